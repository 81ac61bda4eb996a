# Schémas Pydantic exposés par l'API (requêtes).
#
# Les corps de requête sont en camelCase (seasonId, startDate, hijriMonth...);
# les noms snake_case sont aussi acceptés.

from __future__ import annotations

import re
from datetime import UTC, datetime
from typing import Annotated, Any

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    EmailStr,
    Field,
    ValidationInfo,
    field_validator,
)
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from agri_calendar.services.stars import INVERTED_RANGE

_DATE_ONLY = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_star_date(value: Any) -> datetime:
    """`YYYY-MM-DD` → minuit UTC; datetime ISO-8601 → instant UTC (naïf).

    Seules les chaînes (et les `datetime` déjà construits) sont acceptées.
    """
    if not isinstance(value, (str, datetime)):
        raise ValueError("expected a YYYY-MM-DD or ISO-8601 date string")
    if isinstance(value, str):
        raw = value.strip()
        if _DATE_ONLY.match(raw):
            return datetime.strptime(raw, "%Y-%m-%d")
        parsed = datetime.fromisoformat(raw.replace("Z", "+00:00"))
        value = parsed
    if isinstance(value, datetime) and value.tzinfo is not None:
        return value.astimezone(UTC).replace(tzinfo=None)
    return value


def _strip(value: Any) -> Any:
    return value.strip() if isinstance(value, str) else value


StarDate = Annotated[datetime, BeforeValidator(parse_star_date)]
HexColor = Annotated[str, Field(pattern=r"^#[0-9A-Fa-f]{6}$")]
HijriMonth = Annotated[int, Field(ge=1, le=12)]
HijriDay = Annotated[int, Field(ge=1, le=30)]


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class LoginPayload(BaseModel):
    """Payload pour la connexion d'un administrateur."""

    email: Annotated[EmailStr, BeforeValidator(_strip)]
    password: str = Field(min_length=1)


class SeasonCreate(CamelModel):
    name: str = Field(min_length=1, max_length=100)
    color_hex: HexColor
    icon_name: str = Field(min_length=1, max_length=50)
    duration: str = Field(min_length=1, max_length=100)
    sort_order: int = Field(ge=0)


class SeasonUpdate(CamelModel):
    name: str | None = Field(default=None, min_length=1, max_length=100)
    color_hex: HexColor | None = None
    icon_name: str | None = Field(default=None, min_length=1, max_length=50)
    duration: str | None = Field(default=None, min_length=1, max_length=100)
    sort_order: int | None = Field(default=None, ge=0)


class StarCreate(CamelModel):
    """Création d'une étoile; `start_date` <= `end_date`."""

    season_id: int = Field(gt=0)
    name: str = Field(min_length=1, max_length=255)
    start_date: StarDate
    end_date: StarDate
    description: str | None = Field(default=None, max_length=2000)
    weather_info: str | None = Field(default=None, max_length=5000)
    agricultural_info: list[str] = Field(default_factory=list)
    tips: list[str] = Field(default_factory=list)

    @field_validator("end_date")
    @classmethod
    def _check_range(cls, end: datetime, info: ValidationInfo) -> datetime:
        start = info.data.get("start_date")
        if start is not None and start > end:
            raise PydanticCustomError("date_range", INVERTED_RANGE)
        return end


class StarUpdate(CamelModel):
    season_id: int | None = Field(default=None, gt=0)
    name: str | None = Field(default=None, min_length=1, max_length=255)
    start_date: StarDate | None = None
    end_date: StarDate | None = None
    description: str | None = Field(default=None, max_length=2000)
    weather_info: str | None = Field(default=None, max_length=5000)
    agricultural_info: list[str] | None = None
    tips: list[str] | None = None


class OccasionCreate(CamelModel):
    hijri_month: HijriMonth
    hijri_day: HijriDay
    title: str = Field(min_length=1, max_length=500)
    prayer_title: str = Field(min_length=1, max_length=500)
    prayer_text: str | None = Field(default=None, max_length=5000)


class OccasionUpdate(CamelModel):
    hijri_month: HijriMonth | None = None
    hijri_day: HijriDay | None = None
    title: str | None = Field(default=None, min_length=1, max_length=500)
    prayer_title: str | None = Field(default=None, min_length=1, max_length=500)
    prayer_text: str | None = Field(default=None, max_length=5000)


class PrayerCreate(BaseModel):
    text: str = Field(min_length=1, max_length=10000)


class PrayerUpdate(BaseModel):
    text: str | None = Field(default=None, min_length=1, max_length=10000)


def changes(payload: BaseModel, nullable: tuple[str, ...] = ()) -> dict[str, Any]:
    """Champs explicitement fournis dans une mise à jour partielle.

    Un `null` explicite n'est conservé que pour les champs de `nullable`.
    """
    data = payload.model_dump(exclude_unset=True)
    return {k: v for k, v in data.items() if v is not None or k in nullable}
