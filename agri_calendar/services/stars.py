"""
Service des étoiles: calendrier public, étoile courante et CRUD admin.

Les dates sont stockées en instants UTC et restituées en `YYYY-MM-DD` avec
une plage d'affichage "D Mois - D Mois".
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

import structlog
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload, selectinload

from agri_calendar.core.http_constants import DEFAULT_STARS_PAGE_SIZE
from agri_calendar.domain.calendar import find_current, format_date_for_api, format_date_range
from agri_calendar.domain.pagination import Page, clamp_page
from agri_calendar.domain.results import ErrorKind, Outcome
from agri_calendar.infra.models import SeasonORM, StarORM

log = structlog.get_logger(__name__)

INVERTED_RANGE = "endDate must be on or after startDate"


def _string_list(value: Any) -> list[str]:
    if isinstance(value, list):
        return [x for x in value if isinstance(x, str)]
    return []


def star_to_calendar_item(star: StarORM) -> dict[str, Any]:
    return {
        "id": star.id,
        "name": star.name,
        "date_range": format_date_range(star.start_date, star.end_date),
        "start_date": format_date_for_api(star.start_date),
        "end_date": format_date_for_api(star.end_date),
        "description": star.description,
        "agricultural_info": _string_list(star.agricultural_info),
        "weather_info": star.weather_info,
        "tips": _string_list(star.tips),
    }


def star_to_dict(star: StarORM) -> dict[str, Any]:
    """Élément complet (admin/mobile): élément de calendrier + saison."""
    item = star_to_calendar_item(star)
    item["seasonId"] = star.season_id
    item["season_name"] = star.season.name if star.season else None
    return item


class StarService:
    """Lecture du calendrier et CRUD des étoiles."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def calendar(self) -> list[dict[str, Any]]:
        """Saisons (par `sort_order`) avec leurs étoiles (par date de début)."""
        stmt = (
            select(SeasonORM)
            .options(selectinload(SeasonORM.stars))
            .order_by(SeasonORM.sort_order.asc(), SeasonORM.id.asc())
        )
        seasons = self._session.execute(stmt).scalars().all()
        return [
            {
                "id": season.id,
                "season_name": season.name,
                "duration": season.duration,
                "color_hex": season.color_hex,
                "icon_name": season.icon_name,
                "stars": [star_to_calendar_item(s) for s in season.stars],
            }
            for season in seasons
        ]

    def list(
        self,
        page: int | None = None,
        limit: int | None = None,
        season_id: int | None = None,
    ) -> Page:
        req = clamp_page(page, limit, DEFAULT_STARS_PAGE_SIZE)
        stmt = select(StarORM).options(joinedload(StarORM.season))
        count_stmt = select(func.count()).select_from(StarORM)
        if season_id is not None:
            stmt = stmt.where(StarORM.season_id == season_id)
            count_stmt = count_stmt.where(StarORM.season_id == season_id)
        stmt = (
            stmt.order_by(StarORM.start_date.asc(), StarORM.id.asc())
            .offset(req.offset)
            .limit(req.limit)
        )
        rows = self._session.execute(stmt).scalars().all()
        total = self._session.execute(count_stmt).scalar_one()
        return Page(
            items=[star_to_dict(s) for s in rows], total=total, page=req.page, limit=req.limit
        )

    def get(self, star_id: int) -> dict[str, Any] | None:
        star = self._session.get(StarORM, star_id, options=[joinedload(StarORM.season)])
        return star_to_dict(star) if star else None

    def current(self, now: datetime | None = None) -> dict[str, Any] | None:
        """Étoile dont la plage chevauche le jour UTC courant, ou None."""
        now = now or datetime.now(UTC)
        stmt = (
            select(StarORM)
            .options(joinedload(StarORM.season))
            .order_by(StarORM.start_date.asc(), StarORM.id.asc())
        )
        star = find_current(now, self._session.execute(stmt).scalars().all())
        return star_to_dict(star) if star else None

    def create(self, data: dict[str, Any]) -> Outcome[dict[str, Any]]:
        """Crée une étoile; CONSTRAINT si la saison n'existe pas."""
        if self._session.get(SeasonORM, data["season_id"]) is None:
            return Outcome.failure(
                ErrorKind.CONSTRAINT,
                "Season not found",
                {"seasonId": ["Season does not exist"]},
            )
        star = StarORM(**data)
        self._session.add(star)
        try:
            self._session.flush()
        except IntegrityError as exc:
            log.warning("star_integrity_error", error=str(exc.orig))
            return Outcome.failure(ErrorKind.CONSTRAINT, "Constraint violation")
        self._session.refresh(star)
        log.info("star_created", star_id=star.id, season_id=star.season_id)
        return Outcome.success(star_to_dict(star))

    def update(self, star_id: int, changes: dict[str, Any]) -> Outcome[dict[str, Any]]:
        """Mise à jour partielle; la plage fusionnée doit rester ordonnée."""
        star = self._session.get(StarORM, star_id)
        if star is None:
            return Outcome.failure(ErrorKind.NOT_FOUND, "Star not found")
        if "season_id" in changes and self._session.get(SeasonORM, changes["season_id"]) is None:
            return Outcome.failure(
                ErrorKind.CONSTRAINT,
                "Season not found",
                {"seasonId": ["Season does not exist"]},
            )
        start = changes.get("start_date", star.start_date)
        end = changes.get("end_date", star.end_date)
        if start > end:
            return Outcome.failure(
                ErrorKind.VALIDATION,
                "Validation failed",
                {"endDate": [INVERTED_RANGE]},
            )
        for key, value in changes.items():
            setattr(star, key, value)
        try:
            self._session.flush()
        except IntegrityError as exc:
            log.warning("star_integrity_error", star_id=star_id, error=str(exc.orig))
            return Outcome.failure(ErrorKind.CONSTRAINT, "Constraint violation")
        self._session.refresh(star)
        log.info("star_updated", star_id=star_id, fields=sorted(changes))
        return Outcome.success(star_to_dict(star))

    def delete(self, star_id: int) -> bool:
        """Supprime une étoile; False si l'id est inconnu."""
        star = self._session.get(StarORM, star_id)
        if star is None:
            return False
        self._session.delete(star)
        self._session.flush()
        log.info("star_deleted", star_id=star_id)
        return True
