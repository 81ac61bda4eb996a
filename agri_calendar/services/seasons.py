"""Service CRUD des saisons (administration)."""

from __future__ import annotations

from typing import Any

import structlog
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from agri_calendar.domain.results import ErrorKind, Outcome
from agri_calendar.infra.models import SeasonORM, StarORM

log = structlog.get_logger(__name__)


def season_to_dict(s: SeasonORM) -> dict[str, Any]:
    return {
        "id": s.id,
        "name": s.name,
        "colorHex": s.color_hex,
        "iconName": s.icon_name,
        "duration": s.duration,
        "sortOrder": s.sort_order,
    }


class SeasonService:
    """CRUD des saisons, triées par `sort_order`."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def list(self) -> list[dict[str, Any]]:
        stmt = select(SeasonORM).order_by(SeasonORM.sort_order.asc(), SeasonORM.id.asc())
        return [season_to_dict(s) for s in self._session.execute(stmt).scalars().all()]

    def get(self, season_id: int) -> dict[str, Any] | None:
        season = self._session.get(SeasonORM, season_id)
        return season_to_dict(season) if season else None

    def create(self, data: dict[str, Any]) -> dict[str, Any]:
        season = SeasonORM(**data)
        self._session.add(season)
        self._session.flush()
        log.info("season_created", season_id=season.id)
        return season_to_dict(season)

    def update(self, season_id: int, changes: dict[str, Any]) -> Outcome[dict[str, Any]]:
        """Mise à jour partielle; NOT_FOUND si l'id est inconnu."""
        season = self._session.get(SeasonORM, season_id)
        if season is None:
            return Outcome.failure(ErrorKind.NOT_FOUND, "Season not found")
        for key, value in changes.items():
            setattr(season, key, value)
        self._session.flush()
        log.info("season_updated", season_id=season_id, fields=sorted(changes))
        return Outcome.success(season_to_dict(season))

    def delete(self, season_id: int) -> Outcome[bool]:
        """Supprime une saison sans étoiles.

        `False` si l'id est inconnu; CONSTRAINT si des étoiles y sont rattachées.
        """
        season = self._session.get(SeasonORM, season_id)
        if season is None:
            return Outcome.success(False)
        count = self._session.execute(
            select(func.count()).select_from(StarORM).where(StarORM.season_id == season_id)
        ).scalar_one()
        if count:
            return Outcome.failure(
                ErrorKind.CONSTRAINT, "Season still has stars; delete or move them first"
            )
        self._session.delete(season)
        self._session.flush()
        log.info("season_deleted", season_id=season_id)
        return Outcome.success(True)
