"""
Service des occasions: CRUD admin et affichage public par sections hégiriennes.
"""

from __future__ import annotations

from datetime import date
from typing import Any

import structlog
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from agri_calendar.core.http_constants import DEFAULT_OCCASIONS_PAGE_SIZE
from agri_calendar.domain.calendar import bucket_occasions
from agri_calendar.domain.hijri import current_hijri, format_hijri_date_ar
from agri_calendar.domain.pagination import Page, clamp_page
from agri_calendar.domain.results import ErrorKind, Outcome
from agri_calendar.infra.models import OccasionORM

log = structlog.get_logger(__name__)

_ORDER = (OccasionORM.hijri_month.asc(), OccasionORM.hijri_day.asc(), OccasionORM.id.asc())


def occasion_to_dict(o: OccasionORM) -> dict[str, Any]:
    return {
        "id": o.id,
        "hijri_month": o.hijri_month,
        "hijri_day": o.hijri_day,
        "title": o.title,
        "prayer_title": o.prayer_title,
        "prayer_text": o.prayer_text,
        "created_at": o.created_at,
        "updated_at": o.updated_at,
        "hijri_display": format_hijri_date_ar(o.hijri_day, o.hijri_month),
    }


class OccasionService:
    def __init__(self, session: Session) -> None:
        self._session = session

    def display(self, today: date | None = None) -> dict[str, list[dict[str, Any]]]:
        """Occasions groupées: aujourd'hui, mois courant, mois suivant, année.

        Une seule lecture de la table par appel; le regroupement est pur.
        """
        hijri_today = current_hijri(today)
        rows = self._session.execute(select(OccasionORM).order_by(*_ORDER)).scalars().all()
        return bucket_occasions(hijri_today, [occasion_to_dict(o) for o in rows])

    def list(self, page: int | None = None, limit: int | None = None) -> Page:
        req = clamp_page(page, limit, DEFAULT_OCCASIONS_PAGE_SIZE)
        rows = (
            self._session.execute(
                select(OccasionORM).order_by(*_ORDER).offset(req.offset).limit(req.limit)
            )
            .scalars()
            .all()
        )
        total = self._session.execute(select(func.count()).select_from(OccasionORM)).scalar_one()
        return Page(
            items=[occasion_to_dict(o) for o in rows], total=total, page=req.page, limit=req.limit
        )

    def get(self, occasion_id: int) -> dict[str, Any] | None:
        occ = self._session.get(OccasionORM, occasion_id)
        return occasion_to_dict(occ) if occ else None

    def create(self, data: dict[str, Any]) -> dict[str, Any]:
        occ = OccasionORM(**data)
        self._session.add(occ)
        self._session.flush()
        log.info("occasion_created", occasion_id=occ.id)
        return occasion_to_dict(occ)

    def update(self, occasion_id: int, changes: dict[str, Any]) -> Outcome[dict[str, Any]]:
        occ = self._session.get(OccasionORM, occasion_id)
        if occ is None:
            return Outcome.failure(ErrorKind.NOT_FOUND, "Occasion not found")
        for key, value in changes.items():
            setattr(occ, key, value)
        self._session.flush()
        self._session.refresh(occ)
        log.info("occasion_updated", occasion_id=occasion_id, fields=sorted(changes))
        return Outcome.success(occasion_to_dict(occ))

    def delete(self, occasion_id: int) -> bool:
        occ = self._session.get(OccasionORM, occasion_id)
        if occ is None:
            return False
        self._session.delete(occ)
        self._session.flush()
        log.info("occasion_deleted", occasion_id=occasion_id)
        return True
