"""Service des invocations: tirage aléatoire (public) et CRUD admin."""

from __future__ import annotations

import random
from typing import Any

import structlog
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from agri_calendar.core.http_constants import DEFAULT_PRAYERS_PAGE_SIZE
from agri_calendar.domain.pagination import Page, clamp_page
from agri_calendar.domain.results import ErrorKind, Outcome
from agri_calendar.infra.models import PrayerORM

log = structlog.get_logger(__name__)


def prayer_to_dict(p: PrayerORM) -> dict[str, Any]:
    return {
        "id": p.id,
        "text": p.text,
        "created_at": p.created_at,
        "updated_at": p.updated_at,
    }


class PrayerService:
    def __init__(self, session: Session, rng: random.Random | None = None) -> None:
        self._session = session
        self._rng = rng or random.Random()

    def random(self) -> dict[str, Any] | None:
        """Une invocation tirée uniformément, ou None si la table est vide."""
        rows = self._session.execute(select(PrayerORM.id, PrayerORM.text)).all()
        if not rows:
            return None
        picked = self._rng.choice(rows)
        return {"id": picked.id, "text": picked.text}

    def list(self, page: int | None = None, limit: int | None = None) -> Page:
        req = clamp_page(page, limit, DEFAULT_PRAYERS_PAGE_SIZE)
        stmt = (
            select(PrayerORM)
            .order_by(PrayerORM.created_at.desc(), PrayerORM.id.desc())
            .offset(req.offset)
            .limit(req.limit)
        )
        rows = self._session.execute(stmt).scalars().all()
        total = self._session.execute(select(func.count()).select_from(PrayerORM)).scalar_one()
        return Page(
            items=[prayer_to_dict(p) for p in rows], total=total, page=req.page, limit=req.limit
        )

    def get(self, prayer_id: int) -> dict[str, Any] | None:
        p = self._session.get(PrayerORM, prayer_id)
        return prayer_to_dict(p) if p else None

    def create(self, text: str) -> dict[str, Any]:
        p = PrayerORM(text=text)
        self._session.add(p)
        self._session.flush()
        log.info("prayer_created", prayer_id=p.id)
        return prayer_to_dict(p)

    def update(self, prayer_id: int, text: str) -> Outcome[dict[str, Any]]:
        p = self._session.get(PrayerORM, prayer_id)
        if p is None:
            return Outcome.failure(ErrorKind.NOT_FOUND, "Prayer not found")
        p.text = text
        self._session.flush()
        self._session.refresh(p)
        log.info("prayer_updated", prayer_id=prayer_id)
        return Outcome.success(prayer_to_dict(p))

    def delete(self, prayer_id: int) -> bool:
        p = self._session.get(PrayerORM, prayer_id)
        if p is None:
            return False
        self._session.delete(p)
        self._session.flush()
        log.info("prayer_deleted", prayer_id=prayer_id)
        return True
