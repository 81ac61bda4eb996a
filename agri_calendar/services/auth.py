"""
Service d'authentification des administrateurs.

Email inconnu et mauvais mot de passe produisent le même résultat, après une
vérification de hash dans les deux cas.
"""

from __future__ import annotations

from typing import Any

import structlog
from sqlalchemy import select
from sqlalchemy.orm import Session

from agri_calendar.core.settings import Settings
from agri_calendar.domain.auth import (
    create_access_token,
    decode_token,
    hash_password,
    normalize_email,
    verify_password,
)
from agri_calendar.domain.results import ErrorKind, Outcome
from agri_calendar.infra.models import AdminORM

log = structlog.get_logger(__name__)

INVALID_CREDENTIALS = "Invalid email or password"
INVALID_TOKEN = "Invalid or expired token"


class AuthService:
    def __init__(self, session: Session, settings: Settings) -> None:
        self._session = session
        self._settings = settings

    def login(self, email: str, password: str) -> Outcome[dict[str, Any]]:
        """Vérifie les identifiants et émet un JWT."""
        normalized = normalize_email(email)
        admin = self._session.execute(
            select(AdminORM).where(AdminORM.email == normalized)
        ).scalar_one_or_none()
        valid = verify_password(password.strip(), admin.password_hash if admin else None)
        if admin is None or not valid:
            log.warning("login_failed")
            return Outcome.failure(ErrorKind.AUTH, INVALID_CREDENTIALS)
        token = create_access_token(
            secret=self._settings.JWT_SECRET,
            alg=self._settings.JWT_ALG,
            expires_min=self._settings.JWT_EXPIRES_MIN,
            payload={"sub": str(admin.id), "email": admin.email},
        )
        log.info("login_succeeded", admin_id=admin.id)
        return Outcome.success(
            {"token": token, "admin": {"id": admin.id, "email": admin.email, "name": admin.name}}
        )

    def upsert_admin(self, email: str, password: str, name: str | None = "Admin") -> AdminORM:
        """Crée l'admin ou rafraîchit son mot de passe (utilisé par le seed)."""
        normalized = normalize_email(email)
        admin = self._session.execute(
            select(AdminORM).where(AdminORM.email == normalized)
        ).scalar_one_or_none()
        password_hash = hash_password(password)
        if admin is None:
            admin = AdminORM(email=normalized, password_hash=password_hash, name=name)
            self._session.add(admin)
        else:
            admin.password_hash = password_hash
        self._session.flush()
        return admin


def verify_token(token: str, settings: Settings) -> Outcome[dict[str, Any]]:
    """Valide un JWT admin; échec uniforme quelle que soit la cause."""
    data = decode_token(token, settings.JWT_SECRET, settings.JWT_ALG)
    if data is None:
        return Outcome.failure(ErrorKind.AUTH, INVALID_TOKEN)
    try:
        admin_id = int(data.sub)
    except ValueError:
        return Outcome.failure(ErrorKind.AUTH, INVALID_TOKEN)
    return Outcome.success({"admin_id": admin_id, "email": data.email})
