"""Dépendances partagées pour les routes de l'API.

But du module
-------------
- Récupérer le `Container` attaché à l'application (pas d'instance globale).
- Ouvrir une session SQLAlchemy par requête (commit/rollback/close).
- Construire les services et vérifier le jeton admin.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Annotated

from fastapi import Depends, Header, Path, Query, Request
from sqlalchemy.orm import Session

from agri_calendar.api.errors import unauthorized, unwrap
from agri_calendar.core.container import Container
from agri_calendar.infra.db import session_scope
from agri_calendar.services.auth import AuthService, verify_token
from agri_calendar.services.occasions import OccasionService
from agri_calendar.services.prayers import PrayerService
from agri_calendar.services.seasons import SeasonService
from agri_calendar.services.stars import StarService


def get_container(request: Request) -> Container:
    return request.app.state.container


def get_session(container: Annotated[Container, Depends(get_container)]) -> Iterator[Session]:
    with session_scope(container.session_factory) as session:
        yield session


SessionDep = Annotated[Session, Depends(get_session)]
ContainerDep = Annotated[Container, Depends(get_container)]
ItemId = Annotated[int, Path(ge=1)]


def get_season_service(session: SessionDep) -> SeasonService:
    return SeasonService(session)


def get_star_service(session: SessionDep) -> StarService:
    return StarService(session)


def get_occasion_service(session: SessionDep) -> OccasionService:
    return OccasionService(session)


def get_prayer_service(session: SessionDep) -> PrayerService:
    return PrayerService(session)


def get_auth_service(session: SessionDep, container: ContainerDep) -> AuthService:
    return AuthService(session, container.settings)


class PageParams:
    """Paramètres `page`/`limit`, bornés ensuite par les services."""

    def __init__(self, page: int | None = Query(None), limit: int | None = Query(None)):
        self.page = page
        self.limit = limit


def require_admin(
    container: ContainerDep, authorization: str | None = Header(None)
) -> dict:
    """Extrait et valide l'admin courant depuis `Authorization: Bearer <token>`.

    Toute absence ou invalidité produit la même réponse 401.
    """
    if not authorization or not authorization.startswith("Bearer "):
        raise unauthorized()
    token = authorization[len("Bearer ") :].strip()
    if not token:
        raise unauthorized()
    return unwrap(verify_token(token, container.settings))


Seasons = Annotated[SeasonService, Depends(get_season_service)]
Stars = Annotated[StarService, Depends(get_star_service)]
Occasions = Annotated[OccasionService, Depends(get_occasion_service)]
Prayers = Annotated[PrayerService, Depends(get_prayer_service)]
Auth = Annotated[AuthService, Depends(get_auth_service)]
Paging = Annotated[PageParams, Depends()]
AdminRequired = [Depends(require_admin)]
