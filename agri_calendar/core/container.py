"""
Conteneur d'injection de dépendances.

Construit une seule fois au démarrage du processus (settings, moteur SQLAlchemy,
factory de sessions) puis transmis explicitement à `create_app`. Aucune
instance globale n'est créée à l'import.
"""

from __future__ import annotations

import structlog
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from agri_calendar.core.settings import Settings, get_settings
from agri_calendar.infra.db import get_engine, get_session_factory
from agri_calendar.infra.models import Base

log = structlog.get_logger(__name__)


class Container:
    """Regroupe les ressources partagées entre requêtes.

    Le moteur (pool de connexions) est sûr en accès concurrent; chaque requête
    ouvre sa propre session à partir de `session_factory`.
    """

    def __init__(self, settings: Settings | None = None, engine: Engine | None = None):
        self.settings = settings or get_settings()
        self.engine = engine or get_engine(
            self.settings.DATABASE_URL, echo=self.settings.DATABASE_ECHO
        )
        self.session_factory: sessionmaker = get_session_factory(self.engine)

    @property
    def storage_backend(self) -> str:
        """Nom du dialecte SQL utilisé (sqlite, mysql, postgresql...)."""
        return self.engine.dialect.name

    def create_schema(self) -> None:
        """Crée les tables manquantes (tests/dev; Alembic en production)."""
        Base.metadata.create_all(self.engine)

    def close(self) -> None:
        """Libère le pool de connexions."""
        log.info("container_close", storage=self.storage_backend)
        self.engine.dispose()
