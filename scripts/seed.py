"""
Script de peuplement de la base: saisons, étoiles et compte administrateur.

Usage: python scripts/seed.py [--year 2026] [--create-all]

L'admin est lu depuis ADMIN_EMAIL / ADMIN_PASSWORD (settings); son mot de
passe est rafraîchi s'il existe déjà.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Permet l'exécution du script en direct (python scripts/seed.py)
SYS_ROOT = Path(__file__).resolve().parents[1]
if str(SYS_ROOT) not in sys.path:
    sys.path.append(str(SYS_ROOT))

import structlog  # noqa: E402

from agri_calendar.core.container import Container  # noqa: E402
from agri_calendar.core.logging import setup_logging  # noqa: E402
from agri_calendar.infra.db import session_scope  # noqa: E402
from agri_calendar.infra.seed import seed_calendar  # noqa: E402
from agri_calendar.services.auth import AuthService  # noqa: E402


def main(argv: list[str] | None = None) -> int:
    """Point d'entrée: peuple la base configurée par DATABASE_URL."""
    parser = argparse.ArgumentParser(description="Peuple la base du calendrier agricole")
    parser.add_argument("--year", type=int, default=None, help="Année d'ancrage des étoiles")
    parser.add_argument(
        "--create-all",
        action="store_true",
        help="Crée les tables sans passer par Alembic",
    )
    args = parser.parse_args(argv)

    container = Container()
    setup_logging(container.settings.LOG_LEVEL)
    log = structlog.get_logger("seed")
    try:
        if args.create_all:
            container.create_schema()
        with session_scope(container.session_factory) as session:
            counts = seed_calendar(session, args.year)
            admin = AuthService(session, container.settings).upsert_admin(
                container.settings.ADMIN_EMAIL, container.settings.ADMIN_PASSWORD
            )
            log.info("seed_completed", admin=admin.email, **counts)
    finally:
        container.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
