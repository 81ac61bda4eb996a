"""
Application principale FastAPI.

Ce module assemble les composants de l'API du calendrier agricole :
middlewares, routes, gestion des erreurs et cycle de vie du stockage.

Responsabilités du module:
- Initialiser le logging structuré
- Construire l'application FastAPI à partir d'un `Container` explicite
- Ajouter les middlewares (CORS, request id, timing)
- Monter les routers (santé, auth, public, mobile, admin)
- Libérer le pool de connexions à l'arrêt
"""

from __future__ import annotations

from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from agri_calendar.api.errors import register_error_handlers
from agri_calendar.api.routes_admin import router as admin_router
from agri_calendar.api.routes_auth import router as auth_router
from agri_calendar.api.routes_health import router as health_router
from agri_calendar.api.routes_mobile import router as mobile_router
from agri_calendar.api.routes_public import router as public_router
from agri_calendar.core.container import Container
from agri_calendar.core.logging import setup_logging
from agri_calendar.middlewares.request_id import RequestIDMiddleware
from agri_calendar.middlewares.timing import TimingMiddleware

log = structlog.get_logger(__name__)


def create_app(container: Container | None = None) -> FastAPI:
    """
    Construit et retourne l'application FastAPI prête à l'usage.

    Étapes:
    - Configure le logging structuré (structlog)
    - Attache le conteneur (settings + moteur SQL) à `app.state`
    - Ajoute les middlewares utiles au debug/traçabilité
    - Publie les routes sous `API_PREFIX`, `/health` à la racine
    """
    container = container or Container()
    settings = container.settings
    setup_logging(settings.LOG_LEVEL, json_logs=settings.is_production)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        log.info("app_startup", env=settings.APP_ENV, storage=container.storage_backend)
        yield
        container.close()

    app = FastAPI(title=settings.APP_NAME, debug=settings.APP_DEBUG, lifespan=lifespan)
    app.state.container = container

    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(TimingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS or ["*"],
        allow_credentials=bool(settings.CORS_ORIGINS),
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app, production=settings.is_production)

    app.include_router(health_router)
    prefix = settings.API_PREFIX.rstrip("/")
    app.include_router(public_router, prefix=prefix)
    app.include_router(auth_router, prefix=prefix)
    app.include_router(mobile_router, prefix=prefix)
    app.include_router(admin_router, prefix=prefix)
    return app
