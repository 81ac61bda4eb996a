"""Configuration de test pour pytest.

Chaque test reçoit une application construite sur une base SQLite en mémoire
via le même `Container` que la production.
"""

import os
import sys

import pytest
from fastapi.testclient import TestClient

# Ensure project root is on sys.path so that
# imports like `from agri_calendar...` resolve.
CURRENT_DIR = os.path.dirname(__file__)
PROJECT_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from agri_calendar.app.main import create_app  # noqa: E402
from agri_calendar.core.container import Container  # noqa: E402
from agri_calendar.core.settings import Settings  # noqa: E402
from agri_calendar.infra.db import session_scope  # noqa: E402
from agri_calendar.services.auth import AuthService  # noqa: E402
from tests.helpers import ADMIN_EMAIL, ADMIN_PASSWORD, API  # noqa: E402


@pytest.fixture
def settings() -> Settings:
    return Settings(
        APP_ENV="test",
        DATABASE_URL="sqlite+pysqlite:///:memory:",
        JWT_SECRET="test-secret",
        JWT_EXPIRES_MIN=30,
        LOG_LEVEL="WARNING",
    )


@pytest.fixture
def container(settings):
    c = Container(settings)
    c.create_schema()
    yield c
    c.close()


@pytest.fixture
def session(container):
    """Session transactionnelle commitée à la sortie du test."""
    with session_scope(container.session_factory) as s:
        yield s


@pytest.fixture
def client(container) -> TestClient:
    return TestClient(create_app(container))


@pytest.fixture
def admin(container):
    with session_scope(container.session_factory) as s:
        AuthService(s, container.settings).upsert_admin(ADMIN_EMAIL, ADMIN_PASSWORD, "Admin")
    return {"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD}


@pytest.fixture
def auth_headers(client, admin) -> dict[str, str]:
    r = client.post(f"{API}/auth/login", json=admin)
    assert r.status_code == 200, r.text
    return {"Authorization": f"Bearer {r.json()['data']['token']}"}


@pytest.fixture
def season_id(client, auth_headers) -> int:
    r = client.post(
        f"{API}/admin/seasons",
        json={
            "name": "Winter",
            "colorHex": "#4A90D9",
            "iconName": "snowflake",
            "duration": "December - February",
            "sortOrder": 1,
        },
        headers=auth_headers,
    )
    assert r.status_code == 201, r.text
    return r.json()["data"]["id"]
