"""Tests de l'enveloppe d'erreur standard."""

import pytest
from fastapi.testclient import TestClient

from agri_calendar.api.errors import APIError, unwrap
from agri_calendar.app.main import create_app
from agri_calendar.core.container import Container
from agri_calendar.core.http_constants import (
    HTTP_BAD_REQUEST,
    HTTP_INTERNAL_SERVER_ERROR,
    HTTP_NOT_FOUND,
)
from agri_calendar.domain.results import ErrorKind, Outcome


def _app_with_failing_route(settings):
    app = create_app(Container(settings))

    @app.get("/boom")
    def boom():
        raise RuntimeError("db password leaked here")

    return app


def test_unknown_route(client):
    r = client.get("/api/v1/does-not-exist")
    assert r.status_code == HTTP_NOT_FOUND
    assert r.json() == {"status": False, "message": "Resource not found"}


def test_unhandled_error_hides_details_in_production(settings):
    prod = settings.model_copy(update={"APP_ENV": "production"})
    c = TestClient(_app_with_failing_route(prod), raise_server_exceptions=False)
    r = c.get("/boom")
    assert r.status_code == HTTP_INTERNAL_SERVER_ERROR
    assert r.json() == {"status": False, "message": "Internal server error"}


def test_unhandled_error_shows_message_in_dev(settings):
    c = TestClient(_app_with_failing_route(settings), raise_server_exceptions=False)
    r = c.get("/boom")
    assert r.status_code == HTTP_INTERNAL_SERVER_ERROR
    assert r.json()["message"] == "db password leaked here"


def test_outcome_helpers():
    ok = Outcome.success(3)
    assert ok.ok and ok.value == 3
    err = Outcome.failure(ErrorKind.NOT_FOUND, "missing")
    assert not err.ok
    assert err.error is ErrorKind.NOT_FOUND
    assert err.value is None


def test_unwrap_returns_value_or_raises():
    assert unwrap(Outcome.success({"id": 1})) == {"id": 1}
    with pytest.raises(APIError) as info:
        unwrap(Outcome.failure(ErrorKind.CONSTRAINT, "busy", {"seasonId": ["x"]}))
    assert info.value.status_code == HTTP_BAD_REQUEST
    assert info.value.errors == {"seasonId": ["x"]}
