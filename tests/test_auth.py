"""Tests de l'authentification admin (JWT + garde des routes /admin)."""

from agri_calendar.core.http_constants import HTTP_BAD_REQUEST, HTTP_OK, HTTP_UNAUTHORIZED
from agri_calendar.domain.auth import (
    create_access_token,
    decode_token,
    hash_password,
    verify_password,
)
from agri_calendar.services.auth import verify_token
from tests.helpers import ADMIN_EMAIL, ADMIN_PASSWORD, API

SECRET = "test-secret"


def test_hash_and_verify_password():
    h = hash_password("pw-123")
    assert h != "pw-123"
    assert verify_password("pw-123", h)
    assert not verify_password("wrong", h)
    assert not verify_password("pw-123", None)
    assert not verify_password("pw-123", "not-a-hash")


def test_token_roundtrip():
    token = create_access_token(SECRET, "HS256", 5, {"sub": "7", "email": "a@b.io"})
    data = decode_token(token, SECRET, "HS256")
    assert data is not None
    assert data.sub == "7"
    assert data.email == "a@b.io"


def test_expired_or_tampered_tokens_are_rejected():
    expired = create_access_token(SECRET, "HS256", -1, {"sub": "1"})
    assert decode_token(expired, SECRET, "HS256") is None
    other = create_access_token("other-secret", "HS256", 5, {"sub": "1"})
    assert decode_token(other, SECRET, "HS256") is None
    assert decode_token("not.a.jwt", SECRET, "HS256") is None


def test_verify_token_requires_numeric_subject(settings):
    token = create_access_token(SECRET, "HS256", 5, {"sub": "abc"})
    outcome = verify_token(token, settings)
    assert not outcome.ok
    assert outcome.message == "Invalid or expired token"


def test_login_success(client, admin):
    r = client.post(
        f"{API}/auth/login",
        json={"email": f"  {ADMIN_EMAIL.upper()} ", "password": f" {ADMIN_PASSWORD} "},
    )
    assert r.status_code == HTTP_OK, r.text
    body = r.json()
    assert body["status"] is True
    assert body["message"] == "Login successful"
    assert body["data"]["admin"]["email"] == ADMIN_EMAIL
    assert body["data"]["token"]


def test_login_failures_are_indistinguishable(client, admin):
    wrong_pw = client.post(f"{API}/auth/login", json={"email": ADMIN_EMAIL, "password": "nope"})
    unknown = client.post(
        f"{API}/auth/login", json={"email": "ghost@agri-calendar.io", "password": "nope"}
    )
    assert wrong_pw.status_code == unknown.status_code == HTTP_UNAUTHORIZED
    assert wrong_pw.json() == unknown.json() == {
        "status": False,
        "message": "Invalid email or password",
    }


def test_login_validation(client):
    r = client.post(f"{API}/auth/login", json={"email": "not-an-email", "password": ""})
    assert r.status_code == HTTP_BAD_REQUEST
    errors = r.json()["errors"]
    assert "email" in errors
    assert "password" in errors


def test_admin_routes_require_token(client):
    for headers in (
        {},
        {"Authorization": "Token abc"},
        {"Authorization": "Bearer "},
        {"Authorization": "Bearer garbage"},
    ):
        r = client.get(f"{API}/admin/seasons", headers=headers)
        assert r.status_code == HTTP_UNAUTHORIZED
        assert r.json() == {"status": False, "message": "Invalid or expired token"}


def test_expired_token_is_rejected_by_admin_routes(client, admin):
    token = create_access_token(SECRET, "HS256", -5, {"sub": "1", "email": ADMIN_EMAIL})
    r = client.get(f"{API}/admin/prayers", headers={"Authorization": f"Bearer {token}"})
    assert r.status_code == HTTP_UNAUTHORIZED


def test_public_routes_do_not_require_token(client):
    assert client.get(f"{API}/stars/calendar").status_code == HTTP_OK
    assert client.get(f"{API}/occasions").status_code == HTTP_OK
