"""Tests des invocations: tirage aléatoire public et CRUD admin."""

import random

from agri_calendar.core.http_constants import (
    HTTP_BAD_REQUEST,
    HTTP_CREATED,
    HTTP_NOT_FOUND,
    HTTP_OK,
)
from agri_calendar.services.prayers import PrayerService
from tests.helpers import API


def test_random_prayer_when_empty(client):
    r = client.get(f"{API}/prayers/random")
    assert r.status_code == HTTP_NOT_FOUND
    assert r.json() == {"status": False, "message": "No prayers found"}


def test_random_prayer_returns_existing_row(client, auth_headers):
    texts = {"اللهم أغثنا", "اللهم بارك لنا", "اللهم اسقنا"}
    for text in texts:
        r = client.post(f"{API}/admin/prayers", json={"text": text}, headers=auth_headers)
        assert r.status_code == HTTP_CREATED
        assert r.json()["message"] == "Prayer created successfully"
    for _ in range(10):
        r = client.get(f"{API}/prayers/random")
        assert r.status_code == HTTP_OK
        assert set(r.json()["data"]) == {"id", "text"}
        assert r.json()["data"]["text"] in texts


def test_random_uses_injected_rng(session):
    svc = PrayerService(session, rng=random.Random(3))
    for text in ("a", "b", "c", "d"):
        svc.create(text)
    first = [PrayerService(session, rng=random.Random(3)).random()["text"] for _ in range(3)]
    assert len(set(first)) == 1
    assert PrayerService(session).random()["text"] in {"a", "b", "c", "d"}


def test_prayer_crud(client, auth_headers):
    r = client.post(f"{API}/admin/prayers", json={"text": "first"}, headers=auth_headers)
    prayer_id = r.json()["data"]["id"]

    r = client.put(
        f"{API}/admin/prayers/{prayer_id}", json={"text": "edited"}, headers=auth_headers
    )
    assert r.status_code == HTTP_OK
    assert r.json()["data"]["text"] == "edited"

    r = client.get(f"{API}/admin/prayers/{prayer_id}", headers=auth_headers)
    assert r.json()["data"]["text"] == "edited"

    r = client.get(f"{API}/admin/prayers", headers=auth_headers)
    data = r.json()["data"]
    assert data["total"] == 1
    assert data["limit"] == 20

    assert client.delete(
        f"{API}/admin/prayers/{prayer_id}", headers=auth_headers
    ).status_code == HTTP_OK
    r = client.delete(f"{API}/admin/prayers/{prayer_id}", headers=auth_headers)
    assert r.status_code == HTTP_NOT_FOUND
    assert r.json()["message"] == "Prayer not found"


def test_prayer_update_requires_text(client, auth_headers):
    r = client.post(f"{API}/admin/prayers", json={"text": "x"}, headers=auth_headers)
    prayer_id = r.json()["data"]["id"]
    r = client.put(f"{API}/admin/prayers/{prayer_id}", json={}, headers=auth_headers)
    assert r.status_code == HTTP_BAD_REQUEST
    assert r.json()["message"] == "text is required for update"


def test_prayer_create_rejects_empty_text(client, auth_headers):
    r = client.post(f"{API}/admin/prayers", json={"text": ""}, headers=auth_headers)
    assert r.status_code == HTTP_BAD_REQUEST
    assert "text" in r.json()["errors"]


def test_update_unknown_prayer(client, auth_headers):
    r = client.put(f"{API}/admin/prayers/777", json={"text": "x"}, headers=auth_headers)
    assert r.status_code == HTTP_NOT_FOUND
