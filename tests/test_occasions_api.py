"""Tests des occasions hégiriennes (admin + affichage public)."""

from agri_calendar.core.http_constants import (
    HTTP_BAD_REQUEST,
    HTTP_CREATED,
    HTTP_NOT_FOUND,
    HTTP_OK,
)
from agri_calendar.domain.hijri import current_hijri, next_hijri_month
from tests.helpers import API


def _create(client, headers, month, day, title="Occasion", **extra):
    r = client.post(
        f"{API}/admin/occasions",
        json={
            "hijriMonth": month,
            "hijriDay": day,
            "title": title,
            "prayerTitle": "دعاء",
            **extra,
        },
        headers=headers,
    )
    assert r.status_code == HTTP_CREATED, r.text
    return r.json()["data"]


def test_create_occasion(client, auth_headers):
    occ = _create(client, auth_headers, 12, 10, "Eid al-Adha", prayerText="...")
    assert occ["hijri_month"] == 12
    assert occ["hijri_day"] == 10
    assert occ["prayer_text"] == "..."
    assert occ["hijri_display"] == "10 ذو الحجة"


def test_occasion_validation(client, auth_headers):
    r = client.post(
        f"{API}/admin/occasions",
        json={"hijriMonth": 13, "hijriDay": 31, "title": "", "prayerTitle": "x"},
        headers=auth_headers,
    )
    assert r.status_code == HTTP_BAD_REQUEST
    assert {"hijriMonth", "hijriDay", "title"} <= set(r.json()["errors"])


def test_admin_list_is_ordered_by_month_and_day(client, auth_headers):
    _create(client, auth_headers, 10, 1, "B")
    _create(client, auth_headers, 9, 27, "A2")
    _create(client, auth_headers, 9, 1, "A1")
    r = client.get(f"{API}/admin/occasions", headers=auth_headers)
    data = r.json()["data"]
    assert [o["title"] for o in data["occasions"]] == ["A1", "A2", "B"]
    assert data["total"] == 3
    assert data["limit"] == 50


def test_update_and_delete_occasion(client, auth_headers):
    occ = _create(client, auth_headers, 1, 10, "Ashura", prayerText="text")
    r = client.put(
        f"{API}/admin/occasions/{occ['id']}",
        json={"prayerText": None, "hijriDay": 9},
        headers=auth_headers,
    )
    assert r.status_code == HTTP_OK
    updated = r.json()["data"]
    assert updated["prayer_text"] is None
    assert updated["hijri_day"] == 9
    assert updated["title"] == "Ashura"

    assert client.delete(
        f"{API}/admin/occasions/{occ['id']}", headers=auth_headers
    ).status_code == HTTP_OK
    r = client.delete(f"{API}/admin/occasions/{occ['id']}", headers=auth_headers)
    assert r.status_code == HTTP_NOT_FOUND
    r = client.put(f"{API}/admin/occasions/{occ['id']}", json={"title": "x"}, headers=auth_headers)
    assert r.status_code == HTTP_NOT_FOUND


def test_public_display_sections(client, auth_headers):
    today = current_hijri()
    following = next_hijri_month(today.month)
    other = next_hijri_month(following)
    _create(client, auth_headers, today.month, today.day, "today")
    _create(client, auth_headers, following, 1, "next")
    _create(client, auth_headers, other, 1, "later")

    r = client.get(f"{API}/occasions")
    assert r.status_code == HTTP_OK
    data = r.json()["data"]
    assert set(data) == {"today", "currentMonth", "nextMonth", "year"}
    assert [o["title"] for o in data["today"]] == ["today"]
    assert [o["title"] for o in data["currentMonth"]] == ["today"]
    assert [o["title"] for o in data["nextMonth"]] == ["next"]
    assert len(data["year"]) == 3
    keys = [(o["hijri_month"], o["hijri_day"]) for o in data["year"]]
    assert keys == sorted(keys)


def test_public_display_empty(client):
    data = client.get(f"{API}/occasions").json()["data"]
    assert data == {"today": [], "currentMonth": [], "nextMonth": [], "year": []}
