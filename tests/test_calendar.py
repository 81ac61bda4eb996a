"""Tests de la logique calendaire pure (regroupement, étoile courante, formats)."""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta, timezone

from agri_calendar.domain.calendar import (
    bucket_occasions,
    day_window,
    find_current,
    format_date_for_api,
    format_date_range,
)
from agri_calendar.domain.hijri import HijriDate


@dataclass
class Item:
    id: int
    start_date: datetime
    end_date: datetime


def _occ(month: int, day: int, title: str = "") -> dict:
    return {"hijri_month": month, "hijri_day": day, "title": title or f"{month}-{day}"}


OCCASIONS = [
    _occ(12, 10, "Eid al-Adha"),
    _occ(9, 1, "Ramadan"),
    _occ(9, 27),
    _occ(10, 1, "Eid al-Fitr"),
    _occ(9, 1, "Ramadan bis"),
    _occ(1, 10, "Ashura"),
]


def test_buckets_for_first_of_ramadan():
    b = bucket_occasions(HijriDate(1445, 9, 1), OCCASIONS)
    assert [o["title"] for o in b["today"]] == ["Ramadan", "Ramadan bis"]
    assert [(o["hijri_month"], o["hijri_day"]) for o in b["currentMonth"]] == [
        (9, 1),
        (9, 1),
        (9, 27),
    ]
    assert [o["title"] for o in b["nextMonth"]] == ["Eid al-Fitr"]
    assert len(b["year"]) == len(OCCASIONS)


def test_buckets_keep_month_day_order():
    b = bucket_occasions(HijriDate(1445, 9, 1), OCCASIONS)
    keys = [(o["hijri_month"], o["hijri_day"]) for o in b["year"]]
    assert keys == sorted(keys)


def test_today_bucket_is_subset_of_current_month():
    for month in range(1, 13):
        for day in (1, 10, 27, 30):
            b = bucket_occasions(HijriDate(1446, month, day), OCCASIONS)
            assert all(o in b["currentMonth"] for o in b["today"])


def test_next_month_wraps_to_muharram():
    b = bucket_occasions(HijriDate(1445, 12, 5), OCCASIONS)
    assert [o["title"] for o in b["nextMonth"]] == ["Ashura"]
    assert b["today"] == []


def test_find_current_picks_the_star_covering_today():
    stars = [
        Item(1, datetime(2024, 1, 1), datetime(2024, 1, 14)),
        Item(2, datetime(2024, 1, 15), datetime(2024, 1, 28)),
    ]
    found = find_current(datetime(2024, 1, 15, 13, 30), stars)
    assert found is not None and found.id == 2


def test_find_current_returns_none_in_gaps():
    stars = [Item(1, datetime(2024, 1, 1), datetime(2024, 1, 14))]
    assert find_current(datetime(2024, 2, 1), stars) is None
    assert find_current(datetime(2024, 2, 1), []) is None


def test_find_current_overlap_and_tie_break():
    stars = [
        Item(3, datetime(2024, 1, 10), datetime(2024, 1, 20)),
        Item(4, datetime(2024, 1, 5), datetime(2024, 1, 15)),
        # démarre en fin de journée: chevauche quand même le jour
        Item(5, datetime(2024, 1, 12, 23, 0), datetime(2024, 1, 30)),
    ]
    found = find_current(datetime(2024, 1, 12, 8), stars)
    assert found.id == 4


def test_find_current_handles_year_boundary_ranges():
    stars = [Item(7, datetime(2023, 12, 25), datetime(2024, 1, 5))]
    assert find_current(datetime(2024, 1, 2), stars).id == 7


def test_day_window_truncates_aware_instants_to_utc():
    tz = timezone(timedelta(hours=3))
    start, end = day_window(datetime(2024, 1, 15, 1, 0, tzinfo=tz))
    # 01:00 +03:00 == 22:00 UTC la veille
    assert start == datetime(2024, 1, 14)
    assert end == datetime(2024, 1, 14, 23, 59, 59, 999000)
    assert day_window(datetime(2024, 1, 15, 12, tzinfo=UTC))[0] == datetime(2024, 1, 15)


def test_format_date_range_always_repeats_month_names():
    assert format_date_range(datetime(2024, 10, 18), datetime(2024, 10, 30)) == (
        "18 October - 30 October"
    )
    assert format_date_range(datetime(2023, 12, 25), datetime(2024, 1, 5)) == (
        "25 December - 5 January"
    )


def test_format_date_for_api():
    assert format_date_for_api(datetime(2024, 3, 7, 15, 0)) == "2024-03-07"
