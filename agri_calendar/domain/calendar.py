"""
Logique calendaire pure: regroupement des occasions et étoile courante.

Aucune dépendance à la base de données: les fonctions opèrent sur des listes
déjà chargées (quelques dizaines d'éléments).
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import UTC, date, datetime, timedelta
from typing import Any, Protocol, TypeVar

from agri_calendar.domain.hijri import HijriDate, next_hijri_month

MONTH_NAMES = [
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
]


class DateRanged(Protocol):
    start_date: datetime
    end_date: datetime


R = TypeVar("R", bound=DateRanged)


def bucket_occasions(
    today: HijriDate, occasions: Sequence[dict[str, Any]]
) -> dict[str, list[dict[str, Any]]]:
    """Répartit les occasions en vues jour / mois courant / mois suivant / année.

    Chaque occasion est un dict portant `hijri_month` et `hijri_day`. L'ordre
    (mois, jour) croissant est appliqué une fois puis conservé par chaque vue.
    """
    ordered = sorted(occasions, key=lambda o: (o["hijri_month"], o["hijri_day"]))
    following = next_hijri_month(today.month)
    return {
        "today": [
            o
            for o in ordered
            if o["hijri_month"] == today.month and o["hijri_day"] == today.day
        ],
        "currentMonth": [o for o in ordered if o["hijri_month"] == today.month],
        "nextMonth": [o for o in ordered if o["hijri_month"] == following],
        "year": ordered,
    }


def _as_utc_naive(value: datetime) -> datetime:
    if value.tzinfo is not None:
        return value.astimezone(UTC).replace(tzinfo=None)
    return value


def day_window(now: datetime) -> tuple[datetime, datetime]:
    """Bornes UTC [minuit, minuit + 24h - 1ms] du jour contenant `now`."""
    now = _as_utc_naive(now)
    start = datetime(now.year, now.month, now.day)
    end = start + timedelta(days=1) - timedelta(milliseconds=1)
    return start, end


def find_current(now: datetime, items: Iterable[R]) -> R | None:
    """Retourne l'élément dont la plage chevauche le jour de `now`.

    Test de chevauchement (start <= fin du jour et end >= début du jour); en cas
    d'égalité, l'élément au début le plus ancien l'emporte. `None` si aucun.
    """
    start, end = day_window(now)
    matches = [
        item
        for item in items
        if _as_utc_naive(item.start_date) <= end and _as_utc_naive(item.end_date) >= start
    ]
    if not matches:
        return None
    return min(matches, key=lambda item: _as_utc_naive(item.start_date))


def format_date_for_api(value: datetime | date) -> str:
    """Date ISO (YYYY-MM-DD) de l'instant UTC."""
    if isinstance(value, datetime):
        value = _as_utc_naive(value)
        return value.date().isoformat()
    return value.isoformat()


def format_date_range(start: datetime | date, end: datetime | date) -> str:
    """Affichage "18 October - 30 October".

    Le nom du mois est répété même quand début et fin tombent dans le même mois.
    """
    if isinstance(start, datetime):
        start = _as_utc_naive(start)
    if isinstance(end, datetime):
        end = _as_utc_naive(end)
    return (
        f"{start.day} {MONTH_NAMES[start.month - 1]} - "
        f"{end.day} {MONTH_NAMES[end.month - 1]}"
    )
