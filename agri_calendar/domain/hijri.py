"""
Utilitaires de calendrier hégirien (Umm al-Qura).

La conversion grégorien → hégirien s'appuie sur la table Umm al-Qura publiée,
fournie par `hijridate`. Les longueurs de mois de cette table sont irrégulières
et ne se déduisent d'aucune règle arithmétique.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from hijridate import Gregorian

HIJRI_MONTH_NAMES_AR: dict[int, str] = {
    1: "محرم",
    2: "صفر",
    3: "ربيع الأول",
    4: "ربيع الآخر",
    5: "جمادى الأولى",
    6: "جمادى الآخرة",
    7: "رجب",
    8: "شعبان",
    9: "رمضان",
    10: "شوال",
    11: "ذو القعدة",
    12: "ذو الحجة",
}


@dataclass(frozen=True)
class HijriDate:
    """Date hégirienne: mois 1..12, jour 1..30."""

    year: int
    month: int
    day: int


def to_hijri(gregorian_year: int, gregorian_month: int, gregorian_day: int) -> HijriDate:
    """Convertit une date grégorienne en date hégirienne Umm al-Qura."""
    h = Gregorian(gregorian_year, gregorian_month, gregorian_day).to_hijri()
    return HijriDate(year=h.year, month=h.month, day=h.day)


def current_hijri(today: date | None = None) -> HijriDate:
    """Date hégirienne du jour (date locale du serveur par défaut)."""
    d = today or date.today()
    return to_hijri(d.year, d.month, d.day)


def next_hijri_month(month: int) -> int:
    """Mois hégirien suivant (12 → 1)."""
    return 1 if month >= 12 else month + 1


def hijri_month_name_ar(month: int) -> str:
    return HIJRI_MONTH_NAMES_AR.get(month, str(month))


def format_hijri_date_ar(day: int, month: int) -> str:
    """Affichage court, ex. "10 ذو الحجة"."""
    return f"{day} {hijri_month_name_ar(month)}"
