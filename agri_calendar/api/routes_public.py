"""
Routes publiques (sans authentification): calendrier, occasions, invocation.

- `GET /v1/stars/calendar`: saisons et étoiles imbriquées
- `GET /v1/occasions`: occasions regroupées par section hégirienne
- `GET /v1/prayers/random`: une invocation au hasard
"""

from fastapi import APIRouter

from agri_calendar.api.deps import Occasions, Prayers, Stars
from agri_calendar.api.errors import not_found
from agri_calendar.api.responses import success

router = APIRouter(prefix="/v1", tags=["public"])


@router.get("/stars/calendar")
def get_calendar(stars: Stars):
    return success(stars.calendar())


@router.get("/occasions")
def get_occasions_for_display(occasions: Occasions):
    """Sections `today`, `currentMonth`, `nextMonth` et `year`."""
    return success(occasions.display())


@router.get("/prayers/random")
def get_random_prayer(prayers: Prayers):
    prayer = prayers.random()
    if prayer is None:
        raise not_found("No prayers found")
    return success(prayer)
