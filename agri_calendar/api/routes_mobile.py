"""
API mobile en lecture seule (GET uniquement, sans authentification).
"""

from fastapi import APIRouter, Query

from agri_calendar.api.deps import ItemId, Paging, Stars
from agri_calendar.api.errors import not_found
from agri_calendar.api.responses import success

router = APIRouter(prefix="/v1/mobile", tags=["mobile"])


@router.get("/calendar")
def get_calendar(stars: Stars):
    return success(stars.calendar())


@router.get("/stars")
def list_stars(stars: Stars, paging: Paging, season_id: int | None = Query(None, alias="seasonId")):
    page = stars.list(page=paging.page, limit=paging.limit, season_id=season_id)
    return success(page.as_dict("stars"))


# Déclarée avant /stars/{star_id}
@router.get("/stars/current")
def get_current_star(stars: Stars):
    """Étoile dont la plage couvre la date UTC du jour."""
    star = stars.current()
    if star is None:
        raise not_found("No star found for today's date")
    return success(star)


@router.get("/stars/{star_id}")
def get_star(star_id: ItemId, stars: Stars):
    star = stars.get(star_id)
    if star is None:
        raise not_found("Star not found")
    return success(star)
