"""
Routes d'administration (JWT requis): CRUD saisons, étoiles, occasions, invocations.

Toutes les routes de ce module passent par `require_admin`; la suppression
d'un id inconnu renvoie 404 sans lever côté service.
"""

from fastapi import APIRouter, Query

from agri_calendar.api.deps import (
    AdminRequired,
    ItemId,
    Occasions,
    Paging,
    Prayers,
    Seasons,
    Stars,
)
from agri_calendar.api.errors import bad_request, not_found, unwrap
from agri_calendar.api.responses import success
from agri_calendar.api.schemas import (
    OccasionCreate,
    OccasionUpdate,
    PrayerCreate,
    PrayerUpdate,
    SeasonCreate,
    SeasonUpdate,
    StarCreate,
    StarUpdate,
    changes,
)
from agri_calendar.core.http_constants import HTTP_CREATED

router = APIRouter(prefix="/v1/admin", tags=["admin"], dependencies=AdminRequired)

DELETED = {"deleted": True}


# --- Seasons -----------------------------------------------------------------


@router.get("/seasons")
def list_seasons(seasons: Seasons):
    return success(seasons.list())


@router.get("/seasons/{season_id}")
def get_season(season_id: ItemId, seasons: Seasons):
    season = seasons.get(season_id)
    if season is None:
        raise not_found("Season not found")
    return success(season)


@router.post("/seasons")
def create_season(body: SeasonCreate, seasons: Seasons):
    return success(seasons.create(body.model_dump()), "Season created", HTTP_CREATED)


@router.put("/seasons/{season_id}")
def update_season(season_id: ItemId, body: SeasonUpdate, seasons: Seasons):
    season = unwrap(seasons.update(season_id, changes(body)))
    return success(season, "Season updated")


@router.delete("/seasons/{season_id}")
def delete_season(season_id: ItemId, seasons: Seasons):
    if not unwrap(seasons.delete(season_id)):
        raise not_found("Season not found")
    return success(DELETED, "Season deleted")


# --- Stars -------------------------------------------------------------------


@router.get("/stars")
def list_stars(stars: Stars, paging: Paging, season_id: int | None = Query(None, alias="seasonId")):
    page = stars.list(page=paging.page, limit=paging.limit, season_id=season_id)
    return success(page.as_dict("stars"))


@router.get("/stars/{star_id}")
def get_star(star_id: ItemId, stars: Stars):
    star = stars.get(star_id)
    if star is None:
        raise not_found("Star not found")
    return success(star)


@router.post("/stars")
def create_star(body: StarCreate, stars: Stars):
    star = unwrap(stars.create(body.model_dump()))
    return success(star, "Star created successfully", HTTP_CREATED)


@router.put("/stars/{star_id}")
def update_star(star_id: ItemId, body: StarUpdate, stars: Stars):
    star = unwrap(stars.update(star_id, changes(body, nullable=("description", "weather_info"))))
    return success(star, "Star updated successfully")


@router.delete("/stars/{star_id}")
def delete_star(star_id: ItemId, stars: Stars):
    if not stars.delete(star_id):
        raise not_found("Star not found")
    return success(DELETED, "Star deleted successfully")


# --- Occasions ---------------------------------------------------------------


@router.get("/occasions")
def list_occasions(occasions: Occasions, paging: Paging):
    return success(occasions.list(page=paging.page, limit=paging.limit).as_dict("occasions"))


@router.get("/occasions/{occasion_id}")
def get_occasion(occasion_id: ItemId, occasions: Occasions):
    occasion = occasions.get(occasion_id)
    if occasion is None:
        raise not_found("Occasion not found")
    return success(occasion)


@router.post("/occasions")
def create_occasion(body: OccasionCreate, occasions: Occasions):
    return success(
        occasions.create(body.model_dump()), "Occasion created successfully", HTTP_CREATED
    )


@router.put("/occasions/{occasion_id}")
def update_occasion(occasion_id: ItemId, body: OccasionUpdate, occasions: Occasions):
    occasion = unwrap(occasions.update(occasion_id, changes(body, nullable=("prayer_text",))))
    return success(occasion, "Occasion updated successfully")


@router.delete("/occasions/{occasion_id}")
def delete_occasion(occasion_id: ItemId, occasions: Occasions):
    if not occasions.delete(occasion_id):
        raise not_found("Occasion not found")
    return success(DELETED, "Occasion deleted successfully")


# --- Prayers -----------------------------------------------------------------


@router.get("/prayers")
def list_prayers(prayers: Prayers, paging: Paging):
    return success(prayers.list(page=paging.page, limit=paging.limit).as_dict("prayers"))


@router.get("/prayers/{prayer_id}")
def get_prayer(prayer_id: ItemId, prayers: Prayers):
    prayer = prayers.get(prayer_id)
    if prayer is None:
        raise not_found("Prayer not found")
    return success(prayer)


@router.post("/prayers")
def create_prayer(body: PrayerCreate, prayers: Prayers):
    return success(prayers.create(body.text), "Prayer created successfully", HTTP_CREATED)


@router.put("/prayers/{prayer_id}")
def update_prayer(prayer_id: ItemId, body: PrayerUpdate, prayers: Prayers):
    if body.text is None:
        raise bad_request("text is required for update", {"text": ["Field required"]})
    prayer = unwrap(prayers.update(prayer_id, body.text))
    return success(prayer, "Prayer updated successfully")


@router.delete("/prayers/{prayer_id}")
def delete_prayer(prayer_id: ItemId, prayers: Prayers):
    if not prayers.delete(prayer_id):
        raise not_found("Prayer not found")
    return success(DELETED, "Prayer deleted successfully")
