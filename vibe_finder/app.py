from __future__ import annotations

from fastapi import FastAPI, HTTPException, Query

from .favorites.store import favorite_places, get_favorites, is_favorite, toggle_favorite
from .places.cache import cached_filter, get_cache_stats
from .places.catalog import (
    catalog_cuisines,
    catalog_tags,
    get_catalog,
    get_place,
    get_reels,
    nearby_places,
    reels_for_place,
    sponsored_places,
    trending_places,
)
from .places.filters import filter_places
from .places.models import (
    FavoritesResponse,
    FavoriteStatus,
    FilterCriteria,
    HomeFeedResponse,
    Place,
    PlaceDetailResponse,
    PlaceListResponse,
    Reel,
)
from .places.options import BUDGETS, COMPANIONS, DISTANCES, MOODS, PLACE_TYPES, suggestions_for

app = FastAPI(title="Vibe Finder API", version="1.0.0")


def _run_query(criteria: FilterCriteria) -> PlaceListResponse:
    places = cached_filter(criteria, lambda: filter_places(get_catalog(), criteria))
    return PlaceListResponse(places=places, total=len(places))


def _require_place(place_id: str) -> Place:
    place = get_place(place_id)
    if place is None:
        raise HTTPException(status_code=404, detail=f"Unknown place {place_id!r}")
    return place


# ── Catalog endpoints ────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/metadata")
def metadata() -> dict:
    return {
        "companions": COMPANIONS,
        "moods": MOODS,
        "place_types": PLACE_TYPES,
        "budgets": BUDGETS,
        "distances": DISTANCES,
        "cuisines": catalog_cuisines(),
        "tags": catalog_tags(),
    }


@app.get("/places", response_model=PlaceListResponse)
def places(
    companion: str | None = None,
    mood: str | None = None,
    type: str | None = None,
    price_level: int | None = None,
    max_distance: float | None = None,
    min_rating: float | None = None,
    search: str | None = None,
) -> PlaceListResponse:
    criteria = FilterCriteria(
        companion=companion,
        mood=mood,
        type=type,
        price_level=price_level,
        max_distance=max_distance,
        min_rating=min_rating,
        search=search,
    )
    return _run_query(criteria)


@app.get("/places/home", response_model=HomeFeedResponse)
def home_feed() -> HomeFeedResponse:
    return HomeFeedResponse(
        sponsored=sponsored_places(),
        trending=trending_places(),
        nearby=nearby_places(),
    )


@app.get("/places/{place_id}", response_model=PlaceDetailResponse)
def place_detail(place_id: str) -> PlaceDetailResponse:
    place = _require_place(place_id)
    return PlaceDetailResponse(
        place=place,
        price_label=place.price_label,
        reels=reels_for_place(place_id),
    )


@app.get("/search")
def search(q: str = Query(default="")) -> dict:
    # A blank query shows suggestions only, never the whole catalog.
    if not q.strip():
        results = PlaceListResponse(places=[], total=0)
    else:
        results = _run_query(FilterCriteria(search=q))
    return {
        "query": q.strip(),
        "suggestions": suggestions_for(q),
        "results": results.model_dump(by_alias=True),
    }


@app.get("/reels", response_model=list[Reel])
def reels() -> list[Reel]:
    return list(get_reels())


# ── Favorites endpoints ──────────────────────────────────────────────────


@app.get("/favorites", response_model=FavoritesResponse)
async def favorites() -> FavoritesResponse:
    ids = await get_favorites()
    return FavoritesResponse(
        ids=sorted(ids),
        places=favorite_places(get_catalog(), ids),
    )


@app.get("/favorites/{place_id}", response_model=FavoriteStatus)
async def favorite_status(place_id: str) -> FavoriteStatus:
    return FavoriteStatus(place_id=place_id, is_favorite=await is_favorite(place_id))


@app.post("/favorites/{place_id}/toggle", response_model=FavoriteStatus)
async def favorite_toggle(place_id: str) -> FavoriteStatus:
    _require_place(place_id)
    return FavoriteStatus(place_id=place_id, is_favorite=await toggle_favorite(place_id))


# ── Admin endpoints ──────────────────────────────────────────────────────


@app.get("/cache/stats")
def cache_stats() -> dict:
    return get_cache_stats()
