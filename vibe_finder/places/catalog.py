from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from .cache import clear_cache
from .config import DEFAULT_CATALOG_CONFIG, CatalogConfig
from .models import Place, Reel

logger = logging.getLogger(__name__)

_places: tuple[Place, ...] | None = None
_reels: tuple[Reel, ...] | None = None


class CatalogError(RuntimeError):
    """The catalog data file is missing or violates the place schema."""


def _load(path: Path) -> tuple[tuple[Place, ...], tuple[Reel, ...]]:
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        raise CatalogError(f"Cannot read catalog file {path}") from exc
    if not isinstance(raw, dict):
        raise CatalogError(f"Catalog file {path} must hold a JSON object")

    try:
        places = tuple(Place.model_validate(p) for p in raw.get("places", []))
        reels = tuple(Reel.model_validate(r) for r in raw.get("reels", []))
    except ValidationError as exc:
        raise CatalogError(f"Invalid record in catalog file {path}") from exc

    seen: set[str] = set()
    for place in places:
        if place.id in seen:
            raise CatalogError(f"Duplicate place id {place.id!r} in {path}")
        seen.add(place.id)

    logger.info("Loaded catalog from %s: %d places, %d reels", path, len(places), len(reels))
    return places, reels


def load_catalog(config: CatalogConfig = DEFAULT_CATALOG_CONFIG) -> tuple[Place, ...]:
    """(Re)load the catalog from ``config.catalog_path`` and return the places."""
    global _places, _reels
    _places, _reels = _load(config.catalog_path)
    clear_cache()
    return _places


def get_catalog() -> tuple[Place, ...]:
    """Return the in-memory place catalog, loading it on first call."""
    if _places is None:
        load_catalog()
    return _places


def get_reels() -> tuple[Reel, ...]:
    """Return the in-memory reels, loading the catalog on first call."""
    if _reels is None:
        load_catalog()
    return _reels


def get_place(place_id: str) -> Place | None:
    for place in get_catalog():
        if place.id == place_id:
            return place
    return None


def reels_for_place(place_id: str) -> list[Reel]:
    return [r for r in get_reels() if r.place_id == place_id]


def trending_places() -> list[Place]:
    return [p for p in get_catalog() if p.trending]


def sponsored_places() -> list[Place]:
    return [p for p in get_catalog() if p.sponsored]


def nearby_places(radius_km: float = DEFAULT_CATALOG_CONFIG.nearby_radius_km) -> list[Place]:
    return [p for p in get_catalog() if p.distance <= radius_km]


def catalog_cuisines() -> list[str]:
    return sorted({p.cuisine for p in get_catalog() if p.cuisine})


def catalog_tags() -> list[str]:
    tags: set[str] = set()
    for place in get_catalog():
        tags.update(place.tags)
    return sorted(tags)
