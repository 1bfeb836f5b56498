from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Sequence

from ..places.models import Place
from .config import DEFAULT_FAVORITES_CONFIG, FavoritesConfig
from .storage import JsonFileStorage, KeyValueStorage

logger = logging.getLogger(__name__)


def _decode(raw: str | None) -> list[str]:
    """Parse a stored value into an ordered list of unique ids."""
    if raw is None:
        return []
    data = json.loads(raw)
    if not isinstance(data, list) or not all(isinstance(i, str) for i in data):
        raise ValueError("Stored favorites are not a JSON array of strings")
    return list(dict.fromkeys(data))


class FavoritesStore:
    """
    The user's favorite place ids, held in one storage slot.

    Reads never raise: missing, corrupt or unreachable storage reads as no
    favorites. Writes are best-effort; a failed write is logged and dropped.
    Assumes a single writer: toggles are read-modify-write with no locking.
    """

    def __init__(self, storage: KeyValueStorage, key: str = DEFAULT_FAVORITES_CONFIG.storage_key) -> None:
        self.storage = storage
        self.key = key

    async def _read(self) -> list[str]:
        try:
            return _decode(await self.storage.get_item(self.key))
        except Exception:
            logger.warning("Could not read favorites, treating as empty", exc_info=True)
            return []

    async def get_favorites(self) -> set[str]:
        return set(await self._read())

    async def toggle_favorite(self, place_id: str) -> bool:
        """Flip membership of ``place_id`` and return the new state."""
        favorites = await self._read()
        if place_id in favorites:
            favorites.remove(place_id)
            now_favorite = False
        else:
            favorites.append(place_id)
            now_favorite = True

        try:
            await self.storage.set_item(self.key, json.dumps(favorites))
        except Exception:
            logger.warning("Could not persist favorite toggle for %s", place_id, exc_info=True)
        return now_favorite

    async def is_favorite(self, place_id: str) -> bool:
        return place_id in await self.get_favorites()


def favorite_places(catalog: Sequence[Place], ids: Iterable[str]) -> list[Place]:
    """Catalog places whose id is in ``ids``, in catalog order."""
    wanted = set(ids)
    return [p for p in catalog if p.id in wanted]


# ── Default store ────────────────────────────────────────────────────────

_default_store: FavoritesStore | None = None


def get_default_store(config: FavoritesConfig = DEFAULT_FAVORITES_CONFIG) -> FavoritesStore:
    """Return the process-wide store, creating it over the JSON file on first call."""
    global _default_store
    if _default_store is None:
        _default_store = FavoritesStore(JsonFileStorage(config.storage_path), key=config.storage_key)
    return _default_store


def set_default_store(store: FavoritesStore | None) -> None:
    global _default_store
    _default_store = store


async def get_favorites() -> set[str]:
    return await get_default_store().get_favorites()


async def toggle_favorite(place_id: str) -> bool:
    return await get_default_store().toggle_favorite(place_id)


async def is_favorite(place_id: str) -> bool:
    return await get_default_store().is_favorite(place_id)
