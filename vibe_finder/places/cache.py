from __future__ import annotations

import json
import threading
import time
from collections.abc import Callable
from typing import Any

from .config import DEFAULT_CATALOG_CONFIG
from .models import FilterCriteria, Place

_cache: dict[str, dict[str, Any]] = {}
_hits: int = 0
_misses: int = 0
_lock = threading.Lock()
_DEFAULT_TTL = DEFAULT_CATALOG_CONFIG.cache_ttl
_MAX_ENTRIES = DEFAULT_CATALOG_CONFIG.cache_max_entries


def _make_key(criteria: FilterCriteria) -> str:
    # Absent fields are dropped so that {} and {"search": "  "} share a key.
    return json.dumps(criteria.model_dump(exclude_none=True), sort_keys=True)


def _evict(now: float, max_entries: int) -> None:
    # Caller holds _lock. Entries are kept in insertion order, oldest first.
    for key in [k for k, e in _cache.items() if e["expires_at"] <= now]:
        del _cache[key]
    while _cache and len(_cache) >= max_entries:
        del _cache[next(iter(_cache))]


def cached_filter(
    criteria: FilterCriteria,
    compute: Callable[[], list[Place]],
    ttl: float = _DEFAULT_TTL,
    max_entries: int = _MAX_ENTRIES,
) -> list[Place]:
    """Return the memoised result for ``criteria``, calling ``compute`` on a miss."""
    global _hits, _misses
    key = _make_key(criteria)
    with _lock:
        entry = _cache.get(key)
        if entry and time.time() < entry["expires_at"]:
            _hits += 1
            return list(entry["value"])
        _cache.pop(key, None)
        _misses += 1

    value = compute()
    with _lock:
        now = time.time()
        _evict(now, max_entries)
        _cache[key] = {"value": tuple(value), "expires_at": now + ttl}
    return value


def get_cache_stats() -> dict:
    with _lock:
        total = _hits + _misses
        return {
            "size": len(_cache),
            "hits": _hits,
            "misses": _misses,
            "hit_rate": round(_hits / total * 100, 1) if total > 0 else 0.0,
        }


def clear_cache() -> None:
    global _hits, _misses
    with _lock:
        _cache.clear()
        _hits = 0
        _misses = 0
