from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")

_BUNDLED_CATALOG = Path(__file__).resolve().parent.parent / "data" / "places.json"


@dataclass(frozen=True)
class CatalogConfig:
    """
    Configuration for the static place catalog.
    """

    catalog_path: Path = Path(os.getenv("VIBE_FINDER_CATALOG_PATH", str(_BUNDLED_CATALOG)))
    nearby_radius_km: float = 3.0
    cache_ttl: int = 300  # 5 minutes
    cache_max_entries: int = 256


DEFAULT_CATALOG_CONFIG = CatalogConfig()
