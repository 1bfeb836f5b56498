from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")

FAVORITES_KEY = "vibe_finder_favorites"


@dataclass(frozen=True)
class FavoritesConfig:
    storage_path: Path = Path(
        os.getenv("VIBE_FINDER_STORAGE_PATH", str(Path.home() / ".vibe_finder" / "storage.json"))
    )
    storage_key: str = FAVORITES_KEY


DEFAULT_FAVORITES_CONFIG = FavoritesConfig()
