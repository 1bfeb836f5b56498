from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

PRICE_LABELS = {1: "Low", 2: "Medium", 3: "High"}


class CatalogRecord(BaseModel):
    """Immutable catalog record; camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class Review(CatalogRecord):
    user: str
    date: str
    rating: int = Field(..., ge=1, le=5)
    text: str


class Place(CatalogRecord):
    id: str = Field(..., min_length=1)
    name: str
    description: str = ""
    address: str = ""
    cuisine: str | None = None
    best_time_to_visit: str = ""
    type: str
    price_level: int = Field(..., ge=1, le=3)
    rating: float = Field(..., ge=0.0, le=5.0)
    review_count: int = Field(default=0, ge=0)
    distance: float = Field(..., ge=0.0)
    is_open: bool = True
    tags: tuple[str, ...] = ()
    recommended_for: tuple[str, ...] = ()
    companion: str | None = None
    mood: str | None = None
    trending: bool = False
    sponsored: bool = False
    image: str = ""
    photos: tuple[str, ...] = Field(..., min_length=1)
    reviews: tuple[Review, ...] = ()

    @property
    def price_label(self) -> str:
        return get_price_label(self.price_level)


class Reel(CatalogRecord):
    id: str = Field(..., min_length=1)
    place_id: str = Field(..., min_length=1)
    place_name: str
    image: str = ""
    caption: str = ""
    creator: str = ""
    likes: int = Field(default=0, ge=0)
    views: int = Field(default=0, ge=0)


class FilterCriteria(BaseModel):
    """
    One query against the catalog.

    Every field is optional; ``None`` imposes no constraint on that
    dimension. Values are deliberately not range-checked: a criterion no
    place can satisfy just yields an empty result.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    companion: str | None = None
    mood: str | None = None
    type: str | None = None
    price_level: int | None = None
    max_distance: float | None = None
    min_rating: float | None = None
    search: str | None = None

    @field_validator("search", mode="before")
    @classmethod
    def _blank_search_is_absent(cls, value: object) -> object:
        if isinstance(value, str):
            value = value.strip()
            return value or None
        return value


def get_price_label(price_level: int) -> str:
    return PRICE_LABELS.get(price_level, "Unknown")


# ── API response models ──────────────────────────────────────────────────


class PlaceListResponse(BaseModel):
    places: list[Place]
    total: int


class HomeFeedResponse(BaseModel):
    sponsored: list[Place]
    trending: list[Place]
    nearby: list[Place]


class PlaceDetailResponse(BaseModel):
    place: Place
    price_label: str
    reels: list[Reel] = Field(default_factory=list)


class FavoriteStatus(BaseModel):
    place_id: str
    is_favorite: bool


class FavoritesResponse(BaseModel):
    ids: list[str]
    places: list[Place]
