"""
Multi-criteria place filter.

A query is a ``FilterCriteria``; each present field selects one named
predicate from ``PREDICATES`` and a place is kept only when every selected
predicate holds. The result is always a subsequence of the input catalog in
its original order: nothing here sorts, scores or deduplicates.
"""
from __future__ import annotations

from collections.abc import Callable, Sequence

from .models import FilterCriteria, Place

Predicate = Callable[[Place, FilterCriteria], bool]


def match_companion(place: Place, criteria: FilterCriteria) -> bool:
    return place.companion == criteria.companion


def match_mood(place: Place, criteria: FilterCriteria) -> bool:
    return place.mood == criteria.mood


def match_type(place: Place, criteria: FilterCriteria) -> bool:
    return place.type == criteria.type


def match_price_level(place: Place, criteria: FilterCriteria) -> bool:
    return place.price_level == criteria.price_level


def match_max_distance(place: Place, criteria: FilterCriteria) -> bool:
    return place.distance <= criteria.max_distance


def match_min_rating(place: Place, criteria: FilterCriteria) -> bool:
    return place.rating >= criteria.min_rating


def match_search(place: Place, criteria: FilterCriteria) -> bool:
    """Case-insensitive substring match on name, cuisine or any single tag."""
    query = criteria.search.strip().lower()
    if query in place.name.lower():
        return True
    if place.cuisine and query in place.cuisine.lower():
        return True
    return any(query in tag.lower() for tag in place.tags)


# Criteria field -> predicate, in evaluation order.
PREDICATES: tuple[tuple[str, Predicate], ...] = (
    ("companion", match_companion),
    ("mood", match_mood),
    ("type", match_type),
    ("price_level", match_price_level),
    ("max_distance", match_max_distance),
    ("min_rating", match_min_rating),
    ("search", match_search),
)


def active_predicates(criteria: FilterCriteria) -> list[tuple[str, Predicate]]:
    """Return the predicates whose criteria field is set."""
    return [(name, fn) for name, fn in PREDICATES if getattr(criteria, name) is not None]


def _matches(place: Place, criteria: FilterCriteria, predicates: list[Predicate]) -> bool:
    # Criteria built without validation may carry wrong-typed values;
    # those fail to match instead of raising.
    try:
        return all(fn(place, criteria) for fn in predicates)
    except (TypeError, AttributeError):
        return False


def filter_places(
    catalog: Sequence[Place],
    criteria: FilterCriteria | None = None,
) -> list[Place]:
    """
    Return the places of ``catalog`` matching every present criterion.

    With no criteria (or all fields ``None``) this is a copy of the catalog.
    """
    if criteria is None:
        return list(catalog)

    predicates = [fn for _, fn in active_predicates(criteria)]
    return [place for place in catalog if _matches(place, criteria, predicates)]
