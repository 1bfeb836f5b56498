from __future__ import annotations

from vibe_finder.places.filters import (
    PREDICATES,
    active_predicates,
    filter_places,
    match_max_distance,
    match_min_rating,
    match_search,
)
from vibe_finder.places.models import FilterCriteria, Place


def _place(place_id: str, **overrides) -> Place:
    fields = {
        "id": place_id,
        "name": f"Place {place_id}",
        "type": "restaurant",
        "price_level": 2,
        "rating": 4.0,
        "distance": 1.0,
        "photos": [f"https://img.example.com/{place_id}.jpg"],
    }
    fields.update(overrides)
    return Place(**fields)


A = _place("A", price_level=1, rating=4.2, distance=2, tags=["cafe"], cuisine="Coffee")
B = _place("B", price_level=3, rating=3.9, distance=8, tags=["fine-dining"], companion="partner")
C = _place("C", price_level=2, rating=4.6, distance=1, tags=["cafe", "rooftop"], mood="relaxed")
CATALOG = [A, B, C]

MIXED = [
    _place("1", name="Blue Tokai Cafe", type="cafe", companion="solo", mood="relaxed", rating=4.5, distance=0.5),
    _place("2", name="Trek Base", type="adventure", companion="friends", mood="adventurous", price_level=1, distance=40),
    _place("3", name="Rooftop Grill", cuisine="Barbecue", tags=["Rooftop", "Date Night"], price_level=3, rating=5.0),
    _place("4", name="Chai Corner", type="cafe", cuisine="Chai", tags=["Budget"], price_level=1, rating=3.2, distance=5),
    _place("5", name="Arena", type="entertainment", companion="friends", mood="energetic", rating=0.0, distance=5.0),
]


def _ids(places: list[Place]) -> list[str]:
    return [p.id for p in places]


# ── Example scenario ─────────────────────────────────────────────────────


def test_distance_and_rating_keep_catalog_order():
    result = filter_places(CATALOG, FilterCriteria(max_distance=5, min_rating=4.0))
    assert result == [A, C]


# ── Identity and edge cases ──────────────────────────────────────────────


def test_no_criteria_returns_full_catalog_in_order():
    assert filter_places(MIXED, FilterCriteria()) == MIXED
    assert filter_places(MIXED) == MIXED


def test_result_is_a_new_list():
    result = filter_places(MIXED)
    result.pop()
    assert len(MIXED) == 5


def test_empty_catalog_returns_empty_list():
    assert filter_places([], FilterCriteria(search="cafe")) == []
    assert filter_places([], FilterCriteria()) == []


def test_no_matches_returns_empty_list():
    result = filter_places(MIXED, FilterCriteria(type="museum"))
    assert result == []
    assert isinstance(result, list)


def test_accepts_tuple_catalog():
    assert filter_places(tuple(CATALOG), FilterCriteria(price_level=2)) == [C]


# ── Categorical predicates ───────────────────────────────────────────────


def test_companion_exact_match():
    assert _ids(filter_places(MIXED, FilterCriteria(companion="friends"))) == ["2", "5"]


def test_companion_is_case_sensitive():
    assert filter_places(MIXED, FilterCriteria(companion="Friends")) == []


def test_mood_exact_match():
    assert _ids(filter_places(MIXED, FilterCriteria(mood="relaxed"))) == ["1"]


def test_type_exact_match():
    assert _ids(filter_places(MIXED, FilterCriteria(type="cafe"))) == ["1", "4"]


def test_places_without_companion_never_match_a_companion():
    assert A not in filter_places(CATALOG, FilterCriteria(companion="partner"))


# ── Price / distance / rating ────────────────────────────────────────────


def test_price_level_soundness_and_completeness():
    for level in (1, 2, 3):
        result = filter_places(MIXED, FilterCriteria(price_level=level))
        assert all(p.price_level == level for p in result)
        assert result == [p for p in MIXED if p.price_level == level]


def test_out_of_range_price_level_matches_nothing():
    assert filter_places(MIXED, FilterCriteria(price_level=4)) == []


def test_min_rating_is_inclusive():
    for r in (0.0, 3.2, 4.0, 4.5, 5.0):
        result = filter_places(MIXED, FilterCriteria(min_rating=r))
        assert result == [p for p in MIXED if p.rating >= r]
    assert _ids(filter_places(MIXED, FilterCriteria(min_rating=5.0))) == ["3"]


def test_min_rating_zero_is_a_real_constraint_that_matches_all():
    assert filter_places(MIXED, FilterCriteria(min_rating=0)) == MIXED


def test_max_distance_is_inclusive():
    for d in (0.0, 0.5, 1.0, 5.0, 50.0):
        result = filter_places(MIXED, FilterCriteria(max_distance=d))
        assert result == [p for p in MIXED if p.distance <= d]
    assert _ids(filter_places(MIXED, FilterCriteria(max_distance=5))) == ["1", "3", "4", "5"]


def test_max_distance_zero_excludes_everything_further_away():
    assert filter_places(MIXED, FilterCriteria(max_distance=0)) == []


# ── Search ───────────────────────────────────────────────────────────────


def test_search_is_case_insensitive():
    lower = filter_places(MIXED, FilterCriteria(search="cafe"))
    upper = filter_places(MIXED, FilterCriteria(search="CAFE"))
    assert lower == upper
    assert _ids(lower) == ["1"]


def test_search_matches_name_substring():
    assert _ids(filter_places(MIXED, FilterCriteria(search="trek"))) == ["2"]


def test_search_matches_cuisine():
    assert _ids(filter_places(MIXED, FilterCriteria(search="barbe"))) == ["3"]


def test_search_matches_any_single_tag():
    assert _ids(filter_places(MIXED, FilterCriteria(search="date night"))) == ["3"]
    assert _ids(filter_places(MIXED, FilterCriteria(search="budget"))) == ["4"]


def test_search_does_not_match_across_tags():
    # "rooftop date" spans two tags but is not a substring of either.
    place = MIXED[2]
    assert not match_search(place, FilterCriteria(search="Rooftop Date"))


def test_search_query_is_trimmed():
    assert _ids(filter_places(MIXED, FilterCriteria(search="  chai  "))) == ["4"]


def test_search_ignores_description():
    place = _place("x", description="Best coffee in town")
    assert filter_places([place], FilterCriteria(search="coffee")) == []


def test_blank_search_is_no_constraint():
    assert FilterCriteria(search="   ").search is None
    assert filter_places(MIXED, FilterCriteria(search="")) == MIXED


# ── Combination ──────────────────────────────────────────────────────────


def _intersect(left: list[Place], right: list[Place]) -> list[Place]:
    right_ids = {p.id for p in right}
    return [p for p in left if p.id in right_ids]


def test_conjunction_equals_intersection_of_single_criteria():
    pairs = [
        ({"type": "cafe"}, {"max_distance": 1}),
        ({"price_level": 1}, {"min_rating": 3.0}),
        ({"companion": "friends"}, {"search": "arena"}),
        ({"max_distance": 5}, {"min_rating": 4.0}),
    ]
    for first, second in pairs:
        combined = filter_places(MIXED, FilterCriteria(**first, **second))
        expected = _intersect(
            filter_places(MIXED, FilterCriteria(**first)),
            filter_places(MIXED, FilterCriteria(**second)),
        )
        assert combined == expected


def test_all_criteria_together():
    criteria = FilterCriteria(
        companion="solo",
        mood="relaxed",
        type="cafe",
        price_level=2,
        max_distance=1,
        min_rating=4.5,
        search="tokai",
    )
    assert _ids(filter_places(MIXED, criteria)) == ["1"]


# ── Predicates ───────────────────────────────────────────────────────────


def test_active_predicates_follow_present_fields():
    names = [name for name, _ in active_predicates(FilterCriteria(min_rating=4, companion="solo"))]
    assert names == ["companion", "min_rating"]


def test_no_active_predicates_for_empty_criteria():
    assert active_predicates(FilterCriteria()) == []


def test_every_criteria_field_has_a_predicate():
    assert {name for name, _ in PREDICATES} == set(FilterCriteria.model_fields)


def test_boundary_predicates():
    place = _place("b", rating=4.0, distance=3.0)
    assert match_min_rating(place, FilterCriteria(min_rating=4.0))
    assert not match_min_rating(place, FilterCriteria(min_rating=4.01))
    assert match_max_distance(place, FilterCriteria(max_distance=3.0))
    assert not match_max_distance(place, FilterCriteria(max_distance=2.99))


def test_wrong_typed_criteria_fail_to_match():
    criteria = FilterCriteria.model_construct(max_distance="near")
    assert filter_places(MIXED, criteria) == []


def test_criteria_accept_camel_case_names():
    criteria = FilterCriteria.model_validate({"priceLevel": 1, "maxDistance": 10})
    assert _ids(filter_places(MIXED, criteria)) == ["4"]
