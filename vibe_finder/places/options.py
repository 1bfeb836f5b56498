"""Fixed option lists offered by the guided discovery flow and the search tab."""
from __future__ import annotations

COMPANIONS: list[dict[str, str]] = [
    {"id": "solo", "label": "Solo"},
    {"id": "friends", "label": "Friends"},
    {"id": "family", "label": "Family"},
    {"id": "partner", "label": "Partner"},
]

MOODS: list[dict[str, str]] = [
    {"id": "relaxed", "label": "Relaxed"},
    {"id": "adventurous", "label": "Adventurous"},
    {"id": "romantic", "label": "Romantic"},
    {"id": "energetic", "label": "Energetic"},
    {"id": "cultural", "label": "Cultural"},
    {"id": "foodie", "label": "Foodie"},
]

PLACE_TYPES: list[dict[str, str]] = [
    {"id": "restaurant", "label": "Restaurant"},
    {"id": "cafe", "label": "Cafe"},
    {"id": "adventure", "label": "Adventure"},
    {"id": "entertainment", "label": "Entertainment"},
    {"id": "nature", "label": "Nature"},
    {"id": "shopping", "label": "Shopping"},
]

BUDGETS: list[dict] = [
    {"id": 1, "label": "Low"},
    {"id": 2, "label": "Medium"},
    {"id": 3, "label": "High"},
]

# 50 km stands in for "Any" distance.
DISTANCES: list[dict] = [
    {"id": 1, "label": "1 km", "value": 1},
    {"id": 5, "label": "5 km", "value": 5},
    {"id": 10, "label": "10 km", "value": 10},
    {"id": 50, "label": "Any", "value": 50},
]

SEARCH_SUGGESTIONS: list[str] = [
    "Biryani", "Cafe", "Adventure", "Rooftop", "Budget",
    "Gaming", "Trekking", "Chai", "Family", "Date Night",
    "Hyderabadi", "Barbecue", "Lake", "Cinema", "Escape Room",
]


def suggestions_for(query: str) -> list[str]:
    """Suggestions containing ``query`` (case-insensitive); all of them for a blank query."""
    query = query.strip().lower()
    if not query:
        return list(SEARCH_SUGGESTIONS)
    return [s for s in SEARCH_SUGGESTIONS if query in s.lower()]
