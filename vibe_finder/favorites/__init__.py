"""
Favorites persistence.

Responsibilities:
- Keep the user's favorite place ids in a single durable storage slot.
- Toggle membership and answer membership queries.
- Degrade to "no favorites" when storage is missing or unreadable.
"""
