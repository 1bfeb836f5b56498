"""
Place catalog and filter engine.

Responsibilities:
- Load the static place and reel catalog once and keep it in memory.
- Match places against user-selected criteria (companion, mood, type,
  budget, distance, rating, free-text search).
- Memoise repeated queries for the API layer.
"""
