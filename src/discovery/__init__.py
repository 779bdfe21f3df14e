"""
Discovery module.

Filters, ranks, and suggests ideas from the catalog.
"""

from src.discovery.engine import (
    POPULARITY_SCORE,
    popularity_score,
    trending_score,
    matches_category,
    matches_query,
    filter_ideas,
    sort_ideas,
    sort_options,
    rank,
    ordered_ideas,
    get_suggestions,
    should_show_suggestions,
    resolve_suggestion,
)

__all__ = [
    # Scoring
    "POPULARITY_SCORE",
    "popularity_score",
    "trending_score",
    # Filtering and ranking
    "matches_category",
    "matches_query",
    "filter_ideas",
    "sort_ideas",
    "sort_options",
    "rank",
    "ordered_ideas",
    # Suggestions
    "get_suggestions",
    "should_show_suggestions",
    "resolve_suggestion",
]
