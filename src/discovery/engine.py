"""
Discovery engine for KhojVerse.

Provides pure, side-effect-free functions to:
1. Filter the idea catalog by category and free-text query
2. Order the filtered ideas by the active sort option
3. Resolve a clicked search suggestion into the next discovery state

All functions are deterministic and do not mutate input data. Calling rank()
twice with the same arguments yields the same list in the same order,
including the order of ties.
"""

from typing import Callable, Iterable, Sequence

from src.models.errors import ContractViolation
from src.models.idea_item import IdeaItem, Category, Popularity, SortOption
from src.models.state import DiscoveryState


# =============================================================================
# Scoring Configuration
# =============================================================================

# Weight of each popularity tier, shared by the "popularity" and "trending" sorts
POPULARITY_SCORE: dict[Popularity, int] = {
    Popularity.HIGH: 3,
    Popularity.MEDIUM: 2,
    Popularity.LOW: 1,
}


# =============================================================================
# Scoring Functions
# =============================================================================

def popularity_score(popularity: Popularity) -> int:
    """Return the weight of a popularity tier (High=3, Medium=2, Low=1)."""
    try:
        return POPULARITY_SCORE[popularity]
    except KeyError:
        raise ContractViolation(f"unknown popularity tier: {popularity!r}") from None


def trending_score(item: IdeaItem) -> float:
    """
    Compute the "trending" score of an idea.

    Formula:
        views * (popularity_weight / 2)

    Example:
        500 views at High (3) -> 750.0; 900 views at Low (1) -> 450.0
    """
    return item.views * (popularity_score(item.popularity) / 2)


# =============================================================================
# Filtering
# =============================================================================

def matches_category(item: IdeaItem, category: Category) -> bool:
    """Trending matches every record; any other list-category matches exactly."""
    if category.is_wildcard:
        return True
    return item.category is category


def matches_query(item: IdeaItem, query: str) -> bool:
    """
    Check whether an idea matches a free-text query.

    Matching rules:
    - Empty query matches everything
    - Case-insensitive substring match
    - Searches the title and every tag (description is not searched)
    """
    if not query:
        return True

    needle = query.lower()
    if needle in item.title.lower():
        return True
    return any(needle in tag.lower() for tag in item.tags)


def filter_ideas(records: Iterable[IdeaItem], query: str, category: Category) -> list[IdeaItem]:
    """Return the records passing both the category and the text predicate, in input order."""
    return [
        item for item in records
        if matches_category(item, category) and matches_query(item, query)
    ]


# =============================================================================
# Sorting
# =============================================================================

def sort_key(sort: SortOption) -> Callable[[IdeaItem], object]:
    """
    Return the key function for a sort option.

    Every sort is descending on its key; sort_ideas() applies reverse=True.

    "new" compares identifiers by code point, not by locale collation, so
    uppercase letters sort before lowercase ones ("Z" < "a"). Identifiers
    that share one case and width (idea-001, idea-002, ...) order the same
    either way.
    """
    if sort is SortOption.VIEWS:
        return lambda item: item.views
    if sort is SortOption.POPULARITY:
        return lambda item: popularity_score(item.popularity)
    if sort is SortOption.NEW:
        return lambda item: item.id
    if sort is SortOption.TRENDING:
        return trending_score
    raise ContractViolation(f"unknown sort option: {sort!r}")


def sort_ideas(items: Iterable[IdeaItem], sort: SortOption) -> list[IdeaItem]:
    """
    Return a new list ordered by the given sort option.

    sorted() is stable even with reverse=True, so records with equal keys
    keep their catalog order.
    """
    return sorted(items, key=sort_key(sort), reverse=True)


def sort_options() -> list[dict]:
    """Sort options as value/label pairs, in menu order."""
    return [{"value": option.value, "label": option.label} for option in SortOption]


# =============================================================================
# Ranking
# =============================================================================

def rank(
    records: Sequence[IdeaItem],
    query: str,
    category: Category | str,
    sort: SortOption | str,
) -> list[IdeaItem]:
    """
    Filter and order the catalog for display.

    Args:
        records: Full catalog. Never mutated.
        query: Free-text query, possibly empty.
        category: A list-category (enum member or its string value).
        sort: A sort option (enum member or its string value).

    Returns:
        New list of matching records in display order. Empty when nothing
        matches.

    Raises:
        ContractViolation: If category or sort is unknown, category is a
            mode-category, or query is not a string.
    """
    category = Category.parse(category)
    sort = SortOption.parse(sort)

    if category.is_mode:
        raise ContractViolation(f"cannot rank ideas for mode category {category.value!r}")

    if query is None:
        query = ""
    if not isinstance(query, str):
        raise ContractViolation(f"query must be a string, got {type(query).__name__}")

    return sort_ideas(filter_ideas(records, query, category), sort)


def ordered_ideas(discovery: DiscoveryState, records: Sequence[IdeaItem]) -> list[IdeaItem]:
    """
    Ideas to show for the current discovery state.

    Returns an empty list while a mode-category is active, since the list
    view is not rendered in that case.
    """
    if discovery.category.is_mode:
        return []
    return rank(records, discovery.query, discovery.category, discovery.sort)


# =============================================================================
# Suggestions
# =============================================================================

def get_suggestions(
    query: str,
    suggestions: Sequence[str],
    filter_by_query: bool = False,
) -> list[str]:
    """
    Return the suggestions to show under the search box.

    By default the static list is returned unchanged whatever the query is.
    With filter_by_query, only suggestions containing the query
    (case-insensitive) are kept; an empty query keeps all of them.
    """
    if not filter_by_query or not query:
        return list(suggestions)

    needle = query.lower()
    return [s for s in suggestions if needle in s.lower()]


def should_show_suggestions(query: str, focused: bool, just_typed: bool = False) -> bool:
    """Suggestions are shown iff the query is non-empty and the input is focused or was just typed in."""
    return bool(query) and (focused or just_typed)


def resolve_suggestion(discovery: DiscoveryState, suggestion: str) -> DiscoveryState:
    """
    Apply a clicked suggestion to the discovery state.

    Sets the query to the suggestion, hides the dropdown, and switches to
    Trending (dropping any active mode-category) so results are always
    visible. Sort and sort menu are left untouched. The caller is
    responsible for switching to the dashboard.
    """
    if not isinstance(suggestion, str):
        raise ContractViolation(f"suggestion must be a string, got {type(suggestion).__name__}")

    return discovery.evolve(
        query=suggestion,
        suggestions_visible=False,
        category=Category.TRENDING,
    )
