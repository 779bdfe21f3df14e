"""
Data models module.

Defines idea records, categories, sort options, sessions, and app state.
"""

from src.models.errors import ContractViolation, IllegalTransition
from src.models.idea_item import (
    IdeaItem,
    Popularity,
    Category,
    SortOption,
    Difficulty,
    LIST_CATEGORIES,
    MODE_CATEGORIES,
    SORT_LABELS,
)
from src.models.session import (
    Session,
    SessionSettings,
    guest_session,
    login_session,
    display_identity,
)
from src.models.state import Screen, DiscoveryState, AppState, initial_state

__all__ = [
    "ContractViolation",
    "IllegalTransition",
    "IdeaItem",
    "Popularity",
    "Category",
    "SortOption",
    "Difficulty",
    "LIST_CATEGORIES",
    "MODE_CATEGORIES",
    "SORT_LABELS",
    "Session",
    "SessionSettings",
    "guest_session",
    "login_session",
    "display_identity",
    "Screen",
    "DiscoveryState",
    "AppState",
    "initial_state",
]
