"""
Application state for KhojVerse.

The whole per-session UI state lives in one immutable AppState value. The
navigation controller replaces it wholesale on every dispatched action, so
no caller ever observes a half-applied transition.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional

from src.models.idea_item import Category, SortOption
from src.models.session import Session


class Screen(str, Enum):
    LANDING = "landing"
    LOGIN = "login"
    DASHBOARD = "dashboard"


@dataclass(frozen=True)
class DiscoveryState:
    """
    Query, category, and sort inputs plus the search/sort UI flags.

    Attributes:
        query: Raw search string (may be empty).
        category: Active category; a list-category or a mode-category.
        sort: Active sort option.
        suggestions_visible: Whether the suggestion dropdown is shown.
        sort_menu_open: Whether the sort menu is open.
        search_focused: Whether the search input has focus.
    """
    query: str = ""
    category: Category = Category.TRENDING
    sort: SortOption = SortOption.VIEWS
    suggestions_visible: bool = False
    sort_menu_open: bool = False
    search_focused: bool = False

    def evolve(self, **changes) -> "DiscoveryState":
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)

    def to_dict(self) -> dict:
        return {
            "query": self.query,
            "category": self.category.value,
            "sort": self.sort.value,
            "suggestions_visible": self.suggestions_visible,
            "sort_menu_open": self.sort_menu_open,
            "search_focused": self.search_focused,
        }


@dataclass(frozen=True)
class AppState:
    """
    Screen, session, and discovery state for a single user.

    Attributes:
        screen: Currently visible screen.
        session: Active session, or None when signed out.
        discovery: Query/category/sort state. Persists across screens.
    """
    screen: Screen = Screen.LANDING
    session: Optional[Session] = None
    discovery: DiscoveryState = field(default_factory=DiscoveryState)

    @property
    def view(self) -> Optional[Category]:
        """Dashboard sub-selector; None outside the dashboard."""
        if self.screen is Screen.DASHBOARD:
            return self.discovery.category
        return None

    @property
    def is_list_view(self) -> bool:
        """True when the dashboard is showing the filtered idea list."""
        return self.screen is Screen.DASHBOARD and self.discovery.category.is_list

    def evolve(self, **changes) -> "AppState":
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)

    def to_dict(self) -> dict:
        view = self.view
        return {
            "screen": self.screen.value,
            "view": view.value if view is not None else None,
            "session": self.session.to_dict() if self.session else None,
            "discovery": self.discovery.to_dict(),
        }


def initial_state(sort: SortOption = SortOption.VIEWS) -> AppState:
    """Landing screen, no session, empty query, Trending, the given sort."""
    return AppState(discovery=DiscoveryState(sort=sort))
