"""
Navigation controller for KhojVerse.

Owns the single AppState of a user and moves it between screens:

    Landing → Login → Dashboard(category) → Landing ...

Steps of a dispatch:
1. Check that the action is legal on the current screen
2. Compute the full next state in one pure step (reduce)
3. Attach or discard the session when entering the dashboard or leaving it
4. Swap the new state in and log the transition

Design principles:
- reduce() is pure: same (state, action) always gives the same next state
- Transitions are atomic: callers never observe a half-applied action
- Illegal actions fail fast with IllegalTransition instead of being ignored
"""

import logging
import threading
from typing import Optional, Sequence

import src.config.config as app_config
from src.discovery.engine import (
    get_suggestions,
    ordered_ideas,
    resolve_suggestion,
    should_show_suggestions,
)
from src.models.errors import IllegalTransition
from src.models.idea_item import IdeaItem, Category, SortOption
from src.models.session import (
    DEFAULT_SESSION_SETTINGS,
    Session,
    SessionSettings,
    display_identity,
    guest_session,
    login_session,
)
from src.models.state import AppState, DiscoveryState, Screen, initial_state
from src.navigation.actions import (
    BlurSearch,
    ClearSearch,
    ContinueAsGuest,
    ExploreTrending,
    FocusSearch,
    GoToLanding,
    GoToLogin,
    Login,
    Logout,
    SelectCategory,
    SelectSuggestion,
    SetQuery,
    SetSort,
    ToggleSortMenu,
    action_name,
)

logger = logging.getLogger(__name__)

SEARCH_ACTIONS = (SetQuery, FocusSearch, BlurSearch, ClearSearch)


# =============================================================================
# Transition Helpers
# =============================================================================

def _leave_search(discovery: DiscoveryState) -> DiscoveryState:
    """The search input loses focus whenever the visible screen changes."""
    return discovery.evolve(search_focused=False, suggestions_visible=False)


def _enter_dashboard(
    state: AppState,
    discovery: DiscoveryState,
    session: Optional[Session],
) -> AppState:
    """Move to the dashboard, keeping any session that already exists."""
    return state.evolve(
        screen=Screen.DASHBOARD,
        session=session,
        discovery=_leave_search(discovery),
    )


def _apply_search(discovery: DiscoveryState, action) -> DiscoveryState:
    """Apply one of the search-input actions to the discovery state."""
    if isinstance(action, SetQuery):
        return discovery.evolve(
            query=action.query,
            suggestions_visible=should_show_suggestions(
                action.query, discovery.search_focused, just_typed=True
            ),
        )
    if isinstance(action, FocusSearch):
        return discovery.evolve(
            search_focused=True,
            suggestions_visible=should_show_suggestions(discovery.query, focused=True),
        )
    if isinstance(action, BlurSearch):
        return discovery.evolve(search_focused=False, suggestions_visible=False)
    # ClearSearch
    return discovery.evolve(query="", suggestions_visible=False)


# =============================================================================
# Reducer
# =============================================================================

def reduce(
    state: AppState,
    action,
    session_settings: SessionSettings = DEFAULT_SESSION_SETTINGS,
) -> AppState:
    """
    Compute the next state for an action.

    Args:
        state: Current state.
        action: One of the actions in src.navigation.actions.
        session_settings: Identity used for newly created sessions.

    Returns:
        The complete next state.

    Raises:
        IllegalTransition: If the action is not accepted on the current screen.
    """
    screen = state.screen
    discovery = state.discovery

    # A suggestion click always lands on Dashboard(Trending), from any screen
    if isinstance(action, SelectSuggestion):
        return _enter_dashboard(
            state,
            resolve_suggestion(discovery, action.suggestion),
            state.session or guest_session(session_settings),
        )

    if screen is Screen.LANDING:
        if isinstance(action, ExploreTrending):
            return _enter_dashboard(
                state,
                discovery.evolve(category=Category.TRENDING),
                state.session or guest_session(session_settings),
            )
        if isinstance(action, GoToLogin):
            return state.evolve(screen=Screen.LOGIN, discovery=_leave_search(discovery))
        if isinstance(action, SEARCH_ACTIONS):
            return state.evolve(discovery=_apply_search(discovery, action))

    elif screen is Screen.LOGIN:
        # Credentials are never verified; both paths always create a session
        if isinstance(action, Login):
            return _enter_dashboard(
                state,
                discovery.evolve(category=Category.TRENDING),
                login_session(session_settings),
            )
        if isinstance(action, ContinueAsGuest):
            return _enter_dashboard(
                state,
                discovery.evolve(category=Category.TRENDING),
                guest_session(session_settings),
            )
        if isinstance(action, GoToLanding):
            return state.evolve(screen=Screen.LANDING)

    elif screen is Screen.DASHBOARD:
        if isinstance(action, (GoToLanding, Logout)):
            return state.evolve(
                screen=Screen.LANDING,
                session=None,
                discovery=_leave_search(discovery).evolve(sort_menu_open=False),
            )
        if isinstance(action, SelectCategory):
            changes = {"category": action.category}
            if action.category.is_list:
                changes["sort_menu_open"] = False
            return state.evolve(discovery=discovery.evolve(**changes))
        if isinstance(action, (ToggleSortMenu, SetSort)):
            if not state.is_list_view:
                raise IllegalTransition(
                    screen.value, action_name(action),
                    f"no sort menu in {discovery.category.value}",
                )
            if isinstance(action, ToggleSortMenu):
                return state.evolve(discovery=discovery.evolve(sort_menu_open=not discovery.sort_menu_open))
            return state.evolve(discovery=discovery.evolve(sort=action.sort, sort_menu_open=False))
        if isinstance(action, SEARCH_ACTIONS):
            return state.evolve(discovery=_apply_search(discovery, action))

    raise IllegalTransition(screen.value, action_name(action))


# =============================================================================
# Controller
# =============================================================================

class NavigationController:
    """
    Holds one user's AppState and applies actions to it.

    The catalog and suggestion list are read-only inputs supplied at
    construction and shared with the discovery engine on every read.
    """

    def __init__(
        self,
        catalog: Sequence[IdeaItem] = (),
        suggestions: Sequence[str] = (),
        default_sort: SortOption | str = SortOption.VIEWS,
        session_settings: SessionSettings = DEFAULT_SESSION_SETTINGS,
        filter_suggestions: bool = False,
    ):
        self.catalog = tuple(catalog)
        self.suggestion_list = tuple(suggestions)
        self.default_sort = SortOption.parse(default_sort)
        self.session_settings = session_settings
        self.filter_suggestions = filter_suggestions
        self._lock = threading.Lock()
        self._state = initial_state(self.default_sort)

    @classmethod
    def from_config(cls, catalog: Sequence[IdeaItem], suggestions: Sequence[str]) -> "NavigationController":
        """Build a controller using the values in src.config."""
        return cls(
            catalog=catalog,
            suggestions=suggestions,
            default_sort=app_config.DEFAULT_SORT,
            session_settings=SessionSettings(
                name=app_config.GUEST_NAME,
                email=app_config.GUEST_EMAIL,
                avatar_template=app_config.AVATAR_URL_TEMPLATE,
            ),
            filter_suggestions=app_config.SUGGESTIONS_FILTER_BY_QUERY,
        )

    @property
    def state(self) -> AppState:
        return self._state

    def dispatch(self, action) -> AppState:
        """
        Apply an action and return the new state.

        Raises:
            IllegalTransition: If the action is not legal on the current screen.
                The state is left unchanged.
        """
        # Read, reduce and swap as one step
        with self._lock:
            previous = self._state
            try:
                new_state = reduce(previous, action, self.session_settings)
            except IllegalTransition as e:
                logger.warning("Rejected action: %s", e)
                raise
            self._state = new_state

        if previous.session is None and new_state.session is not None:
            logger.info("Session started for %s", new_state.session.email)
        elif previous.session is not None and new_state.session is None:
            logger.info("Session ended for %s", previous.session.email)

        logger.debug(
            "%s: %s -> %s (view=%s)",
            action_name(action),
            previous.screen.value,
            new_state.screen.value,
            new_state.view.value if new_state.view else None,
        )

        return new_state

    def ordered_ideas(self) -> list[IdeaItem]:
        """Ideas for the dashboard list view; empty while a mode is active."""
        return ordered_ideas(self._state.discovery, self.catalog)

    def suggestions(self, query: Optional[str] = None) -> list[str]:
        """Suggestions for `query`, defaulting to the current query."""
        if query is None:
            query = self._state.discovery.query
        return get_suggestions(query, self.suggestion_list, self.filter_suggestions)

    def identity(self) -> tuple[str, str]:
        """(name, avatar) to show in the dashboard header."""
        return display_identity(self._state.session, self.session_settings)

    def reset(self) -> AppState:
        """Return to the initial landing state, discarding any session."""
        state = initial_state(self.default_sort)
        with self._lock:
            self._state = state
        return state
