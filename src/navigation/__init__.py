"""
Navigation module.

Screen state machine and the actions that drive it.
"""

from src.navigation.actions import (
    SelectCategory,
    SetQuery,
    SetSort,
    ToggleSortMenu,
    SelectSuggestion,
    Login,
    ContinueAsGuest,
    Logout,
    GoToLanding,
    GoToLogin,
    ExploreTrending,
    FocusSearch,
    BlurSearch,
    ClearSearch,
    ACTION_TYPES,
    action_from_dict,
)
from src.navigation.controller import NavigationController, reduce

__all__ = [
    # Actions
    "SelectCategory",
    "SetQuery",
    "SetSort",
    "ToggleSortMenu",
    "SelectSuggestion",
    "Login",
    "ContinueAsGuest",
    "Logout",
    "GoToLanding",
    "GoToLogin",
    "ExploreTrending",
    "FocusSearch",
    "BlurSearch",
    "ClearSearch",
    "ACTION_TYPES",
    "action_from_dict",
    # Controller
    "NavigationController",
    "reduce",
]
