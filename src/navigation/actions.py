"""
User actions accepted by the navigation controller.

Each action is a small frozen dataclass. action_from_dict() builds one from a
JSON payload such as {"type": "SelectCategory", "category": "Research"}.
"""

from dataclasses import dataclass, fields

from src.models.errors import ContractViolation
from src.models.idea_item import Category, SortOption


@dataclass(frozen=True)
class SelectCategory:
    category: Category

    def __post_init__(self):
        object.__setattr__(self, "category", Category.parse(self.category))


@dataclass(frozen=True)
class SetQuery:
    query: str

    def __post_init__(self):
        if not isinstance(self.query, str):
            raise ContractViolation(f"query must be a string, got {type(self.query).__name__}")


@dataclass(frozen=True)
class SetSort:
    sort: SortOption

    def __post_init__(self):
        object.__setattr__(self, "sort", SortOption.parse(self.sort))


@dataclass(frozen=True)
class ToggleSortMenu:
    pass


@dataclass(frozen=True)
class SelectSuggestion:
    suggestion: str

    def __post_init__(self):
        if not isinstance(self.suggestion, str):
            raise ContractViolation(f"suggestion must be a string, got {type(self.suggestion).__name__}")


@dataclass(frozen=True)
class Login:
    """Login form submitted. Always succeeds."""


@dataclass(frozen=True)
class ContinueAsGuest:
    pass


@dataclass(frozen=True)
class Logout:
    pass


@dataclass(frozen=True)
class GoToLanding:
    """Logo click on the dashboard, or "Go Back" on the login screen."""


@dataclass(frozen=True)
class GoToLogin:
    pass


@dataclass(frozen=True)
class ExploreTrending:
    pass


@dataclass(frozen=True)
class FocusSearch:
    pass


@dataclass(frozen=True)
class BlurSearch:
    pass


@dataclass(frozen=True)
class ClearSearch:
    pass


ACTION_TYPES: dict[str, type] = {
    cls.__name__: cls
    for cls in (
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
    )
}


def action_name(action) -> str:
    return type(action).__name__


def action_from_dict(data: dict):
    """
    Build an action from a JSON-style dict.

    Args:
        data: Dict with a "type" key naming the action, plus its fields.

    Returns:
        The action instance.

    Raises:
        ContractViolation: If the type is unknown or a field is missing.
    """
    if not isinstance(data, dict):
        raise ContractViolation("action must be an object")

    type_name = data.get("type")
    cls = ACTION_TYPES.get(type_name)
    if cls is None:
        raise ContractViolation(f"unknown action type: {type_name!r}")

    kwargs = {}
    for f in fields(cls):
        if f.name not in data:
            raise ContractViolation(f"{type_name} requires field {f.name!r}")
        kwargs[f.name] = data[f.name]

    return cls(**kwargs)
