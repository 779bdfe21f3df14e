"""
Core data model for KhojVerse.

Defines the IdeaItem dataclass representing a single catalog entry
(hackathon, project, research note, article...) and the closed enums
used to classify, filter, and sort it.
"""

from dataclasses import dataclass, asdict
from enum import Enum
from typing import Optional

from src.models.errors import ContractViolation


class Popularity(str, Enum):
    """Ordered popularity tier: High > Medium > Low."""

    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"

    @classmethod
    def parse(cls, value) -> "Popularity":
        """Return the member for `value` or raise ContractViolation."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise ContractViolation(f"unknown popularity tier: {value!r}") from None


class Category(str, Enum):
    """
    Closed set of dashboard selectors.

    List-categories filter the catalog; mode-categories switch the dashboard
    to a full-screen view and never match a record. TRENDING is the wildcard
    list-category that matches every record.
    """

    TRENDING = "Trending"
    HACKATHONS = "Hackathons"
    PROJECTS = "Projects"
    RESEARCH = "Research"
    ARTICLES = "Articles"
    SAVED = "Saved"
    AI_LAB = "AI Lab"
    LIVE_ASSISTANT = "Live Assistant"

    @property
    def is_mode(self) -> bool:
        return self in MODE_CATEGORIES

    @property
    def is_list(self) -> bool:
        return self not in MODE_CATEGORIES

    @property
    def is_wildcard(self) -> bool:
        return self is Category.TRENDING

    @classmethod
    def parse(cls, value) -> "Category":
        """Return the member for `value` or raise ContractViolation."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise ContractViolation(f"unknown category: {value!r}") from None


MODE_CATEGORIES: tuple = (Category.AI_LAB, Category.LIVE_ASSISTANT)

LIST_CATEGORIES: tuple = tuple(c for c in Category if c not in MODE_CATEGORIES)


class SortOption(str, Enum):
    """Sort criteria for the dashboard list view. Exactly one is active."""

    VIEWS = "views"
    POPULARITY = "popularity"
    TRENDING = "trending"
    NEW = "new"

    @property
    def label(self) -> str:
        return SORT_LABELS[self]

    @classmethod
    def parse(cls, value) -> "SortOption":
        """Return the member for `value` or raise ContractViolation."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise ContractViolation(f"unknown sort option: {value!r}") from None


# Menu order matches the declaration order of SortOption
SORT_LABELS: dict = {
    SortOption.VIEWS: "Most Viewed",
    SortOption.POPULARITY: "Popularity (Level)",
    SortOption.TRENDING: "Trending Today",
    SortOption.NEW: "New Ideas",
}


class Difficulty(str, Enum):
    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"


REQUIRED_FIELDS: tuple = ("id", "title", "category", "popularity", "views")


@dataclass(frozen=True)
class IdeaItem:
    """
    Represents a single immutable entry in the idea catalog.

    Only id, title, category, popularity, views, and tags are read by the
    discovery engine. The remaining optional attributes are opaque payload
    for whatever renders the record.

    Attributes:
        id: Unique identifier. String order doubles as a recency proxy.
        title: Display title, searched case-insensitively.
        category: The list-category this record belongs to.
        description: Short description.
        popularity: Popularity tier (High, Medium, Low).
        views: Non-negative view count.
        tags: Topic tags, searched case-insensitively.
    """

    # Required fields
    id: str
    title: str
    category: Category
    popularity: Popularity
    views: int

    # Optional fields with defaults
    description: str = ""
    tags: tuple = ()

    # Category-specific payload
    theme: Optional[str] = None           # Hackathons
    organizer: Optional[str] = None       # Hackathons
    deadline: Optional[str] = None        # Hackathons
    difficulty: Optional[Difficulty] = None  # Projects
    domain: Optional[str] = None          # Research
    abstract: Optional[str] = None        # Research
    author: Optional[str] = None          # Articles
    date: Optional[str] = None            # Articles

    def __post_init__(self) -> None:
        """Normalize tags to a tuple and validate fields."""
        if isinstance(self.tags, list):
            object.__setattr__(self, "tags", tuple(self.tags))
        self.validate()

    def validate(self) -> None:
        """
        Validate that required fields are present and well-formed.

        Raises:
            ContractViolation: If validation fails.
        """
        errors = []

        if not isinstance(self.id, str) or not self.id.strip():
            errors.append("id is required and cannot be empty")

        if not isinstance(self.title, str) or not self.title.strip():
            errors.append("title is required and cannot be empty")

        if not isinstance(self.category, Category):
            errors.append(f"category must be a Category, got {self.category!r}")
        elif self.category.is_mode:
            errors.append(f"category must be a list-category, got {self.category.value!r}")

        if not isinstance(self.popularity, Popularity):
            errors.append(f"popularity must be a Popularity, got {self.popularity!r}")

        # bool is an int subclass but never a valid view count
        if isinstance(self.views, bool) or not isinstance(self.views, int):
            errors.append(f"views must be an integer, got {self.views!r}")
        elif self.views < 0:
            errors.append(f"views cannot be negative, got {self.views}")

        if not isinstance(self.tags, tuple) or not all(isinstance(t, str) for t in self.tags):
            errors.append("tags must be a sequence of strings")

        if self.difficulty is not None and not isinstance(self.difficulty, Difficulty):
            errors.append(f"difficulty must be a Difficulty, got {self.difficulty!r}")

        if errors:
            raise ContractViolation(f"IdeaItem validation failed: {'; '.join(errors)}")

    def to_dict(self) -> dict:
        """
        Convert IdeaItem to a plain JSON-compatible dictionary.

        Enum fields are converted to their string values and unset optional
        fields are dropped.
        """
        data = asdict(self)
        data["category"] = self.category.value
        data["popularity"] = self.popularity.value
        data["tags"] = list(self.tags)
        if self.difficulty is not None:
            data["difficulty"] = self.difficulty.value
        return {key: value for key, value in data.items() if value is not None}

    @classmethod
    def from_dict(cls, data: dict) -> "IdeaItem":
        """
        Create an IdeaItem from a dictionary (e.g., a JSON catalog entry).

        Args:
            data: Dictionary with IdeaItem fields; enums given as strings.

        Returns:
            New IdeaItem instance.

        Raises:
            ContractViolation: If a required field is missing, a field is
                unknown, or an enum value is not recognized.
        """
        if not isinstance(data, dict):
            raise ContractViolation(f"IdeaItem record must be an object, got {type(data).__name__}")

        missing = [name for name in REQUIRED_FIELDS if name not in data]
        if missing:
            raise ContractViolation(f"IdeaItem record missing required fields: {', '.join(missing)}")

        # Make a copy to avoid modifying the input
        data = data.copy()

        unknown = set(data) - set(cls.__dataclass_fields__)
        if unknown:
            raise ContractViolation(f"IdeaItem record has unknown fields: {', '.join(sorted(unknown))}")

        data["category"] = Category.parse(data["category"])
        data["popularity"] = Popularity.parse(data["popularity"])

        if data.get("tags") is not None:
            if not isinstance(data["tags"], (list, tuple)):
                raise ContractViolation(
                    f"IdeaItem record tags must be a list of strings, got {type(data['tags']).__name__}"
                )
            data["tags"] = tuple(data["tags"])
        else:
            data.pop("tags", None)

        if data.get("difficulty") is not None:
            try:
                data["difficulty"] = Difficulty(data["difficulty"])
            except ValueError:
                raise ContractViolation(f"unknown difficulty: {data['difficulty']!r}") from None

        return cls(**data)

    def __str__(self) -> str:
        """Human-readable string representation."""
        return f"[{self.category.value}] {self.title} ({self.views} views, {self.popularity.value})"
