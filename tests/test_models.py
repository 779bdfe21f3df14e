"""
Tests for data models.

Validates IdeaItem construction and validation, enum parsing,
dict conversion, sessions, and app state.
"""

import pytest
from dataclasses import FrozenInstanceError

from src.models import (
    AppState,
    Category,
    ContractViolation,
    Difficulty,
    DiscoveryState,
    IdeaItem,
    LIST_CATEGORIES,
    MODE_CATEGORIES,
    Popularity,
    Screen,
    Session,
    SessionSettings,
    SortOption,
    display_identity,
    guest_session,
    initial_state,
    login_session,
)
from tests.test_config import CONFIG, EXPECTED, TEST_DATA, MESSAGES


# =============================================================================
# Test Fixtures
# =============================================================================

@pytest.fixture
def basic_item():
    """A minimal valid IdeaItem."""
    return IdeaItem(
        id="idea-100",
        title="Minimal Idea",
        category=Category.PROJECTS,
        popularity=Popularity.LOW,
        views=10,
    )


# =============================================================================
# Test Enums
# =============================================================================

class TestCategory:
    """Tests for the Category enum."""

    def test_list_and_mode_partition(self):
        """Every category is exactly one of list or mode."""
        assert [c.value for c in LIST_CATEGORIES] == CONFIG["list_categories"]
        assert [c.value for c in MODE_CATEGORIES] == CONFIG["mode_categories"]
        for category in Category:
            assert category.is_list != category.is_mode

    def test_only_trending_is_wildcard(self):
        assert Category.TRENDING.is_wildcard
        assert not any(c.is_wildcard for c in Category if c is not Category.TRENDING)

    def test_parse_accepts_value_and_member(self):
        assert Category.parse("AI Lab") is Category.AI_LAB
        assert Category.parse(Category.RESEARCH) is Category.RESEARCH

    def test_parse_unknown_raises(self):
        with pytest.raises(ContractViolation, match=MESSAGES["errors"]["unknown_category"]):
            Category.parse("Podcasts")

    def test_parse_is_case_sensitive(self):
        with pytest.raises(ContractViolation):
            Category.parse("research")


class TestSortOption:
    """Tests for the SortOption enum."""

    def test_menu_order(self):
        assert [s.value for s in SortOption] == CONFIG["sort_options"]

    def test_labels(self):
        for value, label in EXPECTED["discovery"]["sort_labels"].items():
            assert SortOption(value).label == label

    def test_parse_unknown_raises(self):
        with pytest.raises(ContractViolation, match=MESSAGES["errors"]["unknown_sort"]):
            SortOption.parse("alphabetical")


class TestPopularity:
    def test_parse(self):
        assert Popularity.parse("High") is Popularity.HIGH

    def test_parse_unknown_raises(self):
        with pytest.raises(ContractViolation):
            Popularity.parse("Viral")


# =============================================================================
# Test IdeaItem
# =============================================================================

class TestIdeaItemValidation:
    """Tests for IdeaItem validation on construction."""

    def test_valid_item(self, basic_item):
        assert basic_item.title == "Minimal Idea"
        assert basic_item.tags == ()
        assert basic_item.description == ""

    def test_tags_list_becomes_tuple(self):
        item = IdeaItem(
            id="x", title="Tagged", category=Category.ARTICLES,
            popularity=Popularity.HIGH, views=1, tags=["a", "b"],
        )
        assert item.tags == ("a", "b")

    def test_empty_title_rejected(self):
        with pytest.raises(ContractViolation, match="title"):
            IdeaItem(id="x", title="  ", category=Category.PROJECTS, popularity=Popularity.LOW, views=1)

    def test_empty_id_rejected(self):
        with pytest.raises(ContractViolation, match="id"):
            IdeaItem(id="", title="T", category=Category.PROJECTS, popularity=Popularity.LOW, views=1)

    def test_negative_views_rejected(self):
        with pytest.raises(ContractViolation, match="views"):
            IdeaItem(id="x", title="T", category=Category.PROJECTS, popularity=Popularity.LOW, views=-1)

    def test_bool_views_rejected(self):
        with pytest.raises(ContractViolation, match="views"):
            IdeaItem(id="x", title="T", category=Category.PROJECTS, popularity=Popularity.LOW, views=True)

    def test_mode_category_rejected(self):
        with pytest.raises(ContractViolation, match="list-category"):
            IdeaItem(id="x", title="T", category=Category.AI_LAB, popularity=Popularity.LOW, views=1)

    def test_string_category_rejected(self):
        """Constructor expects enum members; from_dict handles strings."""
        with pytest.raises(ContractViolation):
            IdeaItem(id="x", title="T", category="Projects", popularity=Popularity.LOW, views=1)

    def test_multiple_errors_reported_together(self):
        with pytest.raises(ContractViolation) as exc_info:
            IdeaItem(id="", title="", category=Category.PROJECTS, popularity=Popularity.LOW, views=-1)
        message = str(exc_info.value)
        assert "id" in message and "title" in message and "views" in message

    def test_item_is_immutable(self, basic_item):
        with pytest.raises(FrozenInstanceError):
            basic_item.views = 99


class TestIdeaItemConversion:
    """Tests for to_dict / from_dict."""

    def test_from_dict_parses_enums(self):
        item = IdeaItem.from_dict(TEST_DATA["scenario_records"][0])
        assert item.category is Category.RESEARCH
        assert item.popularity is Popularity.HIGH
        assert item.tags == ("Transformers", "NLP")

    def test_from_dict_does_not_modify_input(self):
        record = dict(TEST_DATA["scenario_records"][0])
        snapshot = dict(record)
        IdeaItem.from_dict(record)
        assert record == snapshot

    def test_from_dict_optional_payload(self):
        item = IdeaItem.from_dict({
            "id": "p1", "title": "Robot", "category": "Projects",
            "popularity": "Medium", "views": 3, "difficulty": "Advanced",
        })
        assert item.difficulty is Difficulty.ADVANCED

    @pytest.mark.parametrize("name", sorted(TEST_DATA["malformed_records"]))
    def test_from_dict_malformed_records_raise(self, name):
        with pytest.raises(ContractViolation):
            IdeaItem.from_dict(TEST_DATA["malformed_records"][name])

    def test_from_dict_missing_field_message(self):
        with pytest.raises(ContractViolation, match=MESSAGES["errors"]["missing_field"]):
            IdeaItem.from_dict(TEST_DATA["malformed_records"]["missing_views"])

    def test_from_dict_string_tags_rejected(self):
        """A bare string is not split into single-character tags."""
        with pytest.raises(ContractViolation, match="tags must be a list"):
            IdeaItem.from_dict(TEST_DATA["malformed_records"]["string_tags"])

    def test_from_dict_unknown_field_raises(self):
        record = dict(TEST_DATA["scenario_records"][0], rating=5)
        with pytest.raises(ContractViolation, match="unknown fields"):
            IdeaItem.from_dict(record)

    def test_from_dict_rejects_non_dict(self):
        with pytest.raises(ContractViolation):
            IdeaItem.from_dict(["not", "a", "dict"])

    def test_to_dict_round_trip(self):
        record = TEST_DATA["scenario_records"][1]
        item = IdeaItem.from_dict(record)
        assert IdeaItem.from_dict(item.to_dict()) == item

    def test_to_dict_is_json_friendly(self, basic_item):
        data = basic_item.to_dict()
        assert data["category"] == "Projects"
        assert data["popularity"] == "Low"
        assert data["tags"] == []
        assert "deadline" not in data


# =============================================================================
# Test Sessions
# =============================================================================

class TestSession:
    def test_login_session_identity(self):
        session = login_session()
        assert session.name == EXPECTED["config"]["default_guest_name"]
        assert session.email == EXPECTED["config"]["default_guest_email"]
        assert session.avatar == EXPECTED["session"]["login_avatar"]

    def test_guest_session_avatar(self):
        assert guest_session().avatar == EXPECTED["session"]["guest_avatar"]

    def test_custom_settings(self):
        settings = SessionSettings(name="Ada", email="ada@example.com", avatar_template="https://img/{seed}.png")
        session = guest_session(settings)
        assert session == Session(name="Ada", email="ada@example.com", avatar="https://img/guest.png")

    def test_display_identity_without_session(self):
        name, avatar = display_identity(None)
        assert name == EXPECTED["session"]["anonymous_name"]
        assert avatar == EXPECTED["session"]["anonymous_avatar"]

    def test_display_identity_with_session(self):
        session = login_session()
        assert display_identity(session) == (session.name, session.avatar)


# =============================================================================
# Test App State
# =============================================================================

class TestAppState:
    def test_initial_state(self):
        state = initial_state()
        assert state.screen is Screen.LANDING
        assert state.session is None
        assert state.discovery == DiscoveryState()
        assert state.discovery.category is Category.TRENDING
        assert state.discovery.sort is SortOption.VIEWS

    def test_initial_state_custom_sort(self):
        assert initial_state(SortOption.NEW).discovery.sort is SortOption.NEW

    def test_view_only_defined_on_dashboard(self):
        discovery = DiscoveryState(category=Category.RESEARCH)
        assert AppState(screen=Screen.LANDING, discovery=discovery).view is None
        assert AppState(screen=Screen.LOGIN, discovery=discovery).view is None
        assert AppState(screen=Screen.DASHBOARD, discovery=discovery).view is Category.RESEARCH

    def test_is_list_view(self):
        dashboard = AppState(screen=Screen.DASHBOARD)
        assert dashboard.is_list_view
        assert not dashboard.evolve(discovery=DiscoveryState(category=Category.AI_LAB)).is_list_view
        assert not AppState(screen=Screen.LANDING).is_list_view

    def test_to_dict(self):
        state = AppState(screen=Screen.DASHBOARD, session=guest_session())
        data = state.to_dict()
        assert data["screen"] == "dashboard"
        assert data["view"] == "Trending"
        assert data["session"]["email"] == EXPECTED["config"]["default_guest_email"]
        assert data["discovery"]["sort"] == "views"

    def test_state_is_immutable(self):
        with pytest.raises(FrozenInstanceError):
            initial_state().screen = Screen.DASHBOARD
