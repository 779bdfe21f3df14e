"""
Configuration Validation Tests

Verifies that configuration defaults are applied, that invalid values are
reported clearly, and that logging can be configured repeatedly.

Test data and expected values are defined in tests/test_config.py.
Update that file to change test parameters without modifying this script.
"""

import importlib
import logging
import os
import pytest
from unittest.mock import patch

# Import externalized test configuration
from tests.test_config import CONFIG, EXPECTED

CONFIG_VARS = (
    "APP_ENV", "DEBUG", "LOG_LEVEL", "CATALOG_PATH", "SUGGESTIONS_PATH",
    "DEFAULT_SORT", "SUGGESTIONS_FILTER_BY_QUERY", "GUEST_NAME", "GUEST_EMAIL",
    "AVATAR_URL_TEMPLATE", "WEB_HOST", "WEB_PORT",
)


def reload_config(**env):
    """Reload src.config.config with only the given variables set."""
    import src.config.config as config_module

    clean = {k: v for k, v in os.environ.items() if k not in CONFIG_VARS}
    clean.update(env)
    with patch.dict(os.environ, clean, clear=True), patch("dotenv.load_dotenv"):
        importlib.reload(config_module)
    return config_module


@pytest.fixture(autouse=True)
def restore_config():
    """Reload the real configuration after each test."""
    yield
    import src.config.config as config_module
    importlib.reload(config_module)


@pytest.mark.config_validation
class TestDefaults:
    def test_defaults_are_valid(self):
        """
        GIVEN: No configuration variables set
        WHEN: validate_config() is called
        THEN: No errors are returned and defaults are applied
        """
        config = reload_config()
        assert config.validate_config() == []
        assert config.DEFAULT_SORT == EXPECTED["config"]["default_sort"]
        assert config.GUEST_NAME == EXPECTED["config"]["default_guest_name"]
        assert config.GUEST_EMAIL == EXPECTED["config"]["default_guest_email"]
        assert config.WEB_PORT == EXPECTED["config"]["default_web_port"]
        assert config.SUGGESTIONS_FILTER_BY_QUERY is False
        assert config.is_development()

    def test_debug_raises_log_level(self):
        config = reload_config(DEBUG="true")
        assert config.LOG_LEVEL == "DEBUG"

    def test_boolean_parsing(self):
        config = reload_config(SUGGESTIONS_FILTER_BY_QUERY="TRUE")
        assert config.SUGGESTIONS_FILTER_BY_QUERY is True


@pytest.mark.config_validation
class TestInvalidConfig:
    def test_unknown_sort(self):
        errors = reload_config(DEFAULT_SORT="alphabetical").validate_config()
        assert any("DEFAULT_SORT" in e for e in errors)

    def test_unknown_log_level(self):
        errors = reload_config(LOG_LEVEL="chatty").validate_config()
        assert any("LOG_LEVEL" in e for e in errors)

    def test_port_out_of_range(self):
        errors = reload_config(WEB_PORT="70000").validate_config()
        assert any("WEB_PORT" in e for e in errors)

    def test_avatar_template_needs_seed(self):
        errors = reload_config(AVATAR_URL_TEMPLATE="https://example.com/a.png").validate_config()
        assert any("AVATAR_URL_TEMPLATE" in e for e in errors)

    def test_missing_catalog_file(self, tmp_path):
        errors = reload_config(CATALOG_PATH=str(tmp_path / "nope.json")).validate_config()
        assert any("CATALOG_PATH" in e for e in errors)

    def test_existing_catalog_file(self, tmp_path):
        path = tmp_path / "ideas.json"
        path.write_text("[]")
        assert reload_config(CATALOG_PATH=str(path)).validate_config() == []

    def test_production_requires_catalog(self):
        """
        GIVEN: APP_ENV is 'production' and CATALOG_PATH is not set
        WHEN: validate_config() is called
        THEN: A clear error about CATALOG_PATH is returned
        """
        config = reload_config(APP_ENV=CONFIG["environments"]["production"])
        assert config.is_production()
        assert any("CATALOG_PATH" in e for e in config.validate_config())

    def test_all_errors_reported(self):
        errors = reload_config(DEFAULT_SORT="x", LOG_LEVEL="y").validate_config()
        assert len(errors) >= 2


@pytest.mark.config_validation
class TestLoggingSetup:
    def test_configure_logging_is_idempotent(self):
        from src.config import configure_logging
        configure_logging("INFO")
        logger = configure_logging("DEBUG")
        try:
            assert len(logger.handlers) == 1
            assert logger.level == logging.DEBUG
        finally:
            logger.handlers = []
            logger.setLevel(logging.NOTSET)

    def test_unknown_level_falls_back_to_info(self):
        from src.config import configure_logging
        logger = configure_logging("chatty")
        try:
            assert logger.level == logging.INFO
        finally:
            logger.handlers = []
            logger.setLevel(logging.NOTSET)
