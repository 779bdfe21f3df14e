"""
Configuration module.

Handles environment variables, catalog locations, and application settings.
"""

from src.config.config import (
    APP_ENV,
    DEBUG,
    LOG_LEVEL,
    CATALOG_PATH,
    SUGGESTIONS_PATH,
    DEFAULT_SORT,
    SUGGESTIONS_FILTER_BY_QUERY,
    GUEST_NAME,
    GUEST_EMAIL,
    AVATAR_URL_TEMPLATE,
    WEB_HOST,
    WEB_PORT,
    is_production,
    is_development,
    validate_config,
    print_config_summary,
)
from src.config.logging import configure_logging

__all__ = [
    "APP_ENV",
    "DEBUG",
    "LOG_LEVEL",
    "CATALOG_PATH",
    "SUGGESTIONS_PATH",
    "DEFAULT_SORT",
    "SUGGESTIONS_FILTER_BY_QUERY",
    "GUEST_NAME",
    "GUEST_EMAIL",
    "AVATAR_URL_TEMPLATE",
    "WEB_HOST",
    "WEB_PORT",
    "is_production",
    "is_development",
    "validate_config",
    "print_config_summary",
    "configure_logging",
]
