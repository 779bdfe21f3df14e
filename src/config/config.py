"""
Configuration module for KhojVerse.

Loads environment variables from .env file and exposes them as typed configuration values.
Uses python-dotenv for loading and provides safe defaults where appropriate.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Load .env file from project root
# The .env file should be in the root directory (parent of src/)
_project_root = Path(__file__).parent.parent.parent
_env_path = _project_root / ".env"
load_dotenv(_env_path)


# =============================================================================
# Application Environment
# =============================================================================

# Application environment: "development", "staging", or "production"
# Default: "development" for safe local testing
APP_ENV: str = os.getenv("APP_ENV", "development")

# Enable debug mode for verbose logging (only in development)
DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"

# Log level name for the src.* loggers
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "DEBUG" if DEBUG else "INFO").upper()


# =============================================================================
# Catalog Configuration
# =============================================================================

# JSON file with the idea catalog (array of records)
# Empty: use the built-in catalog
CATALOG_PATH: str = os.getenv("CATALOG_PATH", "")

# JSON file with the search suggestions (array of strings)
# Empty: use the built-in suggestion list
SUGGESTIONS_PATH: str = os.getenv("SUGGESTIONS_PATH", "")


# =============================================================================
# Discovery Configuration
# =============================================================================

# Sort option active when a session starts
# One of: views, popularity, trending, new
DEFAULT_SORT: str = os.getenv("DEFAULT_SORT", "views")

# Filter suggestions by the current query
# Default: false - the full static list is shown regardless of the query
SUGGESTIONS_FILTER_BY_QUERY: bool = os.getenv("SUGGESTIONS_FILTER_BY_QUERY", "false").lower() == "true"


# =============================================================================
# Session Configuration
# =============================================================================

# Identity attached to every session (login is never verified)
GUEST_NAME: str = os.getenv("GUEST_NAME", "Guest Explorer")
GUEST_EMAIL: str = os.getenv("GUEST_EMAIL", "guest@khojverse.io")

# Avatar URL template, {seed} is replaced by "user", "guest", or "anon"
AVATAR_URL_TEMPLATE: str = os.getenv("AVATAR_URL_TEMPLATE", "https://picsum.photos/seed/{seed}/100/100")


# =============================================================================
# Web Server Configuration
# =============================================================================

WEB_HOST: str = os.getenv("WEB_HOST", "127.0.0.1")
WEB_PORT: int = int(os.getenv("WEB_PORT", "5000"))


# Kept as literals so config never imports the models package
_SORT_VALUES = ("views", "popularity", "trending", "new")
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


# =============================================================================
# Helper Functions
# =============================================================================

def is_production() -> bool:
    """Check if running in production environment."""
    return APP_ENV == "production"


def is_development() -> bool:
    """Check if running in development environment."""
    return APP_ENV == "development"


def validate_config() -> list[str]:
    """
    Validate configuration values.

    Returns:
        List of missing or invalid configuration keys (empty if all valid).
    """
    errors = []

    if is_production() and not CATALOG_PATH:
        errors.append("CATALOG_PATH is required in production")

    if CATALOG_PATH and not Path(CATALOG_PATH).is_file():
        errors.append(f"CATALOG_PATH does not point to a file: {CATALOG_PATH}")

    if SUGGESTIONS_PATH and not Path(SUGGESTIONS_PATH).is_file():
        errors.append(f"SUGGESTIONS_PATH does not point to a file: {SUGGESTIONS_PATH}")

    if DEFAULT_SORT not in _SORT_VALUES:
        errors.append(f"DEFAULT_SORT must be one of {', '.join(_SORT_VALUES)}, got {DEFAULT_SORT!r}")

    if LOG_LEVEL not in _LOG_LEVELS:
        errors.append(f"LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}, got {LOG_LEVEL!r}")

    if "{seed}" not in AVATAR_URL_TEMPLATE:
        errors.append("AVATAR_URL_TEMPLATE must contain a {seed} placeholder")

    if not (1 <= WEB_PORT <= 65535):
        errors.append("WEB_PORT must be between 1 and 65535")

    return errors


def print_config_summary() -> None:
    """Print a summary of current configuration."""
    print(f"  APP_ENV: {APP_ENV}")
    print(f"  DEBUG: {DEBUG}")
    print(f"  LOG_LEVEL: {LOG_LEVEL}")
    print(f"  CATALOG_PATH: {CATALOG_PATH or '(built-in)'}")
    print(f"  SUGGESTIONS_PATH: {SUGGESTIONS_PATH or '(built-in)'}")
    print(f"  DEFAULT_SORT: {DEFAULT_SORT}")
    print(f"  SUGGESTIONS_FILTER_BY_QUERY: {SUGGESTIONS_FILTER_BY_QUERY}")
    print(f"  GUEST_NAME: {GUEST_NAME}")
    print(f"  WEB: {WEB_HOST}:{WEB_PORT}")
