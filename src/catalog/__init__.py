"""
Catalog module.

Static idea records and search suggestions, built-in or loaded from JSON.
"""

from src.catalog.data import BUILTIN_IDEAS, BUILTIN_SUGGESTIONS
from src.catalog.loader import load_catalog, load_suggestions, parse_catalog

__all__ = [
    "BUILTIN_IDEAS",
    "BUILTIN_SUGGESTIONS",
    "load_catalog",
    "load_suggestions",
    "parse_catalog",
]
