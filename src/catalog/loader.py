"""
Catalog loading for KhojVerse.

Reads the idea catalog and the suggestion list from JSON files, falling back
to the built-in data when no path is configured. Both are read once at
session start and handed to the controller as immutable tuples.
"""

import json
import logging
from pathlib import Path
from typing import Optional

from src.catalog.data import BUILTIN_IDEAS, BUILTIN_SUGGESTIONS
from src.models.errors import ContractViolation
from src.models.idea_item import IdeaItem

logger = logging.getLogger(__name__)


def _read_json_array(path: Path, what: str) -> list:
    """Read a JSON file whose top-level value must be an array."""
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ContractViolation(f"{what} file {path} is not valid JSON: {e}") from e

    if not isinstance(data, list):
        raise ContractViolation(f"{what} file {path} must contain a JSON array")
    return data


def parse_catalog(records: list) -> tuple[IdeaItem, ...]:
    """
    Build IdeaItems from raw record dicts.

    Args:
        records: List of record dicts (as decoded from JSON).

    Returns:
        Tuple of IdeaItem in input order.

    Raises:
        ContractViolation: If a record is malformed or an id repeats.
    """
    items = []
    seen: dict[str, int] = {}

    for index, record in enumerate(records):
        try:
            item = IdeaItem.from_dict(record)
        except ContractViolation as e:
            raise ContractViolation(f"catalog record {index}: {e}") from e

        if item.id in seen:
            raise ContractViolation(
                f"catalog record {index}: duplicate id {item.id!r} (first seen at record {seen[item.id]})"
            )
        seen[item.id] = index
        items.append(item)

    return tuple(items)


def load_catalog(path: Optional[str | Path] = None) -> tuple[IdeaItem, ...]:
    """
    Load the idea catalog.

    Args:
        path: JSON file containing an array of records. If None or empty,
            the built-in catalog is returned.

    Returns:
        Tuple of IdeaItem.
    """
    if not path:
        logger.debug("Using built-in catalog (%d ideas)", len(BUILTIN_IDEAS))
        return BUILTIN_IDEAS

    path = Path(path)
    items = parse_catalog(_read_json_array(path, "catalog"))
    logger.info("Loaded %d ideas from %s", len(items), path)
    return items


def load_suggestions(path: Optional[str | Path] = None) -> tuple[str, ...]:
    """
    Load the static search suggestion list.

    Args:
        path: JSON file containing an array of strings. If None or empty,
            the built-in suggestions are returned.

    Returns:
        Tuple of suggestion strings in file order.
    """
    if not path:
        return BUILTIN_SUGGESTIONS

    path = Path(path)
    data = _read_json_array(path, "suggestions")
    bad = [i for i, s in enumerate(data) if not isinstance(s, str) or not s.strip()]
    if bad:
        raise ContractViolation(f"suggestions file {path}: entries {bad} must be non-empty strings")

    logger.info("Loaded %d suggestions from %s", len(data), path)
    return tuple(data)
