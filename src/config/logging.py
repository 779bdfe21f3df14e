from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

# Every module logs under src.*
ROOT_LOGGER = "src"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Attach a single stream handler to the `src` logger.

    Safe to call more than once: existing handlers are replaced so repeated
    calls (CLI re-entry, Flask reloads, tests) never duplicate lines.
    Unknown level names fall back to INFO.
    """

    level_name = str(level or "INFO").upper().strip()
    resolved = getattr(logging, level_name, None)
    if not isinstance(resolved, int):
        resolved = logging.INFO

    handler = logging.StreamHandler()
    handler.setLevel(resolved)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logger = logging.getLogger(ROOT_LOGGER)
    logger.handlers = []
    logger.setLevel(resolved)
    logger.addHandler(handler)

    logger.debug("logging configured (level=%s)", logging.getLevelName(resolved))
    return logger
