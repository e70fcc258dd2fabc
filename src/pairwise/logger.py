"""Package logger. Level comes from LOG_LEVEL; unknown names fall back to WARNING."""

import logging
import os
import sys

DEFAULT_LEVEL = logging.WARNING


def resolve_level(name: str | None) -> int:
    if not name:
        return DEFAULT_LEVEL
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else DEFAULT_LEVEL


logger = logging.getLogger("pairwise")

if not logger.handlers:
    _handler = logging.StreamHandler(sys.stderr)
    _handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
    logger.addHandler(_handler)
    logger.propagate = False

logger.setLevel(resolve_level(os.getenv("LOG_LEVEL")))
