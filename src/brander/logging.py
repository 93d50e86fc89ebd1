"""Logging setup for the brander CLI.

Modules log through ``logging.getLogger(__name__)``; this module only decides
where records go and at which level.
"""

from __future__ import annotations

import logging
import os
import sys

LOG_FORMAT = "%(message)s"
DEBUG_LOG_FORMAT = "[%(levelname)s] [%(name)s] %(message)s"

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def resolve_env_log_level() -> int | None:
    """Return the level named by BRANDER_LOG_LEVEL (name or number), else None."""
    val = os.environ.get("BRANDER_LOG_LEVEL")
    if not val:
        return None
    v = val.strip().upper()
    if v.isdigit():
        return int(v)
    return _LEVELS.get(v)


def setup_logging(level: int | None = None) -> None:
    """Send ``brander`` log records to stderr at ``level`` (env var, then INFO, when None)."""
    if level is None:
        level = resolve_env_log_level() or logging.INFO

    logger = logging.getLogger("brander")
    logger.setLevel(level)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
