"""Runtime settings read from the environment."""

from __future__ import annotations

import logging
import os

LOG_LEVEL_ENV = "WDGRAPH_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"


def get_log_level(verbose: bool = False) -> int:
    """Log level for the CLI: DEBUG when verbose, else ``WDGRAPH_LOG_LEVEL`` or WARNING."""
    if verbose:
        return logging.DEBUG
    name = os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING
