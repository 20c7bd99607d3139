"""
Shared logging setup for the command-line entry points.

`setup_logging()` is called once, early in a CLI `main()`, so every CoreLogger
in the package shares one stderr handler. Levels come from the environment
(LOG_ROOT_LEVEL, LOG_LEVEL, LOG_LEVELS, LOG_LEVEL_<MODULE>).

Example:
    >>> from uvsync.hooks.io.logging_utils import setup_logging
    >>> setup_logging()
"""

from __future__ import annotations

from uvsync.hooks.xlogging.core_logger import initialize_root


def setup_logging() -> None:
    """Configure the root logger for project modules."""
    initialize_root(force=True)
