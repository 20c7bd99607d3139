# File: src/uvsync/hooks/xlogging/logger_factory.py
"""
Logger factory for creating and configuring CoreLogger instances.

Loggers are named after the caller's module when no name is given, and a
script run as `__main__` is named after its file stem, so LOG_LEVEL_<NAME>
overrides work the same for `python bin/script.py` and the installed entry point.
"""

import logging
import sys
from pathlib import Path

from uvsync.hooks.base.caller_module_name_and_level import caller_module_name_and_level
from uvsync.hooks.xlogging.core_logger import CoreLogger


def create_logger(
    name: str | None = None,
    *,
    level: int | str | None = None,
    stacklevel: int = 1,
) -> CoreLogger:
    """
    Return a CoreLogger with a consistent, context-aware name.

    Creating the same name twice returns the first instance.

    :param name: Logger name, usually `__name__`. Default is the caller's module.
    :param level: Optional explicit level, overriding the environment.
    :param stacklevel: Extra frames to skip when deriving the name from the caller.
    :return: The CoreLogger instance.
    :raises TypeError: If a plain logging.Logger already owns the name.
    """
    logger_name: str = name or ""

    if logger_name == "__main__":
        arg0 = Path(sys.argv[0]) if sys.argv and sys.argv[0] else None
        logger_name = arg0.stem if arg0 and arg0.stem else "embedded_main"

    if not logger_name:
        logger_name = get_caller_logger_name(stacklevel=stacklevel + 1)

    existing = logging.Logger.manager.loggerDict.get(logger_name)
    if isinstance(existing, CoreLogger):
        if level is not None:
            existing.setLevel(level)
        return existing
    logger = _get_core_logger_from_logging(logger_name)
    if level is not None:
        logger.setLevel(level)
    return logger


def _get_core_logger_from_logging(name: str) -> CoreLogger:
    """
    Create or retrieve a CoreLogger through logging.getLogger().

    Temporarily sets CoreLogger as the logger class so the new logger is wired
    into the logging hierarchy (parent relationships, propagation, caplog).

    :raises TypeError: If getLogger() returns the wrong type.
    """
    logging_class = logging.getLoggerClass()
    logging.setLoggerClass(CoreLogger)
    try:
        logger = logging.getLogger(name)
    finally:
        logging.setLoggerClass(logging_class)
    if not isinstance(logger, CoreLogger):
        raise TypeError(f"Failed to create CoreLogger: {logger!r}")
    return logger


def get_caller_logger_name(*, stacklevel: int = 1) -> str:
    """Resolve the default logger name based on caller context."""
    name = caller_module_name_and_level(stacklevel=stacklevel + 1)[0]
    if not name or name == "__main__":
        executable = sys.argv[0] if sys.argv and sys.argv[0] else sys.executable
        name = Path(executable).stem
    return name


# End of file: src/uvsync/hooks/xlogging/logger_factory.py
