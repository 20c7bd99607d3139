# File: src/uvsync/hooks/xlogging/core_logger.py
"""
Structured logging with environment-driven configuration.

Example:
    >>> from uvsync.hooks.xlogging.logger_factory import create_logger
    >>> LOG = create_logger(__name__)
    >>> LOG.info("Injecting hook")
    >>>
    >>> with LOG.prefix_with("[bash]"):
    ...     LOG.debug("Reading %s", "~/.bashrc")

Features:
- Custom TRACE level below DEBUG
- Caller file/line reported for the code that called the logger, not the wrapper
- Contextvar-based prefix context manager
- Extra keyword arguments are moved into the record's `extra` mapping

Design:
- Only the root logger owns handlers/formatters; CoreLogger instances propagate.
- Log levels are controlled per-logger (via environment and LogLevelConfig).
- initialize_root() is the only supported entry point for root setup. It is
  idempotent, manages only the stderr handler, and leaves handlers owned by a
  host application (or by pytest's caplog) alone.
"""

from __future__ import annotations

import contextvars
import logging
import os
import re
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any, ClassVar, TextIO

from uvsync.hooks.xlogging.logger_constants import (
    DEFAULT_LOG_DATEFMT,
    DEFAULT_LOG_FORMAT,
    TRACE,
    initialize_logger_constants,
)
from uvsync.hooks.xlogging.logger_formatter import CoreFormatter
from uvsync.hooks.xlogging.logger_util import LogLevelConfig, get_root_level_from_environment


__all__: list[str] = [
    "CoreLogger",
    "initialize_root",
]

_LOG_KWARGS_FORBIDDEN: set[str] = {"filename", "lineno", "msg", "args", "levelname", "levelno"}
_LOG_KWARGS_STANDARD: set[str] = {"exc_info", "stack_info", "stacklevel", "extra"}
_LOG_ROOT_ATTR_NAME = "_uvsync_corelogger_initialized"

_log_prefix: contextvars.ContextVar[str] = contextvars.ContextVar("log_prefix", default="")


class CoreLogger(logging.Logger):
    """
    Application logger that extends logging.Logger with:

    - A TRACE level and trace() method.
    - Levels resolved from LOG_LEVEL* environment variables at creation.
    - Prefix context manager for scoped message prefixes.

    Handlers are not attached directly; all CoreLogger instances propagate
    to the root logger, which holds a single stderr handler per initialize_root().
    """

    _INTERNAL_FRAME_OFFSET: ClassVar[int] = 1  # the log() method itself

    def __init__(
        self,
        name: str,
        level: int | str = logging.NOTSET,
    ) -> None:
        """
        Initialize the CoreLogger with a name and log level.

        :param name: The name of the logger, typically the module name.
        :param level: The initial log level. NOTSET means "resolve from the environment".
        """
        initialize_logger_constants()
        if level in {logging.NOTSET, "NOTSET", ""}:
            level = LogLevelConfig.get_instance().get_effective_level(name)
        super().__init__(name, level)

    def __repr__(self) -> str:
        level = self.getEffectiveLevel()
        return f"<{self.__class__.__name__} '{self.name}' {logging.getLevelName(level)}={level}>"

    def log(self, level: int, msg: object, *args: Any, **kwargs: Any) -> None:
        """
        Emit a log record, preserving all handler/filter logic of logging.Logger.

        Keyword arguments that logging.Logger does not accept are moved into
        `extra`, so `LOG.info("wrote", path=p)` makes `record.path` available.
        """
        initialize_root()
        if not self.isEnabledFor(level):
            return

        _validate_and_move_kwargs_to_extra(kwargs)
        stacklevel: int = kwargs.pop("stacklevel", 1) + self._INTERNAL_FRAME_OFFSET

        prefix = _log_prefix.get()
        if prefix:
            msg = f"{prefix}{msg}"

        super().log(level, msg, *args, stacklevel=stacklevel, **kwargs)

    def _wrapped_log(self, level: int, msg: object, *args: Any, **kwargs: Any) -> None:
        kwargs["stacklevel"] = kwargs.get("stacklevel", 1) + 2  # level method + this helper
        self.log(level, msg, *args, **kwargs)

    def trace(self, msg: object, *args: Any, **kwargs: Any) -> None:
        """Log a message at TRACE level (below DEBUG)."""
        self._wrapped_log(TRACE, msg, *args, **kwargs)

    def debug(self, msg: object, *args: Any, **kwargs: Any) -> None:
        self._wrapped_log(logging.DEBUG, msg, *args, **kwargs)

    def info(self, msg: object, *args: Any, **kwargs: Any) -> None:
        self._wrapped_log(logging.INFO, msg, *args, **kwargs)

    def warning(self, msg: object, *args: Any, **kwargs: Any) -> None:
        self._wrapped_log(logging.WARNING, msg, *args, **kwargs)

    def error(self, msg: object, *args: Any, **kwargs: Any) -> None:
        self._wrapped_log(logging.ERROR, msg, *args, **kwargs)

    def critical(self, msg: object, *args: Any, **kwargs: Any) -> None:
        self._wrapped_log(logging.CRITICAL, msg, *args, **kwargs)

    def exception(self, msg: object, *args: Any, exc_info: Any = True, **kwargs: Any) -> None:
        """Log a message at ERROR level with exception info."""
        self._wrapped_log(logging.ERROR, msg, *args, exc_info=exc_info, **kwargs)

    @contextmanager
    def prefix_with(self, prefix: str) -> Iterator[None]:
        """
        Context manager to prefix all log messages within the current context.

        Supports nesting; prefixes accumulate as "outer > inner > message".

        :param prefix: The prefix string to prepend to all log messages.
        """
        current_prefix = _log_prefix.get()
        token = _log_prefix.set(f"{current_prefix}{prefix} > ")
        try:
            yield
        finally:
            _log_prefix.reset(token)


def initialize_root(
    fmt: str | None = None,
    datefmt: str | None = None,
    level: int | str | None = None,
    force: bool = False,
) -> None:
    """
    Idempotently configure the root logger for CoreLogger.

    Tracks state on the root logger (attribute: _uvsync_corelogger_initialized),
    never in a module-global.

    Behavior:
    - Ensures exactly one stderr StreamHandler with CoreFormatter exists.
    - If `force=True`, removes and recreates the stderr handler.
    - If `force=False` and already initialized, returns immediately.
    - Sets root level to `level` if provided, else LOG_ROOT_LEVEL, else WARNING
      when the root level is NOTSET.

    :param fmt: Format string. Defaults to LOG_FORMAT or the package default.
    :param datefmt: Date format. Defaults to LOG_DATEFMT or the package default. If it contains
        no percent directives, timestamps are removed from the format.
    :param level: Root logger level (int or name).
    :param force: Reinitialize even if already initialized.
    """
    root: logging.Logger = logging.getLogger()
    if getattr(root, _LOG_ROOT_ATTR_NAME, False) and not force:
        return
    setattr(root, _LOG_ROOT_ATTR_NAME, True)

    initialize_logger_constants()

    if force:
        root.handlers = [
            h
            for h in root.handlers
            if not (isinstance(h, logging.StreamHandler) and h.stream is sys.stderr)
        ]

    _ensure_stderr_coreformatter(fmt=fmt, datefmt=datefmt)

    if level is None:
        level = get_root_level_from_environment()
    if level is not None:
        if isinstance(level, str):
            level = logging.getLevelNamesMapping().get(level.upper(), logging.WARNING)
        root.setLevel(level)
    elif root.level == logging.NOTSET:
        root.setLevel(logging.WARNING)


def _ensure_stderr_coreformatter(*, fmt: str | None = None, datefmt: str | None = None) -> None:
    """
    Ensure the root logger has one stderr handler using CoreFormatter.

    - If no stderr StreamHandler exists, create one with CoreFormatter.
    - If one exists without CoreFormatter, upgrade its formatter in place.
    - Never touches non-stderr handlers.
    """
    fmt = fmt or os.environ.get("LOG_FORMAT", DEFAULT_LOG_FORMAT)
    datefmt = datefmt if datefmt is not None else os.environ.get("LOG_DATEFMT", DEFAULT_LOG_DATEFMT)
    if "%" not in datefmt:
        fmt = re.sub(r"\s*%\(asctime\)s\s*", " ", fmt).strip()
        datefmt = None

    root: logging.Logger = logging.getLogger()
    stderr_handlers: list[logging.StreamHandler[TextIO]] = [
        h for h in root.handlers if isinstance(h, logging.StreamHandler) and h.stream is sys.stderr
    ]
    if not stderr_handlers:
        handler: logging.StreamHandler[TextIO] = logging.StreamHandler(sys.stderr)
        handler.setFormatter(CoreFormatter(fmt, datefmt))
        root.addHandler(handler)
        return

    if not any(isinstance(h.formatter, CoreFormatter) for h in stderr_handlers):
        stderr_handlers[0].setFormatter(CoreFormatter(fmt, datefmt))


def _validate_and_move_kwargs_to_extra(kwargs: dict[str, Any]) -> None:
    """
    Validate kwargs and move non-standard keys into the extra dict.

    :param kwargs: The keyword arguments passed to the log() method.
    :raises ValueError: If any key would overwrite a reserved LogRecord attribute.
    """
    for _key, _value in list(kwargs.items()):
        if _key in _LOG_KWARGS_FORBIDDEN:
            raise ValueError(f"Invalid keyword argument '{_key}={_value!r}'")
        if _key not in _LOG_KWARGS_STANDARD:
            kwargs.pop(_key)
            kwargs.setdefault("extra", {})[_key] = _value


# End of file: src/uvsync/hooks/xlogging/core_logger.py
