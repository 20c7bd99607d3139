# File: src/uvsync/hooks/xlogging/logger_formatter.py

import logging
import os
import re
from datetime import datetime
from pathlib import Path
from typing import Any, Literal

import pytz
from colorama import Fore, Style

from uvsync.hooks.base import config as cfg
from uvsync.hooks.xlogging.logger_constants import (
    DEFAULT_LOG_TIMEZONE,
    RE_PATH_BACKSLASH,
)


__all__ = ["CoreFormatter", "get_color_code"]


FormatStyle = Literal["%", "{", "$"]

COLOR_MAP: dict[str | None, str] = {
    # Code location
    "fileAndLine": Style.DIM,
    # Log levels
    "TRACE": Fore.MAGENTA,
    "DEBUG": Fore.LIGHTBLACK_EX,
    "INFO": Fore.RESET,
    "WARNING": Fore.YELLOW,
    "ERROR": Fore.LIGHTRED_EX,
    "CRITICAL": Fore.RED + Style.BRIGHT,
    None: Fore.RESET + Style.RESET_ALL,
}

K_COLOR = "color"


def get_color_code(key: Any = None) -> str:
    """
    Return the ANSI sequence for a level name, field name or colorama color name.

    Returns "" when color output is disabled (see config.in_desktop_mode()).
    """
    if not cfg.in_desktop_mode():
        return ""
    if key in {"", "RESET"} or key is None:
        return COLOR_MAP[None]
    if key in COLOR_MAP:
        return COLOR_MAP[key]

    _clean_key = str(key).upper()
    if "BRIGHT" in _clean_key:
        _clean_key = _clean_key.replace("BRIGHT", "LIGHT")
    if "LIGHT" in _clean_key and not _clean_key.endswith("_EX"):
        _clean_key += "_EX"
    return getattr(Fore, _clean_key, COLOR_MAP[None])


class CoreFormatter(logging.Formatter):
    """
    Formatter for CoreLogger records.

    Adds the `levelName` (colored level) and `fileAndLine` (project-relative
    source location) fields, renders timestamps in the LOG_TIMEZONE zone, and
    colors the whole message by level when running in a terminal.
    """

    def __init__(
        self,
        fmt: str | None = None,
        datefmt: str | None = None,
        style: FormatStyle = "%",
        validate: bool = True,
        *,
        timezone: str | None = None,
    ) -> None:
        """
        Initialize the CoreFormatter with a format string, date format, and style.

        :param fmt: The format string for log messages.
        :param datefmt: The date format string for log timestamps.
        :param style: The style for the format string (default is "%").
        :param validate: Whether to validate the format strings (default is True).
        :param timezone: pytz zone name; default is LOG_TIMEZONE or UTC.
        """
        super().__init__(fmt=fmt, datefmt=datefmt, style=style, validate=validate)
        zone_name = timezone or os.environ.get("LOG_TIMEZONE") or DEFAULT_LOG_TIMEZONE
        try:
            self.tz = pytz.timezone(zone_name)
        except pytz.UnknownTimeZoneError:
            self.tz = pytz.timezone(DEFAULT_LOG_TIMEZONE)

    def format(self, record: logging.LogRecord) -> str:
        record.levelName = get_color_code(record.levelname) + record.levelname + get_color_code()
        record.fileAndLine = self.format_fileAndLine(record.pathname, record.lineno)
        message_str = super().format(record)
        color_key = getattr(record, K_COLOR, record.levelname)
        return get_color_code(color_key) + message_str + get_color_code()

    @staticmethod
    def format_file(file: str) -> str:
        """Return `file` relative to the working directory when possible, with forward slashes."""
        if not file:
            return "<unknown file>"
        path = Path(file)
        try:
            file = path.resolve().relative_to(Path.cwd().resolve()).as_posix()
        except (OSError, ValueError):
            file = path.as_posix()
        return re.sub(RE_PATH_BACKSLASH, "/", file)

    def format_fileAndLine(self, file: str, lineno: int) -> str:
        fileAndLine = f"{self.format_file(file)}:{lineno}"
        return get_color_code("fileAndLine") + fileAndLine + get_color_code()

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:
        _datetime = datetime.fromtimestamp(record.created, self.tz)
        if datefmt:
            return _datetime.strftime(datefmt)
        return _datetime.isoformat(timespec="seconds")


# End of file: src/uvsync/hooks/xlogging/logger_formatter.py
