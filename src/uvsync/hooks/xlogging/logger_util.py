# File: src/uvsync/hooks/xlogging/logger_util.py
"""
Environment variable-driven log level configuration.

Two sources are supported:
- Pattern-based DSL strings in LOG_LEVEL / LOG_LEVELS, e.g.
  ``LOG_LEVELS="uvsync.hooks.blocks.*:DEBUG; root=INFO"``
- Per-logger overrides in variables like LOG_LEVEL_UVSYNC_HOOKS_BLOCKS
  (a single "_" becomes ".", a double "__" becomes a literal "_")

The root logger's own threshold comes from LOG_ROOT_LEVEL and is read by
get_root_level_from_environment(); CoreLogger never emits below it.

See LogLevelConfig for resolution rules.
"""

from __future__ import annotations

import fnmatch
import logging
import os
import re
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import ClassVar, Final, NamedTuple

from uvsync.hooks.base.fs_helpers import fs_load_dotenv
from uvsync.hooks.xlogging.logger_constants import initialize_logger_constants


__all__ = ["LogLevelConfig", "LogEnvVar", "get_root_level_from_environment"]

_LOG_VAR_FRAGMENT_SEPARATOR_RX: Final[re.Pattern[str]] = re.compile(r"[;, ]+")
_LOG_VAR_ASSIGNMENT_OPERATOR_RX: Final[re.Pattern[str]] = re.compile(r"[:=]+")

_log_level_config_instance: LogLevelConfig | None = None


def _level_names_mapping() -> dict[str, int]:
    """Return uppercase level names (including TRACE) mapped to numbers."""
    initialize_logger_constants()
    return {
        k.upper(): v
        for k, v in logging.getLevelNamesMapping().items()
        if isinstance(k, str) and k.isupper() and isinstance(v, int)
    }


def _level_from_text(txt: str, level_map: dict[str, int]) -> int | None:
    """Return numeric level from a name or decimal number string, else None."""
    s = txt.strip().strip("\"'")
    if not s:
        return None
    if s.isdigit():
        return int(s, 10)
    lvl = level_map.get(s.upper())
    if isinstance(lvl, int) and lvl != logging.NOTSET:
        return lvl
    return None


def get_root_level_from_environment() -> int | None:
    """Return the LOG_ROOT_LEVEL level if it is defined and valid, else None."""
    fs_load_dotenv()
    raw = os.environ.get("LOG_ROOT_LEVEL")
    if not raw:
        return None
    return _level_from_text(raw, _level_names_mapping())


@dataclass(slots=True)
class LogEnvVar:
    """
    Parsed representation of a log-level environment variable.

    Recognizes names starting with LOG_LEVEL or LOG_LEVELS.
    Encodes the target module (with "__" -> "_" and "_" -> ".") and the raw value.
    """

    NAME_RX: ClassVar[re.Pattern[str]] = re.compile(
        r"""
        ^(?P<BASENAME>LOG_LEVELS?)          # LOG_LEVEL or LOG_LEVELS
        (?P<SUFFIX>(?:_[A-Z][A-Z0-9_]*)*)$  # optional suffix
        """,
        re.VERBOSE,
    )

    name: str = field(default="", repr=False)
    module: str = field(default="", repr=True)
    value: str = field(default="", repr=False)

    @classmethod
    def from_env_var(cls, name: str, value: str) -> LogEnvVar | None:
        """Return a LogEnvVar if the given (name, value) is valid, else None."""
        match = cls.NAME_RX.match(name)
        if match is None:
            return None
        suffix: str = match["SUFFIX"].lstrip("_")
        if not suffix or suffix.upper() == "ROOT":
            module = ""
        else:
            module = suffix.replace("__", "\0").replace("_", ".").replace("\0", "_").lower()
        return cls(name=name, module=module, value=value)

    @classmethod
    def from_environ(cls) -> Iterator[LogEnvVar]:
        """Yield LogEnvVar instances for all matching environment variables."""
        fs_load_dotenv()
        for name, value in sorted(os.environ.items(), reverse=True):
            env_var = cls.from_env_var(name, value)
            if env_var:
                yield env_var


class LogEnvPatternLevel(NamedTuple):
    """Mapping from a pattern string to an integer log level."""

    pattern: str
    level: int


@dataclass(slots=True)
class LogLevelConfig:
    """
    Resolve log levels using environment variables.

    Precedence: exact > ancestor > glob > default > fallback.
    """

    pattern_to_level: dict[str, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.pattern_to_level:
            self.update_from_environment()

    def update_from_environment(self) -> None:
        """Rebuild pattern->level mappings from current environment."""
        self.pattern_to_level.clear()
        level_map = _level_names_mapping()
        for var in LogEnvVar.from_environ():
            for dsl in self.parse_log_var(var, level_map):
                self.pattern_to_level[dsl.pattern] = dsl.level

    def get_effective_level(self, logger_name: str, *, default: int = logging.WARNING) -> int:
        """Return the effective log level for a logger name."""
        name_lc = logger_name.lower()
        lc_map: dict[str, int] = {k.lower(): v for k, v in self.pattern_to_level.items() if k}

        # 1) Exact
        if name_lc in lc_map:
            return lc_map[name_lc]

        # 2) Ancestor
        for anc in self._ancestors(name_lc):
            if anc in lc_map:
                return lc_map[anc]

        # 3) Best glob
        best: tuple[int, int] | None = None
        for pat, level in lc_map.items():
            if self._is_glob_pattern(pat) and fnmatch.fnmatch(name_lc, pat):
                score = self._glob_specificity(pat)
                if best is None or score > best[0]:
                    best = (score, level)
        if best is not None:
            return best[1]

        # 4) Default, 5) fallback
        return self.pattern_to_level.get("", default)

    @classmethod
    def get_instance(cls) -> LogLevelConfig:
        """Return the singleton LogLevelConfig instance, creating it if needed."""
        global _log_level_config_instance
        if _log_level_config_instance is None:
            _log_level_config_instance = LogLevelConfig()
        return _log_level_config_instance

    @staticmethod
    def parse_log_var(var: LogEnvVar, level_map: dict[str, int]) -> Iterator[LogEnvPatternLevel]:
        """Parse one LogEnvVar into pattern->level mappings, skipping unknown levels."""
        for fragment in _LOG_VAR_FRAGMENT_SEPARATOR_RX.split(var.value):
            pattern_level = fragment.strip()
            if not pattern_level:
                continue

            parts = _LOG_VAR_ASSIGNMENT_OPERATOR_RX.split(pattern_level, maxsplit=1)
            if len(parts) == 2:
                pattern = parts[0].strip().strip("'\"")
                level_txt = parts[1]
            else:
                pattern = ""  # bare level -> default/root
                level_txt = parts[0]

            if var.module:
                pattern = var.module if pattern in {"", "root"} else f"{var.module}.{pattern}"
            if pattern.lower() == "root":
                pattern = ""

            level = _level_from_text(level_txt, level_map)
            if level is None:
                continue
            yield LogEnvPatternLevel(pattern, level)

    @staticmethod
    def _is_glob_pattern(pattern: str) -> bool:
        return any(ch in pattern for ch in "*?[")

    @staticmethod
    def _ancestors(logger_name: str) -> list[str]:
        """Return ancestor names of a dotted logger path, most specific first."""
        parts = logger_name.split(".")
        return [".".join(parts[:i]) for i in range(len(parts) - 1, 0, -1)]

    @staticmethod
    def _glob_specificity(pattern: str) -> int:
        """Length of fixed prefix before any wildcard."""
        return min((i for i, ch in enumerate(pattern) if ch in "*?["), default=len(pattern))


# End of file: src/uvsync/hooks/xlogging/logger_util.py
