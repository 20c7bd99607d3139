# File: src/uvsync/hooks/xlogging/test_logger_util.py
"""
Tests for LogLevelConfig: parsing, overrides, matching, and lifecycle.

Covers:
- DSL parsing from LOG_LEVEL / LOG_LEVELS
- Per-logger overrides from LOG_LEVEL_* variables
- Precedence rules and matching semantics
- LOG_ROOT_LEVEL
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator

import pytest

from uvsync.hooks.xlogging import logger_util as lu
from uvsync.hooks.xlogging.logger_util import LogEnvVar, LogLevelConfig


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Clear LOG_LEVEL* vars and reset the singleton, skipping .env loads."""
    monkeypatch.setattr(lu, "fs_load_dotenv", lambda *a, **k: False)
    for key in [k for k in os.environ if k.startswith(("LOG_LEVEL", "LOG_ROOT_LEVEL"))]:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setattr(lu, "_log_level_config_instance", None, raising=False)
    yield
    monkeypatch.setattr(lu, "_log_level_config_instance", None, raising=False)


# ---------- Parsing ----------


class TestEnvironmentParsing:
    def test_bare_level_is_default(self, monkeypatch: pytest.MonkeyPatch, clean_env: None) -> None:
        monkeypatch.setenv("LOG_LEVELS", "DEBUG")
        assert LogLevelConfig().get_effective_level("any.module") == logging.DEBUG

    @pytest.mark.parametrize(
        "value",
        ["pkg1.*:DEBUG;pkg2.*:INFO", "pkg1.*=DEBUG,pkg2.*=INFO", "pkg1.*:DEBUG pkg2.*:INFO"],
    )
    def test_multiple_patterns_various_separators(
        self, monkeypatch: pytest.MonkeyPatch, clean_env: None, value: str
    ) -> None:
        monkeypatch.setenv("LOG_LEVELS", value)
        cfg = LogLevelConfig()
        assert cfg.pattern_to_level["pkg1.*"] == logging.DEBUG
        assert cfg.pattern_to_level["pkg2.*"] == logging.INFO

    def test_quoted_values(self, monkeypatch: pytest.MonkeyPatch, clean_env: None) -> None:
        monkeypatch.setenv("LOG_LEVELS", '"pkg.*":"DEBUG"')
        assert LogLevelConfig().pattern_to_level["pkg.*"] == logging.DEBUG

    def test_root_alias_sets_default(self, monkeypatch: pytest.MonkeyPatch, clean_env: None) -> None:
        monkeypatch.setenv("LOG_LEVELS", "root=ERROR; uvsync=INFO")
        cfg = LogLevelConfig()
        assert cfg.get_effective_level("uvsync.hooks.setup_hooks") == logging.INFO
        assert cfg.get_effective_level("dotenv.main") == logging.ERROR

    def test_unknown_level_and_extra_assignment_skipped(
        self, monkeypatch: pytest.MonkeyPatch, clean_env: None
    ) -> None:
        monkeypatch.setenv("LOG_LEVELS", "a:LOUD; b:DEBUG:extra; ;;c:INFO")
        assert LogLevelConfig().pattern_to_level == {"c": logging.INFO}

    def test_trace_level_name(self, monkeypatch: pytest.MonkeyPatch, clean_env: None) -> None:
        monkeypatch.setenv("LOG_LEVEL", "TRACE")
        assert LogLevelConfig().get_effective_level("x") == logging.DEBUG - 1


class TestPerLoggerVariables:
    def test_module_suffix(self, monkeypatch: pytest.MonkeyPatch, clean_env: None) -> None:
        monkeypatch.setenv("LOG_LEVELS", "uvsync.*:INFO")
        monkeypatch.setenv("LOG_LEVEL_UVSYNC_HOOKS_BLOCKS", "DEBUG")
        cfg = LogLevelConfig()
        assert cfg.get_effective_level("uvsync.hooks.blocks.marked_block") == logging.DEBUG
        assert cfg.get_effective_level("uvsync.hooks.dialects") == logging.INFO

    def test_double_underscore_is_literal(self, monkeypatch: pytest.MonkeyPatch, clean_env: None) -> None:
        monkeypatch.setenv("LOG_LEVEL_SETUP__HOOKS", "DEBUG")
        cfg = LogLevelConfig()
        assert cfg.get_effective_level("setup_hooks") == logging.DEBUG
        assert cfg.get_effective_level("setup.hooks") == logging.WARNING

    def test_log_level_root_suffix(self, monkeypatch: pytest.MonkeyPatch, clean_env: None) -> None:
        monkeypatch.setenv("LOG_LEVEL_ROOT", "ERROR")
        assert LogLevelConfig().get_effective_level("unmatched") == logging.ERROR

    @pytest.mark.parametrize("name", ["LOGLEVEL", "LOG_LEVEL_lower", "MY_LOG_LEVEL"])
    def test_unrelated_names_ignored(self, name: str) -> None:
        assert LogEnvVar.from_env_var(name, "DEBUG") is None


# ---------- Matching ----------


class TestMatchingSemantics:
    def test_exact_beats_glob(self, monkeypatch: pytest.MonkeyPatch, clean_env: None) -> None:
        monkeypatch.setenv("LOG_LEVELS", "app.*:DEBUG;app.core:ERROR")
        assert LogLevelConfig().get_effective_level("app.core") == logging.ERROR

    def test_ancestor_beats_glob(self, monkeypatch: pytest.MonkeyPatch, clean_env: None) -> None:
        monkeypatch.setenv("LOG_LEVELS", "app.*:DEBUG; app.core:ERROR")
        assert LogLevelConfig().get_effective_level("app.core.utils") == logging.ERROR

    def test_glob_tie_break_longest_fixed_prefix(
        self, monkeypatch: pytest.MonkeyPatch, clean_env: None
    ) -> None:
        monkeypatch.setenv("LOG_LEVELS", "u*:DEBUG; uvsync*:INFO")
        assert LogLevelConfig().get_effective_level("uvsync.hooks") == logging.INFO

    def test_case_insensitive(self, monkeypatch: pytest.MonkeyPatch, clean_env: None) -> None:
        monkeypatch.setenv("LOG_LEVELS", "UvSync.*:DEBUG")
        assert LogLevelConfig().get_effective_level("uvsync.hooks") == logging.DEBUG

    def test_fallback_is_warning(self, clean_env: None) -> None:
        assert LogLevelConfig().get_effective_level("anything") == logging.WARNING


# ---------- Lifecycle ----------


class TestLifecycle:
    def test_singleton_until_update(self, monkeypatch: pytest.MonkeyPatch, clean_env: None) -> None:
        monkeypatch.setenv("LOG_LEVEL", "INFO")
        cfg1 = LogLevelConfig.get_instance()
        monkeypatch.setenv("LOG_LEVEL", "ERROR")
        cfg2 = LogLevelConfig.get_instance()
        assert cfg1 is cfg2
        assert cfg2.get_effective_level("x") == logging.INFO

        cfg2.update_from_environment()
        assert cfg2.get_effective_level("x") == logging.ERROR


class TestRootLevel:
    def test_unset(self, clean_env: None) -> None:
        assert lu.get_root_level_from_environment() is None

    @pytest.mark.parametrize(("raw", "expected"), [("info", logging.INFO), ("15", 15), ("bogus", None)])
    def test_values(
        self, monkeypatch: pytest.MonkeyPatch, clean_env: None, raw: str, expected: int | None
    ) -> None:
        monkeypatch.setenv("LOG_ROOT_LEVEL", raw)
        assert lu.get_root_level_from_environment() == expected


# End of file: src/uvsync/hooks/xlogging/test_logger_util.py
