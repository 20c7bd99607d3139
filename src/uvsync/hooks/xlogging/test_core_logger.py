# File: src/uvsync/hooks/xlogging/test_core_logger.py
"""
Tests for CoreLogger, create_logger(), initialize_root() and CoreFormatter.
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Iterator

import pytest

from uvsync.hooks.base import config as cfg
from uvsync.hooks.xlogging import core_logger
from uvsync.hooks.xlogging import logger_util as lu
from uvsync.hooks.xlogging.core_logger import CoreLogger, initialize_root
from uvsync.hooks.xlogging.logger_constants import TRACE
from uvsync.hooks.xlogging.logger_factory import create_logger
from uvsync.hooks.xlogging.logger_formatter import CoreFormatter, get_color_code


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Clear LOG_* vars and reset the level singleton; do not read .env during tests."""
    monkeypatch.setattr(lu, "fs_load_dotenv", lambda *a, **k: False)
    for key in [k for k in os.environ if k.startswith("LOG_")]:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setattr(lu, "_log_level_config_instance", None, raising=False)
    yield
    monkeypatch.setattr(lu, "_log_level_config_instance", None, raising=False)


@pytest.fixture
def clean_logging() -> Iterator[None]:
    """Reset root logger state (handlers, level, init flag) around tests."""
    root = logging.getLogger()
    prev_level = root.level
    prev_handlers = list(root.handlers)
    prev_attr = getattr(root, core_logger._LOG_ROOT_ATTR_NAME, None)

    root.handlers = []
    root.setLevel(logging.NOTSET)
    if hasattr(root, core_logger._LOG_ROOT_ATTR_NAME):
        delattr(root, core_logger._LOG_ROOT_ATTR_NAME)

    yield

    root.handlers = prev_handlers
    root.setLevel(prev_level)
    if prev_attr is not None:
        setattr(root, core_logger._LOG_ROOT_ATTR_NAME, prev_attr)
    elif hasattr(root, core_logger._LOG_ROOT_ATTR_NAME):
        delattr(root, core_logger._LOG_ROOT_ATTR_NAME)


def _record(msg: str = "hello", level: int = logging.WARNING) -> logging.LogRecord:
    return logging.LogRecord("uvsync.test", level, __file__, 42, msg, None, None)


# ---------- CoreLogger ----------


def test_level_from_environment(monkeypatch: pytest.MonkeyPatch, clean_env: None) -> None:
    monkeypatch.setenv("LOG_LEVELS", "pkg.*:DEBUG")
    assert CoreLogger("pkg.module").level == logging.DEBUG
    assert CoreLogger("other").level == logging.WARNING


def test_trace_level_registered(clean_env: None) -> None:
    CoreLogger("pkg.trace")
    assert logging.getLevelName(TRACE) == "TRACE"


def test_prefix_and_extra(
    clean_env: None, clean_logging: None, caplog: pytest.LogCaptureFixture
) -> None:
    log = CoreLogger("pkg.prefix", level=logging.DEBUG)
    log.parent = logging.getLogger()
    with caplog.at_level(logging.DEBUG):
        with log.prefix_with("bash"):
            with log.prefix_with("inject"):
                log.info("wrote %s", "file", path="/tmp/x")
        log.info("plain")

    messages = [r.getMessage() for r in caplog.records]
    assert messages == ["bash > inject > wrote file", "plain"]
    assert caplog.records[0].path == "/tmp/x"  # type: ignore[attr-defined]


def test_caller_location_is_reported(
    clean_env: None, clean_logging: None, caplog: pytest.LogCaptureFixture
) -> None:
    log = CoreLogger("pkg.location", level=logging.DEBUG)
    log.parent = logging.getLogger()
    with caplog.at_level(logging.DEBUG):
        log.warning("here")
    assert caplog.records[0].pathname == __file__
    assert caplog.records[0].funcName == "test_caller_location_is_reported"


def test_reserved_kwargs_rejected(clean_env: None, clean_logging: None) -> None:
    log = CoreLogger("pkg.reserved", level=logging.DEBUG)
    with pytest.raises(ValueError):
        log.error("boom", lineno=3)


# ---------- create_logger ----------


def test_create_logger_returns_same_instance(clean_env: None) -> None:
    first = create_logger("uvsync.test.factory")
    second = create_logger("uvsync.test.factory", level=logging.ERROR)
    assert first is second
    assert isinstance(first, CoreLogger)
    assert first.level == logging.ERROR


def test_create_logger_names_main_after_script(monkeypatch: pytest.MonkeyPatch, clean_env: None) -> None:
    monkeypatch.setattr(sys, "argv", ["/usr/local/bin/uvsync_setup_hooks.py"])
    assert create_logger("__main__").name == "uvsync_setup_hooks"


def test_create_logger_rejects_plain_logger(clean_env: None) -> None:
    logging.getLogger("uvsync.test.plain")
    with pytest.raises(TypeError):
        create_logger("uvsync.test.plain")


# ---------- initialize_root ----------


def test_initialize_root_is_idempotent(clean_env: None, clean_logging: None) -> None:
    initialize_root()
    initialize_root()
    root = logging.getLogger()
    formatters = [
        h.formatter
        for h in root.handlers
        if isinstance(h, logging.StreamHandler) and h.stream is sys.stderr
    ]
    assert len(formatters) == 1
    assert isinstance(formatters[0], CoreFormatter)
    assert root.level == logging.WARNING


def test_initialize_root_reads_log_root_level(
    monkeypatch: pytest.MonkeyPatch, clean_env: None, clean_logging: None
) -> None:
    monkeypatch.setenv("LOG_ROOT_LEVEL", "INFO")
    initialize_root()
    assert logging.getLogger().level == logging.INFO


# ---------- CoreFormatter ----------


def test_formatter_plain_without_desktop_mode() -> None:
    cfg.in_desktop_mode(override=False)
    try:
        text = CoreFormatter("%(levelName)s %(fileAndLine)s %(message)s").format(_record())
    finally:
        cfg.in_desktop_mode(unset_override=True)
    assert text.startswith("WARNING ")
    assert text.endswith(":42 hello")
    assert "\x1b[" not in text


def test_formatter_colors_in_desktop_mode() -> None:
    cfg.in_desktop_mode(override=True)
    try:
        text = CoreFormatter("%(levelName)s %(message)s").format(_record())
        assert get_color_code("WARNING") in text
    finally:
        cfg.in_desktop_mode(unset_override=True)
    assert "\x1b[" in text


def test_formatter_timezone(monkeypatch: pytest.MonkeyPatch) -> None:
    record = _record()
    record.created = 0.0
    formatter = CoreFormatter("%(asctime)s", "%Y-%m-%d %H:%M %Z", timezone="Asia/Tokyo")
    assert formatter.format(record) == "1970-01-01 09:00 JST"

    monkeypatch.setenv("LOG_TIMEZONE", "Not/AZone")
    assert CoreFormatter().tz.zone == "UTC"


def test_no_color_env_disables_desktop_mode(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NO_COLOR", "1")
    assert cfg.in_desktop_mode(unset_override=True) is False
    assert get_color_code("ERROR") == ""


# End of file: src/uvsync/hooks/xlogging/test_core_logger.py
