# File: src/uvsync/hooks/base/config.py
"""
Host and execution context detection utilities.

This module answers the few questions the hook installer asks about the
machine it runs on: which operating-system family it is (and therefore which
shell dialects apply), whether output should carry terminal colors, and
whether the code is running under a test runner. Each check supports a
thread-local override so tests can simulate a Windows host on Linux, or force
color on and off, without touching the real environment.

Exports:
- host_os_family(): "posix" or "windows", with optional override.
- in_desktop_mode(): check or override whether colored output is wanted.
- in_test_mode(): check or override whether code is in test mode.
- os_family_context(): context manager for a temporary OS family override.
"""

from __future__ import annotations

import os
import sys
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Literal


OsFamily = Literal["posix", "windows"]
OS_FAMILIES: tuple[OsFamily, ...] = ("posix", "windows")

_tls = threading.local()


@dataclass
class TLSAttrs:
    """Thread-local flags for host context."""

    os_family_override: OsFamily | None = None
    in_test_mode_override: bool | None = None
    in_desktop_mode_override: bool | None = None


def _get_tls() -> TLSAttrs:
    """Return the current thread's TLSAttrs instance, initializing if needed."""
    try:
        return _tls.state
    except AttributeError:
        _tls.state = TLSAttrs()
        return _tls.state


def host_os_family(
    *,
    unset_override: bool = False,
    override: OsFamily | None = None,
) -> OsFamily:
    """
    Return the operating-system family that selects the shell dialects.

    :param unset_override: If True, clears any prior override for this thread.
    :param override: If given, sets the override for this thread.
    :return: "windows" on Windows hosts, "posix" everywhere else.
    :raises ValueError: If `override` is not a known family.
    """
    tls = _get_tls()
    if unset_override:
        tls.os_family_override = None
    if override is not None:
        if override not in OS_FAMILIES:
            raise ValueError(f"Unknown OS family {override!r}; expected one of {OS_FAMILIES}")
        tls.os_family_override = override
        return override
    if tls.os_family_override is not None:
        return tls.os_family_override
    return "windows" if os.name == "nt" else "posix"


@contextmanager
def os_family_context(family: OsFamily) -> Iterator[None]:
    """
    Context manager to pretend the host belongs to `family`.

    Restores the previous override on exit. Nested contexts are supported.
    """
    tls = _get_tls()
    previous = tls.os_family_override
    host_os_family(override=family)
    try:
        yield
    finally:
        tls.os_family_override = previous


def in_test_mode(
    *,
    unset_override: bool = False,
    override: bool | None = None,
) -> bool:
    """
    Check if running in test mode, with optional override.

    Detection order:
      1. Explicit override (thread-local).
      2. Presence of pytest/unittest in sys.modules.
      3. Known environment variables (PYTEST_CURRENT_TEST, CI).

    :param unset_override: If True, clears any prior override for this thread.
    :param override: If True or False, sets the override for this thread.
    :return: True if test mode is active, False otherwise.
    """
    tls = _get_tls()
    if unset_override:
        tls.in_test_mode_override = None
    if override is not None:
        tls.in_test_mode_override = override
        return override
    if tls.in_test_mode_override is not None:
        return tls.in_test_mode_override
    if "pytest" in sys.modules or "unittest" in sys.modules:
        return True

    env = os.environ
    return bool(env.get("PYTEST_CURRENT_TEST")) or env.get("CI") == "true"


def in_desktop_mode(
    *,
    unset_override: bool = False,
    override: bool | None = None,
) -> bool:
    """
    Determine if log output should be colored for an interactive terminal.

    Rules:
      - Explicit override wins.
      - NO_COLOR (any non-empty value) disables color.
      - Test mode disables color so captured output stays plain.
      - Otherwise color follows whether stderr is a TTY.

    :param unset_override: If True, clears any prior override for this thread.
    :param override: If True or False, sets the override for this thread.
    :return: True if desktop mode is active, False otherwise.
    """
    tls = _get_tls()
    if unset_override:
        tls.in_desktop_mode_override = None
    if override is not None:
        tls.in_desktop_mode_override = override
        return override
    if tls.in_desktop_mode_override is not None:
        return tls.in_desktop_mode_override

    if os.environ.get("NO_COLOR"):
        return False
    if in_test_mode():
        return False
    isatty = getattr(sys.stderr, "isatty", None)
    return bool(isatty and isatty())


# End of file: src/uvsync/hooks/base/config.py
