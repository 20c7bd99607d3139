"""User-facing progress and error lines for the installer."""

from __future__ import annotations

import sys
from typing import TextIO


PROGRESS_MARK = "›"
RULE_WIDTH = 57


def say(message: str, *, file: TextIO | None = None) -> None:
    """Print a progress line, e.g. "› Bash detected. Setting up hook..."."""
    print(f"{PROGRESS_MARK} {message}", file=file or sys.stdout)


def banner(title: str, *, file: TextIO | None = None) -> None:
    """Print a title framed by dashes."""
    print(f"--- {title} ---", file=file or sys.stdout)


def rule(*, file: TextIO | None = None) -> None:
    print("-" * RULE_WIDTH, file=file or sys.stdout)


def info(message: str, *, file: TextIO | None = None) -> None:
    print(message, file=file or sys.stdout)


def error(message: str, *, file: TextIO | None = None) -> None:
    """Print an error message to stderr."""
    print(f"Error: {message}", file=file or sys.stderr)
