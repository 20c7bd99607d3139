# File: src/uvsync/hooks/base/os_helpers.py

from __future__ import annotations

import os
from pathlib import Path


_TRUTHY_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSY_VALUES = frozenset({"0", "false", "no", "off"})


def os_environ_truthy(var_name: str, default: bool = False) -> bool:
    """Check if an environment variable is set to a truthy value.

    Truthy values are: "1", "true", "yes", "on" (case-insensitive).
    Falsy values are: "0", "false", "no", "off" (case-insensitive).
    Unset, empty or unrecognized values return `default`.

    Args:
        var_name (str): The name of the environment variable to check.
        default (bool): The value to return if the variable is unset or unrecognized.

    Returns:
        bool: The parsed flag, or `default`.
    """
    value = os.getenv(var_name)
    if value is None:
        return default

    value_lower = value.strip().lower()
    if value_lower in _TRUTHY_VALUES:
        return True
    if value_lower in _FALSY_VALUES:
        return False
    return default


def os_environ_path(var_name: str, default: Path) -> Path:
    """Return an environment variable as an absolute, user-expanded Path.

    Args:
        var_name (str): The name of the environment variable to read.
        default (Path): The path to use when the variable is unset or blank.

    Returns:
        Path: The expanded absolute path.
    """
    value = (os.getenv(var_name) or "").strip()
    path = Path(value).expanduser() if value else default
    return path if path.is_absolute() else path.absolute()


# End of file: src/uvsync/hooks/base/os_helpers.py
