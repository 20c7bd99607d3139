# File: src/uvsync/hooks/dialects/model.py
"""
Data records describing a shell dialect and the variables its hook syncs.

A Dialect is pure configuration: where the profile lives, how to tell whether
the shell is installed, which markers fence the hook, and how to render the
hook text. The driver consumes every dialect the same way.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from uvsync.hooks.base.config import OsFamily
from uvsync.hooks.blocks.marked_block import MarkerPair


MARKER_TEMPLATE = "# UV-CONDA-HOOK-{tag}-{edge}"


@dataclass(frozen=True, slots=True)
class SyncVariables:
    """Names used by the generated hook code."""

    prefix_var: str = "CONDA_PREFIX"
    env_name_var: str = "CONDA_DEFAULT_ENV"
    target_var: str = "UV_PROJECT_ENVIRONMENT"
    base_env_name: str = "base"
    function_name: str = "_sync_mamba_uv_env"

    def __post_init__(self) -> None:
        for field_name in ("prefix_var", "env_name_var", "target_var", "function_name"):
            value = getattr(self, field_name)
            if not value.isidentifier():
                raise ValueError(f"{field_name} must be an identifier, got {value!r}")
        if not self.base_env_name or any(c in self.base_env_name for c in "\"'`$\\\n"):
            raise ValueError(f"base_env_name must be a plain name, got {self.base_env_name!r}")

    def placeholders(self) -> dict[str, str]:
        return {
            "prefix_var": self.prefix_var,
            "env_name_var": self.env_name_var,
            "target_var": self.target_var,
            "base_env_name": self.base_env_name,
            "function_name": self.function_name,
        }


def hook_markers(name: str) -> MarkerPair:
    """Return the marker pair for dialect `name`, e.g. "# UV-CONDA-HOOK-BASH-START"."""
    tag = name.upper()
    return MarkerPair(
        MARKER_TEMPLATE.format(tag=tag, edge="START"),
        MARKER_TEMPLATE.format(tag=tag, edge="END"),
    )


ConfigPathFn = Callable[[Path, str], Path]
RenderFn = Callable[[MarkerPair, SyncVariables, bool], str]


@dataclass(frozen=True, slots=True)
class Dialect:
    """
    One supported shell.

    `config_path(home, executable)` receives the executable that was found on
    PATH, since some shells (PowerShell) keep a different profile per edition.
    """

    name: str
    display_name: str
    os_family: OsFamily
    executables: tuple[str, ...]
    config_path: ConfigPathFn
    renderer: RenderFn

    @property
    def markers(self) -> MarkerPair:
        return hook_markers(self.name)

    def render(self, variables: SyncVariables, *, ignore_base: bool = False) -> str:
        """Return the complete hook block, marker lines included."""
        return self.renderer(self.markers, variables, ignore_base)


# End of file: src/uvsync/hooks/dialects/model.py
