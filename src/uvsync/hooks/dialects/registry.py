# File: src/uvsync/hooks/dialects/registry.py
"""
The table of supported shell dialects.

POSIX hosts get Bash, Zsh, Fish and Elvish; Windows hosts get PowerShell.
Order is the order in which the installer processes them.
"""

from __future__ import annotations

from pathlib import Path

from uvsync.hooks.base.config import OS_FAMILIES, OsFamily
from uvsync.hooks.dialects import templates
from uvsync.hooks.dialects.model import ConfigPathFn, Dialect


def _home_file(*parts: str) -> ConfigPathFn:
    def config_path(home: Path, _executable: str) -> Path:
        return home.joinpath(*parts)

    return config_path


def powershell_profile(home: Path, executable: str) -> Path:
    """
    Return the CurrentUserCurrentHost profile for the PowerShell edition.

    PowerShell 7+ (pwsh) and Windows PowerShell 5.1 (powershell) keep separate
    profile directories under Documents.
    """
    edition = "PowerShell" if Path(executable).stem.lower() == "pwsh" else "WindowsPowerShell"
    return home / "Documents" / edition / "Microsoft.PowerShell_profile.ps1"


DIALECTS: tuple[Dialect, ...] = (
    Dialect(
        name="bash",
        display_name="Bash",
        os_family="posix",
        executables=("bash",),
        config_path=_home_file(".bashrc"),
        renderer=templates.BASH.render,
    ),
    Dialect(
        name="zsh",
        display_name="Zsh",
        os_family="posix",
        executables=("zsh",),
        config_path=_home_file(".zshrc"),
        renderer=templates.ZSH.render,
    ),
    Dialect(
        name="fish",
        display_name="Fish",
        os_family="posix",
        executables=("fish",),
        config_path=_home_file(".config", "fish", "config.fish"),
        renderer=templates.FISH.render,
    ),
    Dialect(
        name="elvish",
        display_name="Elvish",
        os_family="posix",
        executables=("elvish",),
        config_path=_home_file(".config", "elvish", "rc.elv"),
        renderer=templates.ELVISH.render,
    ),
    Dialect(
        name="powershell",
        display_name="PowerShell",
        os_family="windows",
        executables=("pwsh", "powershell"),
        config_path=powershell_profile,
        renderer=templates.POWERSHELL.render,
    ),
)


def dialects_for_os(family: OsFamily) -> tuple[Dialect, ...]:
    """Return the dialects installed on hosts of `family`, in processing order."""
    if family not in OS_FAMILIES:
        raise ValueError(f"Unknown OS family {family!r}; expected one of {OS_FAMILIES}")
    return tuple(d for d in DIALECTS if d.os_family == family)


# End of file: src/uvsync/hooks/dialects/registry.py
