# File: src/uvsync/hooks/setup_hooks.py
"""
Install the UV + Conda/Mamba environment sync hook into every detected shell.

Usage:
    uvsync-setup-hooks [--ignore_base]

For each shell dialect of the host OS family whose executable is on PATH, the
hook block is injected into that shell's profile, replacing any copy left by
an earlier run. A failure in one profile is reported and the remaining
shells are still processed.

Exit status:
    0  all detected shells were set up (or --help was shown)
    1  invalid command-line arguments
    2  at least one shell could not be set up

Environment:
    UVSYNC_HOME         profile root directory (default: the user's home)
    UVSYNC_IGNORE_BASE  truthy value turns on --ignore_base
"""

from __future__ import annotations

import argparse
import shutil
import sys
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal, NoReturn, TextIO

from uvsync.hooks.base.config import OsFamily, host_os_family
from uvsync.hooks.base.fs_helpers import fs_load_dotenv
from uvsync.hooks.base.os_helpers import os_environ_path, os_environ_truthy
from uvsync.hooks.blocks.errors import HookError
from uvsync.hooks.blocks.marked_block import inject
from uvsync.hooks.dialects.model import Dialect, SyncVariables
from uvsync.hooks.dialects.registry import dialects_for_os
from uvsync.hooks.io import console
from uvsync.hooks.io.logging_utils import setup_logging
from uvsync.hooks.xlogging.logger_factory import create_logger


__all__ = [
    "HookResult",
    "HookSettings",
    "build_parser",
    "install_hook",
    "install_hooks",
    "setup_hooks_main",
]

LOG = create_logger(__name__)

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_FAILED = 2

ENV_HOME = "UVSYNC_HOME"
ENV_IGNORE_BASE = "UVSYNC_IGNORE_BASE"

PLATFORM_LABELS: dict[OsFamily, str] = {"posix": "macOS/Linux", "windows": "Windows"}

HookStatus = Literal["skipped", "added", "replaced", "unchanged", "failed"]
WhichFn = Callable[[str], str | None]


@dataclass(frozen=True, slots=True)
class HookSettings:
    """Everything a run needs, resolved once up front."""

    home: Path
    os_family: OsFamily
    ignore_base: bool = False
    variables: SyncVariables = field(default_factory=SyncVariables)

    @classmethod
    def from_environment(cls, *, ignore_base: bool | None = None) -> HookSettings:
        """
        Build settings from the environment (and a .env file, if one is found).

        :param ignore_base: Command-line value; None defers to UVSYNC_IGNORE_BASE.
        """
        fs_load_dotenv()
        if ignore_base is None:
            ignore_base = os_environ_truthy(ENV_IGNORE_BASE)
        return cls(
            home=os_environ_path(ENV_HOME, Path.home()),
            os_family=host_os_family(),
            ignore_base=ignore_base,
        )


@dataclass(frozen=True, slots=True)
class HookResult:
    dialect: Dialect
    status: HookStatus
    path: Path | None = None
    error: HookError | None = None


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that exits with status 1 on bad arguments."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        console.error(message)
        print("Use --help for usage information.", file=sys.stderr)
        self.exit(EXIT_USAGE)


def build_parser(prog: str | None = None) -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog=prog,
        description=(
            "Set up shell hooks that sync UV_PROJECT_ENVIRONMENT with the active "
            "Conda/Mamba environment."
        ),
        epilog=(
            "examples:\n"
            "  %(prog)s                 set up hooks (the base environment is synced too)\n"
            "  %(prog)s --ignore_base   set up hooks that leave the base environment out"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--ignore_base",
        "--ignore-base",
        dest="ignore_base",
        action="store_true",
        default=None,
        help="Exclude conda's default 'base' environment from UV sync.",
    )
    return parser


def find_executable(dialect: Dialect, which: WhichFn | None = None) -> str | None:
    """Return the first of the dialect's executable names found on PATH."""
    lookup = which or shutil.which
    for executable in dialect.executables:
        if lookup(executable):
            return executable
    return None


def install_hook(
    dialect: Dialect,
    settings: HookSettings,
    *,
    which: WhichFn | None = None,
    out: TextIO | None = None,
) -> HookResult:
    """
    Install the hook for one dialect.

    HookError is reported and returned as a "failed" result, never raised.
    """
    executable = find_executable(dialect, which)
    if executable is None:
        LOG.debug("%s not found on PATH; skipping", dialect.display_name)
        return HookResult(dialect, "skipped")

    console.say(f"{dialect.display_name} detected. Setting up hook...", file=out)
    path = dialect.config_path(settings.home, executable)
    block = dialect.render(settings.variables, ignore_base=settings.ignore_base)
    markers = dialect.markers
    try:
        with LOG.prefix_with(dialect.name):
            result = inject(path, markers.start, markers.end, block)
    except HookError as exc:
        LOG.debug("inject failed for %s", path, exc_info=True)
        console.error(f"Could not set up the {dialect.display_name} hook: {exc}")
        return HookResult(dialect, "failed", path, exc)

    status: HookStatus
    if not result.changed:
        status = "unchanged"
        console.say(f"{dialect.display_name} hook in {result.path} is already up to date.", file=out)
    elif result.replaced:
        status = "replaced"
        console.say(
            f"Existing {dialect.display_name} hook found in {result.path}. Replaced with updated version.",
            file=out,
        )
    else:
        status = "added"
        console.say(f"Successfully injected hook for {dialect.display_name} into {result.path}.", file=out)
    return HookResult(dialect, status, result.path)


def install_hooks(
    settings: HookSettings,
    *,
    dialects: Iterable[Dialect] | None = None,
    which: WhichFn | None = None,
    out: TextIO | None = None,
) -> list[HookResult]:
    """
    Install the hook for every dialect of the host OS family, in table order.

    :param settings: Resolved run settings.
    :param dialects: Override the dialect list; default is dialects_for_os(settings.os_family).
    :param which: PATH lookup used for the presence check.
    :param out: Progress output stream; default is stdout.
    :return: One HookResult per dialect.
    """
    if dialects is None:
        dialects = dialects_for_os(settings.os_family)

    console.banner(f"Setting up UV + Conda/Mamba Hooks for {PLATFORM_LABELS[settings.os_family]}", file=out)
    if settings.ignore_base:
        console.say(
            "Running with --ignore_base: conda 'base' environment will be excluded from UV sync",
            file=out,
        )

    results = [install_hook(dialect, settings, which=which, out=out) for dialect in dialects]

    console.rule(file=out)
    failed = [r.dialect.display_name for r in results if r.status == "failed"]
    if all(r.status == "skipped" for r in results):
        console.info("No supported shells were found on PATH. Nothing to do.", file=out)
    elif failed:
        console.info(f"Setup finished with errors for: {', '.join(failed)}.", file=out)
    else:
        console.info("Setup complete. Please restart your shell(s) to apply changes.", file=out)
    return results


def setup_hooks_main(argv: Sequence[str] | None = None) -> int:
    """
    Command-line entry point.

    :param argv: Arguments excluding the program name; default is sys.argv[1:].
    :return: Process exit status (see module docstring).
    """
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as exc:
        return exc.code if isinstance(exc.code, int) else EXIT_USAGE

    setup_logging()
    settings = HookSettings.from_environment(ignore_base=args.ignore_base)
    LOG.debug("settings: %s", settings)

    results = install_hooks(settings)
    return EXIT_FAILED if any(r.status == "failed" for r in results) else EXIT_OK


def main() -> NoReturn:
    """Console-script wrapper around setup_hooks_main()."""
    try:
        sys.exit(setup_hooks_main())
    except KeyboardInterrupt:
        LOG.warning("Interrupted by user.")
        sys.exit(130)


if __name__ == "__main__":
    main()


# End of file: src/uvsync/hooks/setup_hooks.py
