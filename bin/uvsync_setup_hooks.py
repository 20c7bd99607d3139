#!/usr/bin/env python3
"""
Set up the UV + Conda/Mamba environment sync hook in every installed shell.

Usage:
    uvsync_setup_hooks.py [--ignore_base]

This is the source-checkout equivalent of the `uvsync-setup-hooks` console
script: it puts ../src on sys.path when the package is not installed and then
delegates to uvsync.hooks.setup_hooks.
"""

from __future__ import annotations

import sys
from pathlib import Path


__all__ = ["uvsync_setup_hooks_main"]

SRC_DIR = Path(__file__).resolve().parent.parent / "src"


def _import_setup_hooks_main():
    try:
        from uvsync.hooks.setup_hooks import setup_hooks_main
    except ModuleNotFoundError as exc:
        if exc.name is None or not exc.name.startswith("uvsync") or not SRC_DIR.is_dir():
            raise
        sys.path.insert(0, str(SRC_DIR))
        from uvsync.hooks.setup_hooks import setup_hooks_main
    return setup_hooks_main


def uvsync_setup_hooks_main(argv: list[str] | None = None) -> int:
    """Run the installer; returns the process exit status."""
    return _import_setup_hooks_main()(argv)


if __name__ == "__main__":
    try:
        sys.exit(uvsync_setup_hooks_main())
    except KeyboardInterrupt:
        print("Interrupted by user.", file=sys.stderr)
        sys.exit(130)

# End of file: bin/uvsync_setup_hooks.py
