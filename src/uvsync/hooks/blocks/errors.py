# File: src/uvsync/hooks/blocks/errors.py
"""
Exceptions raised while injecting a marked block into a text file.

    HookError
    ├── BlockIOError
    │   ├── PermissionDeniedError
    │   ├── InvalidPathError
    │   ├── ReadFailedError
    │   └── WriteFailedError
    └── MalformedBlockError

Every error carries the path it concerns. I/O errors chain the underlying
OSError (or UnicodeDecodeError) as `__cause__`.
"""

from __future__ import annotations

from pathlib import Path


__all__ = [
    "BlockIOError",
    "HookError",
    "InvalidPathError",
    "MalformedBlockError",
    "PermissionDeniedError",
    "ReadFailedError",
    "WriteFailedError",
]


class HookError(Exception):
    """Base class for failures while installing a shell hook."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(f"{path}: {message}")
        self.path = path
        self.message = message


class BlockIOError(HookError):
    """The target file or its directory could not be read, created or written."""


class PermissionDeniedError(BlockIOError):
    pass


class InvalidPathError(BlockIOError):
    """A path component that must be a directory is a file, or the target is a directory."""


class ReadFailedError(BlockIOError):
    pass


class WriteFailedError(BlockIOError):
    """The atomic replace failed; the original file is unchanged."""


class MalformedBlockError(HookError):
    """
    A marker appears without its partner.

    `line_number` is 1-based and points at the orphaned marker line.
    """

    def __init__(self, path: Path, message: str, *, marker: str, line_number: int) -> None:
        super().__init__(path, f"{message} (line {line_number}: {marker!r})")
        self.marker = marker
        self.line_number = line_number


# End of file: src/uvsync/hooks/blocks/errors.py
