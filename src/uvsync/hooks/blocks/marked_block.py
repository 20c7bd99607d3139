# File: src/uvsync/hooks/blocks/marked_block.py
"""
Insert or replace a marker-delimited block of lines in a text file.

Usage:
    inject(Path.home() / ".bashrc", "# MY-HOOK-START", "# MY-HOOK-END", block)

Behavior:
    • The file and its parent directories are created when missing.
    • Every existing block (start marker line through the next end marker
      line, inclusive) is removed, along with the one blank separator line
      written in front of it by a previous run.
    • The new block is appended at the end of the file after one blank line.
    • All other lines keep their text and relative order.
    • The result is written with a temp-file-then-rename, so an interrupted
      run leaves either the old or the new file, never a partial one.
    • Running twice with the same arguments leaves the file byte-identical to
      running once.

A start marker without a following end marker, or an end marker outside any
block, raises MalformedBlockError and the file is not modified.
"""

from __future__ import annotations

import re
import stat
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Final, NamedTuple

from uvsync.hooks.base.fs_helpers import StrPath, fs_atomic_write_text, fs_resolve_write_target
from uvsync.hooks.blocks.errors import (
    BlockIOError,
    InvalidPathError,
    MalformedBlockError,
    PermissionDeniedError,
    ReadFailedError,
    WriteFailedError,
)
from uvsync.hooks.xlogging.logger_factory import create_logger


__all__ = [
    "InjectResult",
    "MarkerPair",
    "inject",
    "remove_marked_blocks",
    "splice_block",
]

LOG = create_logger(__name__)

ENCODING: Final[str] = "utf-8"
_LINE_BREAK_RE: Final[re.Pattern[str]] = re.compile(r"\r?\n")
_ANONYMOUS_PATH: Final[Path] = Path("<text>")


@dataclass(frozen=True, slots=True)
class MarkerPair:
    """
    The literal start and end tokens that delimit a tool-owned block.

    A line belongs to the marker if it contains the token anywhere, so a
    marker is usually written as a distinctive comment such as
    "# UV-CONDA-HOOK-BASH-START".
    """

    start: str
    end: str

    def __post_init__(self) -> None:
        for label, token in (("start", self.start), ("end", self.end)):
            if not token or not token.strip():
                raise ValueError(f"{label} marker must be a non-empty string")
            if "\n" in token or "\r" in token:
                raise ValueError(f"{label} marker must be a single line: {token!r}")
        if self.start in self.end or self.end in self.start:
            raise ValueError(
                f"start and end markers must not contain one another: {self.start!r}, {self.end!r}"
            )


class InjectResult(NamedTuple):
    """Outcome of one inject() call."""

    path: Path
    replaced: bool  # at least one earlier block was removed
    changed: bool  # the bytes on disk were rewritten


def split_lines(text: str) -> list[str]:
    """Split on LF or CRLF only; a final line break does not start a new line."""
    if not text:
        return []
    lines = _LINE_BREAK_RE.split(text)
    if lines[-1] == "":
        lines.pop()
    return lines


def remove_marked_blocks(
    lines: Sequence[str],
    markers: MarkerPair,
    *,
    path: Path = _ANONYMOUS_PATH,
) -> tuple[list[str], int]:
    """
    Return `lines` without any marked block, and the number of blocks removed.

    A single empty line directly above a removed block is removed too, since
    inject() writes exactly one there.

    :param lines: File content split into lines, without line breaks.
    :param markers: The marker pair to look for.
    :param path: Used only in error messages.
    :raises MalformedBlockError: On an unterminated block or a stray end marker.
    """
    kept: list[str] = []
    removed = 0
    index = 0
    while index < len(lines):
        line = lines[index]
        if markers.start in line:
            end_index = next(
                (j for j in range(index + 1, len(lines)) if markers.end in lines[j]),
                None,
            )
            if end_index is None:
                raise MalformedBlockError(
                    path,
                    "start marker has no matching end marker",
                    marker=markers.start,
                    line_number=index + 1,
                )
            if kept and kept[-1] == "":
                kept.pop()
            removed += 1
            index = end_index + 1
            continue
        if markers.end in line:
            raise MalformedBlockError(
                path,
                "end marker appears outside a marked block",
                marker=markers.end,
                line_number=index + 1,
            )
        kept.append(line)
        index += 1
    return kept, removed


def block_lines(block: str, markers: MarkerPair) -> list[str]:
    """
    Split `block` into lines and check that the markers frame it exactly once.

    :raises ValueError: If the first line lacks the start marker, the last line
        lacks the end marker, or a marker appears anywhere in between.
    """
    lines = split_lines(block)
    if len(lines) < 2:
        raise ValueError("block must span at least two lines: the start and end marker lines")
    if markers.start not in lines[0]:
        raise ValueError(f"block must begin with the start marker {markers.start!r}")
    if markers.end not in lines[-1]:
        raise ValueError(f"block must end with the end marker {markers.end!r}")
    for inner in lines[1:-1]:
        if markers.start in inner or markers.end in inner:
            raise ValueError(f"block contains a nested marker line: {inner!r}")
    return lines


def splice_block(
    text: str,
    markers: MarkerPair,
    block: str,
    *,
    path: Path = _ANONYMOUS_PATH,
) -> tuple[str, int]:
    """
    Return `text` with every old marked block removed and `block` appended.

    CRLF input produces CRLF output; anything else produces LF. The result
    always ends with a line break.

    :return: (new text, number of blocks removed)
    """
    newline = "\r\n" if "\r\n" in text else "\n"
    new_block = block_lines(block, markers)
    kept, removed = remove_marked_blocks(split_lines(text), markers, path=path)
    return newline.join([*kept, "", *new_block]) + newline, removed


def inject(
    path: StrPath,
    start_marker: str,
    end_marker: str,
    block: str,
) -> InjectResult:
    """
    Ensure `path` holds exactly one copy of `block`, replacing any previous copy.

    :param path: Target file; it and its parent directories need not exist.
    :param start_marker: Token identifying the first line of the block.
    :param end_marker: Token identifying the last line of the block.
    :param block: Full text to insert, including the marker lines.
    :return: InjectResult describing what happened.
    :raises ValueError: If the markers or the block framing are invalid.
    :raises PermissionDeniedError: If the file or directory is not accessible.
    :raises InvalidPathError: If `path` cannot be resolved, a parent is not a directory,
        or `path` is a directory.
    :raises ReadFailedError: If the existing file cannot be read as UTF-8 text.
    :raises WriteFailedError: If the new content cannot be written; the original is unchanged.
    :raises MalformedBlockError: If the existing file has an unbalanced marker.
    """
    markers = MarkerPair(start_marker, end_marker)
    block_lines(block, markers)  # validate before touching the filesystem

    try:
        target = fs_resolve_write_target(path)
    except (OSError, RuntimeError) as exc:
        # RuntimeError: symlink loop on Python 3.11 and 3.12
        raise InvalidPathError(Path(path), f"cannot resolve the path: {exc}") from exc
    _ensure_file(target)

    with _io_errors(target, "reading", default=ReadFailedError):
        raw = target.read_bytes()
    try:
        text = raw.decode(ENCODING)
    except UnicodeDecodeError as exc:
        raise ReadFailedError(target, f"not valid {ENCODING} text") from exc

    new_text, removed = splice_block(text, markers, block, path=target)
    replaced = removed > 0
    if removed > 1:
        LOG.warning("%s: collapsed %d copies of the %r block into one", target, removed, markers.start)

    if new_text == text:
        LOG.debug("%s: block already up to date", target)
        return InjectResult(target, replaced=replaced, changed=False)

    with _io_errors(target, "writing", default=WriteFailedError):
        fs_atomic_write_text(target, new_text, encoding=ENCODING)
    LOG.debug("%s: wrote %d bytes (replaced=%s)", target, len(new_text), replaced)
    return InjectResult(target, replaced=replaced, changed=True)


def _ensure_file(target: Path) -> None:
    """Create `target` (empty) and its parent directories if they are missing."""
    with _io_errors(target.parent, "creating the parent directory", default=WriteFailedError):
        target.parent.mkdir(parents=True, exist_ok=True)
    with _io_errors(target, "inspecting the file", default=ReadFailedError):
        try:
            mode: int | None = target.stat().st_mode
        except FileNotFoundError:
            mode = None
    if mode is not None and stat.S_ISDIR(mode):
        raise InvalidPathError(target, "is a directory, expected a text file")
    if mode is None:
        with _io_errors(target, "creating the file", default=WriteFailedError):
            target.touch()
        LOG.debug("%s: created empty file", target)


@contextmanager
def _io_errors(path: Path, action: str, *, default: type[BlockIOError]) -> Iterator[None]:
    """Translate OSError raised inside the block into the BlockIOError hierarchy."""
    try:
        yield
    except PermissionError as exc:
        raise PermissionDeniedError(path, f"permission denied while {action}") from exc
    except (FileExistsError, NotADirectoryError, IsADirectoryError) as exc:
        raise InvalidPathError(path, f"not a usable path while {action}: {exc.strerror or exc}") from exc
    except OSError as exc:
        raise default(path, f"{action} failed: {exc.strerror or exc}") from exc


# End of file: src/uvsync/hooks/blocks/marked_block.py
