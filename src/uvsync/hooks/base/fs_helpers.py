# File: src/uvsync/hooks/base/fs_helpers.py
"""
File System Helpers
"""

import logging
import os
import shutil
import tempfile
from contextlib import suppress
from pathlib import Path
from typing import IO, TypeAlias

import dotenv


StrPath: TypeAlias = str | Path


def fs_resolve_write_target(path: StrPath) -> Path:
    """
    Return the file that a write to `path` should really replace.

    Shell profiles are often symlinks into a dotfiles repository. Replacing the
    link itself would silently detach the profile from that repository, so the
    link is followed and the real file is returned instead. Dangling links
    resolve to their (not yet existing) target.

    :param path: The path given by the caller.
    :return: An absolute path with symlinks resolved.
    """
    return Path(path).expanduser().resolve(strict=False)


def fs_atomic_write_text(
    path: StrPath,
    text: str,
    *,
    encoding: str = "utf-8",
) -> None:
    """
    Replace the contents of `path` with `text` in a single atomic step.

    The text is written to a temporary file in the same directory, flushed and
    fsynced, then moved over `path` with `os.replace()`. If anything fails
    before the move, `path` keeps its previous contents and the temporary file
    is removed. The permission bits of an existing `path` are copied to the
    new file.

    Newlines in `text` are written exactly as given (no translation).

    Example:
    ```
    fs_atomic_write_text(Path.home() / ".bashrc", "export X=1\\n")
    ```

    :param path: Destination file; its directory must already exist.
    :param text: Complete new file contents.
    :param encoding: Text encoding, default is "utf-8".
    :raises OSError: If the temporary file cannot be written or moved.
    """
    target = Path(path)
    fd, tmp_name = tempfile.mkstemp(
        dir=target.parent,
        prefix=f".{target.name}.",
        suffix=".tmp",
    )
    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "w", encoding=encoding, newline="") as f:
            f.write(text)
            f.flush()
            os.fsync(f.fileno())
        if target.exists():
            # Best effort: a profile on a filesystem without chmod support still gets written.
            with suppress(OSError):
                shutil.copymode(target, tmp_path)
        os.replace(tmp_path, target)
    except BaseException:
        with suppress(FileNotFoundError):
            tmp_path.unlink()
        raise


def fs_load_dotenv(
    *,
    logger: logging.Logger | None = None,
    dotenv_path: StrPath | None = None,
    stream: IO[str] | None = None,
    verbose: bool = False,
    override: bool = False,
    encoding: str | None = "utf-8",
) -> bool:
    """
    Parse a .env file and then load all the variables found as environment variables.

    :param logger: Logger to use for warnings and info messages, if supplied verbose is enabled.
    :param dotenv_path: Absolute or relative path to .env file.
    :param stream: Text stream (such as `io.StringIO`) with .env content, used if `dotenv_path` is `None`.
    :param verbose: Whether to output a warning the .env file is missing.
    :param override: Whether to override the environment variables with the variables from the `.env` file.
    :param encoding: Encoding of the .env file.
    :return: True if at least one environment variable is set else False

    If both `dotenv_path` and `stream` are `None`, the .env file is searched for
    upward from the current working directory.
    """
    if logger is not None and bool(logger):
        dotenv.main.logger = logger
        verbose = True
    if dotenv_path is None and stream is None:
        dotenv_path = dotenv.find_dotenv(usecwd=True)
    return dotenv.load_dotenv(
        dotenv_path=dotenv_path,
        stream=stream,
        verbose=verbose,
        override=override,
        encoding=encoding,
    )


# End of file: src/uvsync/hooks/base/fs_helpers.py
