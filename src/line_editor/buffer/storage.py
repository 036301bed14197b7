"""Whole-file text reading and writing for line buffers."""

from __future__ import annotations

import os
import stat
import tempfile
from pathlib import Path
from typing import Iterable, List, Optional, Union

PathLike = Union[str, "os.PathLike[str]"]

_NEW_FILE_MODE = 0o666


def split_lines(text: str) -> List[str]:
    """Split newline-normalized ``text`` into lines.

    A terminator after the last line does not produce a trailing empty line,
    so ``"x\\ny\\n"`` and ``"x\\ny"`` both give ``["x", "y"]`` and ``""`` gives
    ``[]``.
    """

    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def read_lines(path: PathLike, *, encoding: Optional[str] = None) -> List[str]:
    """Read ``path`` as text and return its lines.

    Universal newline mode folds ``\\r\\n`` and ``\\r`` into ``\\n`` before
    splitting. ``OSError`` and ``UnicodeDecodeError`` propagate.
    """

    with open(path, "r", encoding=encoding) as handle:
        content = handle.read()
    return split_lines(content)


def _write_to(handle, lines: Iterable[str]) -> None:
    for line in lines:
        handle.write(line)
        handle.write("\n")


def write_lines(
    path: PathLike,
    lines: Iterable[str],
    *,
    encoding: Optional[str] = None,
    atomic: bool = True,
) -> None:
    """Write ``lines`` to ``path``, each followed by the platform separator.

    With ``atomic`` the content goes to a temp file next to ``path`` which is
    then renamed over it, so a failed write never truncates the old file.
    """

    if not atomic:
        with open(path, "w", encoding=encoding) as handle:
            _write_to(handle, lines)
        return

    # Resolve symlinks so the rename replaces the file the link points at.
    target = Path(os.path.realpath(path))
    fd, tmp_name = tempfile.mkstemp(
        prefix=f".{target.name}.", suffix=".tmp", dir=target.parent
    )
    try:
        with os.fdopen(fd, "w", encoding=encoding) as handle:
            _write_to(handle, lines)
            handle.flush()
            os.fsync(handle.fileno())
        os.chmod(tmp_name, _target_mode(target))
        os.replace(tmp_name, target)
    except BaseException:
        try:
            os.unlink(tmp_name)
        except FileNotFoundError:
            pass
        raise


def _target_mode(target: Path) -> int:
    try:
        return stat.S_IMODE(os.stat(target).st_mode)
    except FileNotFoundError:
        return _NEW_FILE_MODE & ~_current_umask()


def _current_umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask


__all__ = ["PathLike", "read_lines", "split_lines", "write_lines"]
