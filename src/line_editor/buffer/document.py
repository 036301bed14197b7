"""Ordered line storage with whole-buffer load and save."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence

from line_editor.runtime import telemetry

from .storage import PathLike, read_lines, write_lines


@dataclass(slots=True)
class LineBuffer:
    """In-memory document kept as a plain list of lines.

    ``remove_line`` treats an out-of-range index as a no-op and reports it
    through its return value instead of raising. ``version`` increases on
    every mutation so hosts can tell snapshots apart.
    """

    _lines: List[str] = field(default_factory=list)
    version: int = 0
    encoding: Optional[str] = None
    atomic_save: bool = True

    @classmethod
    def from_lines(
        cls,
        lines: Iterable[str],
        *,
        encoding: Optional[str] = None,
        atomic_save: bool = True,
    ) -> "LineBuffer":
        return cls(_lines=list(lines), encoding=encoding, atomic_save=atomic_save)

    def add_line(self, text: str) -> None:
        self._lines.append(text)
        self.version += 1

    def remove_line(self, index: int) -> bool:
        """Delete the line at ``index``; return False if it is out of range."""

        if not 0 <= index < len(self._lines):
            return False
        del self._lines[index]
        self.version += 1
        return True

    def get_lines(self) -> Sequence[str]:
        """Return the current lines as a snapshot detached from later edits."""

        return tuple(self._lines)

    def save_to_file(self, path: PathLike) -> None:
        with telemetry.span(
            "buffer::save",
            component="buffer",
            metadata={"path": os.fspath(path), "lines": len(self._lines)},
        ):
            write_lines(
                path,
                self._lines,
                encoding=self.encoding,
                atomic=self.atomic_save,
            )

    def load_from_file(self, path: PathLike) -> None:
        """Replace the whole buffer with the lines of ``path``.

        The file is read completely before the swap, so on error the current
        lines are left untouched.
        """

        with telemetry.span(
            "buffer::load",
            component="buffer",
            metadata={"path": os.fspath(path)},
        ):
            loaded = read_lines(path, encoding=self.encoding)
        self._lines = loaded
        self.version += 1

    @property
    def line_count(self) -> int:
        return len(self._lines)

    @property
    def text(self) -> str:
        return "\n".join(self._lines)

    def __len__(self) -> int:
        return len(self._lines)
