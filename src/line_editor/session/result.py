"""Result values returned by session commands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

OK = "ok"
INVALID_INPUT = "invalid_input"
INVALID_NUMBER = "invalid_number"
INDEX_OUT_OF_RANGE = "index_out_of_range"
IO_ERROR = "io_error"
UNKNOWN_COMMAND = "unknown_command"


@dataclass(slots=True)
class CommandResult:
    """Outcome of one session command, ready for a host to render."""

    ok: bool
    lines: Tuple[str, ...]
    status: str = OK
    message: Optional[str] = None
    path: Optional[str] = None

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


__all__ = [
    "CommandResult",
    "OK",
    "INVALID_INPUT",
    "INVALID_NUMBER",
    "INDEX_OUT_OF_RANGE",
    "IO_ERROR",
    "UNKNOWN_COMMAND",
]
