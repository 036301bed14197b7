"""Session command layer, results and event bus."""

from .bus import (
    BUFFER_CHANGED,
    COMMAND_ERROR,
    FILE_LOADED,
    FILE_SAVED,
    SessionBus,
)
from .commands import submit_command
from .result import (
    INDEX_OUT_OF_RANGE,
    INVALID_INPUT,
    INVALID_NUMBER,
    IO_ERROR,
    OK,
    UNKNOWN_COMMAND,
    CommandResult,
)
from .session import EditorSession

__all__ = [
    "EditorSession",
    "CommandResult",
    "SessionBus",
    "submit_command",
    "BUFFER_CHANGED",
    "COMMAND_ERROR",
    "FILE_LOADED",
    "FILE_SAVED",
    "OK",
    "INVALID_INPUT",
    "INVALID_NUMBER",
    "INDEX_OUT_OF_RANGE",
    "IO_ERROR",
    "UNKNOWN_COMMAND",
]
