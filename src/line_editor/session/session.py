"""Command layer between a presentation host and a ``LineBuffer``."""

from __future__ import annotations

import os
import threading
from typing import Optional, Sequence

from line_editor.buffer import LineBuffer
from line_editor.buffer.storage import PathLike
from line_editor.config import EditorConfig
from line_editor.runtime import telemetry

from .bus import BUFFER_CHANGED, COMMAND_ERROR, FILE_LOADED, FILE_SAVED, SessionBus
from .result import (
    INDEX_OUT_OF_RANGE,
    INVALID_INPUT,
    INVALID_NUMBER,
    IO_ERROR,
    OK,
    CommandResult,
)

SAVE_OK_MESSAGE = "Text saved to file successfully."
LOAD_OK_MESSAGE = "Text loaded from file successfully."
INVALID_TEXT_MESSAGE = "Invalid input. Please enter some text."
INVALID_NUMBER_MESSAGE = "Invalid input. Please enter a valid number."


class EditorSession:
    """Owns one buffer and turns every command outcome into a ``CommandResult``.

    Commands never raise for user or I/O errors. Each one runs to completion
    under a single lock, so the buffer is only ever mutated by one caller at
    a time.
    """

    def __init__(
        self,
        buffer: Optional[LineBuffer] = None,
        *,
        config: Optional[EditorConfig] = None,
        bus: Optional[SessionBus] = None,
    ) -> None:
        self.config = config or EditorConfig()
        # An empty LineBuffer is falsy, so test for None explicitly.
        if buffer is None:
            buffer = LineBuffer(
                encoding=self.config.encoding, atomic_save=self.config.atomic_save
            )
        self.buffer = buffer
        self.bus = bus or SessionBus()
        self._lock = threading.RLock()

    @property
    def lines(self) -> Sequence[str]:
        with self._lock:
            return self.buffer.get_lines()

    def snapshot(self) -> CommandResult:
        with self._lock:
            return self._ok()

    def add_line(self, text: Optional[str]) -> CommandResult:
        with self._lock:
            if not text:
                return self._reject(INVALID_INPUT, INVALID_TEXT_MESSAGE)
            self.buffer.add_line(text)
            self.bus.emit(BUFFER_CHANGED, self.buffer.get_lines())
            return self._ok()

    def remove_line(self, index_text: Optional[str]) -> CommandResult:
        with self._lock:
            try:
                index = int(index_text)  # type: ignore[arg-type]
            except (TypeError, ValueError):
                return self._reject(INVALID_NUMBER, INVALID_NUMBER_MESSAGE)

            if not self.buffer.remove_line(index):
                return self._reject(
                    INDEX_OUT_OF_RANGE,
                    f"Line {index} does not exist "
                    f"(buffer has {self.buffer.line_count} lines).",
                )
            self.bus.emit(BUFFER_CHANGED, self.buffer.get_lines())
            return self._ok()

    def save_to_file(self, path: PathLike) -> CommandResult:
        target = os.fspath(path)
        with self._lock:
            try:
                self.buffer.save_to_file(target)
            except (OSError, ValueError, LookupError) as exc:
                return self._io_failure(
                    f"Error occurred while saving to file: {exc}", target
                )
            telemetry.record_event(
                "file.saved",
                data={"path": target, "lines": self.buffer.line_count},
                logger_name="line_editor.session",
            )
            self.bus.emit(FILE_SAVED, target)
            return self._ok(message=SAVE_OK_MESSAGE, path=target)

    def load_from_file(self, path: PathLike) -> CommandResult:
        target = os.fspath(path)
        with self._lock:
            try:
                self.buffer.load_from_file(target)
            except (OSError, ValueError, LookupError) as exc:
                return self._io_failure(
                    f"Error occurred while loading from file: {exc}", target
                )
            telemetry.record_event(
                "file.loaded",
                data={"path": target, "lines": self.buffer.line_count},
                logger_name="line_editor.session",
            )
            self.bus.emit(FILE_LOADED, target)
            self.bus.emit(BUFFER_CHANGED, self.buffer.get_lines())
            return self._ok(message=LOAD_OK_MESSAGE, path=target)

    def _ok(
        self, *, message: Optional[str] = None, path: Optional[str] = None
    ) -> CommandResult:
        return CommandResult(
            ok=True,
            lines=tuple(self.buffer.get_lines()),
            status=OK,
            message=message,
            path=path,
        )

    def _reject(self, status: str, message: str) -> CommandResult:
        telemetry.record_event(
            "command.rejected",
            level="warning",
            data={"status": status, "reason": message},
            logger_name="line_editor.session",
        )
        self.bus.emit(COMMAND_ERROR, status)
        return CommandResult(
            ok=False,
            lines=tuple(self.buffer.get_lines()),
            status=status,
            message=message,
        )

    def _io_failure(self, message: str, path: str) -> CommandResult:
        telemetry.record_event(
            "command.io_error",
            level="error",
            data={"path": path, "reason": message},
            logger_name="line_editor.session",
        )
        self.bus.emit(COMMAND_ERROR, IO_ERROR)
        return CommandResult(
            ok=False,
            lines=tuple(self.buffer.get_lines()),
            status=IO_ERROR,
            message=message,
            path=path,
        )


__all__ = [
    "EditorSession",
    "SAVE_OK_MESSAGE",
    "LOAD_OK_MESSAGE",
    "INVALID_TEXT_MESSAGE",
    "INVALID_NUMBER_MESSAGE",
]
