"""Event bus letting hosts observe session changes."""

from __future__ import annotations

from typing import Callable, Dict

BUFFER_CHANGED = "buffer.changed"
FILE_SAVED = "file.saved"
FILE_LOADED = "file.loaded"
COMMAND_ERROR = "command.error"


class SessionBus:
    """Synchronous publish/subscribe keyed by event name."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def unsubscribe(self, event: str, callback: Callable[[object], None]) -> None:
        callbacks = self._subscribers.get(event, [])
        if callback in callbacks:
            callbacks.remove(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in list(self._subscribers.get(event, [])):
            callback(payload)


__all__ = [
    "SessionBus",
    "BUFFER_CHANGED",
    "FILE_SAVED",
    "FILE_LOADED",
    "COMMAND_ERROR",
]
