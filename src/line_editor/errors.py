"""Exception types raised by the line editor outside of file I/O."""

from __future__ import annotations


class LineEditorError(RuntimeError):
    """Base class for editor-specific failures."""


class ConfigError(LineEditorError):
    """Raised when a ``LINE_EDITOR_*`` setting cannot be parsed."""

    def __init__(self, message: str, *, key: str | None = None) -> None:
        super().__init__(message)
        self.key = key


__all__ = ["LineEditorError", "ConfigError"]
