"""Parse one typed command line and route it to an ``EditorSession``."""

from __future__ import annotations

from functools import partial
from typing import Callable, Dict

from line_editor.runtime import telemetry

from .result import INVALID_INPUT, UNKNOWN_COMMAND, CommandResult
from .session import EditorSession

CommandHandler = Callable[[EditorSession, str], CommandResult]


def submit_command(session: EditorSession, line: str | None) -> CommandResult:
    """Run ``line`` against ``session``.

    The first word picks the command. The rest of the line, minus the
    whitespace that separates it from the command, is the argument, so
    ``add  two words `` adds ``"two words "``. File paths are stripped.
    """

    text = (line or "").lstrip()
    if not text.strip():
        return _result(session, INVALID_INPUT, "Empty command.")

    parts = text.split(maxsplit=1)
    command = parts[0]
    argument = parts[1] if len(parts) > 1 else ""
    handler = _COMMAND_HANDLERS.get(command.lower())
    telemetry.record_event(
        "command.submit",
        level="debug",
        data={"command": command, "known": handler is not None},
        logger_name="line_editor.commands",
    )
    if handler is None:
        return _result(session, UNKNOWN_COMMAND, command)
    return handler(session, argument)


def _result(session: EditorSession, status: str, message: str) -> CommandResult:
    return CommandResult(
        ok=False,
        lines=tuple(session.lines),
        status=status,
        message=message,
    )


def _handle_add(session: EditorSession, argument: str) -> CommandResult:
    return session.add_line(argument)


def _handle_remove(session: EditorSession, argument: str) -> CommandResult:
    return session.remove_line(argument)


def _handle_file(
    session: EditorSession, argument: str, *, write: bool
) -> CommandResult:
    argument = argument.strip()
    if not argument:
        verb = "write" if write else "edit"
        return _result(session, INVALID_INPUT, f"{verb}: missing file path")
    if write:
        return session.save_to_file(argument)
    return session.load_from_file(argument)


def _handle_print(session: EditorSession, argument: str) -> CommandResult:
    del argument
    return session.snapshot()


_COMMAND_HANDLERS: Dict[str, CommandHandler] = {
    "add": _handle_add,
    "a": _handle_add,
    "remove": _handle_remove,
    "rm": _handle_remove,
    "d": _handle_remove,
    "write": partial(_handle_file, write=True),
    "w": partial(_handle_file, write=True),
    "save": partial(_handle_file, write=True),
    "edit": partial(_handle_file, write=False),
    "e": partial(_handle_file, write=False),
    "load": partial(_handle_file, write=False),
    "print": _handle_print,
    "p": _handle_print,
}


__all__ = ["submit_command"]
