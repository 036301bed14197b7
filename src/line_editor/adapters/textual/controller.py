"""Host adapter that wires EditorSession results into UI callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional

from line_editor.session import (
    BUFFER_CHANGED,
    COMMAND_ERROR,
    FILE_LOADED,
    FILE_SAVED,
    CommandResult,
    EditorSession,
    submit_command,
)


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class EditorUIHooks:
    """Callbacks invoked by the adapter to update host widgets."""

    update_buffer: Callable[[str], None]
    update_status: Callable[[str], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    # Optional realtime log callback for debug lines
    log: Callable[[str], None] = _noop


class TextualEditorAdapter:
    """Turns host button presses into session commands and renders the outcome."""

    def __init__(self, session: EditorSession, hooks: EditorUIHooks) -> None:
        self.session = session
        self.hooks = hooks
        self._subscribe_events()
        self._refresh_buffer()

    def add_line(self, text: Optional[str]) -> CommandResult:
        return self._run("add", text, self.session.add_line)

    def remove_line(self, index_text: Optional[str]) -> CommandResult:
        return self._run("remove", index_text, self.session.remove_line)

    def save(self, path: str) -> CommandResult:
        return self._run("save", path, self.session.save_to_file)

    def load(self, path: str) -> CommandResult:
        return self._run("load", path, self.session.load_from_file)

    def submit(self, line: str) -> CommandResult:
        return self._run(
            "submit", line, lambda value: submit_command(self.session, value)
        )

    def _run(
        self,
        command: str,
        argument: Optional[str],
        call: Callable[[Optional[str]], CommandResult],
    ) -> CommandResult:
        self._log_state("command ->", command=command, argument=argument)
        result = call(argument)
        status = result.message or result.status
        if status:
            self.hooks.update_status(status)
        self._refresh_buffer()
        self._log_state(
            "result <-",
            ok=result.ok,
            status=result.status,
            message=result.message,
        )
        return result

    def _subscribe_events(self) -> None:
        bus = self.session.bus
        for event in (BUFFER_CHANGED, FILE_SAVED, FILE_LOADED, COMMAND_ERROR):
            bus.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )

    def _handle_event(self, name: str, payload: object | None) -> None:
        self._log_state("event ->", event=name, payload=payload)
        self.hooks.handle_event(name, payload)

    def _refresh_buffer(self) -> None:
        self.hooks.update_buffer(self.session.buffer.text)

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        buffer = self.session.buffer
        return {
            "lines": buffer.line_count,
            "buffer_version": buffer.version,
        }


__all__ = ["TextualEditorAdapter", "EditorUIHooks"]
