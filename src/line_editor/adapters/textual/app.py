"""Executable Textual app hosting an EditorSession."""

from __future__ import annotations

import argparse
import os
from dataclasses import dataclass
from typing import Optional, Sequence

try:  # pragma: no cover - imported only when the app is run
    from textual.app import App, ComposeResult
    from textual.containers import Horizontal, Vertical
    from textual.widgets import Button, Footer, Header, Input, Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package (line-editor[tui]) to use "
        "line_editor.adapters.textual.app"
    ) from exc

from line_editor.config import EditorConfig
from line_editor.session import EditorSession

from .controller import EditorUIHooks, TextualEditorAdapter


@dataclass
class UIState:
    buffer_text: str = ""
    status_text: str = ""


class LineEditorApp(App[None]):
    """Read-only line view with Add/Remove/Save/Load buttons.

    The input field supplies the text, line number or file path for whichever
    button is pressed. Pressing Enter in it runs a typed command line instead.
    """

    CSS = """
	Screen {
		layout: vertical;
	}

	#buffer-view {
		height: 1fr;
		border: round $accent;
		padding: 1 1;
		overflow: auto;
	}

	#buttons {
		height: 3;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(
        self,
        *,
        config: Optional[EditorConfig] = None,
        initial_file: Optional[str] = None,
    ) -> None:
        super().__init__()
        self._state = UIState()
        self._config = config or EditorConfig.from_env()
        self._initial_file = initial_file
        self.adapter: TextualEditorAdapter | None = None
        self._buffer_widget: Static | None = None
        self._status_widget: Static | None = None
        self._input_widget: Input | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(id="buffer-area"):
            self._buffer_widget = Static("", id="buffer-view")
            yield self._buffer_widget
        self._input_widget = Input(
            placeholder="text, line number, file path or command", id="entry"
        )
        yield self._input_widget
        with Horizontal(id="buttons"):
            yield Button("Add Line", id="add")
            yield Button("Remove Line", id="remove")
            yield Button("Save", id="save")
            yield Button("Load", id="load")
        self._status_widget = Static("", id="status-line")
        yield self._status_widget
        yield Footer()

    def on_mount(self) -> None:
        hooks = EditorUIHooks(
            update_buffer=self._update_buffer,
            update_status=self._update_status,
        )
        self.adapter = TextualEditorAdapter(EditorSession(config=self._config), hooks)
        if self._initial_file:
            self.adapter.load(self._initial_file)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if not self.adapter or not self._input_widget:
            return
        value = self._input_widget.value
        button_id = event.button.id
        if button_id == "add":
            result = self.adapter.add_line(value)
        elif button_id == "remove":
            result = self.adapter.remove_line(value)
        elif button_id == "save":
            result = self.adapter.save(value.strip())
        elif button_id == "load":
            result = self.adapter.load(value.strip())
        else:
            return
        if result.ok:
            self._input_widget.value = ""

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if not self.adapter:
            return
        result = self.adapter.submit(event.value)
        if result.ok and self._input_widget:
            self._input_widget.value = ""

    def _update_buffer(self, text: str) -> None:
        self._state.buffer_text = text
        if self._buffer_widget:
            self._buffer_widget.update(text)

    def _update_status(self, status: str) -> None:
        self._state.status_text = status
        if self._status_widget:
            self._status_widget.update(status)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the line editor Textual app.")
    parser.add_argument(
        "--file",
        default=os.environ.get("LINE_EDITOR_FILE"),
        help="File to load on start",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    app = LineEditorApp(initial_file=args.file)
    app.run()


if __name__ == "__main__":  # pragma: no cover - manual run
    main()
