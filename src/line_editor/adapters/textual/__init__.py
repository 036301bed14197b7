"""Textual host adapter; the app itself lives in ``.app`` and needs textual."""

from .controller import EditorUIHooks, TextualEditorAdapter

__all__ = ["EditorUIHooks", "TextualEditorAdapter"]
