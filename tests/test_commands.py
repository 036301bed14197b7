from __future__ import annotations

import pytest

from line_editor.buffer import LineBuffer
from line_editor.session import (
    INDEX_OUT_OF_RANGE,
    INVALID_INPUT,
    IO_ERROR,
    OK,
    UNKNOWN_COMMAND,
    EditorSession,
    submit_command,
)


def make_session(*lines: str) -> EditorSession:
    return EditorSession(LineBuffer.from_lines(lines, encoding="utf-8"))


def test_add_keeps_inner_and_trailing_spaces() -> None:
    session = make_session()

    result = submit_command(session, "add   two  words ")

    assert result.ok
    assert result.lines == ("two  words ",)


def test_file_path_argument_is_stripped(tmp_path) -> None:
    path = tmp_path / "notes.txt"
    session = make_session("x")

    result = submit_command(session, f"  w   {path}   ")

    assert result.ok
    assert result.path == str(path)
    assert path.exists()


@pytest.mark.parametrize("command", ["add", "a", "ADD"])
def test_add_aliases(command: str) -> None:
    session = make_session()

    submit_command(session, f"{command} hello")

    assert session.lines == ("hello",)


def test_add_without_text_is_invalid() -> None:
    session = make_session()

    result = submit_command(session, "add")

    assert result.status == INVALID_INPUT
    assert session.lines == ()


@pytest.mark.parametrize("command", ["remove", "rm", "d"])
def test_remove_aliases(command: str) -> None:
    session = make_session("a", "b", "c")

    result = submit_command(session, f"{command} 0")

    assert result.lines == ("b", "c")


def test_remove_out_of_range() -> None:
    session = make_session("a")

    result = submit_command(session, "rm 5")

    assert result.status == INDEX_OUT_OF_RANGE


def test_write_then_edit(tmp_path) -> None:
    path = tmp_path / "notes.txt"
    session = make_session("x", "y")

    written = submit_command(session, f"w {path}")
    submit_command(session, "add z")
    edited = submit_command(session, f"edit {path}")

    assert written.ok
    assert edited.ok
    assert edited.lines == ("x", "y")


@pytest.mark.parametrize("command", ["w", "save", "e", "load"])
def test_file_commands_need_a_path(command: str) -> None:
    session = make_session("a")

    result = submit_command(session, command)

    assert result.status == INVALID_INPUT
    assert "missing file path" in (result.message or "")


def test_edit_missing_file(tmp_path) -> None:
    session = make_session("a")

    result = submit_command(session, f"e {tmp_path / 'nope.txt'}")

    assert result.status == IO_ERROR
    assert session.lines == ("a",)


def test_print_returns_snapshot() -> None:
    session = make_session("a", "b")

    result = submit_command(session, "print")

    assert result.status == OK
    assert result.lines == ("a", "b")


@pytest.mark.parametrize("line", ["", "   ", None])
def test_empty_command(line) -> None:
    result = submit_command(make_session(), line)

    assert result.status == INVALID_INPUT


def test_unknown_command() -> None:
    result = submit_command(make_session(), "frobnicate now")

    assert result.status == UNKNOWN_COMMAND
    assert result.message == "frobnicate"
