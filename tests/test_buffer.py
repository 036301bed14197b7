from __future__ import annotations

import os

import pytest

from line_editor.buffer import LineBuffer


def make_buffer(*lines: str) -> LineBuffer:
    return LineBuffer.from_lines(lines)


def test_add_line_appends_in_call_order() -> None:
    buffer = LineBuffer()

    for text in ("first", "second", "", "third"):
        buffer.add_line(text)

    assert buffer.get_lines() == ("first", "second", "", "third")
    assert len(buffer) == 4


def test_remove_line_shifts_later_lines() -> None:
    buffer = make_buffer("a", "b", "c")

    removed = buffer.remove_line(1)

    assert removed is True
    assert buffer.get_lines() == ("a", "c")


@pytest.mark.parametrize("index", [-1, 3, 100])
def test_remove_line_out_of_range_is_noop(index: int) -> None:
    buffer = make_buffer("a", "b", "c")
    version = buffer.version

    removed = buffer.remove_line(index)

    assert removed is False
    assert buffer.get_lines() == ("a", "b", "c")
    assert buffer.version == version


def test_remove_line_on_empty_buffer() -> None:
    buffer = LineBuffer()

    assert buffer.remove_line(0) is False
    assert buffer.get_lines() == ()


def test_get_lines_is_a_snapshot() -> None:
    buffer = make_buffer("a")
    before = buffer.get_lines()

    buffer.add_line("b")
    buffer.remove_line(0)

    assert before == ("a",)
    assert buffer.get_lines() == ("b",)


def test_version_bumps_on_mutation() -> None:
    buffer = LineBuffer()

    buffer.add_line("x")
    buffer.remove_line(0)

    assert buffer.version == 2


def test_text_joins_lines_for_display() -> None:
    buffer = make_buffer("x", "y")

    assert buffer.text == "x\ny"
    assert LineBuffer().text == ""


def test_round_trip_through_file(tmp_path) -> None:
    path = tmp_path / "doc.txt"
    buffer = LineBuffer.from_lines(
        ["alpha", "", "  indented", "tab\there", "ünïcödé"], encoding="utf-8"
    )
    expected = buffer.get_lines()

    buffer.save_to_file(path)
    reloaded = LineBuffer(encoding="utf-8")
    reloaded.load_from_file(path)

    assert reloaded.get_lines() == expected


def test_empty_buffer_round_trip(tmp_path) -> None:
    path = tmp_path / "empty.txt"

    LineBuffer().save_to_file(path)
    assert path.exists()
    assert path.read_bytes() == b""

    buffer = make_buffer("stale")
    buffer.load_from_file(path)
    assert buffer.get_lines() == ()


def test_save_terminates_every_line(tmp_path) -> None:
    path = tmp_path / "out.txt"

    make_buffer("a", "b").save_to_file(path)

    with open(path, "r", newline="") as handle:
        raw = handle.read()
    assert raw.splitlines(keepends=True) == [
        "a" + os.linesep,
        "b" + os.linesep,
    ]


def test_save_overwrites_existing_content(tmp_path) -> None:
    path = tmp_path / "out.txt"
    path.write_text("old\nlonger content\nthat should vanish\n")

    make_buffer("new").save_to_file(path)

    assert path.read_text().splitlines() == ["new"]


def test_load_replaces_instead_of_merging(tmp_path) -> None:
    path = tmp_path / "in.txt"
    path.write_bytes(b"x\ny\nz\n")
    buffer = make_buffer("old1", "old2")

    buffer.load_from_file(path)

    assert buffer.get_lines() == ("x", "y", "z")


def test_load_missing_file_raises_and_keeps_buffer(tmp_path) -> None:
    buffer = make_buffer("keep")

    with pytest.raises(FileNotFoundError):
        buffer.load_from_file(tmp_path / "missing.txt")

    assert buffer.get_lines() == ("keep",)


def test_load_undecodable_file_raises_and_keeps_buffer(tmp_path) -> None:
    path = tmp_path / "binary.bin"
    path.write_bytes(b"\xff\xfe\xfa\x00bad")
    buffer = LineBuffer.from_lines(["keep"], encoding="utf-8")

    with pytest.raises(UnicodeDecodeError):
        buffer.load_from_file(path)

    assert buffer.get_lines() == ("keep",)


def test_save_into_missing_directory_raises(tmp_path) -> None:
    buffer = make_buffer("a")

    with pytest.raises(OSError):
        buffer.save_to_file(tmp_path / "nope" / "out.txt")
