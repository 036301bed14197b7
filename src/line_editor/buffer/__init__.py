"""Line buffer model and its file storage helpers."""

from .document import LineBuffer
from .storage import read_lines, split_lines, write_lines

__all__ = [
    "LineBuffer",
    "read_lines",
    "split_lines",
    "write_lines",
]
