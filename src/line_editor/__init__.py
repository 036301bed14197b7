"""Line-oriented text buffer editor core."""

__all__ = [
    "adapters",
    "buffer",
    "config",
    "errors",
    "runtime",
    "session",
]

__version__ = "0.1.0"
