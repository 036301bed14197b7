"""Runtime services shared by the buffer and session layers."""

from . import telemetry

__all__ = ["telemetry"]
