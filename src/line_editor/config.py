"""Editor configuration loaded from ``LINE_EDITOR_*`` environment variables."""

from __future__ import annotations

import codecs
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .errors import ConfigError

ENV_PREFIX = "LINE_EDITOR_"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _parse_flag(key: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ConfigError(f"{key} must be a boolean flag, got {raw!r}", key=key)


@dataclass(frozen=True)
class EditorConfig:
    """File handling options for a session.

    ``encoding`` of ``None`` means the platform default text encoding.
    """

    encoding: Optional[str] = None
    atomic_save: bool = True

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "EditorConfig":
        env = os.environ if environ is None else environ

        encoding_key = f"{ENV_PREFIX}ENCODING"
        encoding = env.get(encoding_key) or None
        if encoding is not None:
            try:
                codecs.lookup(encoding)
            except LookupError as exc:
                raise ConfigError(
                    f"{encoding_key} names an unknown encoding {encoding!r}",
                    key=encoding_key,
                ) from exc

        atomic_key = f"{ENV_PREFIX}ATOMIC_SAVE"
        raw_atomic = env.get(atomic_key)
        atomic_save = True if raw_atomic is None else _parse_flag(atomic_key, raw_atomic)

        return cls(encoding=encoding, atomic_save=atomic_save)


__all__ = ["EditorConfig", "ENV_PREFIX"]
