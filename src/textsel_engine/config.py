"""Engine configuration: marker text and word boundaries."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from textsel_engine.buffer.offsets import byte_length

ENV_PREFIX = "TEXTSEL_ENGINE_"

DEFAULT_OPEN_MARKER = "<|"
DEFAULT_CLOSE_MARKER = "|>"
DEFAULT_WORD_SEPARATORS: tuple[str, ...] = (" ",)

_ESCAPES = {"\\t": "\t", "\\n": "\n", "\\s": " "}


class EngineConfigError(ValueError):
    """Raised for configuration values the engine cannot work with."""


@dataclass(frozen=True, slots=True)
class EngineConfig:
    open_marker: str = DEFAULT_OPEN_MARKER
    close_marker: str = DEFAULT_CLOSE_MARKER
    word_separators: tuple[str, ...] = DEFAULT_WORD_SEPARATORS

    def __post_init__(self) -> None:
        if not self.open_marker or not self.close_marker:
            raise EngineConfigError("selection markers cannot be empty")
        if self.open_marker == self.close_marker:
            raise EngineConfigError("open and close markers must differ")
        separators = tuple(dict.fromkeys(s for s in self.word_separators if s))
        if not separators:
            raise EngineConfigError("at least one word separator is required")
        object.__setattr__(self, "word_separators", separators)

    @property
    def cursor_shift(self) -> int:
        """Bytes the displayed cursor moves when the open marker is inserted."""

        return byte_length(self.open_marker)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "EngineConfig":
        env = os.environ if environ is None else environ
        open_marker = env.get(f"{ENV_PREFIX}OPEN_MARKER", DEFAULT_OPEN_MARKER)
        close_marker = env.get(f"{ENV_PREFIX}CLOSE_MARKER", DEFAULT_CLOSE_MARKER)
        raw = env.get(f"{ENV_PREFIX}WORD_SEPARATORS")
        separators = (
            _parse_separators(raw) if raw is not None else DEFAULT_WORD_SEPARATORS
        )
        return cls(
            open_marker=open_marker,
            close_marker=close_marker,
            word_separators=separators,
        )


def _parse_separators(raw: str) -> tuple[str, ...]:
    for escape, char in _ESCAPES.items():
        raw = raw.replace(escape, char)
    return tuple(raw)


__all__ = [
    "EngineConfig",
    "EngineConfigError",
    "DEFAULT_OPEN_MARKER",
    "DEFAULT_CLOSE_MARKER",
    "DEFAULT_WORD_SEPARATORS",
]
