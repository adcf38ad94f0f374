"""Boundary types exchanged between the engine and its host widget."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .state import SelectionState


@dataclass(slots=True)
class BufferMirror:
    """Host-friendly snapshot of what should be on screen.

    ``cursor`` is a UTF-8 byte offset into ``text``.
    """

    text: str
    cursor: int
    selection: Optional[SelectionState] = None


class BufferValidationError(RuntimeError):
    """Raised when an offset is out of range or splits a UTF-8 sequence."""

    def __init__(self, message: str, *, offset: int | None = None) -> None:
        super().__init__(message)
        self.offset = offset
