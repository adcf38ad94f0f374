"""Buffer text, cursor offsets, and host synchronisation types."""

from .model import TextModel
from .offsets import (
    byte_length,
    char_count,
    char_length_at,
    clamp_to_boundary,
    encode,
    ensure_boundary,
    is_boundary,
    offset_for_column,
    previous_boundary,
    slice_text,
)
from .state import SelectionState
from .sync import BufferMirror, BufferValidationError

__all__ = [
    "TextModel",
    "SelectionState",
    "BufferMirror",
    "BufferValidationError",
    "byte_length",
    "char_count",
    "char_length_at",
    "clamp_to_boundary",
    "encode",
    "ensure_boundary",
    "is_boundary",
    "offset_for_column",
    "previous_boundary",
    "slice_text",
]
