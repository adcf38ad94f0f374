"""UTF-8 byte-offset helpers.

Content is held as ``str`` but every offset the engine exchanges with its host
is a byte offset into the UTF-8 encoding. These helpers take the encoded
``bytes`` so callers encode once per command.
"""

from __future__ import annotations

from .sync import BufferValidationError

ENCODING = "utf-8"


def encode(text: str) -> bytes:
    return text.encode(ENCODING)


def byte_length(text: str) -> int:
    return len(encode(text))


def _is_continuation(byte: int) -> bool:
    return byte & 0xC0 == 0x80


def is_boundary(data: bytes, offset: int) -> bool:
    if offset < 0 or offset > len(data):
        return False
    if offset == len(data):
        return True
    return not _is_continuation(data[offset])


def ensure_boundary(data: bytes, offset: int) -> int:
    """Return ``offset`` unchanged or raise ``BufferValidationError``."""

    if offset < 0 or offset > len(data):
        raise BufferValidationError(
            f"Offset {offset} outside content of {len(data)} bytes", offset=offset
        )
    if not is_boundary(data, offset):
        raise BufferValidationError(
            f"Offset {offset} splits a multi-byte character", offset=offset
        )
    return offset


def char_length_at(data: bytes, offset: int) -> int:
    """Byte length of the character whose lead byte sits at ``offset``."""

    lead = data[offset]
    if lead < 0x80:
        return 1
    if lead >> 5 == 0b110:
        return 2
    if lead >> 4 == 0b1110:
        return 3
    if lead >> 3 == 0b11110:
        return 4
    raise BufferValidationError(
        f"Offset {offset} is not the start of a character", offset=offset
    )


def previous_boundary(data: bytes, offset: int) -> int:
    """Start offset of the character ending at ``offset``."""

    position = offset - 1
    while position > 0 and _is_continuation(data[position]):
        position -= 1
    return max(position, 0)


def clamp_to_boundary(data: bytes, offset: int) -> int:
    """Largest character boundary that is ``<= offset`` within ``data``."""

    offset = max(0, min(offset, len(data)))
    while offset > 0 and not is_boundary(data, offset):
        offset -= 1
    return offset


def slice_text(data: bytes, start: int, end: int) -> str:
    """Decode ``data[start:end]``; both offsets must be character boundaries."""

    ensure_boundary(data, start)
    ensure_boundary(data, end)
    if start > end:
        raise BufferValidationError(
            f"Slice start {start} is past its end {end}", offset=start
        )
    return data[start:end].decode(ENCODING)


def char_count(data: bytes, start: int, end: int) -> int:
    """Number of characters in the byte range ``[start, end)``."""

    return sum(1 for byte in data[start:end] if not _is_continuation(byte))


def offset_for_column(data: bytes, line_start: int, line_end: int, column: int) -> int:
    """Byte offset of ``column`` characters past ``line_start``.

    Never walks past ``line_end``; a column equal to the line length lands
    exactly on ``line_end``.
    """

    offset = line_start
    for _ in range(column):
        if offset >= line_end:
            break
        offset += char_length_at(data, offset)
    return min(offset, line_end)


__all__ = [
    "ENCODING",
    "encode",
    "byte_length",
    "is_boundary",
    "ensure_boundary",
    "char_length_at",
    "previous_boundary",
    "clamp_to_boundary",
    "slice_text",
    "char_count",
    "offset_for_column",
]
