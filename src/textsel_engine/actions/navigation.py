"""Cursor motions over UTF-8 byte offsets.

Every function takes ``(content, cursor)`` and returns the new cursor offset.
Nothing is mutated; a motion that cannot move returns ``cursor`` unchanged.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Dict

from textsel_engine.buffer import offsets


class Direction(str, Enum):
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"


def _line_start(data: bytes, cursor: int) -> int:
    return data.rfind(b"\n", 0, cursor) + 1


def _line_end(data: bytes, position: int) -> int:
    found = data.find(b"\n", position)
    return len(data) if found == -1 else found


def move_right(content: str, cursor: int) -> int:
    data = offsets.encode(content)
    if cursor >= len(data):
        return cursor
    return cursor + offsets.char_length_at(data, cursor)


def move_left(content: str, cursor: int) -> int:
    if cursor <= 0:
        return cursor
    data = offsets.encode(content)
    return offsets.previous_boundary(data, cursor)


def move_down(content: str, cursor: int) -> int:
    """Move to the next line, keeping the column when that line is long enough."""

    data = offsets.encode(content)
    line_start = _line_start(data, cursor)
    column = offsets.char_count(data, line_start, cursor)
    line_end = _line_end(data, cursor)
    if line_end >= len(data):
        return cursor

    next_start = line_end + 1
    next_end = _line_end(data, next_start)
    target = min(column, offsets.char_count(data, next_start, next_end))
    return offsets.offset_for_column(data, next_start, next_end, target)


def move_up(content: str, cursor: int) -> int:
    """Move to the previous line, keeping the column when that line is long enough."""

    data = offsets.encode(content)
    line_start = _line_start(data, cursor)
    if line_start == 0:
        return cursor
    column = offsets.char_count(data, line_start, cursor)

    prev_end = line_start - 1
    prev_start = _line_start(data, prev_end)
    target = min(column, offsets.char_count(data, prev_start, prev_end))
    return offsets.offset_for_column(data, prev_start, prev_end, target)


_MOTIONS: Dict[Direction, Callable[[str, int], int]] = {
    Direction.LEFT: move_left,
    Direction.RIGHT: move_right,
    Direction.UP: move_up,
    Direction.DOWN: move_down,
}


def move(direction: Direction, content: str, cursor: int) -> int:
    return _MOTIONS[Direction(direction)](content, cursor)


__all__ = [
    "Direction",
    "move",
    "move_left",
    "move_right",
    "move_up",
    "move_down",
]
