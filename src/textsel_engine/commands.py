"""Command objects a host delivers to ``EditorCore.handle``."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from textsel_engine.actions import CaseMode, Direction


@dataclass(frozen=True, slots=True)
class Move:
    direction: Direction

    @property
    def name(self) -> str:
        return f"move.{Direction(self.direction).value}"


@dataclass(frozen=True, slots=True)
class ToggleSelection:
    @property
    def name(self) -> str:
        return "selection.toggle"


@dataclass(frozen=True, slots=True)
class ExpandSelection:
    @property
    def name(self) -> str:
        return "selection.expand"


@dataclass(frozen=True, slots=True)
class ReduceSelection:
    @property
    def name(self) -> str:
        return "selection.reduce"


@dataclass(frozen=True, slots=True)
class Transform:
    mode: CaseMode

    @property
    def name(self) -> str:
        return f"transform.{CaseMode(self.mode).value}"


Command = Union[Move, ToggleSelection, ExpandSelection, ReduceSelection, Transform]

MOVE_LEFT = Move(Direction.LEFT)
MOVE_RIGHT = Move(Direction.RIGHT)
MOVE_UP = Move(Direction.UP)
MOVE_DOWN = Move(Direction.DOWN)
TOGGLE_SELECTION = ToggleSelection()
EXPAND_SELECTION = ExpandSelection()
REDUCE_SELECTION = ReduceSelection()


@dataclass(slots=True)
class CommandResult:
    """Outcome of ``EditorCore.handle``.

    ``applied`` is False when the command left content, cursor and selection
    untouched (``status == "noop"``).
    """

    applied: bool
    status: str = "ok"
    cursor: int = 0
    message: Optional[str] = None


__all__ = [
    "Command",
    "CommandResult",
    "Move",
    "ToggleSelection",
    "ExpandSelection",
    "ReduceSelection",
    "Transform",
    "MOVE_LEFT",
    "MOVE_RIGHT",
    "MOVE_UP",
    "MOVE_DOWN",
    "TOGGLE_SELECTION",
    "EXPAND_SELECTION",
    "REDUCE_SELECTION",
]
