"""Stateless editing verbs: cursor motions and case transforms."""

from .navigation import Direction, move, move_down, move_left, move_right, move_up
from .transform import CaseMode, capitalize, transform

__all__ = [
    "Direction",
    "move",
    "move_left",
    "move_right",
    "move_up",
    "move_down",
    "CaseMode",
    "capitalize",
    "transform",
]
