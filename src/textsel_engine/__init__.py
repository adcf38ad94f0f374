"""UI-agnostic text navigation and inline-marker selection engine."""

from .commands import (
    EXPAND_SELECTION,
    MOVE_DOWN,
    MOVE_LEFT,
    MOVE_RIGHT,
    MOVE_UP,
    REDUCE_SELECTION,
    TOGGLE_SELECTION,
    CommandResult,
    Move,
    Transform,
)
from .config import EngineConfig, EngineConfigError
from .core import EditorCore, EventBus

__all__ = [
    "EditorCore",
    "EventBus",
    "EngineConfig",
    "EngineConfigError",
    "CommandResult",
    "Move",
    "Transform",
    "MOVE_LEFT",
    "MOVE_RIGHT",
    "MOVE_UP",
    "MOVE_DOWN",
    "TOGGLE_SELECTION",
    "EXPAND_SELECTION",
    "REDUCE_SELECTION",
    "actions",
    "adapters",
    "buffer",
    "runtime",
    "selection",
]

__version__ = "0.1.0"
