"""Textual host adapter. Importing ``.app`` requires the ``textual`` package."""

from .controller import (
    KEY_COMMANDS,
    MENU_KEY,
    TRANSFORM_LABELS,
    TextualSelectionAdapter,
    TextualUIHooks,
    normalize_key,
)

__all__ = [
    "KEY_COMMANDS",
    "MENU_KEY",
    "TRANSFORM_LABELS",
    "TextualSelectionAdapter",
    "TextualUIHooks",
    "normalize_key",
]
