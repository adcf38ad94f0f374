"""Inline-marker selection: state machine plus marker rendering."""

from .engine import SelectionEngine
from .markers import render, strip

__all__ = ["SelectionEngine", "render", "strip"]
