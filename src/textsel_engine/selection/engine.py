"""Selection state machine: toggle, expand to words, reduce to the origin."""

from __future__ import annotations

from typing import Optional, Tuple

from textsel_engine.buffer import SelectionState, offsets
from textsel_engine.config import EngineConfig
from textsel_engine.runtime import telemetry

from . import markers

Edit = Tuple[str, int]


class SelectionEngine:
    """Tracks one selection over marker-free content and renders it inline.

    Every operation takes the displayed content (markers included) and the
    displayed cursor, and returns the new displayed content and cursor.
    Offsets kept in ``state`` always refer to the marker-free text.
    """

    def __init__(self, config: Optional[EngineConfig] = None) -> None:
        self.config = config or EngineConfig()
        self.state = SelectionState()
        self.logger = telemetry.get_logger("textsel_engine.selection")
        self._separators = tuple(
            offsets.encode(sep) for sep in self.config.word_separators
        )

    @property
    def is_active(self) -> bool:
        return self.state.active

    def update_selection(self, content: str, start: int, end: int) -> None:
        if start == end:
            text = ""
        else:
            text = offsets.slice_text(offsets.encode(content), start, end)
        self.state.set_range(text, start, end)

    def canonical(self, content: str) -> str:
        """Return ``content`` with the active selection's markers removed."""

        return markers.strip(content, self.state, self.config)

    def clear(self, cursor: int = 0) -> None:
        """Forget the selection without touching any content."""

        self.state.clear(cursor)

    def toggle(self, content: str, cursor: int) -> Edit:
        if self.state.active:
            return self._deselect(content, cursor)
        return self._select(content, cursor)

    def expand(self, content: str, cursor: int) -> Edit:
        """Grow the selection out to the surrounding word separators."""

        if not self.state.active:
            return content, cursor
        text = self.canonical(content)
        data = offsets.encode(text)
        start = self._word_start(data, self.state.start)
        end = self._word_end(data, self.state.end)
        self.update_selection(text, start, end)
        telemetry.record_event(
            "selection.expand",
            level="debug",
            data={"start": start, "end": end},
            logger_name="textsel_engine.selection",
        )
        return self._render(text), start + self.config.cursor_shift

    def reduce(self, content: str, cursor: int) -> Edit:
        """Jump straight back to the selection made by the last toggle."""

        if not self.state.active:
            return content, cursor
        text = self.canonical(content)
        start, end = self.state.original_start, self.state.original_end
        self.update_selection(text, start, end)
        telemetry.record_event(
            "selection.reduce",
            level="debug",
            data={"start": start, "end": end},
            logger_name="textsel_engine.selection",
        )
        return self._render(text), start + self.config.cursor_shift

    def _select(self, content: str, cursor: int) -> Edit:
        data = offsets.encode(content)
        if cursor >= len(data):
            return content, cursor
        offsets.ensure_boundary(data, cursor)
        end = cursor + offsets.char_length_at(data, cursor)
        self.update_selection(content, cursor, end)
        self.state.mark_original()
        telemetry.record_event(
            "selection.select",
            level="debug",
            data={"start": cursor, "end": end},
            logger_name="textsel_engine.selection",
        )
        return self._render(content), cursor + self.config.cursor_shift

    def _deselect(self, content: str, cursor: int) -> Edit:
        text = self.canonical(content)
        restored = cursor - self.config.cursor_shift
        close_end = (
            self.state.end
            + self.config.cursor_shift
            + offsets.byte_length(self.config.close_marker)
        )
        if cursor >= close_end:
            restored -= offsets.byte_length(self.config.close_marker)
        # Moves may leave the cursor inside a marker or past the close marker.
        restored = offsets.clamp_to_boundary(offsets.encode(text), restored)
        self.state.clear(restored)
        telemetry.record_event(
            "selection.clear",
            level="debug",
            data={"cursor": restored},
            logger_name="textsel_engine.selection",
        )
        return text, restored

    def _render(self, text: str) -> str:
        return markers.render(text, self.state.start, self.state.end, self.config)

    def _word_start(self, data: bytes, start: int) -> int:
        best = 0
        for sep in self._separators:
            found = data.rfind(sep, 0, start)
            if found != -1:
                best = max(best, found + len(sep))
        return best

    def _word_end(self, data: bytes, end: int) -> int:
        best = len(data)
        for sep in self._separators:
            found = data.find(sep, end)
            if found != -1:
                best = min(best, found)
        return best


__all__ = ["SelectionEngine"]
