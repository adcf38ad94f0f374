"""Selection bookkeeping shared by the selection engine and snapshots."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class SelectionState:
    """Current and original selection bounds.

    All offsets are UTF-8 byte offsets into the marker-free content. An empty
    ``text`` means no selection is active, in which case ``start == end``.
    """

    text: str = ""
    start: int = 0
    end: int = 0
    original_start: int = 0
    original_end: int = 0

    @property
    def active(self) -> bool:
        return bool(self.text)

    def set_range(self, text: str, start: int, end: int) -> None:
        self.text = text
        self.start = start
        self.end = end

    def mark_original(self) -> None:
        self.original_start = self.start
        self.original_end = self.end

    def clear(self, at: int) -> None:
        self.text = ""
        self.start = at
        self.end = at

    def copy(self) -> "SelectionState":
        return SelectionState(
            text=self.text,
            start=self.start,
            end=self.end,
            original_start=self.original_start,
            original_end=self.original_end,
        )
