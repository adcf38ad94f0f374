"""Render and strip the inline markers that display a selection."""

from __future__ import annotations

from textsel_engine.buffer import SelectionState, offsets
from textsel_engine.config import EngineConfig


def render(content: str, start: int, end: int, config: EngineConfig) -> str:
    """Wrap the byte range ``[start, end)`` of marker-free ``content`` in markers."""

    data = offsets.encode(content)
    return "".join(
        (
            offsets.slice_text(data, 0, start),
            config.open_marker,
            offsets.slice_text(data, start, end),
            config.close_marker,
            offsets.slice_text(data, end, len(data)),
        )
    )


def strip(content: str, state: SelectionState, config: EngineConfig) -> str:
    """Remove the marked span for ``state`` from displayed ``content``.

    The markers are expected exactly where ``render`` put them: the open
    marker at ``state.start`` followed by the selected text and the close
    marker. If the content no longer has that shape the first textual
    occurrence of the marked span is removed instead. Content without a
    marked span comes back unchanged.
    """

    if not state.active:
        return content

    data = offsets.encode(content)
    opening = offsets.encode(config.open_marker)
    closing = offsets.encode(config.close_marker)
    selected = offsets.encode(state.text)

    text_start = state.start + len(opening)
    text_end = text_start + len(selected)
    close_end = text_end + len(closing)
    if (
        data[state.start : text_start] == opening
        and data[text_start:text_end] == selected
        and data[text_end:close_end] == closing
    ):
        return (data[: state.start] + selected + data[close_end:]).decode(
            offsets.ENCODING
        )

    marked = f"{config.open_marker}{state.text}{config.close_marker}"
    return content.replace(marked, state.text, 1)


__all__ = ["render", "strip"]
