from __future__ import annotations

import threading
from typing import List, Tuple

import pytest

from textsel_engine import (
    EXPAND_SELECTION,
    MOVE_DOWN,
    MOVE_LEFT,
    MOVE_RIGHT,
    MOVE_UP,
    REDUCE_SELECTION,
    TOGGLE_SELECTION,
    EditorCore,
    EventBus,
    Transform,
)
from textsel_engine.actions import CaseMode
from textsel_engine.buffer import BufferMirror


def make_core(text: str = "", cursor: int = 0) -> Tuple[EditorCore, List[tuple]]:
    events: List[tuple] = []
    bus = EventBus()
    for name in (
        "move.left",
        "move.right",
        "move.up",
        "move.down",
        "selection.toggle",
        "selection.expand",
        "selection.reduce",
        "transform.upper",
        "transform.capitalized",
        "buffer.sync",
    ):
        bus.subscribe(name, lambda payload, name=name: events.append((name, payload)))
    return EditorCore(text, cursor=cursor, bus=bus), events


def test_move_right_through_multibyte_text() -> None:
    core, _ = make_core("café")

    cursors = [core.handle(MOVE_RIGHT).cursor for _ in range(5)]

    assert cursors == [1, 2, 3, 5, 5]
    assert core.cursor == 5


def test_edge_moves_are_reported_as_noop() -> None:
    core, events = make_core("ab")

    result = core.handle(MOVE_LEFT)

    assert result.applied is False
    assert result.status == "noop"
    assert events == []


def test_vertical_moves_emit_events() -> None:
    core, events = make_core("ab\ncd\n", cursor=1)

    assert core.handle(MOVE_DOWN).cursor == 4
    assert core.handle(MOVE_UP).cursor == 1
    assert [name for name, _ in events] == ["move.down", "move.up"]
    assert events[0][1] == {"cursor": 4, "direction": "down"}


def test_deselect_after_moving_past_close_marker() -> None:
    core, _ = make_core("abc")
    core.handle(TOGGLE_SELECTION)
    for _ in range(10):
        core.handle(MOVE_RIGHT)
    assert core.cursor == len("<|a|>bc")

    core.handle(TOGGLE_SELECTION)

    assert core.content == "abc"
    assert core.cursor == 3
    assert core.handle(MOVE_LEFT).cursor == 2


def test_deselect_after_moving_into_open_marker() -> None:
    core, _ = make_core("éx", cursor=2)
    core.handle(TOGGLE_SELECTION)
    assert core.handle(MOVE_LEFT).cursor == 3

    core.handle(TOGGLE_SELECTION)

    assert core.content == "éx"
    assert core.cursor == 0
    assert core.handle(MOVE_RIGHT).cursor == 2


def test_toggle_expand_reduce_cycle() -> None:
    core, events = make_core("hello world foo", cursor=7)

    core.handle(TOGGLE_SELECTION)
    assert core.content == "hello w<|o|>rld foo"
    assert core.cursor == 9

    core.handle(EXPAND_SELECTION)
    assert core.content == "hello <|world|> foo"
    assert core.selection.text == "world"

    assert core.handle(EXPAND_SELECTION).applied is False

    core.handle(REDUCE_SELECTION)
    assert core.content == "hello w<|o|>rld foo"
    assert core.cursor == 9

    core.handle(TOGGLE_SELECTION)
    assert core.content == "hello world foo"
    assert core.cursor == 7
    assert core.snapshot().selection is None

    names = [name for name, _ in events]
    assert names == [
        "selection.toggle",
        "selection.expand",
        "selection.reduce",
        "selection.toggle",
    ]
    assert events[0][1]["active"] is True
    assert events[-1][1]["active"] is False


def test_expand_without_selection_is_noop() -> None:
    core, _ = make_core("hello", cursor=1)

    assert core.handle(EXPAND_SELECTION).applied is False
    assert core.handle(REDUCE_SELECTION).applied is False
    assert core.content == "hello"


def test_transform_whole_buffer_and_clamp_cursor() -> None:
    core, events = make_core("a   b", cursor=5)

    result = core.handle(Transform(CaseMode.CAPITALIZED))

    assert core.content == "A B"
    assert result.cursor == 3
    assert events[-1] == (
        "transform.capitalized",
        {"cursor": 3, "mode": "capitalized", "selection_dropped": False},
    )


def test_transform_drops_active_selection() -> None:
    core, events = make_core("abc", cursor=1)
    core.handle(TOGGLE_SELECTION)

    core.handle(Transform(CaseMode.UPPER))

    assert core.content == "ABC"
    assert core.cursor == 1
    assert not core.selection.active
    assert events[-1][1]["selection_dropped"] is True


def test_unknown_command_raises_type_error() -> None:
    core, _ = make_core("abc")

    with pytest.raises(TypeError):
        core.handle("left")  # type: ignore[arg-type]


def test_sync_from_host_keeps_selection_for_same_text() -> None:
    core, events = make_core("abc", cursor=0)
    core.handle(TOGGLE_SELECTION)

    core.sync_from_host(BufferMirror(text=core.content, cursor=3))

    assert core.selection.active
    assert core.cursor == 3
    assert events[-1] == ("buffer.sync", {"cursor": 3, "selection_dropped": False})


def test_sync_from_host_drops_selection_on_edit_and_clamps_cursor() -> None:
    core, events = make_core("abc", cursor=0)
    core.handle(TOGGLE_SELECTION)

    core.sync_from_host(BufferMirror(text="café", cursor=4))

    assert core.content == "café"
    assert core.cursor == 3
    assert not core.selection.active
    assert events[-1][1]["selection_dropped"] is True


def test_load_text_resets_state() -> None:
    core, _ = make_core("abc", cursor=0)
    core.handle(TOGGLE_SELECTION)

    core.load_text("xyz", cursor=10)

    assert core.content == "xyz"
    assert core.cursor == 3
    assert not core.selection.active


def test_concurrent_toggles_stay_consistent() -> None:
    core, _ = make_core("hello", cursor=0)

    def worker() -> None:
        for _ in range(50):
            core.handle(TOGGLE_SELECTION)

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert core.content == "hello"
    assert core.cursor == 0
    assert not core.selection.active


def test_snapshot_mirrors_text_cursor_and_selection() -> None:
    core, _ = make_core("hello", cursor=1)
    assert core.snapshot() == BufferMirror(text="hello", cursor=1)

    core.handle(TOGGLE_SELECTION)

    assert core.snapshot() == BufferMirror(
        text="h<|e|>llo", cursor=3, selection=core.selection
    )
