from __future__ import annotations

from typing import List, Sequence

from textsel_engine import EditorCore
from textsel_engine.adapters.textual import (
    TRANSFORM_LABELS,
    TextualSelectionAdapter,
    TextualUIHooks,
)
from textsel_engine.buffer import BufferMirror


def make_adapter(text: str = "hello world", **hooks: object) -> TextualSelectionAdapter:
    core = EditorCore(text)
    hooks.setdefault("update_buffer", lambda mirror: None)
    return TextualSelectionAdapter(core, TextualUIHooks(**hooks))  # type: ignore[arg-type]


def test_adapter_pushes_initial_buffer() -> None:
    mirrors: List[BufferMirror] = []

    make_adapter("abc", update_buffer=mirrors.append)

    assert mirrors[0].text == "abc"
    assert mirrors[0].cursor == 0


def test_ctrl_keys_map_to_commands() -> None:
    statuses: List[str] = []
    mirrors: List[BufferMirror] = []
    adapter = make_adapter(
        "ab\ncd",
        update_buffer=mirrors.append,
        update_status=statuses.append,
    )

    adapter.handle_textual_key("ctrl+d")
    adapter.handle_textual_key("ctrl+s")

    assert adapter.core.cursor == 4
    assert statuses == ["move.right", "move.down"]
    assert mirrors[-1].cursor == 4

    adapter.handle_textual_key("ctrl+w")
    adapter.handle_textual_key("ctrl+a")
    assert adapter.core.cursor == 0


def test_selection_keys() -> None:
    adapter = make_adapter("hello world")
    for _ in range(7):
        adapter.handle_textual_key("ctrl+d")

    adapter.handle_textual_key("ctrl+space")
    assert adapter.core.content == "hello w<|o|>rld"

    adapter.handle_textual_key("ctrl+e")
    assert adapter.core.content == "hello <|world|>"

    adapter.handle_textual_key("ctrl+r")
    assert adapter.core.content == "hello w<|o|>rld"

    adapter.handle_textual_key("ctrl+@")
    assert adapter.core.content == "hello world"


def test_unbound_key_is_ignored() -> None:
    adapter = make_adapter()

    assert adapter.handle_textual_key("x") is None
    assert adapter.core.cursor == 0


def test_menu_key_opens_transform_choices() -> None:
    menus: List[Sequence[str]] = []
    adapter = make_adapter(show_menu=menus.append)

    assert adapter.handle_textual_key("ctrl+u") is None
    assert menus == [TRANSFORM_LABELS]

    result = adapter.choose_transform("Capitalized")

    assert result.applied is True
    assert adapter.core.content == "Hello World"


def test_adapter_relays_engine_events() -> None:
    events: List[tuple[str, object | None]] = []
    adapter = make_adapter(handle_event=lambda name, payload: events.append((name, payload)))

    adapter.handle_textual_key("ctrl+space")
    adapter.choose_transform("Uppercase")

    names = [name for name, _ in events]
    assert names == ["selection.toggle", "transform.upper"]


def test_host_sync_refreshes_buffer() -> None:
    mirrors: List[BufferMirror] = []
    adapter = make_adapter("abc", update_buffer=mirrors.append)

    adapter.core.sync_from_host(BufferMirror(text="abcd", cursor=4))

    assert mirrors[-1].text == "abcd"


def test_adapter_emits_log_lines() -> None:
    logs: List[str] = []
    adapter = make_adapter(log=logs.append)

    adapter.handle_textual_key("ctrl+d")

    assert any(line.startswith("key ->") for line in logs)
    assert any(line.startswith("result <-") for line in logs)
