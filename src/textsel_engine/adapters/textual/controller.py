"""Host-side glue translating Textual key tokens into engine commands."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Dict, Iterable, Mapping, Optional, Sequence

from textsel_engine.actions import CaseMode
from textsel_engine.buffer import BufferMirror
from textsel_engine.commands import (
    EXPAND_SELECTION,
    MOVE_DOWN,
    MOVE_LEFT,
    MOVE_RIGHT,
    MOVE_UP,
    REDUCE_SELECTION,
    TOGGLE_SELECTION,
    Command,
    CommandResult,
    Transform,
)
from textsel_engine.core import EditorCore

MENU_KEY = "ctrl+u"

KEY_COMMANDS: Mapping[str, Command] = MappingProxyType(
    {
        "ctrl+d": MOVE_RIGHT,
        "ctrl+a": MOVE_LEFT,
        "ctrl+s": MOVE_DOWN,
        "ctrl+w": MOVE_UP,
        "ctrl+space": TOGGLE_SELECTION,
        "ctrl+@": TOGGLE_SELECTION,
        "ctrl+at": TOGGLE_SELECTION,
        "ctrl+e": EXPAND_SELECTION,
        "ctrl+r": REDUCE_SELECTION,
    }
)

TRANSFORM_LABELS: tuple[str, ...] = tuple(mode.label for mode in CaseMode)

HOST_EVENTS: tuple[str, ...] = ("buffer.load", "buffer.sync")


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


def normalize_key(key: str) -> str:
    return key.strip().lower()


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks the adapter uses to update Textual widgets."""

    update_buffer: Callable[[BufferMirror], None]
    update_status: Callable[[str], None] = _noop
    show_menu: Callable[[Sequence[str]], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    log: Callable[[str], None] = _noop


class TextualSelectionAdapter:
    """Dispatches host keys to an ``EditorCore`` and relays its events."""

    def __init__(
        self,
        core: EditorCore,
        hooks: TextualUIHooks,
        *,
        key_commands: Optional[Mapping[str, Command]] = None,
    ) -> None:
        self.core = core
        self.hooks = hooks
        self._keys: Dict[str, Command] = {
            normalize_key(key): command
            for key, command in (key_commands or KEY_COMMANDS).items()
        }
        self._subscribe_events(self._event_names())
        self._refresh_buffer()

    def handle_textual_key(self, key: str) -> Optional[CommandResult]:
        """Run the command bound to ``key``; unbound keys return ``None``."""

        token = normalize_key(key)
        self._log("key ->", key=token)
        if token == MENU_KEY:
            self.hooks.show_menu(TRANSFORM_LABELS)
            self.hooks.update_status("transform_menu")
            return None

        command = self._keys.get(token)
        if command is None:
            return None
        return self._dispatch(command)

    def choose_transform(self, choice: str | CaseMode) -> CommandResult:
        """Apply the transformation picked from the host's choice menu."""

        mode = choice if isinstance(choice, CaseMode) else CaseMode.from_label(choice)
        return self._dispatch(Transform(mode))

    def _dispatch(self, command: Command) -> CommandResult:
        result = self.core.handle(command)
        self.hooks.update_status(result.message or result.status)
        self._refresh_buffer()
        self._log(
            "result <-",
            applied=result.applied,
            status=result.status,
            cursor=result.cursor,
        )
        return result

    def _event_names(self) -> Iterable[str]:
        names = [command.name for command in self._keys.values()]
        names.extend(Transform(mode).name for mode in CaseMode)
        names.extend(HOST_EVENTS)
        return dict.fromkeys(names)

    def _subscribe_events(self, names: Iterable[str]) -> None:
        for event in names:
            self.core.bus.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )

    def _handle_event(self, name: str, payload: object | None) -> None:
        self._log("event ->", event=name, payload=payload)
        self.hooks.handle_event(name, payload)
        if name in HOST_EVENTS:
            self._refresh_buffer()

    def _refresh_buffer(self) -> None:
        self.hooks.update_buffer(self.core.snapshot())

    def _log(self, prefix: str, **fields: object) -> None:
        snapshot = self.core.snapshot()
        parts = [prefix, f"cursor={snapshot.cursor!r}"]
        if snapshot.selection is not None:
            parts.append(f"selection={snapshot.selection.text!r}")
        parts.extend(f"{key}={value!r}" for key, value in fields.items())
        self.hooks.log(" ".join(parts))


__all__ = [
    "KEY_COMMANDS",
    "MENU_KEY",
    "TRANSFORM_LABELS",
    "TextualSelectionAdapter",
    "TextualUIHooks",
    "normalize_key",
]
