"""EditorCore: the single owner of buffer and selection state."""

from __future__ import annotations

import threading
from typing import Any, Callable, Dict, Optional, Type

from textsel_engine.actions import CaseMode, Direction, navigation
from textsel_engine.actions.transform import transform
from textsel_engine.buffer import (
    BufferMirror,
    SelectionState,
    TextModel,
    clamp_to_boundary,
    encode,
)
from textsel_engine.commands import (
    Command,
    CommandResult,
    ExpandSelection,
    Move,
    ReduceSelection,
    ToggleSelection,
    Transform,
)
from textsel_engine.config import EngineConfig
from textsel_engine.runtime import telemetry
from textsel_engine.selection import SelectionEngine


class EventBus:
    """Minimal publish/subscribe channel between the core and its host."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def unsubscribe(self, event: str, callback: Callable[[object], None]) -> None:
        callbacks = self._subscribers.get(event, [])
        if callback in callbacks:
            callbacks.remove(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in list(self._subscribers.get(event, [])):
            callback(payload)


class EditorCore:
    """Applies commands to a TextModel and SelectionEngine under one lock.

    Each ``handle`` call is a complete read-compute-write section; hosts that
    dispatch from several threads can share one instance.
    """

    def __init__(
        self,
        text: str = "",
        *,
        cursor: int = 0,
        config: Optional[EngineConfig] = None,
        bus: Optional[EventBus] = None,
    ) -> None:
        self.config = config or EngineConfig()
        self.model = TextModel.from_text(text, cursor=cursor)
        self.selection_engine = SelectionEngine(self.config)
        self.bus = bus or EventBus()
        self.logger = telemetry.get_logger("textsel_engine.core")
        self._lock = threading.RLock()
        self._handlers: Dict[Type[Any], Callable[[Any], Dict[str, object]]] = {
            Move: self._move,
            ToggleSelection: self._toggle,
            ExpandSelection: self._expand,
            ReduceSelection: self._reduce,
            Transform: self._transform,
        }

    @property
    def content(self) -> str:
        with self._lock:
            return self.model.get_content()

    @property
    def cursor(self) -> int:
        with self._lock:
            return self.model.get_cursor()

    @property
    def selection(self) -> SelectionState:
        with self._lock:
            return self.selection_engine.state.copy()

    def snapshot(self) -> BufferMirror:
        with self._lock:
            state = self.selection_engine.state
            return BufferMirror(
                text=self.model.get_content(),
                cursor=self.model.get_cursor(),
                selection=state.copy() if state.active else None,
            )

    def handle(self, command: Command) -> CommandResult:
        handler = self._handlers.get(type(command))
        if handler is None:
            raise TypeError(f"Unsupported command {command!r}")

        with self._lock:
            before_text = self.model.get_content()
            before_cursor = self.model.get_cursor()
            before_selection = self.selection_engine.state.copy()
            with telemetry.span(
                f"core::{command.name}",
                logger_name="textsel_engine.core",
                component="core",
                metadata={"cursor": before_cursor},
            ) as handle:
                payload = handler(command)
                handle.add_metadata("cursor_after", self.model.get_cursor())

            cursor = self.model.get_cursor()
            changed = (
                self.model.get_content() != before_text
                or cursor != before_cursor
                or self.selection_engine.state != before_selection
            )
            if not changed:
                self.logger.debug(f"noop {command.name} at {cursor}")
                return CommandResult(applied=False, status="noop", cursor=cursor)

            self.bus.emit(command.name, {"cursor": cursor, **payload})
            return CommandResult(applied=True, cursor=cursor, message=command.name)

    def load_text(self, text: str, *, cursor: int = 0) -> None:
        """Replace the buffer wholesale and drop any selection."""

        with self._lock:
            cursor = clamp_to_boundary(encode(text), cursor)
            self.model.set_content(text)
            self.model.set_cursor(cursor)
            self.selection_engine.clear(cursor)
            self.bus.emit("buffer.load", {"cursor": cursor})

    def sync_from_host(self, mirror: BufferMirror) -> None:
        """Adopt content and cursor edited by the host outside ``handle``.

        A selection survives only if the text itself is unchanged; otherwise
        its offsets no longer describe the content and it is dropped.
        """

        with self._lock:
            cursor = clamp_to_boundary(encode(mirror.text), mirror.cursor)
            dropped = False
            if mirror.text != self.model.get_content():
                dropped = self.selection_engine.is_active
                self.selection_engine.clear(cursor)
                self.model.set_content(mirror.text)
            self.model.set_cursor(cursor)
            self.bus.emit(
                "buffer.sync", {"cursor": cursor, "selection_dropped": dropped}
            )

    def _apply(self, edit: tuple[str, int]) -> None:
        text, cursor = edit
        self.model.set_content(text)
        self.model.set_cursor(cursor)

    def _move(self, command: Move) -> Dict[str, object]:
        direction = Direction(command.direction)
        cursor = navigation.move(
            direction, self.model.get_content(), self.model.get_cursor()
        )
        self.model.set_cursor(cursor)
        return {"direction": direction.value}

    def _toggle(self, command: ToggleSelection) -> Dict[str, object]:
        del command
        engine = self.selection_engine
        self._apply(engine.toggle(self.model.get_content(), self.model.get_cursor()))
        return {"active": engine.is_active, "selection": engine.state.text}

    def _expand(self, command: ExpandSelection) -> Dict[str, object]:
        del command
        engine = self.selection_engine
        self._apply(engine.expand(self.model.get_content(), self.model.get_cursor()))
        return {
            "range": (engine.state.start, engine.state.end),
            "selection": engine.state.text,
        }

    def _reduce(self, command: ReduceSelection) -> Dict[str, object]:
        del command
        engine = self.selection_engine
        self._apply(engine.reduce(self.model.get_content(), self.model.get_cursor()))
        return {
            "range": (engine.state.start, engine.state.end),
            "selection": engine.state.text,
        }

    def _transform(self, command: Transform) -> Dict[str, object]:
        mode = CaseMode(command.mode)
        content = self.model.get_content()
        cursor = self.model.get_cursor()
        dropped = self.selection_engine.is_active
        if dropped:
            # Case mapping can change byte lengths, so marker offsets would go stale.
            content, cursor = self.selection_engine.toggle(content, cursor)
        updated = transform(content, mode)
        self._apply((updated, clamp_to_boundary(encode(updated), cursor)))
        return {"mode": mode.value, "selection_dropped": dropped}


__all__ = ["EditorCore", "EventBus"]
