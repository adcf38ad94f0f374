"""Executable Textual app that hosts the selection engine."""

from __future__ import annotations

import argparse
import os
from typing import Optional, Sequence

try:  # pragma: no cover - imported only when demo is run
    from rich.text import Text
    from textual import events
    from textual.app import App, ComposeResult
    from textual.widgets import Footer, Header, OptionList, Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use textsel_engine.adapters.textual.app"
    ) from exc

from textsel_engine.buffer import BufferMirror, encode
from textsel_engine.config import EngineConfig
from textsel_engine.core import EditorCore
from textsel_engine.runtime import telemetry

from .controller import (
    TRANSFORM_LABELS,
    TextualSelectionAdapter,
    TextualUIHooks,
)

SAMPLE_TEXT = "hello world\nselect a character, then expand it\ncafé au lait\n"


def render_with_cursor(mirror: BufferMirror) -> Text:
    """Return ``mirror.text`` with the cursor cell shown in reverse video."""

    index = len(encode(mirror.text)[: mirror.cursor].decode("utf-8"))
    text = Text(mirror.text[:index])
    under = mirror.text[index : index + 1]
    if under in {"", "\n"}:
        text.append(" ", style="reverse")
        text.append(under)
    else:
        text.append(under, style="reverse")
    text.append(mirror.text[index + 1 :])
    return text


class SelectionEngineApp(App[None]):
    """Minimal Textual UI embedding the engine."""

    CSS = """
	#buffer-view {
		height: 1fr;
		border: round $accent;
		padding: 0 1;
	}

	#transform-menu {
		height: auto;
		max-height: 5;
		border: round $warning;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(
        self, *, text: str = SAMPLE_TEXT, config: EngineConfig | None = None
    ) -> None:
        super().__init__()
        self.core = EditorCore(text, config=config)
        self.adapter: TextualSelectionAdapter | None = None
        self._buffer_widget: Static | None = None
        self._status_widget: Static | None = None
        self._menu: OptionList | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        self._buffer_widget = Static("", id="buffer-view")
        yield self._buffer_widget
        self._menu = OptionList(*TRANSFORM_LABELS, id="transform-menu")
        self._menu.display = False
        yield self._menu
        self._status_widget = Static("", id="status-line")
        yield self._status_widget
        yield Footer()

    def on_mount(self) -> None:
        hooks = TextualUIHooks(
            update_buffer=self._update_buffer,
            update_status=self._update_status,
            show_menu=self._show_menu,
        )
        self.adapter = TextualSelectionAdapter(self.core, hooks)

    def on_key(self, event: events.Key) -> None:
        if not self.adapter:
            return
        if self._menu is not None and self._menu.display:
            if event.key == "escape":
                self._hide_menu()
                event.stop()
            return
        if self.adapter.handle_textual_key(event.key) is not None:
            event.stop()

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        if self.adapter:
            self.adapter.choose_transform(TRANSFORM_LABELS[event.option_index])
        self._hide_menu()

    def _show_menu(self, labels: Sequence[str]) -> None:
        del labels
        if self._menu is not None:
            self._menu.display = True
            self._menu.highlighted = 0
            self._menu.focus()

    def _hide_menu(self) -> None:
        if self._menu is not None:
            self._menu.display = False
        self.set_focus(None)

    def _update_buffer(self, mirror: BufferMirror) -> None:
        if self._buffer_widget:
            self._buffer_widget.update(render_with_cursor(mirror))

    def _update_status(self, status: str) -> None:
        if self._status_widget:
            self._status_widget.update(Text(f"{status}  @{self.core.cursor}"))


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Run the selection engine Textual demo."
    )
    parser.add_argument(
        "--text",
        default=None,
        help="Initial buffer text (default: a short sample)",
    )
    parser.add_argument(
        "--log-preset",
        default=os.environ.get("TEXTSEL_ENGINE_LOG_PRESET"),
        choices=("development", "headless", "quiet"),
        help="Telemetry preset; console output would draw over the UI",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    telemetry.configure(preset=args.log_preset or "quiet")
    text = SAMPLE_TEXT if args.text is None else args.text
    app = SelectionEngineApp(text=text, config=EngineConfig.from_env())
    app.run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
