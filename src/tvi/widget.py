"""Modal text editor widget."""

from __future__ import annotations

from dataclasses import dataclass

from rich.text import Text
from textual import events
from textual.message import Message
from textual.widget import Widget

from tvi.keys import decode_event
from tvi.render import display_cursor, is_placeholder, render_rows, split_cursor_row
from tvi.state import EditorMode, EditorState, Outcome


class ModalEditor(Widget, can_focus=True):
    """A two-mode (navigation / insertion) text editor Textual widget.

    Supported keys:
      NAVIGATION: i  q  h j k l  arrows
      INSERTION:  typing / Backspace / Enter / arrows / Escape
    """

    DEFAULT_CSS = """
    ModalEditor {
        height: 1fr;
        width: 1fr;
    }
    """

    # Redraw cadence while idle, in seconds.
    POLL_INTERVAL = 0.1

    _CURSOR_STYLE = "reverse"
    _PLACEHOLDER_STYLE = "dim blue"

    # -- Messages ----------------------------------------------------------

    @dataclass
    class Quit(Message):
        pass

    # -- Init --------------------------------------------------------------

    def __init__(
        self,
        initial_content: str = "",
        *,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        super().__init__(name=name, id=id, classes=classes)
        self.state = EditorState(initial_content)

    def on_mount(self) -> None:
        self.set_interval(self.POLL_INTERVAL, self.refresh)

    # =====================================================================
    # Rendering
    # =====================================================================

    def render(self) -> Text:
        width = self.content_region.width
        height = self.content_region.height
        state = self.state
        cx, cy = display_cursor(state.cursor_col, state.cursor_row, width, height)

        result = Text(no_wrap=True, overflow="crop")
        lines = state.lines
        for i, row in enumerate(render_rows(lines, height)):
            if i:
                result.append("\n")
            row_style = self._PLACEHOLDER_STYLE if is_placeholder(lines, i) else ""
            parts = split_cursor_row(row, cx, width) if i == cy else None
            if parts is None:
                result.append(row[:width], style=row_style)
                continue
            before, cell, after = parts
            result.append(before, style=row_style)
            result.append(cell, style=f"{self._CURSOR_STYLE} {row_style}".strip())
            result.append(after, style=row_style)
        return result

    # =====================================================================
    # Key handling
    # =====================================================================

    def on_key(self, event: events.Key) -> None:
        event.prevent_default()
        event.stop()

        mode = self.state.mode
        outcome = self.state.handle(decode_event(event))
        if self.state.mode != mode:
            self.log.debug(f"mode {mode.name} -> {self.state.mode.name}")
        if outcome == Outcome.TERMINATE:
            self.log.debug("quit requested")
            self.post_message(self.Quit())
        self.refresh()

    @property
    def mode(self) -> EditorMode:
        return self.state.mode
