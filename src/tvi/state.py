"""Editor state for the modal text editor.

Owns the document, the cursor and the current mode, and applies decoded
key presses to them. Nothing here touches the terminal.
"""

from __future__ import annotations

from enum import Enum, auto

from tvi.keys import KeyAction, KeyPress


class EditorMode(Enum):
    NAVIGATION = auto()
    INSERTION = auto()


class Outcome(Enum):
    """Result of dispatching a key press."""

    CONTINUE = auto()
    TERMINATE = auto()


# Navigation-mode aliases for the arrow keys.
_NAV_ALIASES = {
    "h": KeyAction.LEFT,
    "j": KeyAction.DOWN,
    "k": KeyAction.UP,
    "l": KeyAction.RIGHT,
}


class EditorState:
    """Document + cursor + mode.

    Invariants kept by every operation:
      - ``lines`` is never empty
      - ``0 <= cursor_row < len(lines)``
      - ``0 <= cursor_col <= len(lines[cursor_row])``
    """

    INSERT_KEY = "i"
    QUIT_KEY = "q"

    def __init__(self, initial_content: str = "") -> None:
        self.lines: list[str] = initial_content.split("\n") if initial_content else [""]
        self.cursor_row: int = 0
        self.cursor_col: int = 0
        self.mode: EditorMode = EditorMode.NAVIGATION

    # -- Public API --------------------------------------------------------

    @property
    def line_count(self) -> int:
        return len(self.lines)

    @property
    def current_line(self) -> str:
        return self.lines[self.cursor_row]

    def get_content(self) -> str:
        return "\n".join(self.lines)

    # -- Dispatch ----------------------------------------------------------

    def handle(self, press: KeyPress | None) -> Outcome:
        """Apply *press* in the current mode. Unknown keys are no-ops."""
        if press is None:
            return Outcome.CONTINUE
        if self.mode == EditorMode.NAVIGATION:
            return self._handle_navigation(press)
        self._handle_insertion(press)
        return Outcome.CONTINUE

    def _handle_navigation(self, press: KeyPress) -> Outcome:
        action = press.action
        if action == KeyAction.CHAR:
            if press.char == self.QUIT_KEY:
                return Outcome.TERMINATE
            if press.char == self.INSERT_KEY:
                self.enter_insert()
                return Outcome.CONTINUE
            action = _NAV_ALIASES.get(press.char, action)
        self._move(action)
        return Outcome.CONTINUE

    def _handle_insertion(self, press: KeyPress) -> None:
        action = press.action
        if action == KeyAction.ESCAPE:
            self.enter_navigation()
        elif action == KeyAction.CHAR:
            self.insert_char(press.char)
        elif action == KeyAction.BACKSPACE:
            self.backspace()
        elif action == KeyAction.ENTER:
            self.insert_newline()
        else:
            self._move(action)

    def _move(self, action: KeyAction) -> None:
        if action == KeyAction.LEFT:
            self.move_left()
        elif action == KeyAction.RIGHT:
            self.move_right()
        elif action == KeyAction.UP:
            self.move_up()
        elif action == KeyAction.DOWN:
            self.move_down()

    # -- Mode --------------------------------------------------------------

    def enter_insert(self) -> None:
        self.mode = EditorMode.INSERTION

    def enter_navigation(self) -> None:
        self.mode = EditorMode.NAVIGATION

    # -- Editing -----------------------------------------------------------

    def insert_char(self, char: str) -> None:
        if not 0 <= self.cursor_row < len(self.lines):
            return
        line = self.lines[self.cursor_row]
        self.lines[self.cursor_row] = line[: self.cursor_col] + char + line[self.cursor_col :]
        self.cursor_col += 1

    def backspace(self) -> None:
        """Delete before the cursor, joining onto the previous line at column 0."""
        if not 0 <= self.cursor_row < len(self.lines):
            return
        if self.cursor_col > 0:
            line = self.lines[self.cursor_row]
            self.lines[self.cursor_row] = line[: self.cursor_col - 1] + line[self.cursor_col :]
            self.cursor_col -= 1
        elif self.cursor_row > 0:
            current = self.lines.pop(self.cursor_row)
            self.cursor_row -= 1
            prev = self.lines[self.cursor_row]
            self.cursor_col = len(prev)
            self.lines[self.cursor_row] = prev + current

    def insert_newline(self) -> None:
        if not 0 <= self.cursor_row < len(self.lines):
            return
        line = self.lines[self.cursor_row]
        self.lines[self.cursor_row] = line[: self.cursor_col]
        self.cursor_row += 1
        self.lines.insert(self.cursor_row, line[self.cursor_col :])
        self.cursor_col = 0

    # -- Movement ----------------------------------------------------------

    def move_left(self) -> None:
        if self.cursor_col > 0:
            self.cursor_col -= 1
        elif self.cursor_row > 0:
            self.cursor_row -= 1
            self.cursor_col = len(self.lines[self.cursor_row])

    def move_right(self) -> None:
        if self.cursor_col < len(self.lines[self.cursor_row]):
            self.cursor_col += 1
        elif self.cursor_row + 1 < len(self.lines):
            self.cursor_row += 1
            self.cursor_col = 0

    def move_up(self) -> None:
        if self.cursor_row > 0:
            self.cursor_row -= 1
            self.cursor_col = min(self.cursor_col, len(self.lines[self.cursor_row]))

    def move_down(self) -> None:
        if self.cursor_row + 1 < len(self.lines):
            self.cursor_row += 1
            self.cursor_col = min(self.cursor_col, len(self.lines[self.cursor_row]))
