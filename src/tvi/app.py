"""Terminal application for the modal text editor."""

from __future__ import annotations

import argparse
import sys
from importlib.metadata import version

from textual.app import App, ComposeResult

from .widget import ModalEditor


class TviApp(App, inherit_bindings=False):
    """TUI app that wraps the ModalEditor widget.

    Textual puts the terminal in raw mode on the alternate screen and
    restores it when the app exits.
    """

    CSS = """
    Screen {
        layout: vertical;
    }
    """

    BINDINGS = []
    ENABLE_COMMAND_PALETTE = False

    def __init__(self, initial_content: str = "", **kwargs) -> None:
        super().__init__(**kwargs)
        self.initial_content = initial_content

    def compose(self) -> ComposeResult:
        yield ModalEditor(self.initial_content, id="editor")

    def on_mount(self) -> None:
        self.query_one("#editor").focus()

    def on_modal_editor_quit(self, event: ModalEditor.Quit) -> None:
        self.exit(return_code=0)


def main() -> None:
    parser = argparse.ArgumentParser(
        prog="tvi",
        description="Minimal modal text editor in Textual",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {version('tvi')}",
    )
    parser.parse_args()

    app = TviApp()
    app.run()
    sys.exit(app.return_code or 0)


if __name__ == "__main__":
    main()
