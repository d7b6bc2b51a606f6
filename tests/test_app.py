"""Headless tests for TviApp and the ModalEditor widget."""

import asyncio
from importlib.metadata import version

import pytest

from tvi.app import TviApp, main
from tvi.state import EditorMode
from tvi.widget import ModalEditor


def _run(coro_fn, size=(20, 5), content=""):
    async def runner():
        app = TviApp(initial_content=content)
        async with app.run_test(size=size) as pilot:
            await coro_fn(app, pilot)
        return app

    return asyncio.run(runner())


class TestTyping:
    """Key presses reach the editor state through the widget."""

    def test_type_in_insert_mode(self):
        async def check(app, pilot):
            editor = app.query_one(ModalEditor)
            await pilot.press("i", "h", "i")
            assert editor.state.lines == ["hi"]
            assert editor.mode == EditorMode.INSERTION
            await pilot.press("enter", "x", "backspace", "backspace")
            assert editor.state.lines == ["hi"]
            assert (editor.state.cursor_col, editor.state.cursor_row) == (2, 0)
            await pilot.press("escape")
            assert editor.mode == EditorMode.NAVIGATION

        _run(check)

    def test_q_in_insert_mode_does_not_quit(self):
        async def check(app, pilot):
            editor = app.query_one(ModalEditor)
            await pilot.press("i", "q")
            await pilot.pause()
            assert editor.state.lines == ["q"]
            assert app.return_code is None

        _run(check)

    def test_unrecognized_keys_in_insert_mode(self):
        async def check(app, pilot):
            editor = app.query_one(ModalEditor)
            await pilot.press("i", "a", "space", "b")
            await pilot.press("tab", "f1", "ctrl+c")
            await pilot.pause()
            assert editor.state.lines == ["a b"]
            assert editor.mode == EditorMode.INSERTION
            assert app.return_code is None

        _run(check)

    def test_q_in_navigation_quits(self):
        async def check(app, pilot):
            await pilot.press("q")
            await pilot.pause()

        app = _run(check)
        assert app.return_code == 0


class TestRender:
    """What the widget draws for the current state."""

    def test_placeholder_rows(self):
        async def check(app, pilot):
            editor = app.query_one(ModalEditor)
            text = editor.render()
            assert text.plain.split("\n") == ["a", "~", "~"]

        _run(check, size=(10, 3), content="a\n")

    def test_rows_limited_to_viewport(self):
        async def check(app, pilot):
            editor = app.query_one(ModalEditor)
            text = editor.render()
            assert text.plain.split("\n") == ["one", "two"]

        _run(check, size=(10, 2), content="one\ntwo\nthree")

    def test_cursor_past_line_end_is_padded(self):
        async def check(app, pilot):
            editor = app.query_one(ModalEditor)
            await pilot.press("i", "a", "b")
            rows = editor.render().plain.split("\n")
            assert rows[0] == "ab "

        _run(check, size=(10, 3))

    def test_cursor_is_clamped_for_display_only(self):
        async def check(app, pilot):
            editor = app.query_one(ModalEditor)
            await pilot.press("i", *"abcdefgh")
            rows = editor.render().plain.split("\n")
            assert rows[0] == "abcd"
            assert editor.state.cursor_col == 8

        _run(check, size=(4, 2))


class TestMain:
    """Console entry point."""

    def test_version_comes_from_package_metadata(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.argv", ["tvi", "--version"])
        with pytest.raises(SystemExit) as exc:
            main()
        assert exc.value.code == 0
        assert capsys.readouterr().out.strip() == f"tvi {version('tvi')}"
