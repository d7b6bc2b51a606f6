"""Projection of editor lines onto a fixed-size viewport."""

from __future__ import annotations

PLACEHOLDER = "~"


def is_placeholder(lines: list[str], index: int) -> bool:
    """True when display row *index* has no text of its own."""
    return index >= len(lines) or not lines[index]


def render_rows(lines: list[str], rows: int) -> list[str]:
    """Return exactly *rows* display rows.

    Row ``i`` shows ``lines[i]``; rows past the end of the document, and
    empty lines, show the ``~`` placeholder. Lines beyond the viewport
    height are not drawn.
    """
    return [
        PLACEHOLDER if is_placeholder(lines, i) else lines[i]
        for i in range(max(0, rows))
    ]


def display_cursor(col: int, row: int, cols: int, rows: int) -> tuple[int, int]:
    """Clamp the logical cursor into the viewport for display only."""
    x = max(0, min(col, cols - 1))
    y = max(0, min(row, rows - 1))
    return x, y


def split_cursor_row(row: str, x: int, cols: int) -> tuple[str, str, str] | None:
    """Split a display row into ``(before, cursor_cell, after)``.

    The row is cropped to *cols*; a cursor past the end of the text sits on
    a padding space. Returns ``None`` when the viewport has no columns.
    """
    if cols <= 0:
        return None
    row = row[:cols]
    if x >= len(row):
        row = row.ljust(x + 1)
    return row[:x], row[x], row[x + 1 :]
