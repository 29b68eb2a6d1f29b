"""Cursor, color, clearing and box-drawing output.

Every operation writes ANSI escape sequences to an output sink and returns
nothing. ``Screen`` binds the sink explicitly (use ``io.StringIO`` to capture
output); the module-level functions write to stdout.
"""

from __future__ import annotations

import sys
from typing import Callable, Optional, TextIO

from clic.core.color import sgr_bg, sgr_fg
from clic.core.constants import (
    CSI,
    NEXT_ROW_SAME_COLUMN,
    RESET,
    RESTORE_CURSOR,
    SAVE_CURSOR,
    Symbol,
)
from clic.core.terminal import ScreenSize, get_screen_size, stream_fd


def _count(name: str, value: int) -> int:
    if value < 0:
        raise ValueError(f"{name} must be >= 0, got {value}")
    return value


class Screen:
    """
    Drawing primitives bound to one output stream.

    Coordinates are 1-indexed, as in the terminal's own addressing.
    """

    def __init__(
        self,
        out: Optional[TextIO] = None,
        size_provider: Optional[Callable[[], ScreenSize]] = None,
    ) -> None:
        self._out = out
        self._size_provider = size_provider

    @property
    def out(self) -> TextIO:
        # Resolved lazily so a replaced sys.stdout is picked up
        return self._out if self._out is not None else sys.stdout

    def write(self, text: str) -> None:
        """Write text to the output and flush."""
        self.out.write(text)
        self.out.flush()

    # Color

    def reset_color(self) -> None:
        """Reset colors to the terminal default."""
        self.write(RESET)

    def set_fg(self, color: int) -> None:
        """Set the text color (Color member or 0-255 index)."""
        self.write(f"{CSI}{sgr_fg(color)}m")

    def set_bg(self, color: int) -> None:
        """Set the background color (Color member or 0-255 index)."""
        self.write(f"{CSI}{sgr_bg(color)}m")

    # Movement

    def move(self, line: int, column: int) -> None:
        """Move cursor to an absolute position."""
        self.write(f"{CSI}{line};{column}H")

    def move_up(self, lines: int) -> None:
        self.write(f"{CSI}{lines}A")

    def move_down(self, lines: int) -> None:
        self.write(f"{CSI}{lines}B")

    def move_right(self, columns: int) -> None:
        self.write(f"{CSI}{columns}C")

    def move_left(self, columns: int) -> None:
        self.write(f"{CSI}{columns}D")

    def move_down_begin(self, lines: int) -> None:
        """Move to the start of the line ``lines`` below."""
        self.write(f"{CSI}{lines}E")

    def move_up_begin(self, lines: int) -> None:
        """Move to the start of the line ``lines`` above."""
        self.write(f"{CSI}{lines}F")

    def move_to_column(self, column: int) -> None:
        self.write(f"{CSI}{column}G")

    def move_to_begin(self) -> None:
        """Move to the start of the current line."""
        self.write(f"{CSI}1G")

    def save_cursor(self) -> None:
        """Save the cursor position (single slot; a second save overwrites)."""
        self.write(SAVE_CURSOR)

    def restore_cursor(self) -> None:
        self.write(RESTORE_CURSOR)

    # Clearing

    def clear_screen(self) -> None:
        """Clear screen and move cursor to home."""
        self.write(f"{CSI}2J{CSI}1;1H")

    def clear_line(self) -> None:
        self.write(f"{CSI}2K")

    def break_line(self) -> None:
        self.write("\n")

    # Symbols and lines

    def print_symbol(self, symbol: str) -> None:
        self.write(str(symbol))

    def print_hline(self, width: int) -> None:
        """Draw a horizontal rule ``width`` cells long."""
        self.write(Symbol.HLINE.value * _count("width", width))

    def print_vline(self, height: int) -> None:
        """Draw a vertical rule downward from the cursor."""
        self.write((Symbol.VLINE.value + NEXT_ROW_SAME_COLUMN) * _count("height", height))

    def print_hblock_line(self, width: int) -> None:
        """Draw a horizontal run of blank cells (shows the background color)."""
        self.write(" " * _count("width", width))

    def print_vblock_line(self, height: int) -> None:
        """Draw a vertical run of blank cells downward from the cursor."""
        self.write((" " + NEXT_ROW_SAME_COLUMN) * _count("height", height))

    def print_box(self, width: int, height: int) -> None:
        """
        Draw a bordered box anchored at the cursor.

        ``width`` and ``height`` are the interior size, so the box covers
        ``width + 2`` columns and ``height + 2`` lines. Interior cells are
        skipped over, not overwritten.
        """
        self.write(box_text(width, height))

    def fix_draw(self) -> None:
        """Park the cursor on the last line and column of the terminal."""
        size = self._screen_size()
        self.move(size.height, size.width)

    def _screen_size(self) -> ScreenSize:
        if self._size_provider is not None:
            return self._size_provider()
        return get_screen_size(stream_fd(self.out))


def box_row_separator(width: int) -> str:
    """Sequence moving from the end of one box row to the start of the next."""
    return f"{CSI}1B{CSI}{width + 2}D"


def box_text(width: int, height: int) -> str:
    """Build the escape/glyph string drawn by ``Screen.print_box``."""
    _count("width", width)
    _count("height", height)

    horizontal = Symbol.HLINE.value * width
    top = Symbol.CORNER_TL.value + horizontal + Symbol.CORNER_TR.value
    bottom = Symbol.CORNER_BL.value + horizontal + Symbol.CORNER_BR.value
    # CSI 0 C would still move one column
    skip = f"{CSI}{width}C" if width else ""
    body = Symbol.VLINE.value + skip + Symbol.VLINE.value

    rows = [top] + [body] * height + [bottom]
    return box_row_separator(width).join(rows)


_default = Screen()

reset_color = _default.reset_color
set_fg = _default.set_fg
set_bg = _default.set_bg
move = _default.move
move_up = _default.move_up
move_down = _default.move_down
move_right = _default.move_right
move_left = _default.move_left
move_down_begin = _default.move_down_begin
move_up_begin = _default.move_up_begin
move_to_column = _default.move_to_column
move_to_begin = _default.move_to_begin
save_cursor = _default.save_cursor
restore_cursor = _default.restore_cursor
clear_screen = _default.clear_screen
clear_line = _default.clear_line
break_line = _default.break_line
print_symbol = _default.print_symbol
print_hline = _default.print_hline
print_vline = _default.print_vline
print_hblock_line = _default.print_hblock_line
print_vblock_line = _default.print_vblock_line
print_box = _default.print_box
fix_draw = _default.fix_draw
