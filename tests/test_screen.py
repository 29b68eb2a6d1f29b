"""Tests for escape-sequence output (no terminal needed)."""

import io
import os
import select

import pytest

from clic.core.color import Color, sgr_bg, sgr_fg
from clic.core.constants import Symbol
from clic.core.errors import NoControllingTerminal
from clic.core.terminal import ScreenSize
from clic.render import screen as screen_module
from clic.render.screen import Screen, box_row_separator, box_text
from conftest import set_window_size

H = Symbol.HLINE.value
V = Symbol.VLINE.value


def _drain(fd: int) -> bytes:
    data = b""
    while select.select([fd], [], [], 0.1)[0]:
        chunk = os.read(fd, 1024)
        if not chunk:
            break
        data += chunk
    return data


@pytest.fixture
def out() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def screen(out: io.StringIO) -> Screen:
    return Screen(out, size_provider=lambda: ScreenSize(80, 24))


class TestColors:
    """Color sequences."""

    def test_reset(self, screen, out) -> None:
        screen.reset_color()
        assert out.getvalue() == "\x1b[m"

    def test_foreground(self, screen, out) -> None:
        screen.set_fg(Color.ORANGE)
        assert out.getvalue() == "\x1b[38;5;208m"

    def test_background(self, screen, out) -> None:
        screen.set_bg(Color.LIGHTGRAY)
        assert out.getvalue() == "\x1b[48;5;248m"

    def test_raw_index(self, screen, out) -> None:
        screen.set_fg(0)
        screen.set_bg(255)
        assert out.getvalue() == "\x1b[38;5;0m\x1b[48;5;255m"

    @pytest.mark.parametrize("value", [-1, 256])
    def test_out_of_range(self, screen, out, value: int) -> None:
        with pytest.raises(ValueError):
            screen.set_fg(value)
        assert out.getvalue() == ""

    def test_non_integer(self) -> None:
        with pytest.raises(TypeError):
            sgr_bg("red")  # type: ignore[arg-type]

    def test_palette_values(self) -> None:
        assert Color.BLACK == 0
        assert Color.GRAY == 8
        assert Color.RED == 9
        assert Color.GREEN == 10
        assert Color.YELLOW == 11
        assert Color.MAGENTA == 13
        assert Color.CYAN == 14
        assert Color.WHITE == 15
        assert Color.BLUE == 39
        assert Color.ORANGE == 208
        assert Color.LIGHTGRAY == 248
        assert sgr_fg(Color.BLUE) == "38;5;39"

    def test_from_name(self) -> None:
        assert Color.from_name("orange") is Color.ORANGE
        assert Color.from_name(" LightGray ") is Color.LIGHTGRAY
        assert Color.from_name("bright-blue") is Color.BRIGHT_BLUE
        with pytest.raises(ValueError, match="Unknown color"):
            Color.from_name("chartreuse")


class TestMovement:
    """Cursor movement sequences."""

    @pytest.mark.parametrize(
        "method,args,expected",
        [
            ("move", (3, 7), "\x1b[3;7H"),
            ("move_up", (2,), "\x1b[2A"),
            ("move_down", (4,), "\x1b[4B"),
            ("move_right", (5,), "\x1b[5C"),
            ("move_left", (6,), "\x1b[6D"),
            ("move_down_begin", (1,), "\x1b[1E"),
            ("move_up_begin", (3,), "\x1b[3F"),
            ("move_to_column", (12,), "\x1b[12G"),
            ("move_to_begin", (), "\x1b[1G"),
            ("save_cursor", (), "\x1b7"),
            ("restore_cursor", (), "\x1b8"),
            ("clear_screen", (), "\x1b[2J\x1b[1;1H"),
            ("clear_line", (), "\x1b[2K"),
            ("break_line", (), "\n"),
        ],
    )
    def test_sequence(self, screen, out, method: str, args: tuple, expected: str) -> None:
        getattr(screen, method)(*args)
        assert out.getvalue() == expected


class TestLines:
    """Rule and block lines."""

    def test_symbol(self, screen, out) -> None:
        screen.print_symbol(Symbol.CROSS)
        assert out.getvalue() == "╋"

    def test_hline(self, screen, out) -> None:
        screen.print_hline(4)
        assert out.getvalue() == "━" * 4

    def test_vline(self, screen, out) -> None:
        screen.print_vline(2)
        assert out.getvalue() == "┃\x1b[1D\x1b[1B" * 2

    def test_hblock_line(self, screen, out) -> None:
        screen.print_hblock_line(3)
        assert out.getvalue() == "   "

    def test_vblock_line(self, screen, out) -> None:
        screen.print_vblock_line(2)
        assert out.getvalue() == " \x1b[1D\x1b[1B" * 2

    def test_zero_length(self, screen, out) -> None:
        screen.print_hline(0)
        screen.print_vline(0)
        assert out.getvalue() == ""

    def test_negative_length(self, screen) -> None:
        with pytest.raises(ValueError):
            screen.print_hline(-1)

    def test_glyph_code_points(self) -> None:
        assert [ord(s.value) for s in Symbol] == [
            0x2501, 0x2503, 0x250F, 0x2513, 0x2517, 0x251B, 0x2192,
            0x21B3, 0x2523, 0x252B, 0x2533, 0x253B, 0x254B, 0x2026,
        ]


class TestBox:
    """Box drawing."""

    def test_five_by_three(self, screen, out) -> None:
        screen.print_box(5, 3)
        rows = out.getvalue().split(box_row_separator(5))

        assert len(rows) == 5
        assert rows[0] == "┏" + H * 5 + "┓"
        for body in rows[1:4]:
            assert body == V + "\x1b[5C" + V
        assert rows[4] == "┗" + H * 5 + "┛"

    def test_interior_not_overwritten(self) -> None:
        rows = box_text(5, 3).split(box_row_separator(5))
        for body in rows[1:-1]:
            assert " " not in body
            assert H not in body

    def test_returns_to_left_column(self) -> None:
        assert box_row_separator(5) == "\x1b[1B\x1b[7D"

    def test_zero_width(self) -> None:
        rows = box_text(0, 1).split(box_row_separator(0))
        assert rows == ["┏┓", V + V, "┗┛"]

    def test_zero_height(self) -> None:
        rows = box_text(2, 0).split(box_row_separator(2))
        assert len(rows) == 2

    def test_negative_size(self) -> None:
        with pytest.raises(ValueError):
            box_text(3, -1)


class TestFixDraw:
    """Cursor parking at the bottom-right cell."""

    def test_uses_size_provider(self, screen, out) -> None:
        screen.fix_draw()
        assert out.getvalue() == "\x1b[24;80H"

    def test_queries_output_terminal(self, pty_pair) -> None:
        set_window_size(pty_pair.slave, 100, 30)
        with open(pty_pair.slave, "w", closefd=False) as tty_out:
            Screen(tty_out).fix_draw()
        assert b"\x1b[30;100H" in _drain(pty_pair.master)

    def test_no_terminal(self, out) -> None:
        with pytest.raises(NoControllingTerminal):
            Screen(out).fix_draw()


class TestDefaultScreen:
    """Module-level functions write to stdout."""

    def test_writes_to_current_stdout(self, monkeypatch) -> None:
        captured = io.StringIO()
        monkeypatch.setattr("sys.stdout", captured)
        screen_module.move(2, 3)
        screen_module.print_box(1, 1)
        assert captured.getvalue() == "\x1b[2;3H" + box_text(1, 1)
