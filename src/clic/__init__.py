"""
clic: terminal drawing primitives for command-line interfaces

Quick Start:
    >>> import clic
    >>> screen = clic.Screen()
    >>> screen.clear_screen()
    >>> screen.set_fg(clic.Color.ORANGE)
    >>> screen.print_box(20, 3)
    >>> screen.reset_color()
    >>> key = clic.key_capture()
    >>> if key == clic.Key.ARROW_UP:
    ...     print("up")

Features:
    - Terminal size queries against the controlling device (no fallbacks)
    - Single key capture in a scoped raw mode, with arrow-key decoding
    - 256-color palette, cursor movement and clearing sequences
    - Heavy box-drawing glyphs, rule lines and boxes
"""

__version__ = "0.1.0"

from clic.core.color import Color
from clic.core.constants import Symbol
from clic.core.errors import ClicError, InputReadFailure, NoControllingTerminal
from clic.core.input import Key, KeyDecoder, key_capture, key_name
from clic.core.terminal import (
    ScreenSize,
    get_screen_height,
    get_screen_size,
    get_screen_width,
    raw_mode,
)
from clic.render.screen import Screen

__all__ = [
    "__version__",
    # Core types
    "Color",
    "Symbol",
    "Key",
    "ScreenSize",
    # Errors
    "ClicError",
    "InputReadFailure",
    "NoControllingTerminal",
    # Geometry
    "get_screen_size",
    "get_screen_width",
    "get_screen_height",
    # Input
    "KeyDecoder",
    "key_capture",
    "key_name",
    "raw_mode",
    # Drawing
    "Screen",
]
