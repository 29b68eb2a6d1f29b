"""Core terminal primitives - geometry, input mode, key decoding."""

from clic.core.color import Color
from clic.core.constants import Symbol
from clic.core.errors import ClicError, InputReadFailure, NoControllingTerminal
from clic.core.input import Key, KeyDecoder, key_capture, key_name
from clic.core.terminal import (
    ScreenSize,
    TerminalMode,
    get_screen_height,
    get_screen_size,
    get_screen_width,
    raw_mode,
)

__all__ = [
    "Color",
    "Symbol",
    "ClicError",
    "InputReadFailure",
    "NoControllingTerminal",
    "Key",
    "KeyDecoder",
    "key_capture",
    "key_name",
    "ScreenSize",
    "TerminalMode",
    "get_screen_height",
    "get_screen_size",
    "get_screen_width",
    "raw_mode",
]
