"""Fixed color palette for 256-color terminals."""

from enum import IntEnum


class Color(IntEnum):
    """
    Palette entries as xterm-256 color indices.

    Values are emitted verbatim in SGR 38;5;n / 48;5;n sequences, so they
    must stay stable for terminals using the standard xterm palette.
    """
    BLACK = 0
    DARK_RED = 1
    DARK_GREEN = 2
    DARK_YELLOW = 3
    DARK_BLUE = 4
    DARK_MAGENTA = 5
    DARK_CYAN = 6
    SILVER = 7
    GRAY = 8
    RED = 9
    GREEN = 10
    YELLOW = 11
    BRIGHT_BLUE = 12
    MAGENTA = 13
    CYAN = 14
    WHITE = 15
    # Extended indices
    BLUE = 39
    ORANGE = 208
    LIGHTGRAY = 248

    @classmethod
    def from_name(cls, name: str) -> "Color":
        """Look up a palette entry by case-insensitive name."""
        try:
            return cls[name.strip().upper().replace("-", "_")]
        except KeyError:
            raise ValueError(f"Unknown color: {name}") from None


def color_index(color: int) -> int:
    """Validate a palette entry or raw 256-color index."""
    if isinstance(color, bool) or not isinstance(color, int):
        raise TypeError(f"Color must be an int or Color, got {type(color).__name__}")
    if not 0 <= color <= 255:
        raise ValueError(f"256-color index must be 0-255, got {color}")
    return int(color)


def sgr_fg(color: int) -> str:
    """Return SGR parameters for a foreground color."""
    return f"38;5;{color_index(color)}"


def sgr_bg(color: int) -> str:
    """Return SGR parameters for a background color."""
    return f"48;5;{color_index(color)}"
