"""Shared constants for terminal drawing."""

from enum import Enum

# ANSI escape sequences
ESC = "\x1b"
CSI = f"{ESC}["
RESET = f"{CSI}m"

# Cursor save/restore use the DEC forms (ESC 7 / ESC 8), not CSI s/u
SAVE_CURSOR = f"{ESC}7"
RESTORE_CURSOR = f"{ESC}8"

# One cell down and back one column, after a glyph has advanced the cursor
NEXT_ROW_SAME_COLUMN = f"{CSI}1D{CSI}1B"


class Symbol(str, Enum):
    """Box-drawing glyphs (heavy line set)."""
    HLINE = "\u2501"          # Horizontal line
    VLINE = "\u2503"          # Vertical line
    CORNER_TL = "\u250F"      # Top-left corner
    CORNER_TR = "\u2513"      # Top-right corner
    CORNER_BL = "\u2517"      # Bottom-left corner
    CORNER_BR = "\u251B"      # Bottom-right corner
    ARROW = "\u2192"          # Right arrow
    ARROW_RETURN = "\u21B3"   # Down-then-right arrow
    T_SIDE_L = "\u2523"       # Tee for a left edge
    T_SIDE_R = "\u252B"       # Tee for a right edge
    T_UP = "\u2533"           # Tee for a top edge
    T_DOWN = "\u253B"         # Tee for a bottom edge
    CROSS = "\u254B"          # Four-way junction
    TREE_POINTS = "\u2026"    # Ellipsis

    def __str__(self) -> str:
        return self.value
