"""Escape-sequence output: colors, cursor movement, lines and boxes."""

from clic.render.screen import Screen, box_text

__all__ = ["Screen", "box_text"]
