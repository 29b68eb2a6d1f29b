"""Low-level terminal operations: window size and input mode (POSIX)."""

from __future__ import annotations

import errno
import fcntl
import logging
import struct
import sys
import termios
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Optional, TextIO

from clic.core.errors import NoControllingTerminal

logger = logging.getLogger(__name__)

# struct winsize: ws_row, ws_col, ws_xpixel, ws_ypixel
_WINSIZE = struct.Struct("HHHH")

# Index of the local-modes word in a termios attribute list
_LFLAG = 3
_CC = 6

# ioctl errnos meaning "this descriptor is not a terminal"
_NOT_A_TERMINAL = (errno.ENOTTY, errno.EINVAL)


@dataclass(frozen=True)
class ScreenSize:
    """Terminal dimensions in character cells."""
    width: int
    height: int


def stream_fd(stream: Optional[TextIO]) -> int:
    """File descriptor behind a standard stream."""
    try:
        return stream.fileno()
    except (AttributeError, ValueError, OSError) as exc:
        # Replaced streams (StringIO, closed files) have no usable descriptor
        raise NoControllingTerminal(None, str(exc)) from exc


def get_screen_size(fd: Optional[int] = None) -> ScreenSize:
    """
    Query the terminal device for its current window size.

    Queries ``fd`` (default: stdout) on every call so live resizes are seen.

    Raises:
        NoControllingTerminal: If ``fd`` is not attached to a terminal.
        OSError: If ``fd`` is not a valid open descriptor.
    """
    if fd is None:
        fd = stream_fd(sys.stdout)
    try:
        packed = fcntl.ioctl(fd, termios.TIOCGWINSZ, _WINSIZE.pack(0, 0, 0, 0))
    except OSError as exc:
        # Bad or closed descriptors are caller errors, not a missing terminal
        if exc.errno not in _NOT_A_TERMINAL:
            raise
        raise NoControllingTerminal(fd, exc.strerror or str(exc)) from exc
    rows, cols, _, _ = _WINSIZE.unpack(packed)
    return ScreenSize(width=cols, height=rows)


def get_screen_width(fd: Optional[int] = None) -> int:
    """Get terminal width in columns."""
    return get_screen_size(fd).width


def get_screen_height(fd: Optional[int] = None) -> int:
    """Get terminal height in rows."""
    return get_screen_size(fd).height


class TerminalMode:
    """Snapshot of a terminal's line-discipline attributes."""

    def __init__(self, fd: int, attributes: list) -> None:
        self.fd = fd
        self.attributes = attributes

    @classmethod
    def capture(cls, fd: int) -> "TerminalMode":
        """Read the current attributes of ``fd``."""
        try:
            return cls(fd, termios.tcgetattr(fd))
        except termios.error as exc:
            raise NoControllingTerminal(fd, str(exc)) from exc

    @property
    def canonical(self) -> bool:
        return bool(self.attributes[_LFLAG] & termios.ICANON)

    @property
    def echo(self) -> bool:
        return bool(self.attributes[_LFLAG] & termios.ECHO)

    @property
    def signals(self) -> bool:
        return bool(self.attributes[_LFLAG] & termios.ISIG)

    def raw(self) -> list:
        """Return a copy of the attributes with line buffering and echo off."""
        attrs = [list(a) if isinstance(a, list) else a for a in self.attributes]
        attrs[_LFLAG] &= ~(termios.ICANON | termios.ECHO)
        attrs[_CC][termios.VMIN] = 1
        attrs[_CC][termios.VTIME] = 0
        return attrs

    def restore(self) -> None:
        """Write the captured attributes back to the device."""
        termios.tcsetattr(self.fd, termios.TCSADRAIN, self.attributes)


@contextmanager
def raw_mode(fd: Optional[int] = None) -> Iterator[TerminalMode]:
    """
    Context manager for raw input mode.

    Disables canonical line buffering and echo so each byte is delivered as
    typed. Output processing and signal keys are left alone. The previous
    mode is restored on every exit, including exceptions.
    """
    if fd is None:
        fd = stream_fd(sys.stdin)
    saved = TerminalMode.capture(fd)
    termios.tcsetattr(fd, termios.TCSANOW, saved.raw())
    logger.debug("Entered raw mode on fd %d", fd)
    try:
        yield saved
    finally:
        saved.restore()
        logger.debug("Restored terminal mode on fd %d", fd)
