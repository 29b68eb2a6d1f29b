"""Pytest configuration: pseudo-terminal fixtures."""

import fcntl
import logging
import os
import pty
import struct
import termios
import tty
from typing import Iterator, NamedTuple

import pytest


class PtyPair(NamedTuple):
    """Both ends of a pseudo-terminal; ``slave`` plays the user's terminal."""
    master: int
    slave: int

    def send(self, data: bytes) -> None:
        """Queue keyboard input for the slave side."""
        os.write(self.master, data)


def set_window_size(fd: int, cols: int, rows: int) -> None:
    """Set the window size reported for a terminal."""
    fcntl.ioctl(fd, termios.TIOCSWINSZ, struct.pack("HHHH", rows, cols, 0, 0))


@pytest.fixture
def pty_pair() -> Iterator[PtyPair]:
    """A fresh pseudo-terminal in its default (canonical, echoing) mode."""
    master, slave = pty.openpty()
    try:
        yield PtyPair(master, slave)
    finally:
        os.close(slave)
        os.close(master)


@pytest.fixture
def cbreak_pty(pty_pair: PtyPair) -> PtyPair:
    """
    Pseudo-terminal already out of canonical mode.

    Bytes typed ahead of a capture would otherwise be line-edited by the
    canonical discipline (DEL erases, for example) before raw mode is entered.
    """
    tty.setcbreak(pty_pair.slave)
    return pty_pair


@pytest.fixture(autouse=True)
def restore_clic_logger() -> Iterator[None]:
    """Undo handlers and levels installed by setup_logging during a test."""
    logger = logging.getLogger("clic")
    handlers = list(logger.handlers)
    level = logger.level
    yield
    logger.handlers = handlers
    logger.setLevel(level)
