"""Keyboard input: capture one key press and decode arrow-key sequences."""

from __future__ import annotations

import logging
import os
import select
import sys
from enum import IntEnum
from typing import Optional

from clic.core.errors import InputReadFailure
from clic.core.terminal import raw_mode, stream_fd

logger = logging.getLogger(__name__)

ESC_BYTE = 0x1B
CSI_BYTE = ord("[")
SS3_BYTE = ord("O")

# Synthesized codes live above the byte range
_SYNTHETIC = 0x100


class Key(IntEnum):
    """
    Key codes returned by key capture.

    Single-byte keys are their byte value, so any raw byte compares equal to
    the member with the same value. Arrow keys have no single-byte form and
    are given codes above 0xFF.
    """
    TAB = 9
    ENTER = 10
    ESCAPE = 27
    SPACE = 32
    NUMBER_0 = 48
    NUMBER_9 = 57
    LETTER_A = 97
    LETTER_Z = 122
    DELETE = 127
    UNKNOWN_ESCAPE = _SYNTHETIC
    ARROW_UP = _SYNTHETIC | ord("A")
    ARROW_DOWN = _SYNTHETIC | ord("B")
    ARROW_RIGHT = _SYNTHETIC | ord("C")
    ARROW_LEFT = _SYNTHETIC | ord("D")


# Final byte of "ESC [ x" (or "ESC O x" in application cursor mode) -> arrow key
ARROW_SEQUENCES: dict[int, Key] = {
    ord("A"): Key.ARROW_UP,
    ord("B"): Key.ARROW_DOWN,
    ord("C"): Key.ARROW_RIGHT,
    ord("D"): Key.ARROW_LEFT,
}

# Range markers share values with real letters; never use them as names
_RANGE_MARKERS = {Key.NUMBER_0, Key.NUMBER_9, Key.LETTER_A, Key.LETTER_Z}


def is_arrow(code: int) -> bool:
    """Check if a key code is one of the four arrow keys."""
    return code in ARROW_SEQUENCES.values()


def key_name(code: int) -> str:
    """Readable name for a key code."""
    try:
        key = Key(code)
    except ValueError:
        key = None
    if key is not None and key not in _RANGE_MARKERS:
        return key.name
    if 0x20 < code < 0x7F:
        return chr(code)
    return f"0x{code:02X}"


def _is_final_byte(byte: int) -> bool:
    # CSI/SS3 sequences end with a byte in 0x40-0x7E
    return 0x40 <= byte <= 0x7E


class KeyDecoder:
    """
    Reads one logical key press from a terminal input descriptor.

    Uses os.read() on the descriptor to bypass Python's I/O buffering, so
    bytes of an escape sequence are never held back in a stream buffer.

    A lone ESC is told apart from the start of a sequence by waiting up to
    ``escape_timeout`` seconds for each continuation byte. ESC followed by
    anything other than an arrow sequence (``[A``..``[D``, or ``OA``..``OD``
    in application cursor mode) yields ``Key.UNKNOWN_ESCAPE``, and the
    rest of that sequence is drained so it cannot leak into the next read.
    A doubled ESC (Alt prefix) swallows the sequence that follows it.
    """

    def __init__(self, fd: Optional[int] = None, escape_timeout: Optional[float] = None) -> None:
        if fd is None:
            fd = stream_fd(sys.stdin)
        if escape_timeout is None:
            from clic.config import get_settings
            escape_timeout = get_settings().escape_timeout
        if escape_timeout < 0:
            raise ValueError(f"escape_timeout must be >= 0, got {escape_timeout}")
        self.fd = fd
        self.escape_timeout = escape_timeout

    def capture(self) -> int:
        """
        Block until a key is pressed and return its code.

        The terminal is in raw mode only for the duration of the call.

        Raises:
            NoControllingTerminal: If the descriptor is not a terminal.
            InputReadFailure: If the read fails or input is closed.
        """
        with raw_mode(self.fd):
            first = self._read_byte()
            if first != ESC_BYTE:
                return first
            return self._decode_escape()

    def _decode_escape(self) -> int:
        second = self._read_pending()
        if second is None:
            return Key.ESCAPE

        if second == ESC_BYTE:
            # Meta prefix (Alt+key in rxvt-style terminals): ESC + a whole sequence
            seen = [second, *self._discard_escape_body()]
        elif second in (CSI_BYTE, SS3_BYTE):
            third = self._read_pending()
            if third in ARROW_SEQUENCES:
                return ARROW_SEQUENCES[third]
            seen = [second, *self._discard_sequence(second, third)]
        else:
            # ESC + plain byte (e.g. Alt+key): only that byte belongs to it
            seen = [second]

        logger.debug("Unrecognized escape sequence: %r", bytes([ESC_BYTE, *seen]))
        return Key.UNKNOWN_ESCAPE

    def _discard_escape_body(self) -> list[int]:
        """Consume what follows an ESC: one plain byte or a CSI/SS3 sequence."""
        introducer = self._read_pending()
        if introducer is None:
            return []
        if introducer not in (CSI_BYTE, SS3_BYTE):
            return [introducer]
        return [introducer, *self._discard_sequence(introducer, self._read_pending())]

    def _discard_sequence(self, introducer: int, byte: Optional[int]) -> list[int]:
        """Consume the rest of a CSI/SS3 sequence, up to its final byte."""
        seen: list[int] = []
        if introducer == CSI_BYTE and byte == CSI_BYTE:
            # Linux console function keys: ESC [ [ A..E
            seen.append(byte)
            byte = self._read_pending()
        while byte is not None:
            seen.append(byte)
            if _is_final_byte(byte):
                break
            byte = self._read_pending()
        return seen

    def _read_byte(self) -> int:
        try:
            data = os.read(self.fd, 1)
        except OSError as exc:
            raise InputReadFailure(f"read from fd {self.fd} failed: {exc}") from exc
        if not data:
            raise InputReadFailure(f"end of input on fd {self.fd}")
        return data[0]

    def _read_pending(self) -> Optional[int]:
        """Read one byte if it arrives within the escape timeout."""
        try:
            ready, _, _ = select.select([self.fd], [], [], self.escape_timeout)
        except (OSError, ValueError) as exc:
            raise InputReadFailure(f"wait on fd {self.fd} failed: {exc}") from exc
        if not ready:
            return None
        return self._read_byte()


def key_capture(fd: Optional[int] = None) -> int:
    """Capture one key press from stdin (or ``fd``)."""
    return KeyDecoder(fd).capture()
