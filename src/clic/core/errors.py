"""Exceptions raised by terminal queries and key capture."""

from __future__ import annotations

from typing import Optional


class ClicError(Exception):
    """Base class for clic errors."""


class NoControllingTerminal(ClicError):
    """The file descriptor is not attached to a terminal device."""

    def __init__(self, fd: Optional[int], reason: str = "") -> None:
        self.fd = fd
        message = f"fd {fd} is not a terminal" if fd is not None else "no terminal file descriptor"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class InputReadFailure(ClicError):
    """Reading a key from the input device failed."""
