"""Error and info messages written to standard error."""

from __future__ import annotations

import enum
import sys

_PROGRAM = "soupdl"


class ErrCode(enum.IntEnum):
    """Outcome of an operation that can fail in a recoverable or fatal way."""

    NONE = 0
    RECOVER = 1
    NO_RECOVER = 2


def perr(message: str) -> None:
    """Print an error message to standard error."""
    print(f"{_PROGRAM}: error: {message}", file=sys.stderr)


def pinf(message: str) -> None:
    """Print an informational message to standard error."""
    print(f"{_PROGRAM}: info: {message}", file=sys.stderr)