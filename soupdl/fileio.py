"""Small helpers for reading map and save files."""

from __future__ import annotations

from typing import TextIO


def read_until(stream: TextIO, delim: str, len_max: int) -> str:
    """Read characters from ``stream`` up to (not including) ``delim``.

    The delimiter is consumed. Raises ``EOFError`` if the stream ends first
    and ``ValueError`` if ``len_max - 1`` characters are read without
    meeting the delimiter.
    """
    limit = len_max - 1
    chars: list[str] = []
    while True:
        c = stream.read(1)
        if c == delim:
            return "".join(chars)
        if not c:
            raise EOFError(f"stream ended before {delim!r} was found")
        chars.append(c)
        if len(chars) >= limit:
            raise ValueError(
                f"no {delim!r} found within {len_max - 1} characters"
            )