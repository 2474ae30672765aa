"""Layout of text drawn with the sprite font."""

from __future__ import annotations

from typing import Iterator

from .geometry import Rect

FONT_CHAR_HEIGHT = 14
FONT_CHAR_WIDTH = 12
FONT_CHAR_XSPACE = FONT_CHAR_WIDTH + 1
FONT_CHAR_YSPACE = FONT_CHAR_HEIGHT + 1

# Characters per row of the font sprite sheet
_FONT_SPR_ROWS = 16


def layout_text(text: str, x: int, y: int) -> Iterator[tuple[Rect, Rect]]:
    """Yield (source, destination) rectangles for each drawn character.

    Spaces advance the cursor without drawing; newlines return it to ``x``
    on the next line.
    """
    cx, cy = x, y
    for ch in text:
        if ch == " ":
            cx += FONT_CHAR_XSPACE
            continue
        if ch == "\n":
            cx = x
            cy += FONT_CHAR_YSPACE
            continue
        code = ord(ch)
        src = Rect(
            (code % _FONT_SPR_ROWS) * FONT_CHAR_WIDTH,
            (code // _FONT_SPR_ROWS) * FONT_CHAR_HEIGHT,
            FONT_CHAR_WIDTH,
            FONT_CHAR_HEIGHT,
        )
        yield src, Rect(cx, cy, FONT_CHAR_WIDTH, FONT_CHAR_HEIGHT)
        cx += FONT_CHAR_XSPACE