"""Rectangles and tile-map collision queries."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

TILE_SIZE = 32
TILE_AIR = 0


@dataclass
class Rect:
    """An axis-aligned rectangle in pixels."""

    x: int = 0
    y: int = 0
    w: int = 0
    h: int = 0

    def corners(self) -> tuple[tuple[int, int], ...]:
        """Top-left, top-right, bottom-left and bottom-right corners."""
        return (
            (self.x, self.y),
            (self.x + self.w, self.y),
            (self.x, self.y + self.h),
            (self.x + self.w, self.y + self.h),
        )


def check_rect(r1: Rect, r2: Rect) -> bool:
    """Return True if two rectangles overlap."""
    return (
        r1.x < r2.x + r2.w
        and r1.x + r1.w > r2.x
        and r1.y < r2.y + r2.h
        and r1.y + r1.h > r2.y
    )


@dataclass
class TileGrid:
    """A tile map indexed as ``tiles[row][column]``.

    ``tile_flags`` maps tile ids to their flag bits; ids missing from it
    have no flags. ``outside`` is the tile reported beyond the map edges.
    """

    tiles: list[list[int]]
    tile_flags: Mapping[int, int] = field(default_factory=dict)
    outside: int = TILE_AIR
    tile_size: int = TILE_SIZE

    @property
    def height(self) -> int:
        return len(self.tiles)

    @property
    def width(self) -> int:
        return len(self.tiles[0]) if self.tiles else 0

    def tile_at(self, x: float, y: float) -> int:
        """Return the tile id at world position (x, y)."""
        x = int(x)
        y = int(y)
        if x < 0 or y < 0:
            return self.outside
        cx = x // self.tile_size
        cy = y // self.tile_size
        if cx >= self.width or cy >= self.height:
            return self.outside
        return self.tiles[cy][cx]

    def rect_hits_id(self, rect: Rect, tile_id: int) -> bool:
        """Return True if any corner of ``rect`` lies on a tile ``tile_id``.

        Only the corners are checked, so rectangles as large as a tile or
        larger may miss tiles in their middle.
        """
        return any(self.tile_at(x, y) == tile_id for x, y in rect.corners())

    def rect_hit_flags(self, rect: Rect, flags: int) -> int:
        """Return the first corner tile sharing a bit with ``flags``, else air."""
        for x, y in rect.corners():
            tile_id = self.tile_at(x, y)
            if self.tile_flags.get(tile_id, 0) & flags:
                return tile_id
        return TILE_AIR