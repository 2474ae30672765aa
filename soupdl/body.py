"""Entity bodies: position, size, speeds and movement against solid tiles."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from .geometry import TILE_AIR, TILE_SIZE, Rect, TileGrid


class TileFlag(enum.IntFlag):
    """Flag bits a tile can carry."""

    SOLID = 1
    SPIKE = 2
    EVILSTOP = 4


def sign(value: float) -> int:
    """Return 1, -1 or 0 according to the sign of ``value``."""
    if value > 0:
        return 1
    if value < 0:
        return -1
    return 0


def _tdiv(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


@dataclass
class Body:
    """A moving rectangle in the world."""

    x: float = 0.0
    y: float = 0.0
    w: int = 0
    h: int = 0
    hsp: float = 0.0
    vsp: float = 0.0
    grv: float = 0.0

    def rect(self) -> Rect:
        """The collision rectangle, with the position truncated to pixels."""
        return Rect(int(self.x), int(self.y), self.w, self.h)

    def tile_collide(self, grid: TileGrid, xshift: float, yshift: float) -> bool:
        """True if the body, shifted by (xshift, yshift), touches a solid tile."""
        crect = Rect(int(self.x + xshift), int(self.y + yshift), self.w, self.h)
        return grid.rect_hit_flags(crect, TileFlag.SOLID) != TILE_AIR

    def move_horizontal(self, grid: TileGrid, timestep: float) -> bool:
        """Move by ``hsp``; on hitting a solid tile, snap to it and return True."""
        step = self.hsp * timestep
        if self.tile_collide(grid, step, 0):
            tile_x = _tdiv(int(self.x + step), TILE_SIZE) + 1
            direction = sign(self.hsp)
            if direction == 1:
                self.x = tile_x * TILE_SIZE - self.w - 1
            elif direction == -1:
                self.x = tile_x * TILE_SIZE
            return True
        self.x += step
        return False

    def move_vertical(self, grid: TileGrid, timestep: float) -> bool:
        """Move by ``vsp``; on hitting a solid tile, snap to it and return True."""
        step = self.vsp * timestep
        if self.tile_collide(grid, 0, step):
            tile_y = _tdiv(int(self.y + step), TILE_SIZE) + 1
            direction = sign(self.vsp)
            if direction == 1:
                self.y = tile_y * TILE_SIZE - self.h - 1
            elif direction == -1:
                self.y = tile_y * TILE_SIZE
            return True
        self.y += step
        return False