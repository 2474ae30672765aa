"""The game camera: position, draw shift and visibility queries."""

from __future__ import annotations

from dataclasses import dataclass

from .geometry import TILE_SIZE

# Pixels the camera moves per frame at a timestep of 1
_CAM_SPEED = 20


def _clamp(value, lo, hi):
    if value < lo:
        return lo
    if value > hi:
        return hi
    return value


def _tdiv(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


@dataclass
class Camera:
    """Camera position and the pixel shift applied to everything drawn.

    Map dimensions passed to the methods are in tiles; screen dimensions
    are in pixels.
    """

    x: int = 0
    y: int = 0
    xshift: int = 0
    yshift: int = 0
    scroll_stop: bool = False
    xstop: bool = False
    ystop: bool = False

    def update_shifts(self, screen_width, screen_height, map_width, map_height) -> None:
        """Recompute the draw shifts from the position and edge stops."""
        xshift = -self.x + screen_width // 2
        yshift = -self.y + screen_height // 2
        if self.xstop:
            xshift = _clamp(xshift, -map_width * TILE_SIZE + screen_width, 0)
        if self.ystop:
            yshift = _clamp(yshift, -map_height * TILE_SIZE + screen_height, 0)
        self.xshift = xshift
        self.yshift = yshift

    def update_limits(self, screen_width, screen_height, map_width, map_height) -> None:
        """Decide whether the view stops at the map edges.

        The view only stops on an axis where the map is at least as large
        as the screen, and only when scroll stopping is enabled.
        """
        if self.scroll_stop:
            self.xstop = screen_width <= map_width * TILE_SIZE
            self.ystop = screen_height <= map_height * TILE_SIZE
        else:
            self.xstop = False
            self.ystop = False

    def move(self, up, down, left, right, timestep, map_width, map_height) -> None:
        """Move freely by the held directions, staying within the map."""
        speed = _CAM_SPEED * timestep
        if up:
            self.y = int(self.y - speed)
        if down:
            self.y = int(self.y + speed)
        if left:
            self.x = int(self.x - speed)
        if right:
            self.x = int(self.x + speed)
        self.x = _clamp(self.x, 0, map_width * TILE_SIZE)
        self.y = _clamp(self.y, 0, map_height * TILE_SIZE)

    def tile_bounds(self, screen_width, screen_height, map_width, map_height):
        """Return (left, right, top, bottom) of the visible tile range.

        ``right`` and ``bottom`` are exclusive and clipped to the map.
        """
        left = _tdiv(-self.xshift, TILE_SIZE)
        right = left + screen_width // TILE_SIZE + 2
        top = _tdiv(-self.yshift, TILE_SIZE)
        bottom = top + screen_height // TILE_SIZE + 2
        return (
            max(left, 0),
            min(right, map_width),
            max(top, 0),
            min(bottom, map_height),
        )

    def can_see_point(self, x, y, leeway, screen_width, screen_height) -> bool:
        """Return True if (x, y) is within view, widened by ``leeway`` pixels."""
        xdist = abs(self.x - x)
        ydist = abs(self.y - y)
        return (
            xdist <= screen_width // 2 + leeway
            and ydist <= screen_height // 2 + leeway
        )