"""Map editor state: brush, tile selection and tile placement."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from .geometry import TILE_AIR
from .spawners import ENT_TILE_MAX


class EditorTileType(enum.Enum):
    """Whether the editor places map tiles or entity tiles."""

    TILE = enum.auto()
    ENT = enum.auto()


class EditorState(enum.Enum):
    """What a held mouse button is doing."""

    NONE = enum.auto()
    TILING = enum.auto()
    ERASING = enum.auto()
    VR_MOVING = enum.auto()
    VR_RESIZING = enum.auto()


class MouseButton(enum.IntEnum):
    LEFT = 1
    MIDDLE = 2
    RIGHT = 3


@dataclass(frozen=True)
class EntTile:
    """A cell of the entity map: empty, or holding an entity tile id."""

    active: bool = False
    etid: int = 0


def _resized(grid: list[list], new_w: int, new_h: int, fill) -> list[list]:
    rows = [row[:new_w] + [fill] * (new_w - len(row[:new_w])) for row in grid[:new_h]]
    rows.extend([fill] * new_w for _ in range(new_h - len(rows)))
    return rows


def resize_map(
    tiles: list[list[int]],
    ent_map: list[list[EntTile]],
    width_inc: int,
    height_inc: int,
    width_max: int,
    height_max: int,
) -> tuple[list[list[int]], list[list[EntTile]]]:
    """Return the tile and entity maps grown or shrunk by the given amounts.

    Kept cells keep their contents; new cells are air and empty entity
    tiles. Raises ``ValueError`` if the new size exceeds the maximum or is
    negative.
    """
    height = len(tiles)
    width = len(tiles[0]) if tiles else 0
    new_w = width + width_inc
    new_h = height + height_inc
    if new_w > width_max or new_h > height_max:
        raise ValueError("can't resize the map over the maximum dimensions")
    if new_w < 0 or new_h < 0:
        raise ValueError("can't resize the map to negative dimensions")
    return (
        _resized(tiles, new_w, new_h, TILE_AIR),
        _resized(ent_map, new_w, new_h, EntTile()),
    )


def _clamp(value: int, lo: int, hi: int) -> int:
    return max(lo, min(value, hi))


@dataclass
class MapEditor:
    """The editor's brush and selection.

    ``tile`` holds the selected id for whichever kind of tile is being
    placed; switching kind keeps the number and clamps it.
    """

    tile: int = 0
    tile_type: EditorTileType = EditorTileType.TILE
    state: EditorState = EditorState.NONE
    w: int = 1
    h: int = 1
    alt: bool = False

    def pick_tile(self, step: int, tile_max: int) -> None:
        """Select map tiles, or move the selection by ``step`` if already selected."""
        if self.tile_type is EditorTileType.ENT:
            self.tile_type = EditorTileType.TILE
        else:
            self.tile += step
        self.tile = _clamp(self.tile, 0, tile_max - 1)

    def pick_entity(self, step: int) -> None:
        """Select entity tiles, or move the selection by ``step`` if already selected."""
        if self.tile_type is EditorTileType.TILE:
            self.tile_type = EditorTileType.ENT
        else:
            self.tile += step
        self.tile = _clamp(self.tile, 0, ENT_TILE_MAX - 1)

    def grow_brush(self) -> None:
        """Make the square brush one tile larger."""
        self.w += 1
        self.h = self.w

    def shrink_brush(self) -> None:
        """Make the square brush one tile smaller, down to one tile."""
        if self.w > 1:
            self.w -= 1
            self.h = self.w

    def mouse_down(self, button: int) -> None:
        """Start placing (left) or erasing (right) tiles."""
        if self.alt:
            self.state = EditorState.NONE
            return
        if button == MouseButton.LEFT:
            self.state = EditorState.TILING
        elif button == MouseButton.RIGHT:
            self.state = EditorState.ERASING

    def mouse_up(self, button: int) -> None:
        """Stop whatever the mouse was doing."""
        self.state = EditorState.NONE

    def place(
        self,
        tiles: list[list[int]],
        ent_map: list[list[EntTile]],
        x: int,
        y: int,
    ) -> None:
        """Place or erase a brush-sized area with its top left at tile (x, y).

        Positions outside the map are ignored; the area is clipped at the
        right and bottom edges.
        """
        height = len(tiles)
        width = len(tiles[0]) if tiles else 0
        if not (0 <= x < width and 0 <= y < height):
            return
        right = min(x + self.w, width)
        bottom = min(y + self.h, height)
        tiling = self.state is EditorState.TILING
        if self.tile_type is EditorTileType.TILE:
            value = self.tile if tiling else TILE_AIR
            target = tiles
        else:
            value = EntTile(True, self.tile) if tiling else EntTile(False, 0)
            target = ent_map
        for row in target[y:bottom]:
            row[x:right] = [value] * (right - x)