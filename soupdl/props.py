"""Stationary entities: items, doors, savebirds and barrier blocks."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar

from .body import Body
from .entities import EntId, Entity
from .geometry import TILE_AIR, TILE_SIZE, Rect
from .log import pinf
from .particles import ParticleKind, spawn_particles
from .sprites import SPR_EGG_H, SPR_EGG_W

if TYPE_CHECKING:
    from .world import World

# Valid door ids are in the range [0, ENT_DOOR_MAX)
ENT_DOOR_MAX = 4

# Where the door sprite sits on the tile set
DOOR_SOURCE_RECT = Rect(TILE_SIZE * 2, TILE_SIZE * 1, TILE_SIZE, TILE_SIZE)


class ItemKind(enum.IntEnum):
    TRUMPET = 0
    CATFACE = 1
    COIN = 2
    HEART = 3


@dataclass(frozen=True)
class ItemTexture:
    """Texture name, optional sheet rectangle and drawn size of an item."""

    texture: str
    src: Rect | None
    w: int
    h: int


_ITEM_TEXTURES = {
    ItemKind.TRUMPET: ItemTexture("trumpet", None, 19, 11),
    ItemKind.CATFACE: ItemTexture("cakico", None, 16, 16),
    ItemKind.COIN: ItemTexture("cakico", None, 16, 16),
    ItemKind.HEART: ItemTexture("heart", Rect(0, 16, 16, 16), 16, 16),
}


def door_id_is_valid(door_id: int) -> bool:
    """True if ``door_id`` is in the range [0, ENT_DOOR_MAX)."""
    return 0 <= door_id < ENT_DOOR_MAX


@dataclass(eq=False)
class Item(Entity):
    """A pickup resting with its bottom centre at (x, y)."""

    ent_id: ClassVar[EntId] = EntId.ITEM
    x: int = 0
    y: int = 0
    kind: ItemKind = ItemKind.TRUMPET

    @classmethod
    def create(cls, world: World, x, y, kind) -> Item:
        item = cls(x=int(x), y=int(y), kind=ItemKind(kind))
        world.spawn(item)
        return item

    @property
    def texture(self) -> ItemTexture:
        return _ITEM_TEXTURES[self.kind]

    def draw_rect(self) -> Rect:
        """The rectangle the item occupies in the world when drawn."""
        tex = self.texture
        return Rect(self.x - tex.w // 2, self.y - tex.h, tex.w, tex.h)

    def destroy(self, world: World) -> None:
        world.remove_now(self)


@dataclass(eq=False)
class Door(Entity):
    """A door leading to the map linked to its ``door_id``."""

    ent_id: ClassVar[EntId] = EntId.DOOR
    b: Body = field(default_factory=Body)
    door_id: int = 0

    @classmethod
    def create(cls, world: World, x, y, door_id) -> Door:
        if not door_id_is_valid(door_id):
            raise ValueError(
                f"door id {door_id} is outside the range [0, {ENT_DOOR_MAX})"
            )
        body = Body(x=float(int(x)), y=float(int(y)), w=TILE_SIZE, h=TILE_SIZE)
        door = cls(b=body, door_id=int(door_id))
        world.spawn(door)
        return door

    def destroy(self, world: World) -> None:
        self.mark_deleted()


@dataclass(eq=False)
class Savebird(Entity):
    """A bird the player talks to in order to save the game."""

    ent_id: ClassVar[EntId] = EntId.SAVEBIRD
    x: int = 0
    y: int = 0

    @classmethod
    def create(cls, world: World, x, y) -> Savebird:
        bird = cls(x=int(x), y=int(y))
        world.spawn(bird)
        return bird

    def rect(self) -> Rect:
        """The area in which the player can interact with the bird."""
        return Rect(self.x, self.y, SPR_EGG_W, SPR_EGG_H)

    def destroy(self, world: World) -> None:
        self.mark_deleted()


def _set_tile(world: World, x: int, y: int, tile_id: int) -> None:
    grid = world.grid
    col = x // grid.tile_size
    row = y // grid.tile_size
    if 0 <= row < grid.height and 0 <= col < grid.width:
        grid.tiles[row][col] = tile_id


@dataclass(eq=False)
class BarrierBlock(Entity):
    """A block that fills its tile with ``block_tile`` until its tag is cleared."""

    ent_id: ClassVar[EntId] = EntId.BARRIER
    # Tile id written under a barrier; it should be a solid, invisible tile
    block_tile: ClassVar[int] = 1

    x: int = 0
    y: int = 0
    btag: int = 0

    @classmethod
    def create(cls, world: World, x, y, btag) -> BarrierBlock:
        block = cls(x=int(x), y=int(y), btag=int(btag))
        world.spawn(block)
        _set_tile(world, block.x, block.y, cls.block_tile)
        pinf(f"barrier with btag {block.btag} created")
        return block

    def destroy(self, world: World) -> None:
        half = TILE_SIZE // 2
        spawn_particles(world, self.x + half, self.y + half, ParticleKind.FLAME, 10)
        _set_tile(world, self.x, self.y, TILE_AIR)
        self.mark_deleted()