"""Entity tiles: map characters that spawn entities when a map is loaded."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable

from .eggs import Coolegg, Groundguy, Slideguy
from .font import FONT_CHAR_HEIGHT, FONT_CHAR_WIDTH
from .geometry import Rect
from .log import pinf
from .player import Player
from .props import BarrierBlock, Door, Item, ItemKind, Savebird
from .sprites import SPR_EGG_H, SPR_EGG_W
from .turret import Turret

if TYPE_CHECKING:
    from .world import World


class EntTileId(enum.IntEnum):
    """Identifier of an entity tile (not of an entity type)."""

    PLAYER = 0
    TRUMPET = 1
    GROUNDGUY = 2
    GROUNDGUY_FAST = 3
    GROUNDGUY_CAREFUL = 4
    SLIDEGUY = 5
    SLIDEGUY_JUMPING = 6
    JUMPGUY = 7
    TURRET = 8
    DOOR0 = 9
    DOOR1 = 10
    DOOR2 = 11
    DOOR3 = 12
    SAVEBIRD = 13
    COIN = 14
    BARRIER = 15
    COOLEGG = 16
    NONE = 17


ENT_TILE_MAX = len(EntTileId)

Spawner = Callable[["World", int, int, int], Any]


@dataclass(frozen=True)
class EntTileDef:
    """How an entity tile is named, written in map files, spawned and shown."""

    name: str
    map_char: str
    spawner: Spawner
    texture: str
    src: Rect


def _player(world: World, x: int, y: int, value: int) -> Player:
    pinf(f"player spawned with VoidRectInt {value}")
    if world.player is None:
        world.player = Player()
    world.player.b.x = float(x)
    world.player.b.y = float(y)
    return world.player


def _trumpet(world: World, x: int, y: int, value: int) -> Item:
    return Item.create(world, x + 16, y + 32, ItemKind.TRUMPET)


def _barrier(world: World, x: int, y: int, value: int) -> BarrierBlock:
    return BarrierBlock.create(world, x, y, value)


def _groundguy(hsp: float, jsp: float, stay_on_ledge: bool) -> Spawner:
    def spawner(world: World, x: int, y: int, value: int) -> Groundguy:
        return Groundguy.create(world, x, y, hsp, jsp, stay_on_ledge, value)

    return spawner


def _slideguy(hp: int, acc: float, jsp: float) -> Spawner:
    def spawner(world: World, x: int, y: int, value: int) -> Slideguy:
        return Slideguy.create(world, x, y, hp, acc, jsp, value)

    return spawner


def _turret(world: World, x: int, y: int, value: int) -> Turret:
    return Turret.create(world, x, y)


def _door(door_id: int) -> Spawner:
    def spawner(world: World, x: int, y: int, value: int) -> Door:
        return Door.create(world, x, y, door_id)

    return spawner


def _savebird(world: World, x: int, y: int, value: int) -> Savebird:
    return Savebird.create(world, x, y)


def _coin(world: World, x: int, y: int, value: int) -> Item:
    return Item.create(world, x + 16, y + 16, ItemKind.COIN)


def _coolegg(world: World, x: int, y: int, value: int) -> Coolegg:
    return Coolegg.create(world, x, y)


def _none(world: World, x: int, y: int, value: int) -> Any:
    raise ValueError("the None entity tile spawns nothing")


def _font_digit(digit: int) -> Rect:
    return Rect(
        FONT_CHAR_WIDTH * digit, FONT_CHAR_HEIGHT * 3, FONT_CHAR_WIDTH, FONT_CHAR_HEIGHT
    )


ENT_TILE_DEFS: dict[EntTileId, EntTileDef] = {
    EntTileId.PLAYER: EntTileDef(
        "Player Spawn Point", "p", _player, "egg", Rect(0, 32, 32, 32)
    ),
    EntTileId.TRUMPET: EntTileDef("Trumpet", "t", _trumpet, "trumpet", Rect(0, 0, 19, 11)),
    EntTileId.BARRIER: EntTileDef("Barrier", "b", _barrier, "cakico", Rect(0, 0, 8, 8)),
    EntTileId.GROUNDGUY: EntTileDef(
        "Groundguy", "g", _groundguy(2.5, 0.0, False), "evilegg", Rect(0, 32, 32, 32)
    ),
    EntTileId.GROUNDGUY_FAST: EntTileDef(
        "Groundguy Fast", "f", _groundguy(6.0, 0.0, False), "evilegg", Rect(0, 32, 32, 32)
    ),
    EntTileId.GROUNDGUY_CAREFUL: EntTileDef(
        "Groundguy Careful (doesn't walk off ledges)",
        "C",
        _groundguy(3.2, 0.0, True),
        "evilegg",
        Rect(0, 0, 32, 32),
    ),
    EntTileId.SLIDEGUY_JUMPING: EntTileDef(
        "Slideguy Jumping", "S", _slideguy(6, 0.08, -5.0), "evilegg", Rect(0, 0, 32, 32)
    ),
    EntTileId.SLIDEGUY: EntTileDef(
        "Slideguy", "v", _slideguy(8, 0.1, 0.0), "evilegg", Rect(0, 0, 32, 32)
    ),
    EntTileId.JUMPGUY: EntTileDef(
        "Jumpguy", "j", _groundguy(3.0, -4.0, False), "evilegg", Rect(0, 0, 11, 17)
    ),
    EntTileId.TURRET: EntTileDef("Turret", "T", _turret, "turret", Rect(0, 0, 11, 17)),
    EntTileId.DOOR0: EntTileDef("Map Change Door #0", "0", _door(0), "font", _font_digit(0)),
    EntTileId.DOOR1: EntTileDef("Map Change Door #1", "1", _door(1), "font", _font_digit(1)),
    EntTileId.DOOR2: EntTileDef("Map Change Door #2", "2", _door(2), "font", _font_digit(2)),
    EntTileId.DOOR3: EntTileDef("Map Change Door #3", "3", _door(3), "font", _font_digit(3)),
    EntTileId.SAVEBIRD: EntTileDef(
        "Savebird", "V", _savebird, "egg", Rect(SPR_EGG_W * 3, 0, SPR_EGG_W, SPR_EGG_H)
    ),
    EntTileId.COIN: EntTileDef("Coin", "+", _coin, "cakico", Rect(0, 0, 16, 16)),
    EntTileId.COOLEGG: EntTileDef(
        "Coolegg", "n", _coolegg, "coolegg", Rect(SPR_EGG_W * 3, 0, SPR_EGG_W, SPR_EGG_H)
    ),
    EntTileId.NONE: EntTileDef("None", "N", _none, "cakico", Rect(0, 0, 16, 16)),
}

_BY_CHAR = {d.map_char: tile_id for tile_id, d in ENT_TILE_DEFS.items()}


def tile_for_char(char: str) -> EntTileId:
    """Return the entity tile written as ``char`` in map files."""
    try:
        return _BY_CHAR[char]
    except KeyError:
        raise ValueError(f"no entity tile uses the character {char!r}") from None


def spawn(world: World, tile_id: EntTileId, x: int, y: int, value: int = 0) -> Any:
    """Spawn the entity of ``tile_id`` at (x, y) and return it.

    ``value`` is the void rectangle value covering the tile, used as the
    barrier tag by enemies and barriers. Raises ``EntityArrayFull`` when
    there is no room, and ``ValueError`` for the None tile.
    """
    return ENT_TILE_DEFS[EntTileId(tile_id)].spawner(world, x, y, value)