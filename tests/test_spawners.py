import pytest

from soupdl.eggs import Groundguy, Slideguy
from soupdl.entities import EntId, EntityArrayFull
from soupdl.player import Player
from soupdl.props import BarrierBlock, Door, Item, ItemKind
from soupdl.spawners import ENT_TILE_DEFS, EntTileId, spawn, tile_for_char


from soupdl.world import World


def test_every_tile_has_a_definition():
    found = {tile_for_char(d.map_char) for d in ENT_TILE_DEFS.values()}
    assert found == set(EntTileId)


def test_chars_round_trip():
    for tile_id, definition in ENT_TILE_DEFS.items():
        assert tile_for_char(definition.map_char) == tile_id


def test_chars_are_distinct():
    chars = [d.map_char for d in ENT_TILE_DEFS.values()]
    assert len(chars) == len(set(chars))


def test_player_char():
    assert tile_for_char("p") == EntTileId.PLAYER
    assert tile_for_char("N") == EntTileId.NONE


def test_unknown_char_raises():
    with pytest.raises(ValueError):
        tile_for_char("~")


def test_spawn_player_moves_player():
    world = World(player=Player())
    player = spawn(world, EntTileId.PLAYER, 64, 96)
    assert player is world.player
    assert (player.b.x, player.b.y) == (64, 96)


def test_spawn_trumpet_offsets_item():
    world = World()
    item = spawn(world, EntTileId.TRUMPET, 32, 64)
    assert isinstance(item, Item)
    assert item.kind is ItemKind.TRUMPET
    assert (item.x, item.y) == (32 + 16, 64 + 32)
    assert item in list(world.registry[EntId.ITEM])


def test_spawn_coin():
    world = World()
    item = spawn(world, EntTileId.COIN, 0, 0)
    assert item.kind is ItemKind.COIN
    assert len(world.registry[EntId.ITEM]) == 1


def test_spawn_careful_groundguy_carries_tag():
    world = World()
    guy = spawn(world, EntTileId.GROUNDGUY_CAREFUL, 10, 20, 7)
    assert isinstance(guy, Groundguy)
    assert guy.stay_on_ledge is True
    assert guy.btag == 7


def test_spawn_plain_groundguy_walks_off_ledges():
    world = World()
    guy = spawn(world, EntTileId.GROUNDGUY, 10, 20, 3)
    assert guy.stay_on_ledge is False
    assert guy.btag == 3


def test_spawn_slideguy():
    world = World()
    guy = spawn(world, EntTileId.SLIDEGUY_JUMPING, 0, 0, 5)
    assert isinstance(guy, Slideguy)
    assert guy.btag == 5
    assert guy in list(world.registry[EntId.SLIDEGUY])


@pytest.mark.parametrize(
    "tile_id", [EntTileId.DOOR0, EntTileId.DOOR1, EntTileId.DOOR2, EntTileId.DOOR3]
)
def test_spawn_doors(tile_id):
    world = World()
    door = spawn(world, tile_id, 0, 0)
    assert isinstance(door, Door)
    assert door.door_id == tile_id - EntTileId.DOOR0


def test_spawn_barrier_tag():
    world = World()
    block = spawn(world, EntTileId.BARRIER, 0, 0, 9)
    assert isinstance(block, BarrierBlock)
    assert block.btag == 9


def test_spawn_none_raises():
    with pytest.raises(ValueError):
        spawn(World(), EntTileId.NONE, 0, 0)


def test_spawn_until_full():
    world = World()
    capacity = world.registry[EntId.SAVEBIRD].len_max
    with pytest.raises(EntityArrayFull):
        for _ in range(capacity + 1):
            spawn(world, EntTileId.SAVEBIRD, 0, 0)
    assert len(world.registry[EntId.SAVEBIRD]) == capacity