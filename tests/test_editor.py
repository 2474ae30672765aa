import pytest

from soupdl.editor import (
    EditorState,
    EditorTileType,
    EntTile,
    MapEditor,
    MouseButton,
    resize_map,
)
from soupdl.geometry import TILE_AIR
from soupdl.spawners import ENT_TILE_MAX, EntTileId


def make_maps(width, height):
    tiles = [[y * width + x + 1 for x in range(width)] for y in range(height)]
    ents = [[EntTile(True, x) for x in range(width)] for _ in range(height)]
    return tiles, ents


def test_resize_grow_keeps_contents():
    tiles, ents = make_maps(3, 2)
    new_tiles, new_ents = resize_map(tiles, ents, 2, 1, 100, 100)
    assert len(new_tiles) == 3 and len(new_tiles[0]) == 5
    assert len(new_ents) == 3 and all(len(r) == 5 for r in new_ents)
    for y in range(2):
        assert new_tiles[y][:3] == tiles[y]
        assert new_ents[y][:3] == ents[y]
        assert new_tiles[y][3:] == [TILE_AIR, TILE_AIR]
        assert new_ents[y][3:] == [EntTile(), EntTile()]
    assert new_tiles[2] == [TILE_AIR] * 5


def test_resize_shrink_truncates():
    tiles, ents = make_maps(3, 3)
    new_tiles, new_ents = resize_map(tiles, ents, -1, -1, 100, 100)
    assert new_tiles == [row[:2] for row in tiles[:2]]
    assert new_ents == [row[:2] for row in ents[:2]]


def test_resize_over_max_raises():
    tiles, ents = make_maps(3, 3)
    with pytest.raises(ValueError):
        resize_map(tiles, ents, 1, 0, 3, 10)


def test_resize_negative_raises():
    tiles, ents = make_maps(1, 1)
    with pytest.raises(ValueError):
        resize_map(tiles, ents, -2, 0, 10, 10)


def test_pick_tile_switches_type_without_stepping():
    ed = MapEditor(tile=3, tile_type=EditorTileType.ENT)
    ed.pick_tile(1, 10)
    assert ed.tile_type is EditorTileType.TILE
    assert ed.tile == 3


def test_pick_tile_clamps():
    ed = MapEditor(tile=0)
    ed.pick_tile(-1, 10)
    assert ed.tile == 0
    ed.tile = 9
    ed.pick_tile(1, 10)
    assert ed.tile == 9


def test_pick_entity_clamps_to_last():
    ed = MapEditor(tile=ENT_TILE_MAX - 1, tile_type=EditorTileType.ENT)
    ed.pick_entity(1)
    assert ed.tile == EntTileId.NONE


def test_pick_entity_switches_type():
    ed = MapEditor(tile=2)
    ed.pick_entity(1)
    assert ed.tile_type is EditorTileType.ENT
    assert ed.tile == 2


def test_brush_resizing_stays_square():
    ed = MapEditor()
    ed.shrink_brush()
    assert (ed.w, ed.h) == (1, 1)
    ed.grow_brush()
    ed.grow_brush()
    assert ed.w == ed.h == 3
    ed.shrink_brush()
    assert ed.w == ed.h == 2


def test_mouse_states():
    ed = MapEditor()
    ed.mouse_down(MouseButton.LEFT)
    assert ed.state is EditorState.TILING
    ed.mouse_up(MouseButton.LEFT)
    assert ed.state is EditorState.NONE
    ed.mouse_down(MouseButton.RIGHT)
    assert ed.state is EditorState.ERASING


def test_erase_tiles_sets_air():
    tiles, ents = make_maps(3, 3)
    ed = MapEditor(tile=7, w=2, h=2, state=EditorState.ERASING)
    ed.place(tiles, ents, 0, 0)
    assert tiles[0][:2] == [TILE_AIR, TILE_AIR]
    assert tiles[1][:2] == [TILE_AIR, TILE_AIR]
    assert tiles[2][0] != TILE_AIR


def test_place_and_erase_entities():
    tiles, ents = make_maps(2, 2)
    ed = MapEditor(tile=EntTileId.COIN, tile_type=EditorTileType.ENT,
                   state=EditorState.TILING)
    ed.place(tiles, ents, 1, 1)
    assert ents[1][1] == EntTile(True, EntTileId.COIN)
    ed.state = EditorState.ERASING
    ed.place(tiles, ents, 1, 1)
    assert ents[1][1] == EntTile(False, 0)


def test_place_out_of_bounds_does_nothing():
    tiles, ents = make_maps(2, 2)
    before = [row[:] for row in tiles]
    ed = MapEditor(tile=7, w=2, h=2, state=EditorState.TILING)
    ed.place(tiles, ents, -1, 0)
    ed.place(tiles, ents, 2, 0)
    assert tiles == before