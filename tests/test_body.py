import pytest

from soupdl.body import Body, TileFlag, sign
from soupdl.geometry import TILE_SIZE, Rect, TileGrid

FLAGS = {1: TileFlag.SOLID, 2: TileFlag.SPIKE}


@pytest.mark.parametrize("value,expected", [(3.5, 1), (-0.1, -1), (0, 0)])
def test_sign(value, expected):
    assert sign(value) == expected


def test_rect_truncates_position():
    body = Body(x=10.9, y=4.2, w=18, h=22)
    assert body.rect() == Rect(10, 4, 18, 22)


def test_tile_collide_only_solid():
    grid = TileGrid([[0, 2, 1]], FLAGS)
    body = Body(x=0, y=0, w=10, h=10)
    assert body.tile_collide(grid, TILE_SIZE, 0) is False
    assert body.tile_collide(grid, 2 * TILE_SIZE, 0) is True


def test_free_horizontal_move():
    grid = TileGrid([[0, 0, 0]], FLAGS)
    body = Body(x=5, y=0, w=10, h=10, hsp=3)
    assert body.move_horizontal(grid, 2) is False
    assert body.x == 11


def test_horizontal_hit_right_wall_snaps_before_tile():
    grid = TileGrid([[0, 0, 1]], FLAGS)
    body = Body(x=50, y=0, w=10, h=10, hsp=6)
    assert body.move_horizontal(grid, 1) is True
    assert body.x + body.w < 2 * TILE_SIZE
    assert body.tile_collide(grid, 0, 0) is False


def test_horizontal_hit_left_wall_snaps_to_tile_edge():
    grid = TileGrid([[1, 0, 0]], FLAGS)
    body = Body(x=40, y=0, w=10, h=10, hsp=-10)
    assert body.move_horizontal(grid, 1) is True
    assert body.x == TILE_SIZE
    assert body.tile_collide(grid, 0, 0) is False


def test_vertical_fall_onto_floor():
    grid = TileGrid([[0], [0], [1]], FLAGS)
    body = Body(x=0, y=50, w=10, h=10, vsp=6)
    assert body.move_vertical(grid, 1) is True
    assert body.y + body.h < 2 * TILE_SIZE
    assert body.tile_collide(grid, 0, 0) is False
    assert body.tile_collide(grid, 0, 1) is False or body.y + body.h + 1 >= 2 * TILE_SIZE


def test_vertical_hit_ceiling():
    grid = TileGrid([[1], [0], [0]], FLAGS)
    body = Body(x=0, y=40, w=10, h=10, vsp=-10)
    assert body.move_vertical(grid, 1) is True
    assert body.y == TILE_SIZE


def test_free_vertical_move():
    grid = TileGrid([[0], [0]], FLAGS)
    body = Body(x=0, y=2, w=10, h=10, vsp=1.5)
    assert body.move_vertical(grid, 2) is False
    assert body.y == 5