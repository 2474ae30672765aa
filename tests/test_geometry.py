import pytest

from soupdl.geometry import TILE_AIR, TILE_SIZE, Rect, TileGrid, check_rect

SOLID = 1
SPIKE = 2


@pytest.fixture
def grid():
    # 3x3 map: a solid tile (id 1) in the middle, a spike (id 2) bottom-right
    return TileGrid(
        tiles=[[0, 0, 0], [0, 1, 0], [0, 0, 2]],
        tile_flags={1: SOLID, 2: SPIKE},
        outside=1,
    )


def test_overlapping_rects_collide():
    a = Rect(0, 0, 10, 10)
    b = Rect(5, 5, 10, 10)
    assert check_rect(a, b)
    assert check_rect(b, a)


def test_touching_rects_do_not_collide():
    a = Rect(0, 0, 10, 10)
    b = Rect(10, 0, 10, 10)
    assert not check_rect(a, b)
    assert not check_rect(b, a)


def test_contained_rect_collides():
    assert check_rect(Rect(0, 0, 100, 100), Rect(40, 40, 1, 1))


def test_tile_at_inside(grid):
    assert grid.tile_at(TILE_SIZE + 1, TILE_SIZE + 1) == 1
    assert grid.tile_at(0, 0) == 0
    assert grid.tile_at(2 * TILE_SIZE, 2 * TILE_SIZE) == 2


def test_tile_at_outside(grid):
    assert grid.tile_at(-1, 0) == grid.outside
    assert grid.tile_at(0, -5) == grid.outside
    assert grid.tile_at(3 * TILE_SIZE, 0) == grid.outside
    assert grid.tile_at(0, 3 * TILE_SIZE) == grid.outside


def test_tile_at_truncates_floats(grid):
    assert grid.tile_at(TILE_SIZE + 0.9, TILE_SIZE) == 1
    assert grid.tile_at(-0.5, 0) == 0


def test_dimensions(grid):
    assert grid.width == 3
    assert grid.height == 3


def test_rect_hits_id_by_corner(grid):
    rect = Rect(TILE_SIZE - 4, TILE_SIZE - 4, 8, 8)
    assert grid.rect_hits_id(rect, 1)
    assert not grid.rect_hits_id(Rect(0, 0, 8, 8), 1)


def test_rect_hit_flags(grid):
    rect = Rect(TILE_SIZE - 4, TILE_SIZE - 4, 8, 8)
    assert grid.rect_hit_flags(rect, SOLID) == 1
    assert grid.rect_hit_flags(rect, SPIKE) == TILE_AIR
    spike_rect = Rect(2 * TILE_SIZE + 1, 2 * TILE_SIZE + 1, 4, 4)
    assert grid.rect_hit_flags(spike_rect, SPIKE | SOLID) == 2


def test_rect_hit_flags_outside_map(grid):
    assert grid.rect_hit_flags(Rect(-10, 0, 4, 4), SOLID) == grid.outside