"""Tests for TileGrid, Bresenham lines and room rectangles."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from dungeon.core.grid import Tile, TileGrid, bresenham
from dungeon.core.models import Rect, Vector2


class TestTileGrid:
    def test_new_grid_is_solid_rock(self):
        grid = TileGrid(6, 4)
        for x, y in grid.coords():
            tile = grid.tile(x, y)
            assert tile.blocked and tile.blocks_sight and not tile.explored

    def test_carve_opens_cell(self):
        grid = TileGrid(6, 4)
        grid.carve(2, 1)
        assert not grid.is_blocked(2, 1)
        assert not grid.blocks_sight(2, 1)
        assert grid.is_blocked(3, 1)

    def test_carve_keeps_explored_memory(self):
        grid = TileGrid(6, 4)
        grid.mark_explored(2, 1)
        grid.carve(2, 1)
        assert grid.tile(2, 1).explored

    def test_out_of_range_raises(self):
        grid = TileGrid(6, 4)
        with pytest.raises(IndexError):
            grid.tile(6, 0)
        with pytest.raises(IndexError):
            grid.is_blocked(0, -1)

    def test_in_bounds(self):
        grid = TileGrid(6, 4)
        assert grid.in_bounds(5, 3)
        assert not grid.in_bounds(6, 3)
        assert not grid.in_bounds(-1, 0)

    def test_tile_factories(self):
        assert Tile.wall() == Tile(blocked=True, blocks_sight=True)
        assert Tile.empty() == Tile(blocked=False, blocks_sight=False)


class TestBresenham:
    def test_bresenham_includes_both_ends(self):
        cells = list(bresenham(0, 0, 4, 2))
        assert cells[0] == (0, 0)
        assert cells[-1] == (4, 2)
        assert len(cells) == 5

    def test_bresenham_single_cell(self):
        assert list(bresenham(3, 3, 3, 3)) == [(3, 3)]

    def test_steps_are_adjacent(self):
        cells = list(bresenham(7, 1, 0, 5))
        for (ax, ay), (bx, by) in zip(cells, cells[1:]):
            assert max(abs(ax - bx), abs(ay - by)) == 1

    def test_straight_line(self):
        assert list(bresenham(2, 1, 2, 4)) == [(2, 1), (2, 2), (2, 3), (2, 4)]


class TestRect:
    def test_from_size_and_center(self):
        room = Rect.from_size(1, 1, 10, 10)
        assert room == Rect(1, 1, 11, 11)
        assert room.center() == Vector2(6, 6)

    def test_center_rounds_down(self):
        assert Rect(0, 0, 5, 3).center() == Vector2(2, 1)

    def test_interior_excludes_border(self):
        room = Rect.from_size(0, 0, 10, 10)
        cells = room.interior()
        assert len(cells) == 81
        assert Vector2(0, 0) not in cells
        assert Vector2(1, 1) in cells
        assert Vector2(9, 9) in cells
        assert Vector2(10, 5) not in cells

    def test_overlap_intersects(self):
        assert Rect(0, 0, 5, 5).intersects(Rect(3, 3, 8, 8))

    def test_shared_edge_counts_as_intersection(self):
        assert Rect(0, 0, 5, 5).intersects(Rect(5, 0, 10, 5))
        assert Rect(0, 0, 5, 5).intersects(Rect(0, 5, 5, 10))

    def test_separated_rooms_do_not_intersect(self):
        assert not Rect(0, 0, 5, 5).intersects(Rect(6, 0, 10, 5))
        assert not Rect(0, 0, 5, 5).intersects(Rect(0, 6, 5, 10))

    def test_intersects_is_symmetric(self):
        a, b = Rect(2, 2, 6, 6), Rect(6, 6, 9, 9)
        assert a.intersects(b) == b.intersects(a)
