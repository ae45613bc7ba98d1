"""Tests for the grid module."""

import numpy as np
import pytest

from vim_snake.grid import ARENA_HEIGHT, ARENA_WIDTH, Arena, CellType, Position, Size


class TestArenaInit:
    def test_default_dimensions(self):
        arena = Arena()
        assert arena.width == ARENA_WIDTH == 50
        assert arena.height == ARENA_HEIGHT == 50

    def test_minimum_size_enforced(self):
        with pytest.raises(ValueError, match="at least 4"):
            Arena(width=3, height=4)
        with pytest.raises(ValueError, match="at least 4"):
            Arena(width=4, height=3)


class TestArenaBounds:
    @pytest.mark.parametrize(
        "position",
        [(-1, 10), (ARENA_WIDTH, 10), (10, -1), (10, ARENA_HEIGHT)],
    )
    def test_each_edge_is_out_of_bounds(self, position):
        assert not Arena().in_bounds(Position(*position))

    def test_last_column_is_in_bounds(self):
        arena = Arena()
        for y in (0, 25, ARENA_HEIGHT - 1):
            assert arena.in_bounds(Position(ARENA_WIDTH - 1, y))

    def test_origin_in_bounds(self):
        assert Arena().in_bounds(Position(0, 0))


class TestOccupancy:
    def test_empty(self):
        arena = Arena(width=5, height=4)
        grid = arena.occupancy([])
        assert grid.shape == (4, 5)
        assert np.all(grid == CellType.EMPTY)

    def test_indexed_by_y_then_x(self):
        arena = Arena(width=5, height=5)
        grid = arena.occupancy([(Position(3, 1), CellType.FOOD)])
        assert grid[1, 3] == CellType.FOOD
        assert grid[3, 1] == CellType.EMPTY

    def test_later_cells_overwrite(self):
        arena = Arena(width=5, height=5)
        grid = arena.occupancy([
            (Position(2, 2), CellType.FOOD),
            (Position(2, 2), CellType.HEAD),
        ])
        assert grid[2, 2] == CellType.HEAD

    def test_out_of_bounds_skipped(self):
        arena = Arena(width=5, height=5)
        grid = arena.occupancy([(Position(5, 0), CellType.HEAD)])
        assert np.all(grid == CellType.EMPTY)

    def test_to_dict(self):
        arena = Arena(width=6, height=4)
        d = arena.to_dict([(Position(0, 0), CellType.SEGMENT)])
        assert d["width"] == 6
        assert d["height"] == 4
        assert len(d["cells"]) == 4
        assert len(d["cells"][0]) == 6
        assert d["cells"][0][0] == CellType.SEGMENT


class TestValueTypes:
    def test_position_equality(self):
        assert Position(1, 2) == Position(1, 2)
        assert Position(1, 2) == (1, 2)

    def test_size_square(self):
        assert Size.square(0.8) == Size(0.8, 0.8)
