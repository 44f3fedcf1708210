"""Tests for random fill and automaton smoothing."""

import numpy as np
import pytest

from cavegen.exceptions import InvalidDimensionsError, InvalidParameterError
from cavegen.generation.automaton import (
    count_adjacent_walls,
    initialize_grid,
    smooth_grid,
    smooth_step,
)
from cavegen.grid import CaveGrid
from cavegen.types import Cell


class TestInitializeGrid:
    """Tests for random interior fill."""

    def test_zero_probability_opens_interior(self):
        grid = initialize_grid(10, 10, 0.0, np.random.default_rng(1))
        assert grid.count(Cell.PATH) == 64
        assert grid.border_is_wall()

    def test_full_probability_fills_interior(self):
        grid = initialize_grid(10, 10, 1.0, np.random.default_rng(1))
        assert grid.count(Cell.WALL) == 100

    def test_one_draw_per_interior_cell(self, scripted_random):
        rng = scripted_random(default_float=0.5)
        initialize_grid(7, 5, 0.45, rng)
        assert rng.calls == [("random",)] * (5 * 3)

    def test_draws_fill_rows_then_columns(self, scripted_random):
        """Draws are consumed row-major: y outer, x inner."""
        rng = scripted_random(floats=[0.1, 0.9, 0.9, 0.1])
        grid = initialize_grid(4, 4, 0.5, rng)

        assert grid.cells[1, 1] == Cell.WALL
        assert grid.cells[1, 2] == Cell.PATH
        assert grid.cells[2, 1] == Cell.PATH
        assert grid.cells[2, 2] == Cell.WALL

    def test_draw_equal_to_probability_is_path(self, scripted_random):
        rng = scripted_random(default_float=0.45)
        grid = initialize_grid(3, 3, 0.45, rng)
        assert grid.cells[1, 1] == Cell.PATH

    def test_same_seed_same_grid(self):
        a = initialize_grid(30, 20, 0.45, np.random.default_rng(7))
        b = initialize_grid(30, 20, 0.45, np.random.default_rng(7))
        assert a == b

    def test_too_small_rejected(self):
        with pytest.raises(InvalidDimensionsError):
            initialize_grid(2, 10, 0.45, np.random.default_rng(0))

    @pytest.mark.parametrize("probability", [-0.01, 1.01])
    def test_bad_probability_rejected(self, probability):
        with pytest.raises(InvalidParameterError, match="fill_probability"):
            initialize_grid(10, 10, probability, np.random.default_rng(0))


class TestCountAdjacentWalls:
    """Tests for Moore neighborhood wall counting."""

    def test_interior_corner_sees_border(self, open_grid):
        assert count_adjacent_walls(open_grid, 1, 1) == 5

    def test_interior_edge_sees_border(self, open_grid):
        assert count_adjacent_walls(open_grid, 4, 1) == 3

    def test_center_of_open_space(self, open_grid):
        assert count_adjacent_walls(open_grid, 5, 5) == 0

    def test_cell_itself_not_counted(self, make_grid):
        grid = make_grid([
            "#####",
            "#...#",
            "#.#.#",
            "#...#",
            "#####",
        ])
        assert count_adjacent_walls(grid, 2, 2) == 0


class TestSmoothStep:
    """Tests for a single smoothing pass."""

    def test_isolated_wall_opens(self, make_grid):
        grid = make_grid([
            "#######",
            "#.....#",
            "#.....#",
            "#..#..#",
            "#.....#",
            "#.....#",
            "#######",
        ])
        assert smooth_step(grid).cells[3, 3] == Cell.PATH

    def test_enclosed_path_closes(self, make_grid):
        grid = make_grid([
            "#######",
            "#.....#",
            "#.###.#",
            "#.#.#.#",
            "#.###.#",
            "#.....#",
            "#######",
        ])
        assert smooth_step(grid).cells[3, 3] == Cell.WALL

    def test_four_walls_keeps_path(self, make_grid):
        grid = make_grid([
            "#######",
            "#.....#",
            "#.###.#",
            "#.#...#",
            "#.....#",
            "#.....#",
            "#######",
        ])
        assert count_adjacent_walls(grid, 3, 3) == 4
        assert smooth_step(grid).cells[3, 3] == Cell.PATH

    def test_four_walls_keeps_wall(self, make_grid):
        grid = make_grid([
            "#######",
            "#.....#",
            "#.###.#",
            "#.##..#",
            "#.....#",
            "#.....#",
            "#######",
        ])
        assert count_adjacent_walls(grid, 3, 3) == 4
        assert smooth_step(grid).cells[3, 3] == Cell.WALL

    def test_open_interior_rounds_corners(self, open_grid):
        """Interior corners see five border walls; edges see only three."""
        result = smooth_step(open_grid)

        for x, y in [(1, 1), (8, 1), (1, 8), (8, 8)]:
            assert result.cells[y, x] == Cell.WALL
        assert result.cells[1, 4] == Cell.PATH
        assert result.count(Cell.WALL) == 36 + 4

    def test_matches_per_cell_rule(self):
        """Vectorized pass agrees with the cell-by-cell rule."""
        grid = initialize_grid(25, 18, 0.45, np.random.default_rng(42))
        result = smooth_step(grid)

        for y in range(1, grid.height - 1):
            for x in range(1, grid.width - 1):
                walls = count_adjacent_walls(grid, x, y)
                if walls >= 5:
                    expected = Cell.WALL
                elif walls <= 3:
                    expected = Cell.PATH
                else:
                    expected = grid.cells[y, x]
                assert result.cells[y, x] == expected, (x, y)

    def test_border_stays_wall(self):
        grid = initialize_grid(20, 20, 0.2, np.random.default_rng(3))
        assert smooth_step(grid).border_is_wall()


class TestSmoothGrid:
    """Tests for repeated smoothing."""

    def test_input_not_mutated(self):
        grid = initialize_grid(20, 15, 0.45, np.random.default_rng(5))
        before = grid.cells.copy()
        smooth_grid(grid, 3)
        np.testing.assert_array_equal(grid.cells, before)

    def test_zero_iterations_returns_copy(self, open_grid):
        result = smooth_grid(open_grid, 0)
        assert result == open_grid
        assert result is not open_grid

    def test_iterations_feed_forward(self):
        grid = initialize_grid(20, 15, 0.45, np.random.default_rng(5))
        assert smooth_grid(grid, 2) == smooth_step(smooth_step(grid))

    def test_negative_iterations_rejected(self, open_grid):
        with pytest.raises(InvalidParameterError):
            smooth_grid(open_grid, -1)

    def test_consumes_no_draws(self):
        """Smoothing is deterministic and takes no random source."""
        grid = CaveGrid(12, 12, fill=Cell.PATH)
        assert smooth_grid(grid, 4) == smooth_grid(grid, 4)
