"""Tests for the GameOfLife class."""

import itertools

import numpy as np
import pytest
from lifegrid.core.grid import ConfigurationError, Grid
from lifegrid.core.game import GameOfLife


def _reference_step(cells):
    """Straightforward per-cell rule on a bounded grid."""
    width, height = cells.shape
    result = np.zeros_like(cells)
    for x in range(width):
        for y in range(height):
            count = 0
            for dx, dy in itertools.product((-1, 0, 1), repeat=2):
                if (dx or dy) and 0 <= x + dx < width and 0 <= y + dy < height:
                    count += int(cells[x + dx, y + dy])
            result[x, y] = count == 3 or (cells[x, y] and count == 2)
    return result


class TestGameOfLife:
    """Test cases for the GameOfLife class."""

    def test_initialization(self):
        """Test game initialization."""
        grid = Grid(10, 10)
        game = GameOfLife(grid)

        assert game.grid is grid
        assert game.generation == 0
        assert game.population == 0
        assert (game.birth, game.survive_min, game.survive_max) == (3, 2, 3)

    @pytest.mark.parametrize("kwargs", [{"birth": 9}, {"survive_min": 4, "survive_max": 3}, {"survive_min": -1}])
    def test_invalid_thresholds(self, kwargs):
        """Thresholds outside 0-8 or inverted ranges are rejected."""
        with pytest.raises(ConfigurationError):
            GameOfLife(Grid(3, 3), **kwargs)

    def test_single_cell_dies_on_small_grid(self):
        """An isolated cell on a 3x3 grid leaves everything dead."""
        grid = Grid(3, 3)
        game = GameOfLife(grid)
        grid.set_cell(1, 1, True)

        game.step()

        assert game.population == 0
        assert game.generation == 1

    def test_still_life_block(self):
        """Test that a block pattern is stable (still life)."""
        grid = Grid(10, 10)
        game = GameOfLife(grid)

        for x, y in [(4, 4), (4, 5), (5, 4), (5, 5)]:
            grid.set_cell(x, y, True)

        for _ in range(5):
            game.step()

        assert game.population == 4
        assert grid.get_cell(4, 4)
        assert grid.get_cell(5, 5)
        assert game.generation == 5

    def test_oscillator_blinker(self):
        """A blinker away from the border has period 2 on a bounded grid."""
        grid = Grid(5, 5)
        game = GameOfLife(grid)

        grid.set_cell(2, 1, True)
        grid.set_cell(2, 2, True)
        grid.set_cell(2, 3, True)
        initial = grid.cells.copy()

        game.step()
        assert grid.get_cell(1, 2)
        assert grid.get_cell(2, 2)
        assert grid.get_cell(3, 2)
        assert not grid.get_cell(2, 1)
        assert not grid.get_cell(2, 3)

        game.step()
        assert np.array_equal(grid.cells, initial)

    def test_birth_needs_exactly_three(self):
        """A dead cell with exactly 3 neighbors is born."""
        grid = Grid(10, 10)
        game = GameOfLife(grid)

        grid.set_cell(5, 5, True)
        grid.set_cell(5, 6, True)
        grid.set_cell(6, 5, True)

        game.step()

        assert grid.get_cell(6, 6)
        assert game.population == 4

    @pytest.mark.parametrize("neighbors", range(9))
    @pytest.mark.parametrize("alive", [False, True])
    def test_rule_for_every_neighbor_count(self, alive, neighbors):
        """The centre cell's fate depends only on its own state and count."""
        grid = Grid(3, 3)
        game = GameOfLife(grid)
        ring = [(x, y) for x in range(3) for y in range(3) if (x, y) != (1, 1)]
        for x, y in ring[:neighbors]:
            grid.set_cell(x, y, True)
        grid.set_cell(1, 1, alive)

        game.step()

        expected = neighbors == 3 or (alive and neighbors == 2)
        assert grid.get_cell(1, 1) is expected

    def test_update_is_order_independent(self):
        """Every cell's next state follows from the previous generation only."""
        grid = Grid(12, 9)
        game = GameOfLife(grid)
        grid.randomize(0.35, np.random.default_rng(99))

        for _ in range(4):
            expected = _reference_step(np.array(grid.cells))
            game.step()
            assert np.array_equal(grid.cells, expected)

    def test_toroidal_glider_wraps(self):
        """On a wrapped grid a glider crosses the edge and keeps its shape."""
        grid = Grid(8, 8, wrap_edges=True)
        game = GameOfLife(grid)
        for x, y in [(1, 0), (2, 1), (0, 2), (1, 2), (2, 2)]:
            grid.set_cell(x, y, True)

        # A glider moves (1, 1) every 4 generations; 32 generations is a full lap
        for _ in range(32):
            game.step()

        assert game.population == 5
        assert sorted(grid.iter_alive()) == sorted([(1, 0), (2, 1), (0, 2), (1, 2), (2, 2)])

    def test_custom_rule(self):
        """Non-default thresholds are honoured."""
        grid = Grid(5, 5)
        game = GameOfLife(grid, birth=1, survive_min=0, survive_max=0)
        grid.set_cell(2, 2, True)

        game.step()

        # The lone cell survives with 0 neighbors and every neighbor is born
        assert game.population == 9

    def test_reset(self):
        """Test game reset functionality."""
        grid = Grid(5, 5)
        game = GameOfLife(grid)
        grid.set_cell(2, 2, True)
        game.step()
        game.step()
        assert game.generation == 2

        grid.set_cell(1, 1, True)
        game.reset()
        assert game.generation == 0
        assert grid.get_cell(1, 1)

        game.reset(clear_grid=True)
        assert game.population == 0

    def test_get_statistics(self):
        """Test statistics gathering."""
        grid = Grid(10, 10)
        game = GameOfLife(grid)
        for x, y in [(4, 4), (4, 5), (5, 4), (5, 5)]:
            grid.set_cell(x, y, True)

        game.step()
        stats = game.get_statistics()

        assert stats["generation"] == 1
        assert stats["population"] == 4
        assert stats["grid_size"] == (10, 10)
        assert stats["population_density"] == 4.0 / 100
        assert stats["bounding_box"] == (4, 4, 5, 5)
        assert stats["bounding_box_size"] == (2, 2)

    def test_get_statistics_empty_grid(self):
        """Test statistics with empty grid."""
        game = GameOfLife(Grid(10, 10))
        stats = game.get_statistics()

        assert stats["population"] == 0
        assert stats["population_density"] == 0.0
        assert stats["bounding_box"] is None
        assert stats["bounding_box_size"] == (0, 0)
