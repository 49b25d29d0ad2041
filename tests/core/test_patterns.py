"""Tests for the Pattern and PatternLibrary classes."""

import pytest
from lifegrid.core.grid import Grid
from lifegrid.core.game import GameOfLife
from lifegrid.core.patterns import Pattern, PatternLibrary


class TestPattern:
    """Test cases for the Pattern class."""

    def test_initialization(self):
        """Test pattern initialization."""
        cells = [(0, 0), (1, 0), (2, 0)]
        pattern = Pattern("Blinker", cells, "Period-2 oscillator")

        assert pattern.name == "Blinker"
        assert pattern.cells == cells
        assert pattern.description == "Period-2 oscillator"

    def test_place_with_offset(self):
        """Placing clears the grid and draws at the offset."""
        grid = Grid(10, 10)
        grid.set_cell(0, 0, True)
        pattern = Pattern("Blinker", [(0, 0), (1, 0), (2, 0)])

        pattern.place(grid, offset_x=5, offset_y=3)

        assert grid.get_cell(5, 3)
        assert grid.get_cell(6, 3)
        assert grid.get_cell(7, 3)
        assert not grid.get_cell(0, 0)
        assert grid.population == 3

    def test_place_out_of_bounds(self):
        """Cells off a bounded grid are skipped."""
        grid = Grid(3, 3)
        pattern = Pattern("Test", [(0, 0), (1, 0), (2, 0), (3, 0)])

        pattern.place(grid)

        assert grid.population == 3

    def test_place_on_wrapped_grid(self):
        """Cells off a toroidal grid wrap around."""
        grid = Grid(3, 3, wrap_edges=True)
        pattern = Pattern("Test", [(3, 0)])

        pattern.place(grid)

        assert grid.get_cell(0, 0)

    def test_cells_are_normalized_to_origin(self):
        """Cells given anywhere are shifted so their bounding box starts at (0, 0)."""
        pattern = Pattern("L", [(1, 0), (1, 1), (1, 2), (2, 2)])
        assert pattern.cells == [(0, 0), (0, 1), (0, 2), (1, 2)]
        assert pattern.get_size() == (2, 3)

        shifted = Pattern("Blinker", [(4, 7), (5, 7), (6, 7)])
        assert shifted.cells == [(0, 0), (1, 0), (2, 0)]
        assert shifted.get_size() == (3, 1)

    def test_duplicate_cells_collapse(self):
        assert Pattern("Dot", [(2, 2), (2, 2)]).cells == [(0, 0)]

    def test_empty_pattern(self):
        pattern = Pattern("Empty", [])
        assert pattern.cells == []
        assert pattern.get_size() == (0, 0)

    @pytest.mark.parametrize(
        "width,height,expected",
        [(5, 5, (1, 2)), (6, 6, (1, 2)), (3, 1, (0, 0)), (2, 2, (0, 0))],
    )
    def test_centered_offset(self, width, height, expected):
        """Centering clamps to the top-left when the pattern is wider than the grid."""
        blinker = Pattern("Blinker", [(0, 0), (1, 0), (2, 0)])
        assert blinker.centered_offset(Grid(width, height)) == expected

    def test_repr(self):
        assert repr(Pattern("Block", [(0, 0), (0, 1), (1, 0), (1, 1)])) == "Pattern('Block', 4 cells)"


class TestPatternLibrary:
    """Test cases for the PatternLibrary class."""

    def test_builtin_patterns(self):
        """The library ships well-known patterns in a stable order."""
        library = PatternLibrary()
        assert library.list_patterns() == ["Block", "Beehive", "Blinker", "Toad", "Beacon", "Glider"]

    def test_get_unknown_pattern(self):
        assert PatternLibrary().get_pattern("Nonexistent") is None

    def test_add_pattern(self):
        library = PatternLibrary()
        library.add_pattern(Pattern("Dot", [(0, 0)]))
        assert library.get_pattern("Dot").cells == [(0, 0)]

    @pytest.mark.parametrize("name", ["Block", "Beehive"])
    def test_still_lifes_are_stable(self, name):
        grid = Grid(10, 10)
        game = GameOfLife(grid)
        PatternLibrary().get_pattern(name).place(grid, 3, 3)
        before = grid.cells.copy()

        game.step()

        assert (grid.cells == before).all()

    @pytest.mark.parametrize("name", ["Blinker", "Toad", "Beacon"])
    def test_oscillators_have_period_two(self, name):
        grid = Grid(10, 10)
        game = GameOfLife(grid)
        PatternLibrary().get_pattern(name).place(grid, 3, 3)
        before = grid.cells.copy()

        game.step()
        assert not (grid.cells == before).all()

        game.step()
        assert (grid.cells == before).all()

    def test_glider_translates(self):
        """After four generations a glider has moved one cell diagonally."""
        grid = Grid(12, 12)
        game = GameOfLife(grid)
        glider = PatternLibrary().get_pattern("Glider")
        glider.place(grid, 2, 2)

        for _ in range(4):
            game.step()

        expected = sorted((x + 3, y + 3) for x, y in glider.cells)
        assert sorted(grid.iter_alive()) == expected
