"""Common Conway's Game of Life patterns."""

from typing import Dict, Iterable, List, Optional, Tuple

from .grid import Grid


class Pattern:
    """A named arrangement of live cells, anchored at the origin.

    Cells are shifted on construction so the top-left corner of their
    bounding box is (0, 0); offsets passed to :meth:`place` then position
    that corner directly.
    """

    def __init__(self, name: str, cells: Iterable[Tuple[int, int]], description: str = "") -> None:
        """Initialize a pattern.

        Args:
            name: Pattern name
            cells: (x, y) coordinates of living cells, in any frame of reference
            description: Optional description
        """
        cells = sorted(set(cells))
        if cells:
            min_x = min(x for x, _ in cells)
            min_y = min(y for _, y in cells)
            cells = [(x - min_x, y - min_y) for x, y in cells]

        self.name = name
        self.cells: List[Tuple[int, int]] = cells
        self.description = description

    @property
    def width(self) -> int:
        return max((x for x, _ in self.cells), default=-1) + 1

    @property
    def height(self) -> int:
        return max((y for _, y in self.cells), default=-1) + 1

    def get_size(self) -> Tuple[int, int]:
        """Get pattern size as (width, height); an empty pattern is (0, 0)."""
        return (self.width, self.height)

    def centered_offset(self, grid: Grid) -> Tuple[int, int]:
        """Offset that centers this pattern on a grid, clamped to the top-left."""
        return (max(0, (grid.width - self.width) // 2), max(0, (grid.height - self.height) // 2))

    def place(self, grid: Grid, offset_x: int = 0, offset_y: int = 0) -> None:
        """Clear a grid and draw this pattern with its corner at the offset.

        Cells beyond the edge of a bounded grid are dropped; a wrapped grid
        folds them back in.
        """
        grid.clear()
        for x, y in self.cells:
            try:
                grid.set_cell(x + offset_x, y + offset_y, True)
            except IndexError:
                continue

    def __repr__(self) -> str:
        return f"Pattern({self.name!r}, {len(self.cells)} cells)"


class PatternLibrary:
    """A collection of well-known patterns, looked up by name."""

    def __init__(self) -> None:
        self._patterns: Dict[str, Pattern] = {}
        self._load_builtin_patterns()

    def _load_builtin_patterns(self) -> None:
        # Still lifes
        self.add_pattern(Pattern("Block", [(0, 0), (0, 1), (1, 0), (1, 1)], "2x2 still life block"))
        self.add_pattern(
            Pattern("Beehive", [(1, 0), (2, 0), (0, 1), (3, 1), (1, 2), (2, 2)], "Beehive still life")
        )

        # Oscillators
        self.add_pattern(Pattern("Blinker", [(0, 0), (1, 0), (2, 0)], "Period-2 oscillator"))
        self.add_pattern(
            Pattern("Toad", [(1, 0), (2, 0), (3, 0), (0, 1), (1, 1), (2, 1)], "Period-2 oscillator")
        )
        self.add_pattern(
            Pattern("Beacon", [(0, 0), (1, 0), (0, 1), (3, 2), (2, 3), (3, 3)], "Period-2 oscillator")
        )

        # Spaceships
        self.add_pattern(
            Pattern("Glider", [(1, 0), (2, 1), (0, 2), (1, 2), (2, 2)], "Smallest spaceship, period-4")
        )

    def add_pattern(self, pattern: Pattern) -> None:
        self._patterns[pattern.name] = pattern

    def get_pattern(self, name: str) -> Optional[Pattern]:
        """Look up a pattern by name, returning None if it is unknown."""
        return self._patterns.get(name)

    def list_patterns(self) -> List[str]:
        return list(self._patterns)
