"""Conway's Game of Life update rule."""

from typing import Dict

import numpy as np

from .grid import ConfigurationError, Grid


class GameOfLife:
    """Applies the Life rule to a grid one generation at a time.

    Implements the classic rules by default:
    - Live cell with 2-3 neighbors survives
    - Dead cell with exactly 3 neighbors becomes alive
    - All other cells die or stay dead
    """

    def __init__(
        self,
        grid: Grid,
        birth: int = 3,
        survive_min: int = 2,
        survive_max: int = 3,
    ) -> None:
        """Initialize the game with a grid.

        Args:
            grid: The cellular grid to simulate
            birth: Exact neighbor count that brings a dead cell to life
            survive_min: Fewest neighbors a live cell needs to survive
            survive_max: Most neighbors a live cell can have and survive

        Raises:
            ConfigurationError: If the thresholds are outside 0-8 or inverted
        """
        if not (0 <= birth <= 8 and 0 <= survive_min <= survive_max <= 8):
            raise ConfigurationError(
                f"Invalid rule thresholds: birth={birth}, survive={survive_min}..{survive_max}"
            )

        self.grid = grid
        self.birth = birth
        self.survive_min = survive_min
        self.survive_max = survive_max
        self._generation = 0

    @property
    def generation(self) -> int:
        """Generations advanced since the last reset."""
        return self._generation

    @property
    def population(self) -> int:
        """Current number of living cells."""
        return self.grid.population

    def step(self) -> None:
        """Advance the simulation by one generation."""
        self._apply_rules()
        self._generation += 1

    def _apply_rules(self) -> None:
        """Compute the next generation into the scratch buffer, then swap."""
        neighbor_counts = self.grid.count_all_neighbors()
        cells = self.grid.cells
        survive = cells & (neighbor_counts >= self.survive_min) & (neighbor_counts <= self.survive_max)
        born = ~cells & (neighbor_counts == self.birth)
        np.logical_or(survive, born, out=self.grid.next_cells)
        self.grid.swap()

    def reset(self, clear_grid: bool = False) -> None:
        """Reset the generation counter.

        Args:
            clear_grid: Whether to clear the grid as well
        """
        if clear_grid:
            self.grid.clear()
        self._generation = 0

    def get_statistics(self) -> Dict:
        """Get simulation statistics.

        Returns:
            Dictionary with generation, population, density and bounding box
        """
        bbox = self.grid.get_bounding_box()
        stats = {
            "generation": self._generation,
            "population": self.population,
            "grid_size": self.grid.shape,
            "population_density": self.population / (self.grid.width * self.grid.height),
            "bounding_box": bbox,
        }

        if bbox:
            stats["bounding_box_size"] = (bbox[2] - bbox[0] + 1, bbox[3] - bbox[1] + 1)
        else:
            stats["bounding_box_size"] = (0, 0)

        return stats
