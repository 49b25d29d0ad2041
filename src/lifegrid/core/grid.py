"""Double-buffered grid storage for the Life engine."""

from typing import Iterator, Optional, Tuple
import numpy as np
import torch
import torch.nn.functional as F


class ConfigurationError(ValueError):
    """Raised when an engine or grid is constructed with invalid settings."""


class Grid:
    """A fixed-size 2D grid of alive/dead cells with two generation buffers.

    Cells are stored in numpy boolean arrays indexed as ``[x, y]``. Only the
    current buffer is exposed to readers; the next buffer is scratch space the
    update rule writes into before the two are swapped.
    """

    def __init__(self, width: int, height: int, wrap_edges: bool = False) -> None:
        """Initialize a new grid.

        Args:
            width: Number of columns
            height: Number of rows
            wrap_edges: Whether edges wrap around (toroidal topology)

        Raises:
            ConfigurationError: If either dimension is not positive
        """
        if width <= 0 or height <= 0:
            raise ConfigurationError(f"Grid dimensions must be positive, got {width}x{height}")

        self._width = width
        self._height = height
        self._wrap_edges = wrap_edges
        self._buffers = (
            np.zeros((width, height), dtype=np.bool_),
            np.zeros((width, height), dtype=np.bool_),
        )
        self._current = 0

        # Reused for every neighbor count
        self._torch_input = torch.zeros(1, 1, height, width, dtype=torch.float32)
        self._torch_kernel = (
            torch.tensor([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=torch.float32).unsqueeze(0).unsqueeze(0)
        )

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def wrap_edges(self) -> bool:
        return self._wrap_edges

    @property
    def shape(self) -> Tuple[int, int]:
        """Get grid dimensions as (width, height)."""
        return (self._width, self._height)

    @property
    def cells(self) -> np.ndarray:
        """Read-only view of the current buffer.

        The view tracks whichever buffer is current at the time it is taken;
        take a fresh one after every advance.
        """
        view = self._buffers[self._current].view()
        view.flags.writeable = False
        return view

    @property
    def next_cells(self) -> np.ndarray:
        """Writable scratch buffer for the next generation."""
        return self._buffers[1 - self._current]

    def swap(self) -> None:
        """Make the next buffer current."""
        self._current = 1 - self._current

    def _resolve(self, x: int, y: int) -> Tuple[int, int]:
        if self._wrap_edges:
            return x % self._width, y % self._height
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(f"Coordinates ({x}, {y}) out of bounds")
        return x, y

    def get_cell(self, x: int, y: int) -> bool:
        """Get the state of a cell.

        Args:
            x: Column coordinate
            y: Row coordinate

        Returns:
            True if cell is alive, False if dead

        Raises:
            IndexError: If coordinates are out of bounds and wrap_edges is False
        """
        x, y = self._resolve(x, y)
        return bool(self._buffers[self._current][x, y])

    def set_cell(self, x: int, y: int, alive: bool) -> None:
        """Set the state of a cell in the current buffer.

        Raises:
            IndexError: If coordinates are out of bounds and wrap_edges is False
        """
        x, y = self._resolve(x, y)
        self._buffers[self._current][x, y] = alive

    def clear(self) -> None:
        """Set every cell dead."""
        self._buffers[self._current].fill(False)

    def randomize(self, probability: float, rng: np.random.Generator) -> None:
        """Overwrite the current buffer with independent random cells.

        Args:
            probability: Chance each cell will be alive (0.0 to 1.0)
            rng: Random source to draw from
        """
        np.less(rng.random((self._width, self._height)), probability, out=self._buffers[self._current])

    @property
    def population(self) -> int:
        """Get the number of living cells."""
        return int(np.count_nonzero(self._buffers[self._current]))

    def get_neighbors(self, x: int, y: int) -> int:
        """Count living neighbors of a single cell (0-8)."""
        cells = self._buffers[self._current]
        count = 0
        for dx in (-1, 0, 1):
            for dy in (-1, 0, 1):
                if dx == 0 and dy == 0:
                    continue

                nx, ny = x + dx, y + dy

                if self._wrap_edges:
                    count += int(cells[nx % self._width, ny % self._height])
                elif 0 <= nx < self._width and 0 <= ny < self._height:
                    count += int(cells[nx, ny])

        return count

    def count_all_neighbors(self) -> np.ndarray:
        """Count neighbors for every cell with a single convolution.

        Returns:
            (width, height) integer array of Moore-neighborhood counts
        """
        # torch expects (height, width), so transpose on the way in and out
        self._torch_input[0, 0] = torch.from_numpy(self._buffers[self._current].T.astype(np.float32))

        if self._wrap_edges:
            padded = F.pad(self._torch_input, (1, 1, 1, 1), mode="circular")
            neighbors = F.conv2d(padded, self._torch_kernel)
        else:
            neighbors = F.conv2d(self._torch_input, self._torch_kernel, padding=1)

        return neighbors[0, 0].numpy().astype(np.int8).T

    def iter_alive(self) -> Iterator[Tuple[int, int]]:
        """Yield (x, y) coordinates of living cells."""
        xs, ys = np.nonzero(self._buffers[self._current])
        for x, y in zip(xs, ys):
            yield (int(x), int(y))

    def get_bounding_box(self) -> Optional[Tuple[int, int, int, int]]:
        """Get bounding box of living cells.

        Returns:
            Tuple of (min_x, min_y, max_x, max_y) or None if no living cells
        """
        xs, ys = np.nonzero(self._buffers[self._current])
        if len(xs) == 0:
            return None
        return (int(xs.min()), int(ys.min()), int(xs.max()), int(ys.max()))

    def __str__(self) -> str:
        """String representation showing living cells as '*' and dead as '.'."""
        cells = self._buffers[self._current]
        rows = []
        for y in range(self._height):
            rows.append("".join("*" if cells[x, y] else "." for x in range(self._width)))
        return "\n".join(rows)
