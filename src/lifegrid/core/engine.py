"""Frame-driven control of a Game of Life simulation.

The engine owns the grid, the run/pause state, the step timer and the random
source used for reseeding. A host calls :meth:`LifeEngine.update` once per
frame with the elapsed time and the frame's input intents, then reads
:meth:`LifeEngine.current_grid` to draw.
"""

from enum import Enum
from typing import Dict, NamedTuple, Optional
import logging

import numpy as np

from .game import GameOfLife
from .grid import ConfigurationError, Grid
from .patterns import Pattern

logger = logging.getLogger(__name__)

DEFAULT_WIDTH = 200
DEFAULT_HEIGHT = 200
DEFAULT_SCALE = 4
DEFAULT_FPS = 15
DEFAULT_DENSITY = 0.5

# Relative slack when comparing the timer against whole intervals
_TIMER_EPSILON = 1e-9


class ControlState(Enum):
    RUNNING = "running"
    PAUSED = "paused"


class FrameInput(NamedTuple):
    """Input intents collected by the host during one frame."""

    toggle_pause: bool = False
    step: bool = False
    reseed: bool = False


class LifeEngine:
    """Game of Life engine with run/pause/step/reseed control.

    Timing policy is drain-and-catch-up: a running engine advances one
    generation for every whole generation interval accumulated in its timer,
    so a stalled host catches up instead of dropping generations. Pass
    ``max_catch_up`` to cap the generations advanced by a single tick; any
    backlog beyond the cap is discarded.
    """

    def __init__(
        self,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        generation_interval: float = 1.0 / DEFAULT_FPS,
        density: float = DEFAULT_DENSITY,
        wrap_edges: bool = False,
        max_catch_up: Optional[int] = None,
        rng: Optional[np.random.Generator] = None,
        seed: Optional[int] = None,
        populate: bool = True,
    ) -> None:
        """Create an engine.

        Args:
            width: Number of columns
            height: Number of rows
            generation_interval: Seconds between generations while running
            density: Probability each cell is alive after a reseed
            wrap_edges: Use toroidal edges instead of bounded ones
            max_catch_up: Most generations a single tick may advance (None for no cap)
            rng: Random source for reseeding; built from ``seed`` if omitted
            seed: Seed for the default random source
            populate: Randomize the grid immediately; otherwise start all dead

        Raises:
            ConfigurationError: If any setting is out of range
        """
        if generation_interval <= 0:
            raise ConfigurationError(f"Generation interval must be positive, got {generation_interval}")
        if not 0.0 <= density <= 1.0:
            raise ConfigurationError(f"Density must be between 0.0 and 1.0, got {density}")
        if max_catch_up is not None and max_catch_up < 1:
            raise ConfigurationError(f"max_catch_up must be at least 1, got {max_catch_up}")

        self._grid = Grid(width, height, wrap_edges=wrap_edges)
        self._game = GameOfLife(self._grid)
        self._interval = float(generation_interval)
        self._max_catch_up = max_catch_up
        self.density = density
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self._state = ControlState.RUNNING
        self._timer = 0.0

        logger.debug(
            "Created %dx%d engine (interval %.4fs, density %.2f, wrap %s)",
            width,
            height,
            self._interval,
            density,
            wrap_edges,
        )

        if populate:
            self.randomize()

    @property
    def grid(self) -> Grid:
        return self._grid

    @property
    def width(self) -> int:
        return self._grid.width

    @property
    def height(self) -> int:
        return self._grid.height

    @property
    def state(self) -> ControlState:
        return self._state

    @property
    def running(self) -> bool:
        return self._state is ControlState.RUNNING

    @property
    def paused(self) -> bool:
        return self._state is ControlState.PAUSED

    @property
    def timer(self) -> float:
        """Seconds accumulated since the last generation advance."""
        return self._timer

    @property
    def generation_interval(self) -> float:
        return self._interval

    @property
    def generation(self) -> int:
        return self._game.generation

    @property
    def population(self) -> int:
        return self._game.population

    def current_grid(self) -> np.ndarray:
        """Read-only ``(width, height)`` boolean view of the current generation."""
        return self._grid.cells

    def initialize(self, seed: Optional[int] = None) -> None:
        """Replace the random source with a seeded one and reseed the grid."""
        self.rng = np.random.default_rng(seed)
        self.randomize()

    def randomize(self) -> None:
        """Fill the grid with random cells and reset the timer.

        The control state is left as it is.
        """
        self._grid.randomize(self.density, self.rng)
        self._game.reset()
        self._timer = 0.0
        logger.debug("Reseeded grid, population %d", self._game.population)

    def load_pattern(self, pattern: Pattern, offset_x: Optional[int] = None, offset_y: Optional[int] = None) -> None:
        """Replace the grid contents with a pattern, centered unless offsets are given."""
        center_x, center_y = pattern.centered_offset(self._grid)
        if offset_x is None:
            offset_x = center_x
        if offset_y is None:
            offset_y = center_y

        pattern.place(self._grid, offset_x, offset_y)
        self._game.reset()
        self._timer = 0.0

    def toggle_pause(self) -> None:
        """Flip between running and paused. Grid and timer are untouched."""
        if self._state is ControlState.RUNNING:
            self._state = ControlState.PAUSED
        else:
            self._state = ControlState.RUNNING
        logger.debug("Engine %s at generation %d", self._state.value, self._game.generation)

    def request_step(self) -> bool:
        """Advance one generation if paused.

        Returns:
            True if a generation was advanced, False if the engine is running
        """
        if self._state is ControlState.RUNNING:
            return False

        self._game.step()
        self._timer = 0.0
        return True

    def tick(self, elapsed: float) -> int:
        """Account for elapsed frame time and advance any due generations.

        Args:
            elapsed: Seconds since the previous tick

        Returns:
            Number of generations advanced

        Raises:
            ValueError: If elapsed is negative
        """
        if elapsed < 0:
            raise ValueError(f"Elapsed time cannot be negative, got {elapsed}")

        self._timer += elapsed
        if self._state is ControlState.PAUSED:
            return 0

        due = int(self._timer // self._interval)
        remainder = self._timer - due * self._interval
        tolerance = _TIMER_EPSILON * self._interval
        if self._interval - remainder <= tolerance:
            due += 1
            remainder = 0.0
        elif remainder < tolerance:
            remainder = 0.0

        if self._max_catch_up is not None and due > self._max_catch_up:
            logger.debug("Discarding %d generations of backlog", due - self._max_catch_up)
            due = self._max_catch_up

        for _ in range(due):
            self._game.step()

        self._timer = remainder
        return due

    def update(self, elapsed: float, frame_input: FrameInput = FrameInput()) -> int:
        """Run one host frame.

        The step request is handled first, then the timer, then the pause
        toggle and finally the reseed.

        Args:
            elapsed: Seconds since the previous frame
            frame_input: Intents collected during the frame

        Returns:
            Number of generations advanced during this frame
        """
        advanced = 0
        if frame_input.step and self.request_step():
            advanced += 1

        advanced += self.tick(elapsed)

        if frame_input.toggle_pause:
            self.toggle_pause()

        if frame_input.reseed:
            self.randomize()

        return advanced

    def get_statistics(self) -> Dict:
        """Game statistics plus the engine's control state and timer."""
        stats = self._game.get_statistics()
        stats["state"] = self._state.value
        stats["timer"] = self._timer
        stats["generation_interval"] = self._interval
        return stats
