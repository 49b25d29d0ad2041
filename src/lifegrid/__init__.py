"""Conway's Game of Life engine with run/pause/step/reseed control."""

__version__ = "0.1.0"

from .core.grid import ConfigurationError, Grid
from .core.game import GameOfLife
from .core.engine import ControlState, FrameInput, LifeEngine
from .core.patterns import Pattern, PatternLibrary

__all__ = [
    "ConfigurationError",
    "Grid",
    "GameOfLife",
    "ControlState",
    "FrameInput",
    "LifeEngine",
    "Pattern",
    "PatternLibrary",
]
