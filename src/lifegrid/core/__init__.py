"""Core cellular automaton logic."""

from .grid import ConfigurationError, Grid
from .game import GameOfLife
from .engine import ControlState, FrameInput, LifeEngine
from .patterns import Pattern, PatternLibrary

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
