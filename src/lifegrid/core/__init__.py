"""Core cellular automata logic."""

from .grid import HEIGHT, WIDTH, CellState, Coordinate, Grid
from .rules import neighbors, next_state
from .game import GameOfLife, next_generation
from .patterns import Pattern, PatternLibrary, default_seed

__all__ = [
    "HEIGHT",
    "WIDTH",
    "CellState",
    "Coordinate",
    "Grid",
    "neighbors",
    "next_state",
    "GameOfLife",
    "next_generation",
    "Pattern",
    "PatternLibrary",
    "default_seed",
]
