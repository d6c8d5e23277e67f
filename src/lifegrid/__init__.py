"""Conway's Game of Life on a fixed 50x25 board."""

__version__ = "0.1.0"

from .core.grid import CellState, Coordinate, Grid
from .core.game import GameOfLife, next_generation
from .core.patterns import Pattern, PatternLibrary

__all__ = ["CellState", "Coordinate", "Grid", "GameOfLife", "next_generation", "Pattern", "PatternLibrary"]
