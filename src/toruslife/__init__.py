"""Conway's Game of Life on a toroidal grid, animated in the terminal."""

__version__ = "0.1.0"

from .core.grid import Cell, Grid
from .core.game import GameOfLife
from .core.patterns import Pattern, PatternLibrary

__all__ = ["Cell", "Grid", "GameOfLife", "Pattern", "PatternLibrary"]
