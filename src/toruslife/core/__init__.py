"""Core cellular automaton logic."""

from .grid import Cell, Grid
from .game import GameOfLife
from .patterns import Pattern, PatternLibrary

__all__ = ["Cell", "Grid", "GameOfLife", "Pattern", "PatternLibrary"]
