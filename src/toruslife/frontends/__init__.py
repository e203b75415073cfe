"""Frontend interfaces for the toroidal Game of Life."""

from .terminal import TerminalGameOfLife

__all__ = ["TerminalGameOfLife"]
