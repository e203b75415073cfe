"""Toroidal grid data structure for Conway's Game of Life."""

from enum import IntEnum
from typing import Iterable, Tuple
import numpy as np
import torch
import torch.nn.functional as F


DEAD_GLYPH = "   "
ALIVE_GLYPH = " ◼ "


class Cell(IntEnum):
    """State of a single grid position."""

    DEAD = 0
    ALIVE = 1

    def toggled(self) -> "Cell":
        """Return the opposite state."""
        return Cell.DEAD if self is Cell.ALIVE else Cell.ALIVE


class Grid:
    """A rectangular torus of cells advanced by the B3/S23 rule.

    Cells live in a flat numpy buffer of length ``width * height``, indexed
    row-major as ``row * width + column``. Edges wrap around, so every cell
    has exactly eight neighbours.
    """

    def __init__(self, width: int, height: int, div_a: int, div_b: int) -> None:
        """Initialize a new grid with a deterministic fill.

        The cell at linear index ``i`` starts alive when ``i`` is a multiple
        of ``div_a`` or of ``div_b``.

        Args:
            width: Number of columns
            height: Number of rows
            div_a: First divisor of the fill pattern
            div_b: Second divisor of the fill pattern

        Raises:
            ValueError: If a dimension or divisor is less than 1
        """
        _check_positive("width", width)
        _check_positive("height", height)
        _check_positive("div_a", div_a)
        _check_positive("div_b", div_b)

        self._width = width
        self._height = height

        # Set single-threaded, the automaton never computes cells in parallel
        torch.set_num_threads(1)
        self._torch_kernel = (
            torch.tensor([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=torch.float32).unsqueeze(0).unsqueeze(0)
        )
        self._allocate()

        indices = np.arange(width * height)
        alive = (indices % div_a == 0) | (indices % div_b == 0)
        self._cells[alive] = Cell.ALIVE

    def _allocate(self) -> None:
        """Replace the buffer with an all-dead one sized for the current dimensions."""
        self._cells = np.zeros(self._width * self._height, dtype=np.int8)
        # Reused input tensor for convolution, shaped (batch, channel, rows, columns)
        self._torch_input = torch.zeros(1, 1, self._height, self._width, dtype=torch.float32)

    @property
    def width(self) -> int:
        """Number of columns."""
        return self._width

    @property
    def height(self) -> int:
        """Number of rows."""
        return self._height

    @property
    def shape(self) -> Tuple[int, int]:
        """Get grid dimensions as (height, width)."""
        return (self._height, self._width)

    @property
    def cells(self) -> np.ndarray:
        """Read-only view of the current generation."""
        return self.get_cells()

    def get_cells(self) -> np.ndarray:
        """Get the flat cell buffer without copying it.

        Returns:
            A read-only view. It keeps showing this generation after the next
            ``tick()``, which swaps in a new buffer instead of writing here.
        """
        view = self._cells.view()
        view.flags.writeable = False
        return view

    @property
    def population(self) -> int:
        """Get the number of living cells."""
        return int(np.count_nonzero(self._cells))

    def index(self, row: int, column: int) -> int:
        """Get the linear buffer index of a cell.

        Raises:
            IndexError: If the coordinates fall outside the grid
        """
        if not (0 <= row < self._height and 0 <= column < self._width):
            raise IndexError(
                f"Coordinates ({row}, {column}) out of bounds for {self._width}x{self._height} grid"
            )
        return row * self._width + column

    def get_cell(self, row: int, column: int) -> Cell:
        """Get the state of a cell.

        Raises:
            IndexError: If the coordinates fall outside the grid
        """
        return Cell(int(self._cells[self.index(row, column)]))

    def set_cells(self, coords: Iterable[Tuple[int, int]]) -> None:
        """Make the given cells alive.

        Every coordinate is checked before any cell changes, so a bad pair
        leaves the grid untouched.

        Args:
            coords: (row, column) pairs

        Raises:
            IndexError: If any pair falls outside the grid
        """
        indices = [self.index(row, column) for row, column in coords]
        self._cells[indices] = Cell.ALIVE

    def toggle_cell(self, row: int, column: int) -> Cell:
        """Flip a cell between dead and alive.

        Returns:
            New state of the cell

        Raises:
            IndexError: If the coordinates fall outside the grid
        """
        idx = self.index(row, column)
        new_state = Cell(int(self._cells[idx])).toggled()
        self._cells[idx] = new_state
        return new_state

    def reset(self) -> None:
        """Kill every cell, keeping the dimensions."""
        self._cells = np.zeros(self._width * self._height, dtype=np.int8)

    def set_width(self, width: int) -> None:
        """Set the number of columns.

        Resets all cells to the dead state.
        """
        _check_positive("width", width)
        self._width = width
        self._allocate()

    def set_height(self, height: int) -> None:
        """Set the number of rows.

        Resets all cells to the dead state.
        """
        _check_positive("height", height)
        self._height = height
        self._allocate()

    def live_neighbor_count(self, row: int, column: int) -> int:
        """Count living neighbors of a cell, wrapping at the edges.

        Args:
            row: Row coordinate
            column: Column coordinate

        Returns:
            Number of living neighbors (0-8)
        """
        # Offsets of height - 1 and width - 1 stand for -1; on a 1-wide or
        # 1-tall torus they collapse to 0 and are skipped like the (0, 0) offset
        count = 0
        for delta_row in (self._height - 1, 0, 1):
            for delta_col in (self._width - 1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue

                neighbor_row = (row + delta_row) % self._height
                neighbor_col = (column + delta_col) % self._width
                count += int(self._cells[neighbor_row * self._width + neighbor_col])

        return count

    def count_all_neighbors(self) -> np.ndarray:
        """Count neighbors for all cells using PyTorch-accelerated convolution.

        Returns:
            2D array of shape (height, width) with neighbor counts for each cell
        """
        if min(self._width, self._height) == 1:
            return np.array(
                [
                    [self.live_neighbor_count(row, column) for column in range(self._width)]
                    for row in range(self._height)
                ],
                dtype=np.int8,
            )

        current = self._cells.reshape(self._height, self._width)
        self._torch_input[0, 0] = torch.from_numpy(current.astype(np.float32))

        # Circular padding makes the convolution see the torus
        padded = F.pad(self._torch_input, (1, 1, 1, 1), mode="circular")
        neighbors = F.conv2d(padded, self._torch_kernel)

        return neighbors[0, 0].numpy().astype(np.int8)

    def tick(self) -> None:
        """Advance the grid by one generation.

        The next generation is built in a separate buffer from a snapshot of
        the current one and then swapped in.
        """
        neighbor_counts = self.count_all_neighbors()
        current = self._cells.reshape(self._height, self._width)

        # Birth: dead cell with exactly 3 neighbors
        birth_mask = (current == Cell.DEAD) & (neighbor_counts == 3)

        # Death: live cell with < 2 or > 3 neighbors
        death_mask = (current == Cell.ALIVE) & ((neighbor_counts < 2) | (neighbor_counts > 3))

        next_cells = current.copy()
        next_cells[death_mask] = Cell.DEAD
        next_cells[birth_mask] = Cell.ALIVE

        self._cells = next_cells.reshape(-1)

    def render(self) -> str:
        """Render the grid as text, one line per row and three characters per cell."""
        lines = []
        for row in self._cells.reshape(self._height, self._width):
            lines.append("".join(ALIVE_GLYPH if cell else DEAD_GLYPH for cell in row))
            lines.append("\n")
        return "".join(lines)

    def __eq__(self, other: object) -> bool:
        """Check if two grids are equal."""
        if not isinstance(other, Grid):
            return False
        return self.shape == other.shape and np.array_equal(self._cells, other._cells)

    def __str__(self) -> str:
        return self.render()


def _check_positive(name: str, value: int) -> None:
    if value < 1:
        raise ValueError(f"{name} must be positive, got {value}")
