"""Grid data structure for the Game of Life."""

from typing import Iterable, List, Tuple
import numpy as np


class Grid:
    """Represents a fixed-size 2D grid of boolean cells.

    Cells are indexed by (row, col). Edges are bounded: coordinates outside
    the grid are rejected rather than wrapped.
    """

    def __init__(self, rows: int, cols: int) -> None:
        """Initialize a new grid with every cell dead.

        Args:
            rows: Number of rows
            cols: Number of columns

        Raises:
            ValueError: If either dimension is not positive
        """
        if rows <= 0 or cols <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {rows}x{cols}")

        self._rows = rows
        self._cols = cols
        self._cells = np.zeros((rows, cols), dtype=bool)

    @classmethod
    def from_array(cls, array) -> "Grid":
        """Create a grid from a 2D array-like of truthy/falsy values.

        Args:
            array: Nested list or numpy array with shape (rows, cols)

        Returns:
            New Grid holding a copy of the data
        """
        data = np.array(array, dtype=bool)
        if data.ndim != 2:
            raise ValueError(f"Expected a 2D array, got {data.ndim} dimensions")

        grid = cls(data.shape[0], data.shape[1])
        grid._cells[:] = data
        return grid

    @classmethod
    def from_rows(cls, lines: Iterable[str], alive: str = "#") -> "Grid":
        """Create a grid from text rows, e.g. ``[".#.", ".#.", ".#."]``.

        Any character other than ``alive`` is a dead cell.
        """
        lines = list(lines)
        widths = {len(line) for line in lines}
        if len(widths) != 1:
            raise ValueError("All rows must have the same length")

        return cls.from_array([[ch == alive for ch in line] for line in lines])

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self._rows

    @property
    def cols(self) -> int:
        """Number of columns."""
        return self._cols

    @property
    def shape(self) -> Tuple[int, int]:
        """Get grid dimensions as (rows, cols)."""
        return (self._rows, self._cols)

    @property
    def cells(self) -> np.ndarray:
        """Get the underlying cell array."""
        return self._cells

    @property
    def population(self) -> int:
        """Get the number of living cells."""
        return int(np.count_nonzero(self._cells))

    def in_bounds(self, row: int, col: int) -> bool:
        """Whether (row, col) lies inside the grid."""
        return 0 <= row < self._rows and 0 <= col < self._cols

    def get_cell(self, row: int, col: int) -> bool:
        """Get the state of a cell.

        Args:
            row: Row coordinate
            col: Column coordinate

        Returns:
            True if cell is alive, False if dead

        Raises:
            IndexError: If coordinates are out of bounds
        """
        if not self.in_bounds(row, col):
            raise IndexError(f"Coordinates ({row}, {col}) out of bounds for {self._rows}x{self._cols} grid")

        return bool(self._cells[row, col])

    def set_cell(self, row: int, col: int, alive: bool) -> None:
        """Set the state of a cell.

        Raises:
            IndexError: If coordinates are out of bounds
        """
        if not self.in_bounds(row, col):
            raise IndexError(f"Coordinates ({row}, {col}) out of bounds for {self._rows}x{self._cols} grid")

        self._cells[row, col] = bool(alive)

    def clear(self) -> None:
        """Clear all cells (set all to dead)."""
        self._cells.fill(False)

    def copy(self) -> "Grid":
        """Return an independent grid with the same cells."""
        return Grid.from_array(self._cells)

    def live_cells(self) -> List[Tuple[int, int]]:
        """Get (row, col) coordinates of every living cell, in row-major order."""
        rows, cols = np.nonzero(self._cells)
        return [(int(r), int(c)) for r, c in zip(rows, cols)]

    def to_list(self) -> list:
        """Convert grid to a nested list of booleans."""
        return self._cells.tolist()

    def __eq__(self, other: object) -> bool:
        """Check if two grids are equal."""
        if not isinstance(other, Grid):
            return NotImplemented
        return self.shape == other.shape and np.array_equal(self._cells, other._cells)

    def __repr__(self) -> str:
        return f"Grid(rows={self._rows}, cols={self._cols}, population={self.population})"

    def __str__(self) -> str:
        """String representation showing living cells as '#' and dead as '.'."""
        return "\n".join("".join("#" if cell else "." for cell in row) for row in self._cells)
