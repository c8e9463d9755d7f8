"""Conway's Game of Life update rules.

Implements the classic rules on a bounded grid:
- Live cell with fewer than 2 neighbours dies (underpopulation)
- Live cell with 2-3 neighbours survives
- Live cell with more than 3 neighbours dies (overpopulation)
- Dead cell with exactly 3 neighbours becomes alive (reproduction)
- All other dead cells stay dead

Cells outside the grid count as dead; edges never wrap.
"""

import numpy as np
import torch
import torch.nn.functional as F

from .grid import Grid

# Single-threaded to keep generation updates synchronous and deterministic
torch.set_num_threads(1)

_NEIGHBOUR_KERNEL = (
    torch.tensor([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=torch.float32).unsqueeze(0).unsqueeze(0)
)


def count_neighbours(grid: Grid, row: int, col: int) -> int:
    """Count living neighbours of a single cell.

    Args:
        grid: The game grid
        row: The cell's row
        col: The cell's column

    Returns:
        Number of living neighbours (0-8) in the Moore neighbourhood

    Raises:
        IndexError: If (row, col) is outside the grid
    """
    if not grid.in_bounds(row, col):
        raise IndexError(f"Coordinates ({row}, {col}) out of bounds for {grid.rows}x{grid.cols} grid")

    count = 0
    for dr in (-1, 0, 1):
        for dc in (-1, 0, 1):
            if dr == 0 and dc == 0:
                continue

            r, c = row + dr, col + dc
            if 0 <= r < grid.rows and 0 <= c < grid.cols and grid.cells[r, c]:
                count += 1

    return count


def count_all_neighbours(grid: Grid) -> np.ndarray:
    """Count neighbours for all cells with a zero-padded convolution.

    Returns:
        Integer array of shape (rows, cols) with each cell's neighbour count
    """
    source = torch.from_numpy(grid.cells.astype(np.float32)).unsqueeze(0).unsqueeze(0)
    neighbours = F.conv2d(source, _NEIGHBOUR_KERNEL, padding=1)
    return neighbours[0, 0].round().to(torch.int64).numpy()


def update_grid(old_grid: Grid) -> Grid:
    """Return a new grid one generation after ``old_grid``.

    Every cell's next state is computed from ``old_grid`` alone; the input
    grid is left untouched.

    Args:
        old_grid: The grid to advance

    Returns:
        A new grid with the same dimensions
    """
    neighbours = count_all_neighbours(old_grid)
    alive = old_grid.cells

    survives = alive & ((neighbours == 2) | (neighbours == 3))
    born = ~alive & (neighbours == 3)

    return Grid.from_array(survives | born)
