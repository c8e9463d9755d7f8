"""Random initial grids."""

from typing import Optional
import numpy as np

from .grid import Grid

_default_rng: Optional[np.random.Generator] = None


def default_rng() -> np.random.Generator:
    """Get the process-wide random generator, creating it on first use."""
    global _default_rng
    if _default_rng is None:
        _default_rng = np.random.default_rng()
    return _default_rng


def seed_default_rng(seed: Optional[int]) -> np.random.Generator:
    """Replace the process-wide random generator with a freshly seeded one.

    Args:
        seed: Seed value, or None for fresh OS entropy

    Returns:
        The new generator
    """
    global _default_rng
    _default_rng = np.random.default_rng(seed)
    return _default_rng


def make_grid(rows: int, cols: int, rng: Optional[np.random.Generator] = None) -> Grid:
    """Return a new grid where each cell has a 50% chance of being alive.

    Args:
        rows: Number of rows
        cols: Number of columns
        rng: Random source; the process-wide generator is used when omitted

    Returns:
        Randomly populated grid

    Raises:
        ValueError: If either dimension is not positive
    """
    grid = Grid(rows, cols)
    if rng is None:
        rng = default_rng()

    grid.cells[:] = rng.integers(0, 2, size=(rows, cols)) > 0
    return grid
