"""Step-by-step driver for a Game of Life run."""

from typing import Optional
import numpy as np

from .engine import update_grid
from .factory import make_grid
from .grid import Grid


class Simulation:
    """Holds the current generation and advances it one step at a time.

    A simulation is an endless iterator: ``next(sim)`` advances one
    generation and returns the new grid. Only the current grid is kept.
    """

    def __init__(self, grid: Grid) -> None:
        """Initialize the simulation with a starting grid.

        Args:
            grid: Generation 0
        """
        self._grid = grid
        self._generation = 0

    @classmethod
    def random(cls, rows: int, cols: int, rng: Optional[np.random.Generator] = None) -> "Simulation":
        """Start a simulation from a randomly populated grid."""
        return cls(make_grid(rows, cols, rng))

    @property
    def grid(self) -> Grid:
        """Grid of the current generation."""
        return self._grid

    @property
    def generation(self) -> int:
        """Current generation number."""
        return self._generation

    @property
    def population(self) -> int:
        """Current number of living cells."""
        return self._grid.population

    @property
    def is_extinct(self) -> bool:
        return self._grid.population == 0

    def step(self) -> Grid:
        """Advance the simulation by one generation.

        Returns:
            The new current grid
        """
        self._grid = update_grid(self._grid)
        self._generation += 1
        return self._grid

    def run(self, generations: int) -> Grid:
        """Advance the simulation by several generations.

        Args:
            generations: Number of steps to take

        Returns:
            The grid after the last step

        Raises:
            ValueError: If generations is negative
        """
        if generations < 0:
            raise ValueError(f"Generations must be non-negative, got {generations}")

        for _ in range(generations):
            self.step()
        return self._grid

    def __iter__(self) -> "Simulation":
        return self

    def __next__(self) -> Grid:
        return self.step()
