"""Conway's Game of Life on a bounded grid, with a text console frontend."""

__version__ = "0.1.0"

from .core.grid import Grid
from .core.factory import make_grid
from .core.engine import count_neighbours, update_grid
from .core.simulation import Simulation
from .core.patterns import Pattern, PatternLibrary

__all__ = ["Grid", "make_grid", "count_neighbours", "update_grid", "Simulation", "Pattern", "PatternLibrary"]
