"""Core Game of Life logic."""

from .grid import Grid
from .factory import make_grid, seed_default_rng
from .engine import count_neighbours, count_all_neighbours, update_grid
from .simulation import Simulation
from .patterns import Pattern, PatternLibrary

__all__ = [
    "Grid",
    "make_grid",
    "seed_default_rng",
    "count_neighbours",
    "count_all_neighbours",
    "update_grid",
    "Simulation",
    "Pattern",
    "PatternLibrary",
]
