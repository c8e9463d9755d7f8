"""Frontend interfaces for the Game of Life."""

from .console import ConsoleRunner, draw_grid, format_grid

__all__ = ["ConsoleRunner", "draw_grid", "format_grid"]
