"""Common Conway's Game of Life starting patterns."""

from typing import Dict, List, Optional, Tuple

from .grid import Grid


class Pattern:
    """Represents a Game of Life pattern."""

    def __init__(self, name: str, cells: List[Tuple[int, int]], description: str = "") -> None:
        """Initialize a pattern.

        Args:
            name: Pattern name
            cells: List of (row, col) offsets for living cells
            description: Optional description
        """
        self.name = name
        self.cells = cells
        self.description = description

    @property
    def size(self) -> Tuple[int, int]:
        """Bounding box size as (height, width)."""
        if not self.cells:
            return (0, 0)

        rows, cols = zip(*self.cells)
        return (max(rows) - min(rows) + 1, max(cols) - min(cols) + 1)

    def apply_to_grid(self, grid: Grid, row: int = 0, col: int = 0) -> None:
        """Clear a grid and draw this pattern onto it.

        Args:
            grid: Target grid
            row: Vertical offset
            col: Horizontal offset
        """
        grid.clear()
        for r, c in self.cells:
            if grid.in_bounds(r + row, c + col):
                grid.set_cell(r + row, c + col, True)

    def to_grid(self, rows: int, cols: int, row: int = 0, col: int = 0) -> Grid:
        """Create a new grid holding only this pattern."""
        grid = Grid(rows, cols)
        self.apply_to_grid(grid, row, col)
        return grid

    def __repr__(self) -> str:
        return f"Pattern({self.name!r}, {len(self.cells)} cells)"


class PatternLibrary:
    """Collection of built-in patterns, looked up by name."""

    def __init__(self) -> None:
        self._patterns: Dict[str, Pattern] = {}
        self._load_builtin_patterns()

    def _load_builtin_patterns(self) -> None:
        """Load built-in common patterns."""
        # Still life patterns
        self.add_pattern(Pattern("Block", [(0, 0), (0, 1), (1, 0), (1, 1)], "2x2 still life block"))

        self.add_pattern(
            Pattern(
                "Beehive",
                [(0, 1), (0, 2), (1, 0), (1, 3), (2, 1), (2, 2)],
                "Beehive still life",
            )
        )

        # Oscillators
        self.add_pattern(Pattern("Blinker", [(1, 0), (1, 1), (1, 2)], "Period-2 oscillator"))

        self.add_pattern(
            Pattern(
                "Toad",
                [(0, 1), (0, 2), (0, 3), (1, 0), (1, 1), (1, 2)],
                "Period-2 oscillator",
            )
        )

        self.add_pattern(
            Pattern(
                "Beacon",
                [(0, 0), (0, 1), (1, 0), (2, 3), (3, 2), (3, 3)],
                "Period-2 oscillator",
            )
        )

        # Spaceships
        self.add_pattern(
            Pattern(
                "Glider",
                [(0, 1), (1, 2), (2, 0), (2, 1), (2, 2)],
                "Smallest spaceship, moves one cell diagonally every 4 generations",
            )
        )

        # Methuselahs
        self.add_pattern(
            Pattern(
                "R-pentomino",
                [(0, 1), (0, 2), (1, 0), (1, 1), (2, 1)],
                "Famous methuselah that stabilizes after 1103 generations",
            )
        )

    def add_pattern(self, pattern: Pattern) -> None:
        self._patterns[pattern.name] = pattern

    def get_pattern(self, name: str) -> Optional[Pattern]:
        """Get a pattern by name, ignoring case.

        Returns:
            Pattern instance or None if not found
        """
        wanted = name.lower()
        for pattern_name, pattern in self._patterns.items():
            if pattern_name.lower() == wanted:
                return pattern
        return None

    def list_patterns(self) -> List[str]:
        """Get all pattern names in insertion order."""
        return list(self._patterns)
