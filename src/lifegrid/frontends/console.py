"""Text console frontend for Conway's Game of Life."""

import argparse
import sys
import time
from typing import Callable, Optional, TextIO

from ..core.factory import make_grid, seed_default_rng
from ..core.grid import Grid
from ..core.patterns import PatternLibrary
from ..core.simulation import Simulation

DEFAULT_ROWS = 20
DEFAULT_COLS = 50
DEFAULT_DELAY = 0.1
ALIVE_CHAR = "#"
DEAD_CHAR = "."

WELCOME_MESSAGE = "Welcome Conway's Game of Life!"
START_PROMPT = "Press ENTER to start the simulation."

CLEAR_SCREEN = "\033[2J\033[H"


def format_grid(grid: Grid, alive: str = ALIVE_CHAR, dead: str = DEAD_CHAR) -> str:
    """Format a grid as text, one line per row and one character per cell.

    Args:
        grid: Grid to format
        alive: Symbol for living cells
        dead: Symbol for dead cells

    Returns:
        Formatted grid string

    Raises:
        ValueError: If the symbols are not two distinct single characters
    """
    if len(alive) != 1 or len(dead) != 1:
        raise ValueError("Cell symbols must be single characters")
    if alive == dead:
        raise ValueError("Alive and dead symbols must differ")

    return "\n".join("".join(alive if cell else dead for cell in row) for row in grid.cells)


def draw_grid(
    grid: Grid, stream: Optional[TextIO] = None, alive: str = ALIVE_CHAR, dead: str = DEAD_CHAR
) -> None:
    """Write the given grid to a text stream (stdout by default)."""
    stream = stream or sys.stdout
    stream.write(format_grid(grid, alive, dead) + "\n")
    stream.flush()


def clear_screen(stream: Optional[TextIO] = None) -> None:
    """Clear the terminal and move the cursor home."""
    stream = stream or sys.stdout
    stream.write(CLEAR_SCREEN)


class ConsoleRunner:
    """Drives a simulation in the terminal: clear, draw, update, wait."""

    def __init__(
        self,
        simulation: Simulation,
        delay: float = DEFAULT_DELAY,
        alive: str = ALIVE_CHAR,
        dead: str = DEAD_CHAR,
        stream: Optional[TextIO] = None,
        sleep: Optional[Callable[[float], None]] = None,
        read_input: Optional[Callable[[], str]] = None,
    ) -> None:
        """Initialize the runner.

        Args:
            simulation: Simulation to display and advance
            delay: Seconds to wait between generations
            alive: Symbol for living cells
            dead: Symbol for dead cells
            stream: Output stream (stdout by default)
            sleep: Function used to wait between generations (time.sleep by default)
            read_input: Function used to wait for ENTER (input by default)
        """
        if delay < 0:
            raise ValueError(f"Delay must be non-negative, got {delay}")
        # Validate the alphabet before drawing anything
        format_grid(Grid(1, 1), alive, dead)

        self.simulation = simulation
        self.delay = delay
        self.alive = alive
        self.dead = dead
        self._stream = stream
        self._sleep = sleep or time.sleep
        self._read_input = read_input or input

    @property
    def stream(self) -> TextIO:
        return self._stream or sys.stdout

    def wait_for_start(self) -> None:
        """Show the welcome message and block until the user presses ENTER."""
        print(WELCOME_MESSAGE, file=self.stream)
        print(START_PROMPT, file=self.stream)
        self.stream.flush()
        self._read_input()

    def render(self) -> None:
        """Redraw the current generation."""
        clear_screen(self.stream)
        draw_grid(self.simulation.grid, self.stream, self.alive, self.dead)

    def run(self, generations: Optional[int] = None, wait_for_start: bool = True) -> int:
        """Run the display loop.

        Args:
            generations: Number of generations to advance, or None to run forever
            wait_for_start: Whether to prompt for ENTER before the first frame

        Returns:
            Number of generations advanced
        """
        if generations is not None and generations < 0:
            raise ValueError(f"Generations must be non-negative, got {generations}")

        if wait_for_start:
            self.wait_for_start()

        advanced = 0
        while generations is None or advanced < generations:
            self.render()
            next(self.simulation)
            advanced += 1
            self._sleep(self.delay)

        return advanced


def list_patterns(library: PatternLibrary) -> None:
    """Print available patterns."""
    print("Available patterns:")
    for name in library.list_patterns():
        pattern = library.get_pattern(name)
        height, width = pattern.size
        print(f"  {name}: {height}x{width}, {len(pattern.cells)} cells")
        if pattern.description:
            print(f"    {pattern.description}")


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description="Run Conway's Game of Life in the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Random 20x50 grid, forever (Ctrl+C to stop)
  lifegrid

  # Reproducible run on a larger grid, faster
  lifegrid --rows 30 --cols 80 --delay 0.05 --seed 42

  # Watch a glider for 40 generations without the welcome prompt
  lifegrid --pattern Glider -r 12 -c 12 -n 40 --no-wait

  # List available patterns
  lifegrid --list-patterns
        """,
    )

    # Grid configuration
    parser.add_argument(
        "-r", "--rows", type=int, default=DEFAULT_ROWS, help=f"Grid rows (default: {DEFAULT_ROWS})"
    )

    parser.add_argument(
        "-c", "--cols", type=int, default=DEFAULT_COLS, help=f"Grid columns (default: {DEFAULT_COLS})"
    )

    parser.add_argument(
        "-s",
        "--seed",
        type=int,
        help="Random seed for a reproducible starting grid",
    )

    parser.add_argument(
        "--pattern",
        type=str,
        help="Start from a built-in pattern (centred) instead of a random grid",
    )

    # Loop configuration
    parser.add_argument(
        "-d",
        "--delay",
        type=float,
        default=DEFAULT_DELAY,
        help=f"Seconds between generations (default: {DEFAULT_DELAY})",
    )

    parser.add_argument(
        "-n",
        "--generations",
        type=int,
        help="Stop after this many generations (default: run until interrupted)",
    )

    parser.add_argument(
        "--no-wait",
        action="store_true",
        help="Start immediately instead of waiting for ENTER",
    )

    # Output configuration
    parser.add_argument(
        "--alive-char",
        type=str,
        default=ALIVE_CHAR,
        help=f"Character for living cells (default: '{ALIVE_CHAR}')",
    )

    parser.add_argument(
        "--dead-char",
        type=str,
        default=DEAD_CHAR,
        help=f"Character for dead cells (default: '{DEAD_CHAR}')",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print setup details and a final summary",
    )

    parser.add_argument(
        "--list-patterns",
        action="store_true",
        help="List all available patterns and exit",
    )

    return parser


def validate_args(args: argparse.Namespace) -> bool:
    """Validate command-line arguments.

    Args:
        args: Parsed arguments

    Returns:
        True if arguments are valid
    """
    errors = []

    if args.rows <= 0:
        errors.append("Rows must be positive")

    if args.cols <= 0:
        errors.append("Columns must be positive")

    if args.delay < 0:
        errors.append("Delay must be non-negative")

    if args.generations is not None and args.generations < 0:
        errors.append("Generations must be non-negative")

    if len(args.alive_char) != 1 or len(args.dead_char) != 1:
        errors.append("Cell characters must be single characters")
    elif args.alive_char == args.dead_char:
        errors.append("Alive and dead characters must differ")

    if errors:
        print("Error: Invalid arguments:")
        for error in errors:
            print(f"  - {error}")
        return False

    return True


def build_simulation(args: argparse.Namespace, library: PatternLibrary) -> Optional[Simulation]:
    """Create the starting simulation described by the arguments.

    Returns:
        Simulation, or None if the requested pattern does not exist
    """
    if args.pattern:
        pattern = library.get_pattern(args.pattern)
        if pattern is None:
            return None

        height, width = pattern.size
        row = max(0, (args.rows - height) // 2)
        col = max(0, (args.cols - width) // 2)
        if args.verbose:
            print(f"Loading pattern '{pattern.name}' at ({row}, {col})")
        return Simulation(pattern.to_grid(args.rows, args.cols, row, col))

    if args.seed is not None:
        seed_default_rng(args.seed)
    if args.verbose:
        seed_info = f" (seed: {args.seed})" if args.seed is not None else ""
        print(f"Generating random {args.rows}x{args.cols} grid{seed_info}")
    return Simulation(make_grid(args.rows, args.cols))


def main() -> int:
    """Main entry point for the console interface.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args()

    library = PatternLibrary()

    if args.list_patterns:
        list_patterns(library)
        return 0

    if not validate_args(args):
        return 1

    simulation = build_simulation(args, library)
    if simulation is None:
        print(f"Error: Pattern '{args.pattern}' not found")
        print(f"Available patterns: {', '.join(library.list_patterns())}")
        return 1

    initial_population = simulation.population
    runner = ConsoleRunner(simulation, delay=args.delay, alive=args.alive_char, dead=args.dead_char)

    try:
        runner.run(generations=args.generations, wait_for_start=not args.no_wait)
    except KeyboardInterrupt:
        print("\nSimulation interrupted by user")
    except Exception as e:
        print(f"Error: {e}")
        if args.verbose:
            import traceback

            traceback.print_exc()
        return 1

    if args.verbose:
        print(f"\nSimulation stopped after {simulation.generation} generations")
        print(f"Population: {initial_population} → {simulation.population}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
