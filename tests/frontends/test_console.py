"""Tests for the console frontend."""

import argparse
from io import StringIO
from unittest.mock import Mock, patch

import pytest

from lifegrid.core.grid import Grid
from lifegrid.core.patterns import PatternLibrary
from lifegrid.core.simulation import Simulation
from lifegrid.frontends.console import (
    CLEAR_SCREEN,
    START_PROMPT,
    WELCOME_MESSAGE,
    ConsoleRunner,
    build_simulation,
    clear_screen,
    create_parser,
    draw_grid,
    format_grid,
    main,
    validate_args,
)

BLINKER = [".....", ".....", ".###.", ".....", "....."]


class TestFormatting:
    """Test cases for grid formatting."""

    def test_format_grid(self):
        """Test default alphabet and layout."""
        grid = Grid.from_rows(["#..", ".#."])
        assert format_grid(grid) == "#..\n.#."

    def test_format_grid_custom_symbols(self):
        """Test a custom two-symbol alphabet."""
        grid = Grid.from_rows(["#.", ".#"])
        assert format_grid(grid, alive="O", dead=" ") == "O \n O"

    @pytest.mark.parametrize("alive, dead", [("##", "."), ("#", ""), ("x", "x")])
    def test_format_grid_invalid_symbols(self, alive, dead):
        """Test that the alphabet must be two distinct characters."""
        with pytest.raises(ValueError):
            format_grid(Grid(2, 2), alive, dead)

    def test_draw_grid(self):
        """Test drawing to a stream."""
        stream = StringIO()
        draw_grid(Grid.from_rows(["#.", "##"]), stream)
        assert stream.getvalue() == "#.\n##\n"

    @patch("sys.stdout", new_callable=StringIO)
    def test_draw_grid_defaults_to_stdout(self, mock_stdout):
        """Test drawing without an explicit stream."""
        draw_grid(Grid(1, 3))
        assert mock_stdout.getvalue() == "...\n"

    def test_clear_screen(self):
        """Test the clear sequence."""
        stream = StringIO()
        clear_screen(stream)
        assert stream.getvalue() == CLEAR_SCREEN


class TestConsoleRunner:
    """Test cases for the ConsoleRunner class."""

    def make_runner(self, **kwargs):
        stream = StringIO()
        sleep = Mock()
        read_input = Mock(return_value="")
        sim = Simulation(Grid.from_rows(BLINKER))
        runner = ConsoleRunner(sim, stream=stream, sleep=sleep, read_input=read_input, **kwargs)
        return runner, stream, sleep, read_input

    def test_run_bounded(self):
        """Test a loop limited to a number of generations."""
        runner, stream, sleep, read_input = self.make_runner(delay=0.25)

        advanced = runner.run(generations=3)

        assert advanced == 3
        assert runner.simulation.generation == 3
        read_input.assert_called_once()
        assert sleep.call_count == 3
        sleep.assert_called_with(0.25)

        output = stream.getvalue()
        assert output.startswith(f"{WELCOME_MESSAGE}\n{START_PROMPT}\n")
        assert output.count(CLEAR_SCREEN) == 3

    def test_frames_show_each_generation(self):
        """Test that the blinker alternates between frames."""
        runner, stream, _, _ = self.make_runner()
        runner.run(generations=2, wait_for_start=False)

        frames = [frame for frame in stream.getvalue().split(CLEAR_SCREEN) if frame]
        assert frames[0] == "\n".join(BLINKER) + "\n"
        assert frames[1] == ".....\n..#..\n..#..\n..#..\n.....\n"

    def test_run_without_prompt(self):
        """Test skipping the welcome prompt."""
        runner, stream, _, read_input = self.make_runner()
        runner.run(generations=1, wait_for_start=False)

        read_input.assert_not_called()
        assert WELCOME_MESSAGE not in stream.getvalue()

    def test_run_zero_generations(self):
        """Test that no frame is drawn for zero generations."""
        runner, stream, sleep, _ = self.make_runner()
        assert runner.run(generations=0, wait_for_start=False) == 0
        sleep.assert_not_called()
        assert stream.getvalue() == ""

    def test_run_forever_until_interrupted(self):
        """Test the unbounded loop stops only when interrupted."""
        runner, _, sleep, _ = self.make_runner()
        sleep.side_effect = [None] * 9 + [KeyboardInterrupt()]

        with pytest.raises(KeyboardInterrupt):
            runner.run(wait_for_start=False)

        assert runner.simulation.generation == 10

    def test_custom_symbols(self):
        """Test drawing with a custom alphabet."""
        runner, stream, _, _ = self.make_runner(alive="O", dead=" ")
        runner.run(generations=1, wait_for_start=False)
        assert " OOO \n" in stream.getvalue()

    def test_invalid_configuration(self):
        """Test that bad settings are rejected up front."""
        sim = Simulation(Grid(2, 2))
        with pytest.raises(ValueError):
            ConsoleRunner(sim, delay=-1)
        with pytest.raises(ValueError):
            ConsoleRunner(sim, alive="#", dead="#")

        runner = ConsoleRunner(sim, sleep=Mock())
        with pytest.raises(ValueError):
            runner.run(generations=-1, wait_for_start=False)


class TestArguments:
    """Test cases for argument parsing and validation."""

    def test_parser_defaults(self):
        """Test default settings."""
        args = create_parser().parse_args([])

        assert args.rows == 20
        assert args.cols == 50
        assert args.delay == 0.1
        assert args.generations is None
        assert args.seed is None
        assert args.pattern is None
        assert args.alive_char == "#"
        assert args.dead_char == "."
        assert not args.no_wait
        assert not args.verbose

    def test_parser_short_options(self):
        """Test short option names."""
        args = create_parser().parse_args(["-r", "5", "-c", "7", "-d", "0", "-n", "3", "-s", "1", "-v"])

        assert (args.rows, args.cols, args.delay, args.generations, args.seed) == (5, 7, 0.0, 3, 1)
        assert args.verbose

    def test_validate_args_valid(self):
        """Test validation with valid arguments."""
        args = create_parser().parse_args([])
        assert validate_args(args) is True

    @patch("sys.stdout", new_callable=StringIO)
    def test_validate_args_invalid(self, mock_stdout):
        """Test validation collects every problem."""
        args = argparse.Namespace(
            rows=0, cols=-1, delay=-0.5, generations=-2, alive_char="#", dead_char="#"
        )

        assert validate_args(args) is False

        output = mock_stdout.getvalue()
        assert "Error: Invalid arguments:" in output
        assert "Rows must be positive" in output
        assert "Columns must be positive" in output
        assert "Delay must be non-negative" in output
        assert "Generations must be non-negative" in output
        assert "must differ" in output

    def test_build_simulation_random(self):
        """Test a seeded random start is reproducible."""
        args = create_parser().parse_args(["-r", "6", "-c", "9", "--seed", "3"])
        first = build_simulation(args, PatternLibrary())
        second = build_simulation(args, PatternLibrary())

        assert first.grid.shape == (6, 9)
        assert first.grid == second.grid

    def test_build_simulation_pattern_centred(self):
        """Test a pattern start is centred on the grid."""
        args = create_parser().parse_args(["-r", "7", "-c", "7", "--pattern", "block"])
        sim = build_simulation(args, PatternLibrary())

        assert sim.grid.live_cells() == [(2, 2), (2, 3), (3, 2), (3, 3)]

    def test_build_simulation_unknown_pattern(self):
        """Test an unknown pattern."""
        args = create_parser().parse_args(["--pattern", "Nope"])
        assert build_simulation(args, PatternLibrary()) is None


class TestMainFunction:
    """Test the main entry point."""

    @patch("sys.stdout", new_callable=StringIO)
    def test_main_list_patterns(self, mock_stdout):
        """Test --list-patterns."""
        with patch("sys.argv", ["lifegrid", "--list-patterns"]):
            result = main()

        assert result == 0
        output = mock_stdout.getvalue()
        assert "Available patterns:" in output
        assert "Glider" in output

    @patch("sys.stdout", new_callable=StringIO)
    def test_main_invalid_args(self, mock_stdout):
        """Test main with invalid arguments."""
        with patch("sys.argv", ["lifegrid", "--rows", "-5"]):
            result = main()

        assert result == 1
        assert "Rows must be positive" in mock_stdout.getvalue()

    @patch("sys.stdout", new_callable=StringIO)
    def test_main_invalid_pattern(self, mock_stdout):
        """Test main with an unknown pattern."""
        with patch("sys.argv", ["lifegrid", "--pattern", "InvalidPattern"]):
            result = main()

        assert result == 1
        assert "Pattern 'InvalidPattern' not found" in mock_stdout.getvalue()

    @patch("sys.stdout", new_callable=StringIO)
    def test_main_bounded_run(self, mock_stdout):
        """Test a short run end to end."""
        argv = ["lifegrid", "-r", "5", "-c", "5", "--pattern", "Blinker", "-n", "2", "-d", "0", "--no-wait", "-v"]
        with patch("sys.argv", argv):
            result = main()

        assert result == 0
        output = mock_stdout.getvalue()
        assert output.count(CLEAR_SCREEN) == 2
        assert "Simulation stopped after 2 generations" in output
        assert "Population: 3 → 3" in output

    @patch("sys.stdout", new_callable=StringIO)
    def test_main_waits_for_enter(self, mock_stdout):
        """Test that the welcome prompt is shown by default."""
        with patch("sys.argv", ["lifegrid", "-r", "3", "-c", "3", "-n", "1", "-d", "0"]):
            with patch("builtins.input", return_value="") as mock_input:
                result = main()

        assert result == 0
        mock_input.assert_called_once()
        assert WELCOME_MESSAGE in mock_stdout.getvalue()

    @patch("lifegrid.frontends.console.ConsoleRunner")
    @patch("sys.stdout", new_callable=StringIO)
    def test_main_keyboard_interrupt(self, mock_stdout, mock_runner_class):
        """Test that Ctrl+C ends the run cleanly."""
        mock_runner_class.return_value.run.side_effect = KeyboardInterrupt()

        with patch("sys.argv", ["lifegrid"]):
            result = main()

        assert result == 0
        assert "interrupted" in mock_stdout.getvalue()

    @patch("lifegrid.frontends.console.ConsoleRunner")
    @patch("sys.stdout", new_callable=StringIO)
    def test_main_exception(self, mock_stdout, mock_runner_class):
        """Test that unexpected errors are reported."""
        mock_runner_class.return_value.run.side_effect = RuntimeError("boom")

        with patch("sys.argv", ["lifegrid"]):
            result = main()

        assert result == 1
        assert "Error: boom" in mock_stdout.getvalue()
