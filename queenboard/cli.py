"""Command-line front end for the queen board.

This module plays the part of the presentation layer: it loads configuration,
places the requested queens, verifies the board, runs the animated completion
and renders every step on stdout. Optional exports (CSV trace, final board,
PNG charts) go to the configured output directory. Argument parsing and I/O
live here so the core modules stay easy to test programmatically.
"""
from __future__ import annotations

import argparse
import tempfile
from pathlib import Path
from typing import List, Optional, Tuple

from . import settings
from .backtracking import bt_complete_first
from .plots import plot_board, plot_search_progress, render_board_text
from .reporting import file_suffix, save_board_to_csv, save_trace_to_csv
from .session import STATUS_CONFLICTS, STATUS_SOLVED, QueenSession
from .stats import StepPrinter, summarize
from .utils import Position, assignment_to_board, find_conflicts, is_valid_solution, positions_to_assignment
from config_manager import ConfigManager

Square = Tuple[int, int]


# ------------- Utils --------------------------------------------------------

def parse_queen_args(queen_args: Optional[List[str]]) -> Optional[List[Square]]:
    """Normalize ``--queen`` inputs into a list of ``(row, col)`` squares.

    Accepts repeated flags (``-q 0,0 -q 3,1``) and semicolon-separated lists
    (``-q "0,0;3,1"``). Returns ``None`` when no queen is given so callers can
    fall back to the configured start-up squares.
    """
    if not queen_args:
        return None
    squares: List[Square] = []
    for entry in queen_args:
        for token in entry.split(";"):
            token = token.strip()
            if not token:
                continue
            parts = token.split(",")
            if len(parts) != 2:
                raise ValueError(f"Invalid queen '{token}'. Expected ROW,COL")
            try:
                squares.append((int(parts[0]), int(parts[1])))
            except ValueError as exc:
                raise ValueError(f"Invalid queen '{token}'. Expected integers ROW,COL") from exc
    return squares or None


def validate_squares(squares: List[Square], size: int) -> None:
    """Check every square lies on the board and fits in the piece pool."""
    if len(squares) > size:
        raise ValueError(f"{len(squares)} queens requested but only {size} are available")
    for row, col in squares:
        if not (0 <= row < size and 0 <= col < size):
            raise ValueError(f"Queen ({row}, {col}) lies outside a {size}x{size} board")


def apply_configuration(config_path: str) -> Tuple[ConfigManager, List[Square]]:
    """Load configuration and copy it into ``settings``.

    Returns the ``ConfigManager`` used and the configured start-up squares.
    Raises ``FileNotFoundError`` for a missing file and ``ValueError`` for
    invalid values.
    """
    config_mgr = ConfigManager(config_path)

    board_settings = config_mgr.get_board_settings()
    if board_settings:
        settings.set_board_size(int(board_settings.get("board_size", settings.BOARD_SIZE)))
        settings.set_step_delay(board_settings.get("step_delay", settings.STEP_DELAY))

    output_settings = config_mgr.get_output_settings()
    if output_settings:
        settings.OUT_DIR = output_settings.get("output_dir", settings.OUT_DIR)
        settings.SAVE_TRACE = bool(output_settings.get("save_trace", settings.SAVE_TRACE))
        settings.SAVE_PLOTS = bool(output_settings.get("save_plots", settings.SAVE_PLOTS))
        settings.RUN_TAG = output_settings.get("run_tag", settings.RUN_TAG)

    squares = [(int(row), int(col)) for row, col in config_mgr.get_initial_queens()]
    validate_squares(squares, settings.BOARD_SIZE)
    return config_mgr, squares


# ------------- Pipeline -----------------------------------------------------

def run_board(
    squares: List[Square],
    quiet: bool = False,
    save_trace: bool = False,
    save_plots: bool = False,
    out_dir: Optional[str] = None,
) -> bool:
    """Place ``squares``, verify, simulate and report; True on a solved board."""
    out_dir = out_dir or settings.OUT_DIR
    printer = StepPrinter("Simulation", settings.BOARD_SIZE)
    session = QueenSession(
        set_status=lambda message: print(f"Status: {message}"),
        on_step=None if quiet else printer.update,
    )
    session.place_queens(squares)

    print(render_board_text(session.get_placed_positions(), session.size))
    solved = session.simulate()

    if session.status == STATUS_CONFLICTS:
        print(render_board_text(session.get_placed_positions(), session.size, session.highlighted_squares()))
        if save_plots:
            plot_board(
                session.get_placed_positions(),
                session.size,
                str(Path(out_dir) / f"conflicts{file_suffix()}.png"),
                conflicts=session.highlighted_squares(),
                title="Conflicting queens",
            )
        return False

    placed = session.get_placed_positions()
    print(render_board_text(placed, session.size))
    summary = session.last_summary
    if summary is not None:
        print(f"Result: {summarize(summary)}")

    if solved:
        board = assignment_to_board(positions_to_assignment(placed), session.size)
        if not is_valid_solution(board):
            raise AssertionError(f"Simulation reported success on an invalid board: {board}")

    if save_trace and summary is not None:
        save_trace_to_csv(summary["trace"], out_dir)
        save_board_to_csv(placed, out_dir)
    if save_plots:
        plot_board(placed, session.size, str(Path(out_dir) / f"final_board{file_suffix()}.png"), title=session.status)
        if summary is not None:
            plot_search_progress(summary["trace"], session.size, out_dir)
    return bool(solved)


def run_quick_regression_tests() -> None:
    """Run lightweight end-to-end checks on an 8x8 board and raise on failure."""
    print("Running quick regression tests (N=8)...")

    expected = [Position(0, 1), Position(0, 0), Position(0, 2), Position(0, 1)]
    if find_conflicts([(0, 0), (0, 1), (0, 2)]) != expected:
        raise AssertionError("Conflict detection no longer matches the most-recent-occupant rule.")
    print("  Conflict detection: ok")

    solution, nodes, elapsed = bt_complete_first({}, 8)
    if solution is None or not is_valid_solution(assignment_to_board(solution, 8)):
        raise AssertionError(f"Backtracking returned an invalid board for N=8: {solution}.")
    print(f"  [BT] empty board: solution found, nodes={nodes}, time={elapsed:.4f}s")

    solution, nodes, _ = bt_complete_first({0: 0, 1: 0}, 8)
    if solution is not None:
        raise AssertionError("Backtracking completed an unsatisfiable pinned set.")
    print(f"  [BT] unsatisfiable pins: no solution, nodes={nodes}")

    session = QueenSession(size=8, delay=lambda seconds: None, step_delay=0.0)
    session.place_queens([(0, 0)])
    if not session.simulate() or session.status != STATUS_SOLVED:
        raise AssertionError("Simulation did not complete a board pinned at (0, 0).")
    placed = session.get_placed_positions()
    board = assignment_to_board(positions_to_assignment(placed), 8)
    if len(placed) != 8 or board[0] != 0 or not is_valid_solution(board):
        raise AssertionError(f"Simulation left an invalid board: {board}.")
    print(f"  Simulation: {summarize(session.last_summary)}")

    with tempfile.TemporaryDirectory() as tmpdir:
        csv_path = Path(save_trace_to_csv(session.last_summary["trace"], tmpdir))
        if not csv_path.exists() or csv_path.stat().st_size == 0:
            raise AssertionError("Trace CSV was not generated successfully during quick tests.")

    print("Quick regression tests passed.")


# ------------- CLI wiring --------------------------------------------------

def build_arg_parser():
    """Construct the argument parser for the CLI entry point."""
    parser = argparse.ArgumentParser(description="Place queens, verify the board and animate its completion.")
    parser.add_argument(
        "--queen",
        "-q",
        action="append",
        help="Queen square as ROW,COL (repeat the flag or separate squares with ';'). Overrides the config file.",
    )
    parser.add_argument("--config", default=None, help="Path to a JSON configuration file (optional).")
    parser.add_argument("--delay", type=float, default=None, help="Seconds to pause after every animated step (0 disables).")
    parser.add_argument("--quiet", action="store_true", help="Do not print a line per animated step.")
    parser.add_argument("--save-trace", action="store_true", help="Export the step trace and final board as CSV.")
    parser.add_argument("--plot", action="store_true", help="Export PNG charts of the final board and search progress.")
    parser.add_argument("--out-dir", default=None, help="Directory for exports (default from settings/config).")
    parser.add_argument("--quick-test", action="store_true", help="Run quick regression tests (N=8) and exit.")
    return parser


def main() -> None:
    """CLI entry point: parse arguments, run the board and set the exit code."""
    parser = build_arg_parser()
    args = parser.parse_args()

    if args.quick_test:
        run_quick_regression_tests()
        return

    squares: List[Square] = []
    try:
        if args.config:
            _, squares = apply_configuration(args.config)
        queen_squares = parse_queen_args(args.queen)
        if queen_squares is not None:
            validate_squares(queen_squares, settings.BOARD_SIZE)
            squares = queen_squares
        if args.delay is not None:
            settings.set_step_delay(args.delay)
    except FileNotFoundError as exc:
        print(f"Configuration file not found: {exc}")
        raise SystemExit(1) from exc
    except ValueError as exc:
        print(f"Configuration error: {exc}")
        raise SystemExit(1) from exc

    try:
        solved = run_board(
            squares,
            quiet=args.quiet,
            save_trace=args.save_trace or settings.SAVE_TRACE,
            save_plots=args.plot or settings.SAVE_PLOTS,
            out_dir=args.out_dir,
        )
    except KeyboardInterrupt:
        print("\nSimulation interrupted by user.")
        raise SystemExit(130) from None

    if not solved:
        raise SystemExit(1)


if __name__ == "__main__":
    main()
