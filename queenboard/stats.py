"""Typed result shapes and progress printing for simulation runs.

Defines ``TypedDict`` structures for the step trace and the end-of-run
summary produced by the animation driver, plus a stdout progress printer the
CLI hooks to every step.
"""
from __future__ import annotations

from typing import List, TypedDict

from .board import BoardSnapshot


class StepRecord(TypedDict):
    step: int
    action: str
    piece_id: int
    row: int
    col: int
    placed_count: int


class SimulationSummary(TypedDict):
    success: bool
    nodes: int
    placements: int
    removals: int
    steps: int
    time: float
    trace: List[StepRecord]


def step_record(snapshot: BoardSnapshot) -> StepRecord:
    """Flatten a snapshot into a trace row."""
    return {
        "step": snapshot.step,
        "action": snapshot.action,
        "piece_id": snapshot.piece_id,
        "row": snapshot.row,
        "col": snapshot.col,
        "placed_count": len(snapshot.placed),
    }


class StepPrinter:
    """Minimal, stdout-only reporter for animated simulation steps.

    Parameters
    ----------
    label : str
        Short label printed in front of each line to provide context (e.g.,
        the current phase).
    board_size : int
        Number of columns; used to print how complete the board is.
    """

    def __init__(self, label: str, board_size: int):
        self.label = label
        self.board_size = max(1, board_size)

    def update(self, snapshot: BoardSnapshot) -> None:
        """Print a single-line update for one placement or removal.

        The percentage is the share of columns currently holding a queen.
        """
        filled = len(snapshot.placed)
        percent = (filled / self.board_size) * 100
        verb = "place" if snapshot.action == "place" else "remove"
        print(
            f"[{self.label}] step {snapshot.step} - {verb} Q{snapshot.piece_id} at "
            f"({snapshot.row}, {snapshot.col}) [{filled}/{self.board_size} ({percent:.0f}%)]"
        )


def summarize(summary: SimulationSummary) -> str:
    """One-line human readable digest of a finished run."""
    outcome = "solution found" if summary["success"] else "no solution"
    return (
        f"{outcome}: nodes={summary['nodes']}, placements={summary['placements']}, "
        f"removals={summary['removals']}, time={summary['time']:.4f}s"
    )
