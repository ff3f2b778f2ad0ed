"""Animated execution of the completion search on the physical piece pool.

The driver runs ``search_completion`` with commit hooks that move real pieces
on a ``BoardState``: every commit draws a free piece from the pool and puts it
on the committed square, every uncommit sends the piece on that square back.
After each such mutation the driver hands a ``BoardSnapshot`` to the step
observer and then calls the delay policy, so a renderer can show every
intermediate board.

Contract
--------
- One run at a time: ``busy`` is True from the start of ``run`` until it
  returns (also when the observer raises). ``run`` while busy does nothing.
- Pool starvation (no free piece for a commit) fails the current column,
  exactly like a column with no safe row; the search then backtracks.
- A finished run leaves the board either complete (success) or holding only
  the pieces that were placed before the run (failure).
- There is no cancellation; a run ends when the search ends.
"""

from __future__ import annotations

from time import perf_counter, sleep
from typing import Callable, List, Mapping, Optional

from .backtracking import search_completion
from .board import BoardSnapshot, BoardState
from .stats import SimulationSummary, StepRecord, step_record

StepObserver = Callable[[BoardSnapshot], None]
DelayPolicy = Callable[[float], None]


class AnimationDriver:
    """Mirror the backtracking search onto a piece pool, one step at a time.

    Parameters
    ----------
    board : BoardState
        State mutated by the run.
    on_step : callable | None
        Observer receiving a snapshot after every placement/removal.
    delay : callable | None
        Pause policy called with ``step_delay`` after each step. Defaults to
        ``time.sleep``; pass a no-op for tests or headless runs.
    step_delay : float
        Seconds passed to ``delay``; values <= 0 skip the pause entirely.
    """

    def __init__(
        self,
        board: BoardState,
        on_step: Optional[StepObserver] = None,
        delay: Optional[DelayPolicy] = None,
        step_delay: float = 0.0,
    ):
        self.board = board
        self.on_step = on_step
        self.delay = delay if delay is not None else sleep
        self.step_delay = step_delay
        self._busy = False
        self._trace: List[StepRecord] = []

    @property
    def busy(self) -> bool:
        return self._busy

    def run(self, fixed: Mapping[int, int]) -> Optional[SimulationSummary]:
        """Complete the board around ``fixed`` (column -> row), animating it.

        Returns ``None`` without touching the board when a run is already in
        flight, otherwise a ``SimulationSummary`` for the finished run.
        """
        if self._busy:
            return None

        self._busy = True
        self._trace = []
        start = perf_counter()
        try:
            solution, nodes, _ = search_completion(
                fixed,
                self.board.size,
                on_commit=self._commit,
                on_uncommit=self._uncommit,
            )
        finally:
            self._busy = False

        placements = sum(1 for record in self._trace if record["action"] == "place")
        return {
            "success": solution is not None,
            "nodes": nodes,
            "placements": placements,
            "removals": len(self._trace) - placements,
            "steps": len(self._trace),
            "time": perf_counter() - start,
            "trace": list(self._trace),
        }

    def _commit(self, row: int, col: int) -> bool:
        piece_id = self.board.find_available_piece()
        if piece_id is None:
            return False
        self.board.place(piece_id, row, col)
        self._emit("place", row, col, piece_id)
        return True

    def _uncommit(self, row: int, col: int) -> None:
        piece_id = self.board.remove_piece_at(row, col)
        if piece_id is not None:
            self._emit("remove", row, col, piece_id)

    def _emit(self, action: str, row: int, col: int, piece_id: int) -> None:
        snapshot = self.board.snapshot(len(self._trace) + 1, action, row, col, piece_id)
        self._trace.append(step_record(snapshot))
        if self.on_step is not None:
            self.on_step(snapshot)
        if self.step_delay > 0:
            self.delay(self.step_delay)
