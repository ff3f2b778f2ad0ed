"""Interactive queen board session.

``QueenSession`` owns everything a front end needs: the piece pool, the
highlighted conflict squares, the status sink and the animation driver. A
renderer drives it through a handful of controls and redraws from
``get_placed_positions()`` / the step snapshots.

Controls
--------
- click_piece / click_square / drop_piece: interactive placement.
- verify(): highlight clashes among placed queens and report whether the board
  is clean.
- simulate(): verify, then complete the board with the animated search,
  keeping every placed queen where it is.
- reset(): send every piece back to the pool.

Every control does nothing while a simulation is running, from the moment
the "running" status is announced until the final status, so a status sink or
observer that calls back into the session mid-run cannot disturb the board.
"""

from __future__ import annotations

from typing import Callable, Dict, List, Optional

from . import settings
from .animation import AnimationDriver, DelayPolicy, StepObserver
from .board import BoardState, PlacedQueen
from .stats import SimulationSummary
from .utils import Position, find_conflicts, positions_to_assignment

STATUS_CONFLICTS = "Conflicts found. Fix clashes to continue."
STATUS_CLEAN = "No conflicts. You can simulate."
STATUS_RUNNING = "Simulation running..."
STATUS_SOLVED = "Simulation complete. Solution found."
STATUS_NO_SOLUTION = "No solution found with current fixed queens."
STATUS_STOPPED = "Simulation stopped. Reset the board to continue."
STATUS_READY = "Ready."

StatusSink = Callable[[str], None]


class QueenSession:
    """Board, pool and controls for one interactive user.

    Parameters
    ----------
    size : int | None
        Board dimension; defaults to ``settings.BOARD_SIZE``.
    set_status : callable | None
        Sink for human-readable status messages.
    on_step : callable | None
        Observer receiving a ``BoardSnapshot`` after every animated step.
    delay : callable | None
        Pause policy for the animation (see ``AnimationDriver``).
    step_delay : float | None
        Seconds per animated step; defaults to ``settings.STEP_DELAY``.
    piece_count : int | None
        Pool size; defaults to ``settings.QUEEN_COUNT`` when ``size`` is also
        left to settings, otherwise to ``size``.
    """

    def __init__(
        self,
        size: Optional[int] = None,
        set_status: Optional[StatusSink] = None,
        on_step: Optional[StepObserver] = None,
        delay: Optional[DelayPolicy] = None,
        step_delay: Optional[float] = None,
        piece_count: Optional[int] = None,
    ):
        if size is None:
            size = settings.BOARD_SIZE
            if piece_count is None:
                piece_count = settings.QUEEN_COUNT
        self.board = BoardState(size, piece_count)
        self.driver = AnimationDriver(
            self.board,
            on_step=on_step,
            delay=delay,
            step_delay=settings.STEP_DELAY if step_delay is None else step_delay,
        )
        self._status_sink = set_status
        self.status = STATUS_READY
        self.highlighted: List[Position] = []
        self.last_summary: Optional[SimulationSummary] = None
        self._running = False

    @property
    def busy(self) -> bool:
        return self._running or self.driver.busy

    @property
    def size(self) -> int:
        return self.board.size

    def set_status(self, message: str) -> None:
        self.status = message
        if self._status_sink is not None:
            self._status_sink(message)

    # ------------- Queries ---------------------------------------------------

    def get_placed_positions(self) -> List[PlacedQueen]:
        """Snapshot of placed pieces as ``PlacedQueen(id, row, col)``."""
        return self.board.placed_queens()

    def highlighted_squares(self) -> List[Position]:
        """Distinct highlighted squares in first-reported order."""
        return list(dict.fromkeys(self.highlighted))

    # ------------- Interactive placement ---------------------------------------

    def click_piece(self, piece_id: int) -> None:
        """Toggle the selection of a piece."""
        if self.busy or self.board.get_piece(piece_id) is None:
            return
        self.board.selected_id = None if self.board.selected_id == piece_id else piece_id

    def click_square(self, row: int, col: int) -> None:
        """Place the selected piece on (row, col), or select the piece there."""
        if self.busy:
            return
        if self.board.selected_id is None:
            self.board.selected_id = self.board.find_piece_at(row, col)
            return
        self.board.place(self.board.selected_id, row, col)
        self.board.selected_id = None

    def drop_piece(self, piece_id: int, row: int, col: int) -> None:
        """Drag-and-drop placement: move ``piece_id`` straight to (row, col)."""
        if self.busy:
            return
        self.board.place(piece_id, row, col)
        self.board.selected_id = None

    def place_queens(self, squares) -> None:
        """Drop pool pieces, in id order, onto each ``(row, col)`` in turn."""
        for row, col in squares:
            piece_id = self.board.find_available_piece()
            if piece_id is None:
                raise ValueError(f"No free queen left for ({row}, {col})")
            self.drop_piece(piece_id, row, col)

    # ------------- Controls ---------------------------------------------------

    def verify(self) -> Optional[bool]:
        """Highlight clashes among placed queens; True if there are none.

        Returns ``None`` (and changes nothing) while a simulation runs.
        """
        if self.busy:
            return None
        self.highlighted = []
        found = find_conflicts(self.get_placed_positions())
        if found:
            self.highlighted = found
            self.set_status(STATUS_CONFLICTS)
            return False
        self.set_status(STATUS_CLEAN)
        return True

    def simulate(self) -> Optional[bool]:
        """Verify, then complete the board around the placed queens.

        Returns True on success, False when verification fails or no
        completion exists, and ``None`` when a simulation is already running.

        The session counts as busy from the "running" status onwards, so a
        status sink or step observer calling back in is ignored. If the
        observer raises, the status becomes ``STATUS_STOPPED`` before the
        exception propagates; the board then holds a partial search state
        until ``reset()``.
        """
        if self.busy:
            return None
        if not self.verify():
            return False

        fixed: Dict[int, int] = positions_to_assignment(self.get_placed_positions())
        summary: Optional[SimulationSummary] = None
        self._running = True
        try:
            self.set_status(STATUS_RUNNING)
            summary = self.driver.run(fixed)
        finally:
            self._running = False
            self.last_summary = summary
            if summary is None:
                self.set_status(STATUS_STOPPED)
        if summary is None:
            return False

        success = summary["success"]
        self.set_status(STATUS_SOLVED if success else STATUS_NO_SOLUTION)
        return success

    def reset(self) -> None:
        """Return every piece to the pool and clear highlights."""
        if self.busy:
            return
        self.board.clear()
        self.highlighted = []
        self.set_status(STATUS_READY)
