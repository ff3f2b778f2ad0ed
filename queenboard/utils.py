"""Position primitives and conflict detection for the queen board.

Two flavours of conflict checking live here:

- ``find_conflicts`` reports *which squares* clash among placed queens. It is
  the routine behind board verification and highlights squares exactly the
  way the interactive board always has (see its docstring for the matching
  rule).
- ``conflicts`` / ``is_valid_solution`` count attacking pairs on a complete
  ``board[col] = row`` encoding and are used to validate solver output.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Sequence


@dataclass(frozen=True)
class Position:
    """A square on the board, 0-based."""

    row: int
    col: int


def as_position(item: Any) -> Position:
    """Coerce a ``Position``, an object with ``row``/``col`` or a pair."""
    if isinstance(item, Position):
        return item
    if hasattr(item, "row") and hasattr(item, "col"):
        return Position(int(item.row), int(item.col))
    row, col = item
    return Position(int(row), int(col))


def find_conflicts(positions: Iterable[Any]) -> List[Position]:
    """Return the positions involved in a clash, in discovery order.

    Parameters
    ----------
    positions : Iterable
        Placed squares, as ``Position`` values, objects exposing ``row`` and
        ``col`` (e.g. ``PlacedQueen``) or ``(row, col)`` pairs.

    Returns
    -------
    List[Position]
        For every incoming square, and for each axis (row, column, row-col
        diagonal, row+col diagonal, in that order) already occupied, the
        incoming square followed by the occupant it clashes with. Duplicates
        are expected when a square clashes on several axes.

    Notes
    -----
    Each axis remembers only its most recent occupant: after the checks the
    incoming square overwrites all four keys. Three queens on one row
    ``(0,0), (0,1), (0,2)`` therefore yield ``(0,1)/(0,0)`` and
    ``(0,2)/(0,1)`` but never ``(0,2)/(0,0)``. The pass is O(n) and is not an
    exhaustive pairwise listing.
    """
    found: List[Position] = []
    by_row: Dict[int, Position] = {}
    by_col: Dict[int, Position] = {}
    by_diag1: Dict[int, Position] = {}
    by_diag2: Dict[int, Position] = {}

    for item in positions:
        current = as_position(item)
        diag1 = current.row - current.col
        diag2 = current.row + current.col

        for seen, key in (
            (by_row, current.row),
            (by_col, current.col),
            (by_diag1, diag1),
            (by_diag2, diag2),
        ):
            if key in seen:
                found.append(current)
                found.append(seen[key])

        by_row[current.row] = current
        by_col[current.col] = current
        by_diag1[diag1] = current
        by_diag2[diag2] = current

    return found


def conflicts(board: Sequence[int]) -> int:
    """Count attacking queen pairs on a ``board[col] = row`` encoding in O(N)."""
    row_count: Counter[int] = Counter()
    diag1: Counter[int] = Counter()
    diag2: Counter[int] = Counter()

    for column, row in enumerate(board):
        row_count[row] += 1
        diag1[row - column] += 1
        diag2[row + column] += 1

    def _pairs(counter: Counter[int]) -> int:
        total = 0
        for count in counter.values():
            if count > 1:
                total += count * (count - 1) // 2
        return total

    return _pairs(row_count) + _pairs(diag1) + _pairs(diag2)


def is_valid_solution(board: Sequence[int]) -> bool:
    """Return True if the board represents a complete N-Queens solution.

    Contract
    - Input: sequence of length N where board[col] = row (0-based indices)
    - Valid if: all 0 <= row < N and no pairs of queens attack each other
    """
    n = len(board)
    if n == 0:
        return False
    for row in board:
        if not isinstance(row, int):
            return False
        if row < 0 or row >= n:
            return False
    return conflicts(board) == 0


def assignment_to_board(assignment: Dict[int, int], size: int) -> List[int]:
    """Flatten a column -> row mapping to ``board[col] = row`` (``-1`` if empty)."""
    return [assignment.get(col, -1) for col in range(size)]


def positions_to_assignment(positions: Iterable[Any]) -> Dict[int, int]:
    """Build a column -> row mapping; later squares win on a shared column."""
    mapping: Dict[int, int] = {}
    for item in positions:
        current = as_position(item)
        mapping[current.col] = current.row
    return mapping
