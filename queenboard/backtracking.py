"""Backtracking completion of a partially placed N-Queens board.

The user may pin queens to some columns before the search starts. This module
fills every remaining column with a row so that the whole board is free of
attacks, treating the pinned queens as immovable constraints.

Entry points
------------
- bt_complete_first(fixed, size): plain left-to-right search returning the
    first completion found.
- search_completion(fixed, size, on_commit=None, on_uncommit=None): the same
    engine with hooks fired on every commit/uncommit. The animation driver uses
    the hooks to mirror the search onto physical pieces.

Both return a tuple:
        (solution: Optional[Dict[int, int]], nodes_explored: int, elapsed_seconds: float)

`solution` maps every column in ``0..size-1`` to its row. ``None`` means no
completion exists for the given pinned queens (or a commit hook refused a
placement, see below).

Implementation overview
-----------------------
- State representation: `assignment` is a column -> row dict seeded from the
    pinned queens; it grows and shrinks as the search commits and uncommits.
- Search strategy: depth-first over columns in ascending order, implemented
    iteratively with one `_Frame` per unpinned column instead of recursion.
- Pinned queens are checked pairwise before the search; a clashing pair ends
    it at once with no solution and zero nodes. Inside the search pinned
    columns are skipped and never revisited.
- Safety: a candidate (row, col) is rejected if some committed queen shares its
    row or a diagonal (|dr| == |dc|). Columns are distinct by construction.
- Value order: rows 0..size-1 ascending; the first full completion wins.

Commit hooks
------------
`on_commit(row, col) -> bool` runs right after a candidate is committed. A
False return means the placement could not be materialized (e.g. no free piece
left); the commit is rolled back and the current column fails at once, without
trying its remaining rows, which sends the search back to the previous column.
`on_uncommit(row, col)` runs right after a commit is undone.

Nodes explored semantics: incremented every time a candidate row is examined
for an unpinned column, whether or not it turns out to be safe.
"""

from __future__ import annotations

from dataclasses import dataclass
from time import perf_counter
from typing import Callable, Dict, List, Mapping, Optional, Tuple

CommitHook = Callable[[int, int], bool]
UncommitHook = Callable[[int, int], None]
SearchResult = Tuple[Optional[Dict[int, int]], int, float]


@dataclass
class _Frame:
    """Mutable stack frame for one unpinned column."""

    column: int
    next_row: int = 0
    row: Optional[int] = None


def is_safe(row: int, column: int, assignment: Mapping[int, int]) -> bool:
    """Return True if (row, column) attacks no committed queen."""
    for other_column, other_row in assignment.items():
        if other_row == row or abs(other_row - row) == abs(other_column - column):
            return False
    return True


def _validate_fixed(fixed: Mapping[int, int], size: int) -> None:
    if size < 1:
        raise ValueError(f"Board size must be positive, got {size}")
    for column, row in fixed.items():
        if not (0 <= column < size and 0 <= row < size):
            raise ValueError(f"Pinned queen ({row}, {column}) lies outside a {size}x{size} board")


def _next_free_column(column: int, size: int, fixed: Mapping[int, int]) -> int:
    while column < size and column in fixed:
        column += 1
    return column


def search_completion(
    fixed: Mapping[int, int],
    size: int,
    on_commit: Optional[CommitHook] = None,
    on_uncommit: Optional[UncommitHook] = None,
) -> SearchResult:
    """Complete a board around pinned queens with hookable commits.

    Parameters
    ----------
    fixed : Mapping[int, int]
        Pinned queens as column -> row. Not modified.
    size : int
        Board dimension N (N >= 1).
    on_commit : callable | None
        ``on_commit(row, col) -> bool`` fired after each commit. Returning
        False rolls the commit back and fails the column.
    on_uncommit : callable | None
        ``on_uncommit(row, col)`` fired after each commit is undone.

    Returns
    -------
    (solution, nodes_explored, elapsed_seconds)
        See module-level contract.

    Raises
    ------
    ValueError
        If ``size < 1`` or a pinned queen lies outside the board.
    """
    _validate_fixed(fixed, size)

    assignment: Dict[int, int] = dict(fixed)
    stack: List[_Frame] = []
    explored = 0
    start = perf_counter()

    pinned: Dict[int, int] = {}
    for pin_column, pin_row in sorted(fixed.items()):
        if not is_safe(pin_row, pin_column, pinned):
            return None, 0, perf_counter() - start
        pinned[pin_column] = pin_row

    column = _next_free_column(0, size, fixed)
    if column >= size:
        return assignment, explored, perf_counter() - start
    stack.append(_Frame(column))

    while stack:
        frame = stack[-1]
        column = frame.column

        if frame.row is not None:
            # A deeper column failed; undo this column's commit before moving on.
            del assignment[column]
            previous_row = frame.row
            frame.row = None
            if on_uncommit is not None:
                on_uncommit(previous_row, column)

        while frame.next_row < size:
            row = frame.next_row
            frame.next_row += 1
            explored += 1
            if not is_safe(row, column, assignment):
                continue

            assignment[column] = row
            if on_commit is not None and not on_commit(row, column):
                # Placement could not be materialized; the column fails outright.
                del assignment[column]
                break
            frame.row = row
            break

        if frame.row is None:
            # Exhausted (or starved) this column; backtrack to the previous one.
            stack.pop()
            continue

        column = _next_free_column(column + 1, size, fixed)
        if column >= size:
            return dict(assignment), explored, perf_counter() - start
        stack.append(_Frame(column))

    return None, explored, perf_counter() - start


def bt_complete_first(fixed: Mapping[int, int], size: int) -> SearchResult:
    """Find the first completion via plain iterative backtracking.

    Parameters
    ----------
    fixed : Mapping[int, int]
        Pinned queens as column -> row; pass ``{}`` for an empty board.
    size : int
        Board dimension N (N >= 1).

    Returns
    -------
    (solution, nodes_explored, elapsed_seconds)
        - solution: dict column -> row covering every column, or None.
        - nodes_explored: int, number of candidate rows examined.
        - elapsed_seconds: float, total wall time.

    Determinism and ordering
    ------------------------
    Columns are filled in natural order 0..N-1 and rows are tried top-to-bottom,
    so with no pinned queens this returns the lexicographically first solution.
    """
    return search_completion(fixed, size)
