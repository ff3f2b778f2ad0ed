"""Board and piece-pool state for the queen board.

The board is simply the set of positions carried by a fixed pool of pieces.
A piece without a position sits in the pool. Interactive placement and the
animation driver both mutate this state; the session decides when either of
them is allowed to.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from .utils import Position


@dataclass
class Piece:
    """A queen with a stable id and an optional square."""

    id: int
    position: Optional[Position] = None


@dataclass(frozen=True)
class PlacedQueen:
    """Snapshot record of a placed piece."""

    id: int
    row: int
    col: int


@dataclass(frozen=True)
class BoardSnapshot:
    """Board state handed to step observers after a placement or removal.

    Attributes:
        step: 1-based index of the mutation within the current run
        action: ``"place"`` or ``"remove"``
        row, col: square acted on
        piece_id: piece moved by this step
        placed: every placed piece, in piece order
        unplaced: ids of the pieces left in the pool
    """

    step: int
    action: str
    row: int
    col: int
    piece_id: int
    placed: Tuple[PlacedQueen, ...]
    unplaced: Tuple[int, ...]


class BoardState:
    """Mutable pool of pieces plus the interactive selection.

    Pieces are created once, numbered ``0..count-1``, and never destroyed;
    only their positions change.
    """

    def __init__(self, size: int, count: Optional[int] = None):
        if size < 1:
            raise ValueError(f"Board size must be positive, got {size}")
        self.size = size
        self.pieces: List[Piece] = [Piece(piece_id) for piece_id in range(size if count is None else count)]
        self.selected_id: Optional[int] = None

    def get_piece(self, piece_id: int) -> Optional[Piece]:
        for piece in self.pieces:
            if piece.id == piece_id:
                return piece
        return None

    def place(self, piece_id: int, row: int, col: int) -> bool:
        """Move a piece to (row, col); returns False for an unknown id.

        Occupied squares are not refused: clashes surface at verification.
        """
        if not (0 <= row < self.size and 0 <= col < self.size):
            raise ValueError(f"Square ({row}, {col}) lies outside a {self.size}x{self.size} board")
        piece = self.get_piece(piece_id)
        if piece is None:
            return False
        piece.position = Position(row, col)
        return True

    def find_piece_at(self, row: int, col: int) -> Optional[int]:
        """Return the id of the first piece on (row, col), if any."""
        for piece in self.pieces:
            if piece.position is not None and piece.position.row == row and piece.position.col == col:
                return piece.id
        return None

    def find_available_piece(self) -> Optional[int]:
        """Return the id of any piece still in the pool."""
        for piece in self.pieces:
            if piece.position is None:
                return piece.id
        return None

    def remove_piece_at(self, row: int, col: int) -> Optional[int]:
        """Send the piece on (row, col) back to the pool; returns its id."""
        for piece in self.pieces:
            if piece.position is not None and piece.position.row == row and piece.position.col == col:
                piece.position = None
                return piece.id
        return None

    def clear(self) -> None:
        for piece in self.pieces:
            piece.position = None
        self.selected_id = None

    def placed_queens(self) -> List[PlacedQueen]:
        return [
            PlacedQueen(piece.id, piece.position.row, piece.position.col)
            for piece in self.pieces
            if piece.position is not None
        ]

    def unplaced_ids(self) -> List[int]:
        return [piece.id for piece in self.pieces if piece.position is None]

    def snapshot(self, step: int, action: str, row: int, col: int, piece_id: int) -> BoardSnapshot:
        return BoardSnapshot(
            step=step,
            action=action,
            row=row,
            col=col,
            piece_id=piece_id,
            placed=tuple(self.placed_queens()),
            unplaced=tuple(self.unplaced_ids()),
        )

