"""Queen board: conflict checking and animated N-Queens completion."""

from .animation import AnimationDriver
from .backtracking import bt_complete_first, is_safe, search_completion
from .board import BoardSnapshot, BoardState, Piece, PlacedQueen
from .session import QueenSession
from .utils import Position, conflicts, find_conflicts, is_valid_solution

__all__ = [
    "AnimationDriver",
    "bt_complete_first",
    "search_completion",
    "is_safe",
    "BoardSnapshot",
    "BoardState",
    "Piece",
    "PlacedQueen",
    "QueenSession",
    "Position",
    "conflicts",
    "find_conflicts",
    "is_valid_solution",
]
