"""Conflict detection on placed queens."""

from pathlib import Path
import sys
import unittest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from queenboard.board import PlacedQueen
from queenboard.utils import Position, conflicts, find_conflicts, is_valid_solution

FIRST_SOLUTION = [0, 4, 7, 5, 2, 6, 1, 3]


class FindConflictsTests(unittest.TestCase):

    def test_non_attacking_board_has_no_conflicts(self):
        squares = [(row, col) for col, row in enumerate(FIRST_SOLUTION)]
        self.assertEqual(find_conflicts(squares), [])

    def test_empty_and_single_inputs(self):
        self.assertEqual(find_conflicts([]), [])
        self.assertEqual(find_conflicts([(3, 3)]), [])

    def test_pair_on_each_axis_reports_both(self):
        cases = {
            "row": [(2, 1), (2, 6)],
            "column": [(0, 3), (5, 3)],
            "diagonal": [(0, 0), (1, 1)],
            "anti-diagonal": [(0, 1), (1, 0)],
        }
        for axis, (first, second) in cases.items():
            with self.subTest(axis=axis):
                self.assertEqual(
                    find_conflicts([first, second]),
                    [Position(*second), Position(*first)],
                )

    def test_only_most_recent_occupant_is_reported(self):
        result = find_conflicts([(0, 0), (0, 1), (0, 2)])
        self.assertEqual(
            result,
            [Position(0, 1), Position(0, 0), Position(0, 2), Position(0, 1)],
        )
        self.assertNotIn((Position(0, 2), Position(0, 0)), list(zip(result[::2], result[1::2])))

    def test_shared_square_clashes_on_every_axis(self):
        result = find_conflicts([(2, 3), (2, 3)])
        self.assertEqual(result, [Position(2, 3)] * 8)

    def test_accepts_placed_queen_records(self):
        placed = [PlacedQueen(0, 0, 0), PlacedQueen(5, 1, 1)]
        self.assertEqual(find_conflicts(placed), [Position(1, 1), Position(0, 0)])

    def test_is_deterministic(self):
        squares = [(0, 0), (1, 2), (2, 2), (4, 4)]
        self.assertEqual(find_conflicts(squares), find_conflicts(squares))


class SolutionCheckTests(unittest.TestCase):

    def test_conflict_pairs_are_counted_exhaustively(self):
        self.assertEqual(conflicts([0, 0, 0]), 3)
        self.assertEqual(conflicts(FIRST_SOLUTION), 0)

    def test_is_valid_solution(self):
        self.assertTrue(is_valid_solution(FIRST_SOLUTION))
        self.assertFalse(is_valid_solution([0, 1, 2, 3]))
        self.assertFalse(is_valid_solution([]))
        self.assertFalse(is_valid_solution([0, -1, 2]))


if __name__ == "__main__":
    unittest.main()
