"""Animated completion on the physical piece pool."""

from pathlib import Path
import sys
import unittest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from queenboard.animation import AnimationDriver
from queenboard.board import BoardState, PlacedQueen
from queenboard.utils import assignment_to_board, is_valid_solution, positions_to_assignment


def _no_delay(seconds):
    return None


class AnimationDriverTests(unittest.TestCase):

    def test_completes_board_around_pinned_piece(self):
        board = BoardState(8)
        board.place(0, 0, 0)
        driver = AnimationDriver(board, delay=_no_delay)

        summary = driver.run({0: 0})

        self.assertTrue(summary["success"])
        placed = board.placed_queens()
        self.assertEqual(len(placed), 8)
        self.assertIn(PlacedQueen(0, 0, 0), placed)
        self.assertTrue(is_valid_solution(assignment_to_board(positions_to_assignment(placed), 8)))
        self.assertEqual(summary["steps"], len(summary["trace"]))
        self.assertEqual(summary["placements"] - summary["removals"], 7)
        self.assertEqual(summary["trace"][0]["step"], 1)
        self.assertEqual(summary["trace"][0]["action"], "place")

    def test_observer_sees_every_mutation(self):
        board = BoardState(8)
        snapshots = []

        def observe(snapshot):
            self.assertEqual(snapshot.placed, tuple(board.placed_queens()))
            self.assertEqual(snapshot.unplaced, tuple(board.unplaced_ids()))
            snapshots.append(snapshot)

        summary = AnimationDriver(board, on_step=observe, delay=_no_delay).run({})

        self.assertEqual(len(snapshots), summary["steps"])
        self.assertEqual([s.step for s in snapshots], list(range(1, len(snapshots) + 1)))
        self.assertEqual(snapshots[-1].action, "place")
        self.assertEqual(len(snapshots[-1].placed), 8)

    def test_delay_policy_runs_after_each_step(self):
        delays = []
        driver = AnimationDriver(BoardState(6), delay=delays.append, step_delay=0.25)
        summary = driver.run({})
        self.assertEqual(len(delays), summary["steps"])
        self.assertTrue(all(seconds == 0.25 for seconds in delays))

    def test_zero_delay_skips_policy(self):
        delays = []
        AnimationDriver(BoardState(6), delay=delays.append, step_delay=0.0).run({})
        self.assertEqual(delays, [])

    def test_busy_during_run_and_reentrant_run_is_ignored(self):
        board = BoardState(5)
        seen = []
        driver = AnimationDriver(board, delay=_no_delay)

        def observe(snapshot):
            seen.append((driver.busy, driver.run({})))

        driver.on_step = observe
        self.assertFalse(driver.busy)
        summary = driver.run({})

        self.assertTrue(summary["success"])
        self.assertTrue(seen)
        self.assertTrue(all(busy and nested is None for busy, nested in seen))
        self.assertFalse(driver.busy)

    def test_busy_flag_cleared_when_observer_raises(self):
        class Boom(Exception):
            pass

        def observe(snapshot):
            raise Boom()

        driver = AnimationDriver(BoardState(8), on_step=observe, delay=_no_delay)
        with self.assertRaises(Boom):
            driver.run({})
        self.assertFalse(driver.busy)

    def test_pool_starvation_fails_without_crashing(self):
        board = BoardState(8, count=3)
        summary = AnimationDriver(board, delay=_no_delay).run({})

        self.assertFalse(summary["success"])
        self.assertEqual(board.placed_queens(), [])
        self.assertEqual(summary["placements"], summary["removals"])
        self.assertTrue(all(record["placed_count"] <= 3 for record in summary["trace"]))

    def test_failed_run_leaves_only_pinned_pieces(self):
        board = BoardState(8)
        board.place(0, 0, 0)
        board.place(1, 0, 1)
        summary = AnimationDriver(board, delay=_no_delay).run({0: 0, 1: 0})

        self.assertFalse(summary["success"])
        self.assertEqual(summary["trace"], [])
        self.assertEqual(board.placed_queens(), [PlacedQueen(0, 0, 0), PlacedQueen(1, 0, 1)])


if __name__ == "__main__":
    unittest.main()
