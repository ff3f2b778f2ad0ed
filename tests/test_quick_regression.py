"""Quick regression tests for the queen board CLI pipeline."""

from pathlib import Path
import os
import sys
import tempfile
import unittest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from queenboard import cli, settings


class QuickRegressionTests(unittest.TestCase):
    """Verify that the lightweight regression checks pass."""

    def setUp(self):
        self._saved = (settings.STEP_DELAY, settings.DATE_IN_FILENAMES)
        settings.STEP_DELAY = 0.0
        settings.DATE_IN_FILENAMES = False

    def tearDown(self):
        settings.STEP_DELAY, settings.DATE_IN_FILENAMES = self._saved

    def test_built_in_checks(self):
        """Ensure detection, search, simulation and CSV export succeed for N=8."""
        cli.run_quick_regression_tests()

    def test_run_board_exports(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            solved = cli.run_board([(0, 0)], quiet=True, save_trace=True, out_dir=tmpdir)
            self.assertTrue(solved)
            self.assertTrue(os.path.exists(os.path.join(tmpdir, "simulation_trace.csv")))
            self.assertTrue(os.path.exists(os.path.join(tmpdir, "final_board.csv")))

    def test_run_board_with_conflicts(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            self.assertFalse(cli.run_board([(0, 0), (1, 1)], quiet=True, out_dir=tmpdir))


if __name__ == "__main__":
    unittest.main()
