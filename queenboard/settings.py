"""Global settings for the queen board session and its exports.

This module centralizes tunable constants used across the package. Values can
be overridden at runtime via the configuration loader in
`queenboard.cli.apply_configuration`.
"""
from __future__ import annotations

from datetime import datetime
from typing import Optional

# Board dimension; one queen per column in a complete placement
BOARD_SIZE: int = 8

# Number of pieces in the pool (always equal to the board size)
QUEEN_COUNT: int = BOARD_SIZE

# Pause after every animated placement/removal, in seconds
STEP_DELAY: float = 0.65

# Output directory for CSV traces and board charts
OUT_DIR: str = "results_queenboard"

# Export toggles used by the CLI
SAVE_TRACE: bool = False
SAVE_PLOTS: bool = False

# Output naming policy --------------------------------------------------------

# When True, exported files include a datestamp suffix (e.g., _20251113-142530)
# applied consistently across all artifacts produced within the same run.
DATE_IN_FILENAMES: bool = True

# Unique run identifier used for filename stamping; set once at import time.
RUN_ID: str = datetime.now().strftime("%Y%m%d-%H%M%S")

# Optional run labeling to avoid overwriting outputs
RUN_TAG: Optional[str] = None


def set_board_size(size: int) -> None:
    """Set the board dimension and keep the pool size in step with it."""
    global BOARD_SIZE, QUEEN_COUNT
    if int(size) < 1:
        raise ValueError(f"Board size must be positive, got {size}")
    BOARD_SIZE = int(size)
    QUEEN_COUNT = BOARD_SIZE


def set_step_delay(seconds: Optional[float]) -> None:
    """Configure the animation pause applied after every simulation step.

    Parameters
    - seconds: pause in seconds; ``None`` or ``0`` disables the pause.

    Side effects
    - Updates the module-level ``STEP_DELAY`` and prints the active value so
      the pacing of a run is explicit at start.
    """
    global STEP_DELAY
    value = float(seconds or 0.0)
    if value < 0:
        raise ValueError(f"Step delay must be non-negative, got {seconds}")
    STEP_DELAY = value
    print(f"Step delay: {STEP_DELAY}s" if STEP_DELAY else "Step delay: disabled")
