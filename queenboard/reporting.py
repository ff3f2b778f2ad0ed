"""CSV export utilities for simulation outputs (step trace and final board).

These helpers materialize the animated run for downstream inspection in a
spreadsheet or for replaying it in another renderer. Filenames carry the
optional run tag and datestamp configured in ``queenboard.settings``.
"""
from __future__ import annotations

import csv
import os
from typing import Iterable, List

from . import settings
from .board import PlacedQueen
from .stats import StepRecord

TRACE_FIELDS = ["step", "action", "piece_id", "row", "col", "placed_count"]


def file_suffix() -> str:
    """Return ``_<RUN_TAG>_<RUN_ID>`` as enabled in settings (or empty)."""
    parts: List[str] = []
    run_tag = getattr(settings, "RUN_TAG", None)
    if run_tag:
        parts.append(str(run_tag))
    if getattr(settings, "DATE_IN_FILENAMES", False):
        run_id = getattr(settings, "RUN_ID", None)
        if run_id:
            parts.append(str(run_id))
    return ("_" + "_".join(parts)) if parts else ""


def save_trace_to_csv(trace: Iterable[StepRecord], out_dir: str) -> str:
    """Write one row per animated step and return the CSV path.

    Columns: step, action (place/remove), piece_id, row, col, placed_count.
    """
    os.makedirs(out_dir, exist_ok=True)
    path = os.path.join(out_dir, f"simulation_trace{file_suffix()}.csv")
    with open(path, "w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=TRACE_FIELDS)
        writer.writeheader()
        for record in trace:
            writer.writerow({field: record[field] for field in TRACE_FIELDS})
    print(f"Saved simulation trace: {path}")
    return path


def save_board_to_csv(placed: Iterable[PlacedQueen], out_dir: str) -> str:
    """Write the placed queens (id, row, col), sorted by column."""
    os.makedirs(out_dir, exist_ok=True)
    path = os.path.join(out_dir, f"final_board{file_suffix()}.csv")
    with open(path, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(["id", "row", "col"])
        for queen in sorted(placed, key=lambda q: (q.col, q.row)):
            writer.writerow([queen.id, queen.row, queen.col])
    print(f"Saved final board: {path}")
    return path
