"""Board rendering for the CLI and PNG exports.

Overview
--------
- ``render_board_text`` draws the board as text for the terminal: ``Q`` for a
    queen, ``X`` for a highlighted (conflicting) square, ``.`` otherwise.
- ``plot_board`` writes a checkerboard PNG with queens and conflict squares.
- ``plot_search_progress`` charts how many queens sat on the board after each
    animated step, which shows the backtracking depth over time.

Outputs and naming
------------------
PNG files are written into ``out_dir`` (created if missing). Filenames carry the
optional run tag/datestamp suffix from ``queenboard.settings``.
"""
from __future__ import annotations

import os
from typing import Iterable, List, Optional, Sequence

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402
from matplotlib.colors import ListedColormap  # noqa: E402
import numpy as np  # noqa: E402

from .board import PlacedQueen  # noqa: E402
from .reporting import file_suffix  # noqa: E402
from .stats import StepRecord  # noqa: E402
from .utils import Position, as_position  # noqa: E402

LIGHT_SQUARE = "#f0d9b5"
DARK_SQUARE = "#b58863"
CONFLICT_COLOR = "#d9534f"


def render_board_text(
    placed: Iterable[PlacedQueen],
    size: int,
    conflicts: Optional[Iterable[Position]] = None,
) -> str:
    """Return a text board, row 0 on top, with row/column indices."""
    marks = [["." for _ in range(size)] for _ in range(size)]
    for square in conflicts or []:
        square = as_position(square)
        marks[square.row][square.col] = "X"
    for queen in placed:
        marks[queen.row][queen.col] = "Q"
    header = "   " + " ".join(str(col) for col in range(size))
    lines = [header]
    for row in range(size):
        lines.append(f"{row:>2} " + " ".join(marks[row]))
    return "\n".join(lines)


def plot_board(
    placed: Sequence[PlacedQueen],
    size: int,
    out_path: str,
    conflicts: Optional[Iterable[Position]] = None,
    title: Optional[str] = None,
) -> str:
    """Render a checkerboard with queens to ``out_path`` (PNG).

    Parameters
    ----------
    placed : Sequence[PlacedQueen]
        Queens to draw.
    size : int
        Board dimension.
    out_path : str
        Destination file; parent directories are created if missing.
    conflicts : Iterable[Position] | None
        Squares to tint as clashing.
    title : str | None
        Optional chart title.

    Returns
    -------
    str
        The path written.
    """
    parent = os.path.dirname(out_path)
    if parent:
        os.makedirs(parent, exist_ok=True)

    # 0 = light, 1 = dark, 2 = conflict
    grid = np.indices((size, size)).sum(axis=0) % 2
    for square in conflicts or []:
        square = as_position(square)
        grid[square.row, square.col] = 2
    cmap = ListedColormap([LIGHT_SQUARE, DARK_SQUARE, CONFLICT_COLOR])

    fig, ax = plt.subplots(figsize=(6, 6))
    ax.imshow(grid, cmap=cmap, vmin=0, vmax=2)
    for queen in placed:
        ax.text(queen.col, queen.row, "♛", ha="center", va="center", fontsize=28, color="black")
    ax.set_xticks(range(size))
    ax.set_yticks(range(size))
    ax.set_xlabel("Column", fontsize=12)
    ax.set_ylabel("Row", fontsize=12)
    if title:
        ax.set_title(title, fontsize=14)
    fig.savefig(out_path, bbox_inches="tight", dpi=150)
    plt.close(fig)
    print(f"Saved board chart: {out_path}")
    return out_path


def plot_search_progress(trace: Sequence[StepRecord], size: int, out_dir: str) -> Optional[str]:
    """Plot placed-queen count vs step for an animated run.

    Returns the PNG path, or ``None`` when the trace is empty (nothing was
    animated, e.g. every column was already pinned).
    """
    if not trace:
        print("Progress chart skipped: empty trace.")
        return None
    os.makedirs(out_dir, exist_ok=True)

    steps = np.array([record["step"] for record in trace])
    counts = np.array([record["placed_count"] for record in trace])
    removals: List[int] = [record["step"] for record in trace if record["action"] == "remove"]

    plt.figure(figsize=(12, 6))
    plt.step(steps, counts, where="post", linewidth=2, label="Queens on board")
    if removals:
        removal_counts = counts[np.isin(steps, removals)]
        plt.scatter(removals, removal_counts, marker="x", color=CONFLICT_COLOR, label="Backtrack")
    plt.axhline(size, linestyle="--", color="gray", alpha=0.7, label="Complete board")
    plt.xlabel("Step", fontsize=12)
    plt.ylabel("Queens placed", fontsize=12)
    plt.title("Backtracking Progress\n(queens on the board after each step)", fontsize=14)
    plt.ylim(0, size + 0.5)
    plt.legend(fontsize=11)
    plt.grid(True, alpha=0.7)

    fname = os.path.join(out_dir, f"search_progress{file_suffix()}.png")
    plt.savefig(fname, bbox_inches="tight", dpi=150)
    plt.close()
    print(f"Saved search-progress chart: {fname}")
    return fname
