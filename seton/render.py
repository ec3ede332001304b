"""Fixed-width text dump of a board, used in logs and console inspection."""
from __future__ import annotations

from typing import List

from wcwidth import wcswidth

from .models import Cell, Grid

# Each cell is padded to this many terminal columns.  The stone symbols are
# ambiguous-width characters, so padding is measured with ``wcswidth``.
CELL_WIDTH = 2

EMPTY_SYMBOL = "·"
BLACK_SYMBOL = "●"
WHITE_SYMBOL = "○"

COLS = "ABCDEFGHIJKL"

SYMBOLS = {
    Cell.EMPTY: EMPTY_SYMBOL,
    Cell.BLACK: BLACK_SYMBOL,
    Cell.WHITE: WHITE_SYMBOL,
}


def format_cell(symbol: str) -> str:
    """Pad ``symbol`` so that it fills ``CELL_WIDTH`` columns."""
    width = wcswidth(symbol)
    if width < 0 or width >= CELL_WIDTH:
        # wcswidth returns -1 for non-printable text; leave such cells as-is
        return symbol
    slack = CELL_WIDTH - width
    left_pad = (slack + 1) // 2
    return (" " * left_pad) + symbol + (" " * (slack - left_pad))


def column_label(col: int) -> str:
    # boards wider than the letter set fall back to numbers
    return COLS[col] if col < len(COLS) else str(col + 1)


def render_grid(grid: Grid) -> str:
    size = int(grid.shape[1])
    header = format_cell("") + "|" + "".join(format_cell(column_label(c)) for c in range(size))
    lines: List[str] = [header]
    for r_idx, row in enumerate(grid):
        cells = "".join(format_cell(SYMBOLS[Cell(int(v))]) for v in row)
        lines.append(f"{format_cell(str(r_idx + 1))}|{cells}")
    return "\n".join(lines)


def render_pair(truth: Grid, solution: Grid, gap: str = "   ") -> str:
    """Render two boards next to each other, truth on the left."""
    left = render_grid(truth).split("\n")
    right = render_grid(solution).split("\n")
    return "\n".join(a + gap + b for a, b in zip(left, right))


__all__ = [
    "BLACK_SYMBOL",
    "CELL_WIDTH",
    "EMPTY_SYMBOL",
    "WHITE_SYMBOL",
    "column_label",
    "format_cell",
    "render_grid",
    "render_pair",
]
