"""Random generation of the board the player has to memorize."""
from __future__ import annotations

import random
from typing import List, Optional

import numpy as np

from .models import Cell, Coord, GRID_DTYPE, Grid


def all_coords(board_size: int) -> List[Coord]:
    return [(r, c) for r in range(board_size) for c in range(board_size)]


def generate_truth(
    board_size: int,
    n_black: int,
    n_white: int,
    rng: Optional[random.Random] = None,
) -> Grid:
    """Return a ``board_size``×``board_size`` grid with randomly placed stones.

    A random ordered sample of ``min(n_black + n_white, board_size**2)`` cells
    is drawn without replacement.  The first ``n_black`` sampled cells become
    black and the rest white, so both the occupied cells and their colours are
    uniformly random for the requested counts.  When more stones are requested
    than the board holds, the total is capped at the number of cells and the
    white stones are the ones left out.
    """
    if board_size < 1:
        raise ValueError(f"Board size must be positive, got {board_size}")
    if n_black < 0 or n_white < 0:
        raise ValueError("Stone counts must not be negative")

    squares = all_coords(board_size)
    k = min(n_black + n_white, len(squares))
    chosen = (rng or random).sample(squares, k)

    grid = np.zeros((board_size, board_size), dtype=GRID_DTYPE)
    for idx, (r, c) in enumerate(chosen):
        grid[r, c] = Cell.BLACK if idx < n_black else Cell.WHITE
    return grid


__all__ = ["all_coords", "generate_truth"]
