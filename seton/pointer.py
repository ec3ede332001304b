"""Resolve pointer positions into board cells."""
from __future__ import annotations

import math
from typing import Optional

from .layout import BoardLayout, Point
from .models import Coord


def cell_at(cursor: Point, center: Point, board_side: float, board_size: int) -> Optional[Coord]:
    """Return the ``(row, col)`` under ``cursor`` or ``None`` when off the board.

    ``center`` is the board centre in screen coordinates and ``board_side`` its
    edge-to-edge length in pixels.  Screen ``y`` grows downwards, so row 0 is
    the top row.
    """
    if board_side <= 0 or board_size < 1:
        return None
    x, y = cursor
    cx, cy = center
    i = board_size * (0.5 + (x - cx) / board_side)
    j = board_size * (0.5 + (y - cy) / board_side)
    if not (0.0 <= i < board_size and 0.0 <= j < board_size):
        return None
    return int(math.floor(j)), int(math.floor(i))


def map_cursor(cursor: Point, layout: BoardLayout, board_size: int) -> Optional[Coord]:
    """Resolve ``cursor`` against the solution board of ``layout``."""
    return cell_at(cursor, layout.solution_center, layout.board_side, board_size)


__all__ = ["cell_at", "map_cursor"]
