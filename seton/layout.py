"""Screen geometry of the two boards for a given viewport.

All positions are in screen pixels with the origin in the top-left corner and
``y`` growing downwards.  Row 0 of a board is its top row, both when a
renderer draws it and when :mod:`seton.pointer` resolves a click.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .models import Coord

Point = Tuple[float, float]

# Gap around each board as a fraction of its side.
PADDING = 0.05
# Share of the window height left over by the top and bottom bars.
HEIGHT_MINUS_GUI = 0.9


@dataclass(frozen=True)
class BoardLayout:
    width: float
    height: float
    board_size: int
    vertical: bool
    board_side: float
    square_side: float
    stone_radius: float
    truth_center: Point
    solution_center: Point

    @property
    def screen_center(self) -> Point:
        return 0.5 * self.width, 0.5 * self.height

    def cell_center(self, center: Point, coord: Coord) -> Point:
        """Screen position of the middle of ``coord`` on the board at ``center``."""
        r, c = coord
        n_half = 0.5 * (self.board_size - 1)
        cx, cy = center
        return (
            cx + (c - n_half) * self.square_side,
            cy + (r - n_half) * self.square_side,
        )


def compute_layout(width: float, height: float, board_size: int) -> BoardLayout:
    """Place the truth and solution boards inside a ``width``×``height`` window.

    Tall windows stack the boards with the truth board on top.  Wide windows
    put them side by side with the truth board on the left.
    """
    if board_size < 1:
        raise ValueError(f"Board size must be positive, got {board_size}")
    width = max(float(width), 0.0)
    height = max(float(height), 0.0)

    vertical = HEIGHT_MINUS_GUI * height > width
    if vertical:
        fit = min(width, HEIGHT_MINUS_GUI * 0.5 * height)
    else:
        fit = min(HEIGHT_MINUS_GUI * height, 0.5 * width)
    board_side = (1.0 - PADDING) * fit
    square_side = board_side / (board_size + PADDING)
    stone_radius = 0.5 * square_side / (1.0 + 4.0 * PADDING)

    shift = 0.5 * board_side * (1.0 + PADDING)
    cx, cy = 0.5 * width, 0.5 * height
    if vertical:
        truth_center, solution_center = (cx, cy - shift), (cx, cy + shift)
    else:
        truth_center, solution_center = (cx - shift, cy), (cx + shift, cy)

    return BoardLayout(
        width=width,
        height=height,
        board_size=board_size,
        vertical=vertical,
        board_side=board_side,
        square_side=square_side,
        stone_radius=stone_radius,
        truth_center=truth_center,
        solution_center=solution_center,
    )


__all__ = ["BoardLayout", "HEIGHT_MINUS_GUI", "PADDING", "Point", "compute_layout"]
