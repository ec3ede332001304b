"""Truth/solution boards and the stone toggle rule used while solving."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Tuple

import numpy as np

from .models import Cell, Coord, GRID_DTYPE, Grid


logger = logging.getLogger(__name__)


def empty_grid(board_size: int) -> Grid:
    return np.zeros((board_size, board_size), dtype=GRID_DTYPE)


def count_stones(grid: Grid, color: Cell) -> int:
    return int(np.count_nonzero(grid == int(color)))


def placed_counts(grid: Grid) -> Tuple[int, int]:
    """Return ``(black, white)`` stone counts of ``grid``."""
    return count_stones(grid, Cell.BLACK), count_stones(grid, Cell.WHITE)


def toggle_value(
    cell: Cell,
    requested: Cell,
    black_placed: int,
    white_placed: int,
    black_cap: int,
    white_cap: int,
) -> Cell:
    """Return the new value of a clicked cell.

    An empty cell takes the ``requested`` colour.  If that colour has no stones
    left it takes the other colour instead, and if neither has stones left it
    stays empty.  Clicking an occupied cell always empties it, whichever
    colour was requested.
    """
    cell = Cell(cell)
    requested = Cell(requested)
    if not requested.is_stone:
        raise ValueError("Requested colour must be BLACK or WHITE")
    if cell.is_stone:
        return Cell.EMPTY

    placed = {Cell.BLACK: black_placed, Cell.WHITE: white_placed}
    caps = {Cell.BLACK: black_cap, Cell.WHITE: white_cap}
    for color in (requested, requested.opposite()):
        if placed[color] < caps[color]:
            return color
    return Cell.EMPTY


@dataclass
class Board:
    """Pair of grids for a session: the board to memorize and the player's copy."""

    truth: Grid = field(default_factory=lambda: empty_grid(5))
    solution: Grid = field(default_factory=lambda: empty_grid(5))

    @property
    def size(self) -> int:
        return int(self.truth.shape[0])

    def clear_solution(self, board_size: int) -> None:
        self.solution = empty_grid(board_size)

    def solution_at(self, coord: Coord) -> Cell:
        r, c = coord
        return Cell(int(self.solution[r, c]))

    def in_bounds(self, coord: Coord) -> bool:
        r, c = coord
        rows, cols = self.solution.shape
        return 0 <= r < rows and 0 <= c < cols


def apply_toggle(
    board: Board,
    coord: Coord,
    requested: Cell,
    black_cap: int,
    white_cap: int,
) -> Cell:
    """Toggle one solution cell and return its new value.

    Stone counts are taken from the solution grid on every call so that the
    caps hold no matter how the grid was edited before.  The truth grid is
    never touched.
    """
    if not board.in_bounds(coord):
        raise ValueError(f"Coordinate outside the board: {coord}")
    black_placed, white_placed = placed_counts(board.solution)
    new_value = toggle_value(
        board.solution_at(coord),
        requested,
        black_placed,
        white_placed,
        black_cap,
        white_cap,
    )
    r, c = coord
    board.solution[r, c] = new_value
    logger.debug(
        "Toggle %s requested=%s -> %s (black %s/%s, white %s/%s)",
        coord,
        Cell(requested).name,
        new_value.name,
        black_placed,
        black_cap,
        white_placed,
        white_cap,
    )
    return new_value


__all__ = [
    "Board",
    "apply_toggle",
    "count_stones",
    "empty_grid",
    "placed_counts",
    "toggle_value",
]
