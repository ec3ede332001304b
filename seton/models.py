"""Data models for the memory board game."""
from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Tuple

import numpy as np

Coord = Tuple[int, int]  # row, col indexes; row 0 is the top row

# Boards are plain ``int8`` arrays indexed ``grid[row, col]`` holding
# ``Cell`` values, so that the truth/solution comparison is a product.
Grid = np.ndarray

GRID_DTYPE = np.int8


class Cell(IntEnum):
    """Value of a single board cell. The sign carries the colour."""

    EMPTY = 0
    BLACK = 1
    WHITE = -1

    def opposite(self) -> "Cell":
        if self is Cell.EMPTY:
            return Cell.EMPTY
        return Cell.WHITE if self is Cell.BLACK else Cell.BLACK

    @property
    def is_stone(self) -> bool:
        return self is not Cell.EMPTY


class RoundState(str, Enum):
    # RESULTS doubles as the pre-round setting screen
    RESULTS = "results"
    MEMORIZING = "memorizing"
    SOLVING = "solving"


@dataclass
class SessionConfig:
    """Settings used for the next round.

    ``n_black_stones + n_white_stones`` may exceed the board capacity; the
    surplus is dropped when the truth board is generated.
    """

    board_size: int = 5
    n_black_stones: int = 5
    n_white_stones: int = 5
    time_seconds: int = 30

    @property
    def total_stones(self) -> int:
        return self.n_black_stones + self.n_white_stones


@dataclass(frozen=True)
class Score:
    """Outcome of one round."""

    correct: int
    wrong_color: int
    wrong_position: int
    percentage: float

    @classmethod
    def initial(cls, config: SessionConfig) -> "Score":
        return cls(0, 0, config.total_stones, 0.0)

    @property
    def percent(self) -> int:
        # half-up, 12.5 % shows as 13 %
        return int(math.floor(100.0 * self.percentage + 0.5))

    def as_tuple(self) -> Tuple[int, int, int, float]:
        return self.correct, self.wrong_color, self.wrong_position, self.percentage


__all__ = [
    "Cell",
    "Coord",
    "GRID_DTYPE",
    "Grid",
    "RoundState",
    "Score",
    "SessionConfig",
]
