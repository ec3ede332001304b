"""Comparison of the reconstructed board against the memorized one."""
from __future__ import annotations

import numpy as np

from .models import Grid, Score


def evaluate(truth: Grid, solution: Grid, n_black: int, n_white: int) -> Score:
    """Score ``solution`` against ``truth``.

    The cell-wise product is positive where both boards hold the same colour
    and negative where they hold opposite colours.  A correct stone counts
    fully and a stone of the wrong colour counts half.  Every other requested
    stone is reported as a wrong position.
    """
    if truth.shape != solution.shape:
        raise ValueError(
            f"Board shapes differ: truth {truth.shape}, solution {solution.shape}"
        )
    product = truth.astype(np.int16) * solution.astype(np.int16)
    correct = int(np.count_nonzero(product > 0))
    wrong_color = int(np.count_nonzero(product < 0))
    total = n_black + n_white
    wrong_position = total - correct - wrong_color
    if total <= 0:
        percentage = 0.0
    else:
        percentage = correct / total + 0.5 * wrong_color / total
    return Score(
        correct=correct,
        wrong_color=wrong_color,
        wrong_position=wrong_position,
        percentage=percentage,
    )


__all__ = ["evaluate"]
