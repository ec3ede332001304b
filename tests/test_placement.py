import random

import numpy as np
import pytest

from seton import placement
from seton.placement import generate_truth


def _counts(grid):
    return int((grid == 1).sum()), int((grid == -1).sum())


@pytest.mark.parametrize(
    "size,black,white",
    [(5, 5, 5), (7, 3, 9), (10, 10, 10), (1, 0, 1), (3, 0, 0), (12, 10, 1)],
)
def test_generate_truth_counts(size, black, white):
    grid = generate_truth(size, black, white)
    assert grid.shape == (size, size)
    assert _counts(grid) == (black, white)
    assert set(np.unique(grid)) <= {-1, 0, 1}


def test_full_board_has_no_empty_cells():
    grid = generate_truth(5, 5, 20)
    assert not (grid == 0).any()
    assert _counts(grid) == (5, 20)


def test_oversupply_is_clamped_to_capacity():
    grid = generate_truth(3, 4, 10)
    black, white = _counts(grid)
    assert black + white == 9
    # black stones are drawn first, white absorbs the shortfall
    assert black == 4
    assert white == 5


def test_oversupply_of_black_alone():
    grid = generate_truth(2, 7, 3)
    assert _counts(grid) == (4, 0)


def test_first_sampled_cells_are_black(monkeypatch):
    order = [(0, 0), (1, 1), (2, 2), (0, 2)]
    monkeypatch.setattr(random, "sample", lambda population, k: order[:k])
    grid = generate_truth(3, 2, 2)
    assert grid[0, 0] == 1 and grid[1, 1] == 1
    assert grid[2, 2] == -1 and grid[0, 2] == -1
    assert _counts(grid) == (2, 2)


def test_seeded_rng_is_reproducible():
    first = generate_truth(8, 6, 6, rng=random.Random(42))
    second = generate_truth(8, 6, 6, rng=random.Random(42))
    assert np.array_equal(first, second)


def test_sample_size_requested_from_rng():
    calls = []

    class RecordingRandom(random.Random):
        def sample(self, population, k):
            calls.append((len(population), k))
            return super().sample(population, k)

    generate_truth(4, 20, 20, rng=RecordingRandom(1))
    assert calls == [(16, 16)]


def test_all_coords_covers_board():
    coords = placement.all_coords(3)
    assert len(coords) == 9
    assert len(set(coords)) == 9


@pytest.mark.parametrize("size,black,white", [(0, 1, 1), (5, -1, 2), (5, 2, -1)])
def test_generate_truth_rejects_invalid_arguments(size, black, white):
    with pytest.raises(ValueError):
        generate_truth(size, black, white)
