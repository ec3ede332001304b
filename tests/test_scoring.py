import numpy as np
import pytest

from seton.models import Score, SessionConfig
from seton.placement import generate_truth
from seton.scoring import evaluate
from tests.utils import grid_from_rows


def test_identical_boards_score_full():
    truth = generate_truth(6, 4, 7)
    score = evaluate(truth, truth.copy(), 4, 7)
    assert score.as_tuple() == (11, 0, 0, 1.0)
    assert score.percent == 100


def test_empty_solution_scores_zero():
    truth = generate_truth(6, 4, 7)
    score = evaluate(truth, np.zeros_like(truth), 4, 7)
    assert score.as_tuple() == (0, 0, 11, 0.0)


def test_swapped_colours_count_as_wrong_colour():
    truth = grid_from_rows(["b.w", ".b.", "w.."])
    solution = -truth
    score = evaluate(truth, solution, 2, 2)
    assert score.correct == 0
    assert score.wrong_color == 4
    assert score.wrong_position == 0
    assert score.percentage == pytest.approx(0.5)


def test_mixed_result():
    truth = grid_from_rows(["bb.", "ww.", "..."])
    solution = grid_from_rows(["bw.", "..w", "b.."])
    score = evaluate(truth, solution, 2, 2)
    # (0,0) correct, (0,1) wrong colour, the rest missing or misplaced
    assert score.correct == 1
    assert score.wrong_color == 1
    assert score.wrong_position == 2
    assert score.percentage == pytest.approx(1 / 4 + 0.5 / 4)
    assert score.percent == 38


def test_misplaced_stones_do_not_score():
    truth = grid_from_rows(["b..", "...", "..w"])
    solution = grid_from_rows([".b.", "...", ".w."])
    assert evaluate(truth, solution, 1, 1).as_tuple() == (0, 0, 2, 0.0)


def test_shape_mismatch():
    with pytest.raises(ValueError):
        evaluate(np.zeros((3, 3), dtype=np.int8), np.zeros((4, 4), dtype=np.int8), 1, 1)


def test_zero_total_has_zero_percentage():
    grid = np.zeros((3, 3), dtype=np.int8)
    assert evaluate(grid, grid, 0, 0).percentage == 0.0


def test_initial_score_counts_every_stone_as_missing():
    assert Score.initial(SessionConfig()).as_tuple() == (0, 0, 10, 0.0)
