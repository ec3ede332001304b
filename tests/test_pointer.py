import pytest

from seton.layout import compute_layout
from seton.pointer import cell_at, map_cursor


def test_center_maps_to_middle_cell():
    assert cell_at((300.0, 200.0), (300.0, 200.0), 250.0, 5) == (2, 2)
    assert cell_at((0.0, 0.0), (0.0, 0.0), 90.0, 9) == (4, 4)


@pytest.mark.parametrize(
    "cursor,expected",
    [
        ((0.0, 0.0), (0, 0)),  # top-left corner is inside
        ((99.9, 0.0), (0, 9)),
        ((0.0, 99.9), (9, 0)),
        ((55.0, 15.0), (1, 5)),
    ],
)
def test_row_zero_is_top(cursor, expected):
    assert cell_at(cursor, (50.0, 50.0), 100.0, 10) == expected


@pytest.mark.parametrize(
    "cursor",
    [(-0.1, 50.0), (100.0, 50.0), (50.0, -0.1), (50.0, 100.0), (500.0, 500.0)],
)
def test_outside_board_is_no_hit(cursor):
    assert cell_at(cursor, (50.0, 50.0), 100.0, 10) is None


def test_degenerate_geometry_is_no_hit():
    assert cell_at((0.0, 0.0), (0.0, 0.0), 0.0, 5) is None


@pytest.mark.parametrize("size", [5, 6, 10])
def test_cell_centres_map_back_to_their_cell(size):
    layout = compute_layout(1280, 720, size)
    for r in range(size):
        for c in range(size):
            point = layout.cell_center(layout.solution_center, (r, c))
            assert map_cursor(point, layout, size) == (r, c)


def test_map_cursor_ignores_truth_board():
    layout = compute_layout(1280, 720, 5)
    assert map_cursor(layout.truth_center, layout, 5) is None
    assert map_cursor(layout.solution_center, layout, 5) == (2, 2)
