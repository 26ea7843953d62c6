"""
Tests for index, box and ball range queries.
"""

import warnings
import pytest
import numpy as np
from grid_subdivision.spatial.grid import GridSubdivision


@pytest.fixture
def line_grid():
    """1D grid with one handle per cell 0..9."""
    grid = GridSubdivision(1.0, num_dims=1)
    for i in range(10):
        grid.insert((i,), i)
    return grid


def test_index_query_visits_in_order(line_grid):
    """Test visitor sees every handle in odometer order."""
    seen = []
    completed = line_grid.index_query((2,), (5,), lambda h: seen.append(h) or True)
    assert completed is True
    assert seen == [2, 3, 4, 5]


def test_index_query_first_stop_wins(line_grid):
    """Test the first False halts the whole traversal."""
    seen = []

    def visit(h):
        seen.append(h)
        return h < 3

    assert line_grid.index_query((0,), (9,), visit) is False
    assert seen == [0, 1, 2, 3]


def test_index_query_stops_within_bucket():
    """Test a stop inside a bucket skips the rest of that bucket and later cells."""
    grid = GridSubdivision(1.0, num_dims=2)
    grid.insert((0, 0), "A")
    grid.insert((0, 0), "B")
    grid.insert((1, 0), "C")

    seen = []
    assert grid.index_query((0, 0), (1, 0), lambda h: seen.append(h) or h != "A") is False
    assert seen == ["A"]


def test_index_query_empty_range_completes():
    """Test queries over unoccupied cells complete without visits."""
    grid = GridSubdivision(1.0, num_dims=2)
    grid.insert((10, 10), "A")
    seen = []
    assert grid.index_query((0, 0), (3, 3), lambda h: seen.append(h) or True) is True
    assert seen == []


def test_index_items_single_cell_multiset():
    """Test a degenerate index box returns exactly that cell's multiset."""
    grid = GridSubdivision(1.0, num_dims=3)
    for h in ["A", "B", "A"]:
        grid.insert((1, 2, 3), h)
    grid.insert((1, 2, 4), "C")
    assert grid.index_items((1, 2, 3), (1, 2, 3)) == ["A", "B", "A"]


def test_index_items_matches_visitor(line_grid):
    """Test eager and visitor forms agree."""
    seen = []
    line_grid.index_query((1,), (7,), lambda h: seen.append(h) or True)
    assert line_grid.index_items((1,), (7,)) == seen


def test_inverted_index_range_asserts(line_grid):
    """Test inverted ranges fail fast."""
    with pytest.raises(AssertionError):
        line_grid.index_items((5,), (2,))


def test_box_query_point_box_single_cell():
    """Test equal corners inspect only the cell containing the point."""
    grid = GridSubdivision(1.0, num_dims=2)
    grid.insert((0, 0), "A")
    grid.insert((1, 0), "B")
    grid.insert((0, 1), "C")
    assert grid.box_items((0.5, 0.5), (0.5, 0.5)) == ["A"]


def test_box_query_upper_edge_is_inclusive_by_cell():
    """Test a box corner on a cell edge includes the cell above it."""
    grid = GridSubdivision(1.0, num_dims=2)
    grid.insert((1, 1), "A")
    assert grid.box_items((0.0, 0.0), (1.0, 1.0)) == ["A"]
    assert grid.box_items((0.0, 0.0), (0.999, 0.999)) == []


def test_box_query_negative_coordinates():
    """Test boxes straddling the origin."""
    grid = GridSubdivision(0.5, num_dims=2)
    grid.insert_point((-0.7, -0.1), "A")
    grid.insert_point((0.2, 0.3), "B")
    grid.insert_point((3.0, 3.0), "C")
    assert sorted(grid.box_items((-1.0, -1.0), (1.0, 1.0))) == ["A", "B"]


def test_ball_query_covers_sphere_box():
    """Test the ball index box is the cell range of [c - r, c + r]."""
    grid = GridSubdivision(1.0, num_dims=2)
    for i in range(-5, 6):
        for j in range(-5, 6):
            grid.insert((i, j), (i, j))

    items = grid.ball_items((0.5, 0.5), 1.2)
    # x and y span [-0.7, 1.7] -> cells -1..1
    assert sorted(items) == sorted((i, j) for i in range(-1, 2) for j in range(-1, 2))


def test_ball_query_zero_radius():
    """Test a zero radius visits only the center cell."""
    grid = GridSubdivision(1.0, num_dims=3)
    grid.insert((0, 0, 0), "A")
    grid.insert((1, 0, 0), "B")
    assert grid.ball_items((0.9, 0.1, 0.1), 0.0) == ["A"]


def test_ball_query_no_false_negatives():
    """Test every point within the radius is returned."""
    rng = np.random.default_rng(7)
    cell_size = np.array([0.4, 1.1, 0.25])
    grid = GridSubdivision(cell_size)
    points = rng.uniform(-3, 3, size=(400, 3))
    grid.build(points)

    for _ in range(25):
        center = rng.uniform(-3, 3, size=3)
        radius = rng.uniform(0.0, 1.5)
        found = set(grid.ball_items(center, radius))
        inside = np.nonzero(np.linalg.norm(points - center, axis=1) <= radius)[0]
        assert set(inside.tolist()) <= found


def test_ball_query_may_return_corner_points():
    """Test the result is a superset: box corners outside the sphere are kept."""
    grid = GridSubdivision(1.0, num_dims=2)
    grid.insert_point((1.9, 1.9), "corner")
    assert grid.ball_items((0.5, 0.5), 1.0) == ["corner"]


def test_ball_query_visitor_stop():
    """Test ball_query honours the stop signal."""
    grid = GridSubdivision(1.0, num_dims=2)
    grid.insert((0, 0), "A")
    grid.insert((0, 0), "B")
    seen = []
    assert grid.ball_query((0.5, 0.5), 0.1, lambda h: seen.append(h) or False) is False
    assert seen == ["A"]


def test_negative_radius_asserts():
    """Test negative radii fail fast."""
    grid = GridSubdivision(1.0, num_dims=2)
    with pytest.raises(AssertionError):
        grid.ball_items((0.0, 0.0), -1.0)


def test_queries_do_not_mutate():
    """Test queries leave the table untouched."""
    grid = GridSubdivision(1.0, num_dims=2)
    grid.insert((0, 0), "A")
    grid.box_items((-5, -5), (5, 5))
    grid.ball_items((0, 0), 3.0)
    grid.index_query((-2, -2), (2, 2), lambda h: True)
    assert grid.num_cells() == 1
    assert grid.get_bucket((0, 0)) == ["A"]


def test_large_query_warns():
    """Test a warning when a query spans more cells than max_query_cells."""
    grid = GridSubdivision(1.0, num_dims=2, max_query_cells=10)
    with pytest.warns(UserWarning, match="spans 25 cells"):
        grid.index_items((0, 0), (4, 4))

    with warnings.catch_warnings():
        warnings.simplefilter("error")
        grid.index_items((0, 0), (2, 2))
