"""
Tests for index-range enumeration.
"""

import itertools
import pytest
from grid_subdivision.core.types import CellIndex
from grid_subdivision.spatial.odometer import IndexRange, increment_index


def test_increment_index_carries():
    """Test axis 0 advances first and carries into axis 1."""
    i = [0, 0]
    assert increment_index(i, [0, 0], [1, 1]) == 0
    assert i == [1, 0]
    assert increment_index(i, [0, 0], [1, 1]) == 0
    assert i == [0, 1]
    assert increment_index(i, [0, 0], [1, 1]) == 0
    assert i == [1, 1]
    assert increment_index(i, [0, 0], [1, 1]) == 1
    assert i == [0, 0]


def test_range_order_and_count():
    """Test deterministic order with axis 0 fastest."""
    cells = list(IndexRange([0, 0], [2, 1]))
    assert cells == [(0, 0), (1, 0), (2, 0), (0, 1), (1, 1), (2, 1)]
    assert all(type(c) is tuple for c in cells)


def test_range_visits_each_cell_once():
    """Test every coordinate of a 3D box appears exactly once."""
    r = IndexRange([-1, 2, 0], [1, 3, 2])
    cells = list(r)
    expected = set(itertools.product(range(-1, 2), range(2, 4), range(0, 3)))
    assert len(cells) == len(expected) == len(r) == 18
    assert set(map(tuple, cells)) == expected


def test_degenerate_range():
    """Test imin == imax yields a single coordinate."""
    r = IndexRange([4, -2], [4, -2])
    assert list(r) == [(4, -2)]
    assert len(r) == 1


def test_range_is_restartable():
    """Test each iteration starts over from imin."""
    r = IndexRange([0], [3])
    assert list(r) == list(r) == [(0,), (1,), (2,), (3,)]


def test_range_contains():
    """Test membership."""
    r = IndexRange([0, 0], [2, 2])
    assert (1, 2) in r
    assert (3, 0) not in r
    assert (1,) not in r


def test_range_index_type():
    """Test yielded coordinates use the requested index type."""
    cls = CellIndex.with_hash_base(11)
    assert all(type(c) is cls for c in IndexRange([0, 0], [1, 1], index_type=cls))


def test_inverted_range_asserts():
    """Test inverted ranges fail fast."""
    with pytest.raises(AssertionError):
        IndexRange([1, 0], [0, 0])
    with pytest.raises(AssertionError):
        IndexRange([0, 0], [1])
