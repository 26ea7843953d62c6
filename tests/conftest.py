import pytest
import numpy as np

from grid_subdivision import GridSubdivision


@pytest.fixture
def unit_grid_2d():
    """Empty 2D grid with unit cells."""
    return GridSubdivision(1.0, num_dims=2)


@pytest.fixture
def particle_cloud():
    """Random 3D particle positions with a grid indexing them by row number."""
    rng = np.random.default_rng(1234)
    positions = rng.uniform(-2.0, 2.0, size=(300, 3))

    grid = GridSubdivision(0.5, num_dims=3)
    grid.build(positions)

    return grid, positions
