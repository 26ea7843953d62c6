"""
Basic example of using the grid subdivision package.

This example demonstrates:
1. Indexing random particles in a 3D grid
2. Shortlisting neighbours with a ball query and filtering exactly
3. Clustering occupied cells with NetworkX
"""

import numpy as np

from grid_subdivision import GridSubdivision, compute_occupancy
from grid_subdivision.adapters import cluster_items

print("Indexing particles...")

rng = np.random.default_rng(42)
positions = rng.uniform(-1.0, 1.0, size=(500, 3))

grid = GridSubdivision(cell_size=0.2, num_dims=3)
grid.build(positions)

center = np.zeros(3)
radius = 0.25
candidates = grid.ball_items(center, radius)
neighbours = [i for i in candidates if np.linalg.norm(positions[i] - center) <= radius]

print("\n=== Query Results ===")
print(f"Candidates: {len(candidates)}")
print(f"Within radius: {len(neighbours)}")

stats = compute_occupancy(grid)
print(f"Occupied cells: {stats['num_cells']} ({100 * stats['fill_ratio']:.1f}% of range)")

clusters = cluster_items(grid, connectivity="full")
print(f"Clusters: {len(clusters)} (largest has {len(clusters[0])} particles)")
