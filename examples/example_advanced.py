"""
Advanced example: broad-phase collision shortlist between two meshes.

This example demonstrates:
1. Indexing mesh triangles by their bounding boxes
2. Shortlisting candidate triangle pairs for a moved mesh
3. Saving the triangle grid to JSON
"""

import trimesh

from grid_subdivision.adapters import index_mesh_triangles, mesh_candidate_pairs
from grid_subdivision.io import save_json

print("Building meshes...")

sphere = trimesh.creation.icosphere(subdivisions=3, radius=1.0)
box = trimesh.creation.box(extents=[1.0, 1.0, 1.0])

for offset in (0.5, 1.2, 3.0):
    transform = trimesh.transformations.translation_matrix([offset, 0.0, 0.0])
    result = mesh_candidate_pairs(sphere, box, cell_size=0.25, transform_b=transform)

    if result.is_failure():
        print(f"offset {offset}: {result.message}")
        continue

    print(f"offset {offset}: {result.metadata['count']} candidate pairs "
          f"in {result.metadata['num_cells']} cells")

grid = index_mesh_triangles(sphere, cell_size=0.25)
save_json(grid, "sphere_triangles.json")
print(f"Saved {grid} to sphere_triangles.json")
