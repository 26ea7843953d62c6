"""
Adapters connecting the grid to NetworkX graphs and trimesh meshes.
"""

from .networkx_adapter import to_networkx_graph, cluster_items, cluster_cells
from .mesh_adapter import index_mesh_triangles, mesh_candidate_pairs, default_cell_size

__all__ = [
    "to_networkx_graph",
    "cluster_items",
    "cluster_cells",
    "index_mesh_triangles",
    "mesh_candidate_pairs",
    "default_cell_size",
]
