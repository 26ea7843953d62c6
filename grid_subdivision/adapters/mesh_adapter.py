"""
Broad-phase triangle shortlists for trimesh.Trimesh objects.

Triangles are stored in a grid by the cells their bounding boxes overlap.
Two triangles become a candidate pair when their boxes share a cell; no
exact triangle-triangle test is performed here.
"""

import numpy as np
import trimesh
from typing import Optional

from ..core.result import OperationResult, ErrorCode
from ..spatial.grid import GridSubdivision


def default_cell_size(mesh: trimesh.Trimesh) -> float:
    """Twice the mean unique edge length of ``mesh``."""
    return 2.0 * float(np.mean(mesh.edges_unique_length))


def index_mesh_triangles(
    mesh: trimesh.Trimesh,
    cell_size: Optional[float] = None,
    grid: Optional[GridSubdivision] = None,
) -> GridSubdivision:
    """
    Insert every triangle id of ``mesh`` into the cells its box overlaps.

    Parameters
    ----------
    mesh : trimesh.Trimesh
        Mesh to index
    cell_size : float, optional
        Cell width; defaults to ``default_cell_size(mesh)``. Ignored when
        ``grid`` is given.
    grid : GridSubdivision, optional
        Existing 3D grid to insert into

    Returns
    -------
    grid : GridSubdivision
        Grid holding triangle ids
    """
    if grid is None:
        if cell_size is None:
            cell_size = default_cell_size(mesh)
        grid = GridSubdivision(cell_size, num_dims=3)

    triangles = mesh.triangles
    tri_min = triangles.min(axis=1)
    tri_max = triangles.max(axis=1)

    for tri_id in range(len(triangles)):
        grid.insert_box(tri_min[tri_id], tri_max[tri_id], tri_id)

    return grid


def mesh_candidate_pairs(
    mesh_a: trimesh.Trimesh,
    mesh_b: trimesh.Trimesh,
    cell_size: Optional[float] = None,
    transform_b: Optional[np.ndarray] = None,
) -> OperationResult:
    """
    Shortlist triangle pairs of two meshes that may intersect.

    Parameters
    ----------
    mesh_a, mesh_b : trimesh.Trimesh
        Meshes to compare, in a shared frame
    cell_size : float, optional
        Cell width; defaults to ``default_cell_size(mesh_a)``
    transform_b : ndarray, optional
        4x4 homogeneous transform applied to a copy of ``mesh_b`` first

    Returns
    -------
    OperationResult
        Result with sorted (tri_a, tri_b) tuples in metadata['pairs'] and
        their number in metadata['count']
    """
    if len(mesh_a.faces) == 0 or len(mesh_b.faces) == 0:
        return OperationResult.failure(
            "Cannot shortlist pairs for a mesh without faces",
            errors=["empty mesh"],
            error_codes=[ErrorCode.EMPTY_MESH.value],
        )

    if transform_b is not None:
        mesh_b = mesh_b.copy()
        mesh_b.apply_transform(np.asarray(transform_b, dtype=float))

    try:
        grid = index_mesh_triangles(mesh_a, cell_size=cell_size)
    except ValueError as e:
        return OperationResult.failure(
            f"Could not build triangle grid: {e}",
            errors=[str(e)],
            error_codes=[ErrorCode.INVALID_PARAMETER.value],
        )

    triangles_b = mesh_b.triangles
    b_min = triangles_b.min(axis=1)
    b_max = triangles_b.max(axis=1)

    pairs = set()
    for tri_b in range(len(triangles_b)):
        for tri_a in grid.box_items(b_min[tri_b], b_max[tri_b]):
            pairs.add((int(tri_a), tri_b))

    pairs = sorted(pairs)
    return OperationResult.success(
        message=f"Found {len(pairs)} candidate triangle pairs",
        metadata={
            "pairs": pairs,
            "count": len(pairs),
            "cell_size": grid.cell_size.tolist(),
            "num_cells": grid.num_cells(),
        },
    )
