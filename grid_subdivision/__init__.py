"""
Grid Subdivision - sparse spatial hashing over uniform N-dimensional cells

Partitions continuous N-dimensional space into uniform rectangular cells and
keeps, for each non-empty cell, the handles of the objects located there.
Point, box and sphere queries shortlist nearby objects without scanning
everything, as a broad phase for collision checks, neighbour search and
spatial clustering.

Key Features:
- Any dimensionality, per-axis cell sizes
- Sparse storage: only occupied cells are kept
- Early-stopping visitor queries and eager list queries
- Conservative box and ball queries (re-test exact shape membership yourself)
- JSON persistence, NetworkX clustering, trimesh broad-phase adapters

Example Usage:
    from grid_subdivision import GridSubdivision

    grid = GridSubdivision(cell_size=1.0, num_dims=2)
    grid.insert(grid.point_to_index((0.5, 0.5)), "A")
    grid.insert(grid.point_to_index((1.5, 0.2)), "B")

    grid.box_items((0, 0), (2, 1))      # ['A', 'B']
    grid.box_items((0, 0), (0.9, 0.9))  # ['A']
"""

__version__ = "0.1.0"

from .core.types import CellIndex, Bounds
from .core.hashing import IndexHash
from .core.result import OperationResult, OperationStatus, ErrorCode

from .spatial.odometer import IndexRange, increment_index
from .spatial.grid import GridSubdivision

from .params import GridParams, get_preset, list_presets, validate_params

from .analysis.occupancy import compute_occupancy

from .io.serialize import save_json, load_json

__all__ = [
    "CellIndex",
    "Bounds",
    "IndexHash",
    "OperationResult",
    "OperationStatus",
    "ErrorCode",
    "IndexRange",
    "increment_index",
    "GridSubdivision",
    "GridParams",
    "get_preset",
    "list_presets",
    "validate_params",
    "compute_occupancy",
    "save_json",
    "load_json",
]
