"""
Occupancy statistics for a grid.
"""

from typing import Any, Dict
import numpy as np

from ..spatial.grid import GridSubdivision
from ..spatial.odometer import IndexRange


def compute_occupancy(grid: GridSubdivision) -> Dict[str, Any]:
    """
    Summarize how handles are spread over the occupied cells.

    Parameters
    ----------
    grid : GridSubdivision
        Grid to inspect

    Returns
    -------
    stats : dict
        num_cells, num_items, avg/max/min_items_per_cell,
        range_volume_cells (cells in the occupied index box) and
        fill_ratio (occupied cells / range_volume_cells)
    """
    if grid.num_cells() == 0:
        return {
            "num_cells": 0,
            "num_items": 0,
            "avg_items_per_cell": 0.0,
            "max_items_per_cell": 0,
            "min_items_per_cell": 0,
            "range_volume_cells": 0,
            "fill_ratio": 0.0,
        }

    counts = np.array([len(bucket) for _, bucket in grid.iter_buckets()])
    imin, imax = grid.get_index_range()
    volume = len(IndexRange(imin, imax))

    return {
        "num_cells": int(counts.size),
        "num_items": int(counts.sum()),
        "avg_items_per_cell": float(np.mean(counts)),
        "max_items_per_cell": int(np.max(counts)),
        "min_items_per_cell": int(np.min(counts)),
        "range_volume_cells": volume,
        "fill_ratio": counts.size / volume,
    }
