"""Grid configuration.

A ``GridParams`` fixes everything a grid needs at construction time: the
dimensionality, the per-axis cell size, the hash base and an optional
query-size warning threshold. Cell sizes are immutable once a grid is built.
"""

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple, Union
import numpy as np

from ..core.hashing import DEFAULT_HASH_BASE


@dataclass
class GridParams:
    """
    Construction parameters for GridSubdivision.

    Parameters
    ----------
    num_dims : int
        Dimensionality N of the grid
    cell_size : float or sequence of float
        Cell width, either shared by all axes or given per axis
    hash_base : int
        Base of the per-axis weights in the cell-coordinate hash
    max_query_cells : int, optional
        Warn when a single query range spans more cells than this
    """

    num_dims: int
    cell_size: Union[float, Tuple[float, ...]] = 1.0
    hash_base: int = DEFAULT_HASH_BASE
    max_query_cells: Optional[int] = None

    def __post_init__(self):
        if not np.isscalar(self.cell_size):
            self.cell_size = tuple(float(h) for h in self.cell_size)

    def cell_size_vector(self) -> np.ndarray:
        """Per-axis cell size as a length-N float array."""
        return as_cell_size_vector(self.cell_size, self.num_dims)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "num_dims": self.num_dims,
            "cell_size": list(self.cell_size) if isinstance(self.cell_size, tuple) else self.cell_size,
            "hash_base": self.hash_base,
            "max_query_cells": self.max_query_cells,
        }

    @classmethod
    def from_dict(cls, d: dict) -> "GridParams":
        """Create from dictionary."""
        return cls(
            num_dims=d["num_dims"],
            cell_size=d.get("cell_size", 1.0),
            hash_base=d.get("hash_base", DEFAULT_HASH_BASE),
            max_query_cells=d.get("max_query_cells"),
        )


def as_cell_size_vector(
    cell_size: Union[float, Sequence[float]],
    num_dims: Optional[int] = None,
) -> np.ndarray:
    """
    Normalize a scalar or per-axis cell size into a float vector.

    Raises
    ------
    ValueError
        If the dimensionality cannot be determined, does not match, or a cell
        size is not a positive finite number
    """
    if np.isscalar(cell_size):
        if num_dims is None:
            raise ValueError("num_dims is required when cell_size is a scalar")
        h = np.full(int(num_dims), float(cell_size))
    else:
        h = np.array(cell_size, dtype=float).reshape(-1)
        if num_dims is not None and h.shape[0] != num_dims:
            raise ValueError(
                f"cell_size has {h.shape[0]} components but num_dims is {num_dims}"
            )

    if h.shape[0] < 1:
        raise ValueError("grid must have at least one dimension")
    if not np.all(np.isfinite(h)) or np.any(h <= 0):
        raise ValueError(f"cell sizes must be positive and finite, got {h.tolist()}")

    return h
