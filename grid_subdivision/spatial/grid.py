"""
Sparse uniform grid subdivision of N-dimensional space.
"""

import warnings
from typing import Callable, Dict, Generic, Iterable, Iterator, List, Optional, Sequence, Tuple, TypeVar, Union
import numpy as np

from ..core.hashing import DEFAULT_HASH_BASE
from ..core.types import Bounds, CellIndex
from ..params.config import GridParams, as_cell_size_vector
from .odometer import IndexRange

T = TypeVar("T")

QueryCallback = Callable[[T], bool]


def _equal_handles(item, handle) -> bool:
    """Value match that only accepts a scalar boolean result."""
    try:
        result = item == handle
    except (TypeError, ValueError):
        # incomparable handles, e.g. arrays of mismatched shape
        return False
    return isinstance(result, (bool, np.bool_)) and bool(result)


class GridSubdivision(Generic[T]):
    """
    Spatial hash over uniform rectangular cells.

    Each non-empty cell maps to a bucket (list) of opaque handles. The grid
    never dereferences, copies or frees a handle; it only stores and returns
    it. Buckets are created on first insertion and dropped as soon as they
    become empty, so the table only ever holds occupied cells.

    Queries visit every cell of an index box and hand back the handles found
    there. Box and ball queries are conservative: they return everything in
    the cells the shape touches, not only handles inside the shape.

    Not thread safe.
    """

    def __init__(
        self,
        cell_size: Union[float, Sequence[float]],
        num_dims: Optional[int] = None,
        hash_base: int = DEFAULT_HASH_BASE,
        max_query_cells: Optional[int] = None,
    ):
        """
        Initialize an empty grid.

        Parameters
        ----------
        cell_size : float or sequence of float
            Cell width, shared by all axes or given per axis. Must be positive.
        num_dims : int, optional
            Dimensionality N; required when ``cell_size`` is a scalar
        hash_base : int
            Base of the per-axis weights in the cell-coordinate hash
        max_query_cells : int, optional
            Emit a warning when a query range spans more cells than this
        """
        self._h = as_cell_size_vector(cell_size, num_dims)
        self._index_type = CellIndex.with_hash_base(hash_base)
        self.max_query_cells = max_query_cells
        self._buckets: Dict[CellIndex, List[T]] = {}

    @classmethod
    def from_params(cls, params: GridParams) -> "GridSubdivision":
        """Create an empty grid from a GridParams configuration."""
        return cls(
            params.cell_size_vector(),
            num_dims=params.num_dims,
            hash_base=params.hash_base,
            max_query_cells=params.max_query_cells,
        )

    def get_params(self) -> GridParams:
        """Configuration this grid was built with."""
        return GridParams(
            num_dims=self.num_dims,
            cell_size=tuple(self._h.tolist()),
            hash_base=self.hash_base,
            max_query_cells=self.max_query_cells,
        )

    @property
    def num_dims(self) -> int:
        return int(self._h.shape[0])

    @property
    def cell_size(self) -> np.ndarray:
        return self._h.copy()

    @property
    def hash_base(self) -> int:
        return self._index_type.hash_base

    def _key(self, components: Iterable[int]) -> CellIndex:
        """Cell coordinate keyed for this grid's table."""
        index = self._index_type(components)
        assert len(index) == self.num_dims, f"expected {self.num_dims}-d index, got {len(index)}-d"
        return index

    # ------------------------------------------------------------------
    # Bucket table

    def insert(self, index: Sequence[int], handle: T) -> None:
        """Append ``handle`` to the bucket of ``index``, creating it if needed."""
        index = self._key(index)
        self._buckets.setdefault(index, []).append(handle)

    def erase(self, index: Sequence[int], handle: T) -> bool:
        """
        Remove the first occurrence of ``handle`` from the bucket of ``index``.

        The first item that is ``handle`` wins. Only if the bucket holds no
        such item does a value match count, and only when ``item == handle``
        is a plain boolean True (integer ids; never array comparisons).
        The bucket is dropped when it becomes empty.

        Returns
        -------
        bool
            True if an item was removed
        """
        index = self._key(index)
        bucket = self._buckets.get(index)
        if bucket is None:
            return False

        position = next((i for i, item in enumerate(bucket) if item is handle), None)
        if position is None:
            position = next((i for i, item in enumerate(bucket) if _equal_handles(item, handle)), None)

        if position is not None:
            del bucket[position]

        if not bucket:
            del self._buckets[index]
        return position is not None

    def get_bucket(self, index: Sequence[int]) -> Optional[List[T]]:
        """Copy of the bucket at ``index``, or None if the cell is empty."""
        bucket = self._buckets.get(self._key(index))
        if bucket is None:
            return None
        return list(bucket)

    def clear(self) -> None:
        """Remove every bucket. Cell sizes and dimensionality are kept."""
        self._buckets.clear()

    def num_cells(self) -> int:
        """Number of occupied cells."""
        return len(self._buckets)

    def num_items(self) -> int:
        """Number of stored handles, counting duplicates."""
        return sum(len(bucket) for bucket in self._buckets.values())

    def __contains__(self, index) -> bool:
        if len(index) != self.num_dims:
            return False
        return self._index_type(index) in self._buckets

    def iter_buckets(self) -> Iterator[Tuple[Tuple[int, ...], List[T]]]:
        """Yield (index tuple, bucket copy) for every occupied cell."""
        for index, bucket in self._buckets.items():
            yield tuple(index), list(bucket)

    def insert_point(self, point: Sequence[float], handle: T) -> Tuple[int, ...]:
        """Insert ``handle`` in the cell containing ``point``; returns the cell."""
        index = self.point_to_index(point)
        self._buckets.setdefault(self._key(index), []).append(handle)
        return index

    def erase_point(self, point: Sequence[float], handle: T) -> bool:
        """Erase ``handle`` from the cell containing ``point``."""
        return self.erase(self.point_to_index(point), handle)

    def insert_box(self, bmin: Sequence[float], bmax: Sequence[float], handle: T) -> int:
        """
        Insert ``handle`` into every cell overlapped by the box [bmin, bmax].

        Returns
        -------
        int
            Number of cells the handle was inserted into
        """
        cells = self._box_range(bmin, bmax)
        for index in cells:
            self._buckets.setdefault(index, []).append(handle)
        return len(cells)

    def erase_box(self, bmin: Sequence[float], bmax: Sequence[float], handle: T) -> int:
        """
        Erase one occurrence of ``handle`` from every cell overlapped by the box.

        Returns
        -------
        int
            Number of cells the handle was removed from
        """
        return sum(1 for index in self._box_range(bmin, bmax) if self.erase(index, handle))

    def build(self, points: np.ndarray, handles: Optional[Sequence[T]] = None) -> None:
        """
        Bulk-insert one handle per row of ``points``.

        Parameters
        ----------
        points : ndarray
            (M, N) array of point coordinates
        handles : sequence, optional
            M handles; defaults to the row numbers 0..M-1
        """
        indices = self.points_to_indices(points)
        if handles is None:
            handles = range(indices.shape[0])
        assert len(handles) == indices.shape[0], "one handle per point required"

        for row, handle in zip(indices, handles):
            self._buckets.setdefault(self._index_type(row), []).append(handle)

    # ------------------------------------------------------------------
    # Coordinate translation

    def _as_point(self, point: Sequence[float]) -> np.ndarray:
        p = np.asarray(point, dtype=float).reshape(-1)
        assert p.shape[0] == self.num_dims, f"expected {self.num_dims}-d point, got {p.shape[0]}-d"
        return p

    def point_to_index(self, point: Sequence[float]) -> Tuple[int, ...]:
        """Cell containing ``point``: floor(p[k] / h[k]) on each axis."""
        p = self._as_point(point)
        return tuple(int(i) for i in np.floor(p / self._h))

    def point_to_index_with_offset(self, point: Sequence[float]) -> Tuple[Tuple[int, ...], np.ndarray]:
        """
        Cell containing ``point`` and the point's offset inside that cell.

        Returns
        -------
        index : tuple of int
            Same as ``point_to_index``
        offset : ndarray
            Per-axis distance from the cell's lower corner, in [0, h[k])
        """
        p = self._as_point(point)
        cells = np.floor(p / self._h)
        offset = p - cells * self._h
        # rounding can push the offset onto the upper face
        offset = np.clip(offset, 0.0, np.nextafter(self._h, 0.0))
        return tuple(int(i) for i in cells), offset

    def points_to_indices(self, points: np.ndarray) -> np.ndarray:
        """Vectorized ``point_to_index`` for an (M, N) array; returns int64 (M, N)."""
        pts = np.asarray(points, dtype=float)
        if pts.ndim == 1:
            pts = pts.reshape(-1, self.num_dims)
        assert pts.shape[1] == self.num_dims, f"expected {self.num_dims} columns, got {pts.shape[1]}"
        return np.floor(pts / self._h).astype(np.int64)

    def index_bucket_bounds(self, index: Sequence[int]) -> Bounds:
        """Physical extent [i*h, i*h + h) of a cell."""
        assert len(index) == self.num_dims
        bmin = self._h * np.asarray(index, dtype=float)
        return Bounds(bmin=bmin, bmax=bmin + self._h)

    def get_index_range(self) -> Tuple[Tuple[int, ...], Tuple[int, ...]]:
        """
        Componentwise min and max over all occupied cells.

        Returns all-zero coordinates when the grid is empty.
        """
        if not self._buckets:
            zero = (0,) * self.num_dims
            return zero, zero

        indices = iter(self._buckets)
        first = next(indices)
        imin = list(first)
        imax = list(first)
        for index in indices:
            for k in range(self.num_dims):
                if index[k] < imin[k]:
                    imin[k] = index[k]
                if index[k] > imax[k]:
                    imax[k] = index[k]
        return tuple(imin), tuple(imax)

    def get_bounds_range(self) -> Bounds:
        """Physical extent covered by the occupied index range (zero when empty)."""
        if not self._buckets:
            return Bounds(bmin=np.zeros(self.num_dims), bmax=np.zeros(self.num_dims))

        imin, imax = self.get_index_range()
        return Bounds(
            bmin=self._h * np.asarray(imin, dtype=float),
            bmax=self._h * (np.asarray(imax, dtype=float) + 1.0),
        )

    # ------------------------------------------------------------------
    # Range queries

    def _index_range(self, imin: Sequence[int], imax: Sequence[int]) -> IndexRange:
        assert len(imin) == self.num_dims and len(imax) == self.num_dims, "dimension mismatch"
        cells = IndexRange(imin, imax, index_type=self._index_type)
        if self.max_query_cells is not None and len(cells) > self.max_query_cells:
            warnings.warn(
                f"Query range {list(cells.imin)}..{list(cells.imax)} spans {len(cells)} cells "
                f"(max_query_cells={self.max_query_cells}). Consider a larger cell size.",
                UserWarning,
                stacklevel=4,
            )
        return cells

    def _box_range(self, bmin: Sequence[float], bmax: Sequence[float]) -> IndexRange:
        return self._index_range(self.point_to_index(bmin), self.point_to_index(bmax))

    def _ball_range(self, center: Sequence[float], radius: float) -> IndexRange:
        assert radius >= 0, f"radius must be non-negative, got {radius}"
        icenter, offset = self.point_to_index_with_offset(center)
        # the sphere spans [offset - r, offset + r] relative to the center cell's corner
        lo = np.floor((offset - radius) / self._h).astype(np.int64)
        hi = np.floor((offset + radius) / self._h).astype(np.int64)
        imin = [ik + int(d) for ik, d in zip(icenter, lo)]
        imax = [ik + int(d) for ik, d in zip(icenter, hi)]
        return self._index_range(imin, imax)

    def _query_range(self, cells: IndexRange, visit: QueryCallback) -> bool:
        for index in cells:
            bucket = self._buckets.get(index)
            if bucket is None:
                continue
            for item in bucket:
                if not visit(item):
                    return False
        return True

    def _collect_range(self, cells: IndexRange) -> List[T]:
        items = []
        for index in cells:
            bucket = self._buckets.get(index)
            if bucket is not None:
                items.extend(bucket)
        return items

    def index_query(self, imin: Sequence[int], imax: Sequence[int], visit: QueryCallback) -> bool:
        """
        Visit every handle stored in the inclusive index box [imin, imax].

        Parameters
        ----------
        imin, imax : sequence of int
            Box corners; ``imin[k] <= imax[k]`` is required
        visit : callable
            Called with each handle; return True to continue, False to stop

        Returns
        -------
        bool
            False if ``visit`` stopped the traversal, True otherwise
        """
        return self._query_range(self._index_range(imin, imax), visit)

    def box_query(self, bmin: Sequence[float], bmax: Sequence[float], visit: QueryCallback) -> bool:
        """Visit every handle in the cells overlapped by the box [bmin, bmax]."""
        return self._query_range(self._box_range(bmin, bmax), visit)

    def ball_query(self, center: Sequence[float], radius: float, visit: QueryCallback) -> bool:
        """
        Visit every handle in the cells overlapped by the sphere's bounding box.

        Handles farther than ``radius`` from ``center`` may be visited too;
        re-test the distance inside ``visit`` if exact membership matters.
        """
        return self._query_range(self._ball_range(center, radius), visit)

    def index_items(self, imin: Sequence[int], imax: Sequence[int]) -> List[T]:
        """All handles stored in the inclusive index box [imin, imax]."""
        return self._collect_range(self._index_range(imin, imax))

    def box_items(self, bmin: Sequence[float], bmax: Sequence[float]) -> List[T]:
        """All handles in the cells overlapped by the box [bmin, bmax]."""
        return self._collect_range(self._box_range(bmin, bmax))

    def ball_items(self, center: Sequence[float], radius: float) -> List[T]:
        """All handles in the cells overlapped by the sphere's bounding box."""
        return self._collect_range(self._ball_range(center, radius))

    # ------------------------------------------------------------------
    # Serialization

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization (handles must be JSON-safe)."""
        return {
            "params": self.get_params().to_dict(),
            "buckets": [
                {"index": index.to_list(), "items": list(bucket)}
                for index, bucket in self._buckets.items()
            ],
        }

    @classmethod
    def from_dict(cls, d: dict) -> "GridSubdivision":
        """Create from dictionary."""
        grid = cls.from_params(GridParams.from_dict(d["params"]))
        for entry in d.get("buckets", []):
            items = list(entry["items"])
            if items:
                grid._buckets[grid._key(entry["index"])] = items
        return grid

    def __repr__(self) -> str:
        return (
            f"GridSubdivision(num_dims={self.num_dims}, cell_size={self._h.tolist()}, "
            f"cells={self.num_cells()})"
        )
