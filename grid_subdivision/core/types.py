"""
Coordinate and extent types for the grid.
"""

from dataclasses import dataclass
from functools import lru_cache
from typing import Iterable, Sequence, Type
import numpy as np

from .hashing import IndexHash, DEFAULT_HASH_BASE


class CellIndex(tuple):
    """
    Integer coordinate of one grid cell.

    Hashing uses ``IndexHash`` with the class-level ``hash_base``. Grids
    build their own subclass via ``with_hash_base`` so every key in one table
    hashes the same way. Equality is componentwise but only between indices
    of the same type: a CellIndex never equals a plain tuple or an index with
    another hash base, since their hashes differ.
    """

    hash_base = DEFAULT_HASH_BASE
    _hasher = IndexHash(DEFAULT_HASH_BASE)

    def __new__(cls, components: Iterable[int]):
        return super().__new__(cls, (int(c) for c in components))

    def __hash__(self) -> int:
        return self._hasher(self)

    def __eq__(self, other) -> bool:
        return type(other) is type(self) and tuple.__eq__(self, other)

    def __ne__(self, other) -> bool:
        return not self.__eq__(other)

    def __repr__(self) -> str:
        return f"CellIndex({list(self)})"

    @classmethod
    def with_hash_base(cls, base: int) -> Type["CellIndex"]:
        """Get the index type hashing with ``base``."""
        return _index_type(base)

    def offset(self, delta: Sequence[int]) -> "CellIndex":
        """Componentwise sum with ``delta``, same index type."""
        assert len(delta) == len(self)
        return type(self)(a + b for a, b in zip(self, delta))

    def to_list(self) -> list:
        """Convert to plain list for serialization."""
        return list(self)


@lru_cache(maxsize=None)
def _index_type(base: int) -> Type[CellIndex]:
    if base == DEFAULT_HASH_BASE:
        return CellIndex
    hasher = IndexHash(base)
    return type(
        f"CellIndex{hasher.base}",
        (CellIndex,),
        {"hash_base": hasher.base, "_hasher": hasher},
    )


@dataclass
class Bounds:
    """Axis-aligned physical extent, half-open on the upper side."""

    bmin: np.ndarray
    bmax: np.ndarray

    def __post_init__(self):
        self.bmin = np.asarray(self.bmin, dtype=float)
        self.bmax = np.asarray(self.bmax, dtype=float)
        if self.bmin.shape != self.bmax.shape:
            raise ValueError(
                f"bmin and bmax must have the same shape, got {self.bmin.shape} and {self.bmax.shape}"
            )

    @property
    def num_dims(self) -> int:
        return int(self.bmin.shape[0])

    def contains(self, point: Sequence[float]) -> bool:
        """Check bmin <= point < bmax on every axis."""
        p = np.asarray(point, dtype=float)
        return bool(np.all(self.bmin <= p) and np.all(p < self.bmax))

    def size(self) -> np.ndarray:
        """Extent along each axis."""
        return self.bmax - self.bmin

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {"bmin": self.bmin.tolist(), "bmax": self.bmax.tolist()}

    @classmethod
    def from_dict(cls, d: dict) -> "Bounds":
        """Create from dictionary."""
        return cls(bmin=np.array(d["bmin"], dtype=float), bmax=np.array(d["bmax"], dtype=float))
