"""Spatial hashing grid and index-range enumeration."""

from .odometer import IndexRange, increment_index
from .grid import GridSubdivision, QueryCallback

__all__ = ["GridSubdivision", "QueryCallback", "IndexRange", "increment_index"]
