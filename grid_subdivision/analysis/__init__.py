"""Analysis helpers for grid contents."""

from .occupancy import compute_occupancy

__all__ = ["compute_occupancy"]
