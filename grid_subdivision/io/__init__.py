"""Input/output for grids."""

from .serialize import save_json, load_json

__all__ = ["save_json", "load_json"]
