"""
JSON serialization for grids.
"""

import json
from pathlib import Path
from typing import Union

from ..spatial.grid import GridSubdivision

SCHEMA_VERSION = "1.0"


def save_json(
    grid: GridSubdivision,
    filepath: Union[str, Path],
    indent: int = 2,
) -> None:
    """
    Save grid configuration and buckets to a JSON file.

    Stored handles must be JSON-serializable (ids, names).

    Parameters
    ----------
    grid : GridSubdivision
        Grid to save
    filepath : str or Path
        Output file path
    indent : int
        JSON indentation level

    Example
    -------
    >>> from grid_subdivision import save_json
    >>> save_json(grid, "my_grid.json")
    """
    filepath = Path(filepath)

    data = grid.to_dict()
    data["schema_version"] = SCHEMA_VERSION

    with open(filepath, 'w') as f:
        json.dump(data, f, indent=indent)


def load_json(filepath: Union[str, Path]) -> GridSubdivision:
    """
    Load a grid from a JSON file.

    Parameters
    ----------
    filepath : str or Path
        Input file path

    Returns
    -------
    grid : GridSubdivision
        Loaded grid

    Example
    -------
    >>> from grid_subdivision import load_json
    >>> grid = load_json("my_grid.json")
    """
    filepath = Path(filepath)

    with open(filepath, 'r') as f:
        data = json.load(f)

    schema_version = data.get("schema_version", SCHEMA_VERSION)
    if schema_version != SCHEMA_VERSION:
        raise ValueError(f"Unsupported schema version: {schema_version}")

    return GridSubdivision.from_dict(data)
