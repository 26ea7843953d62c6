"""Parameter presets for common grid configurations.

Named GridParams factories so callers do not have to restate cell sizes
for the usual cases.
"""

from .config import GridParams


def unit_2d() -> GridParams:
    """Planar grid with unit cells."""
    return GridParams(num_dims=2, cell_size=1.0)


def unit_3d() -> GridParams:
    """Volumetric grid with unit cells."""
    return GridParams(num_dims=3, cell_size=1.0)


def voxel_1mm() -> GridParams:
    """
    Fine 3D grid for geometry expressed in meters.

    Characteristics:
    - 1mm cubic cells
    - Warns on queries touching more than a million cells
    """
    return GridParams(
        num_dims=3,
        cell_size=0.001,
        max_query_cells=1_000_000,
    )


def broadphase_coarse() -> GridParams:
    """
    Coarse 3D grid for broad-phase collision shortlists.

    Characteristics:
    - 0.25 unit cells, sized for objects of roughly that extent
    - Warns on queries touching more than 100k cells
    """
    return GridParams(
        num_dims=3,
        cell_size=0.25,
        max_query_cells=100_000,
    )


PRESETS = {
    "unit_2d": unit_2d,
    "unit_3d": unit_3d,
    "voxel_1mm": voxel_1mm,
    "broadphase_coarse": broadphase_coarse,
}


def get_preset(name: str) -> GridParams:
    """
    Get a parameter preset by name.

    Parameters
    ----------
    name : str
        Preset name (e.g., "unit_3d", "broadphase_coarse")

    Returns
    -------
    GridParams
        Parameter configuration

    Raises
    ------
    ValueError
        If preset name is not recognized
    """
    if name not in PRESETS:
        available = ", ".join(PRESETS.keys())
        raise ValueError(f"Unknown preset '{name}'. Available: {available}")

    return PRESETS[name]()


def list_presets() -> list:
    """List all available preset names."""
    return list(PRESETS.keys())
