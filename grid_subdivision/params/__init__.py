"""Grid configuration, presets and validation."""

from .config import GridParams, as_cell_size_vector

from .presets import (
    unit_2d,
    unit_3d,
    voxel_1mm,
    broadphase_coarse,
    get_preset,
    list_presets,
    PRESETS,
)

from .validation import (
    validate_params,
    validate_and_warn,
    PARAM_BOUNDS,
)

__all__ = [
    "GridParams",
    "as_cell_size_vector",
    # Presets
    "unit_2d",
    "unit_3d",
    "voxel_1mm",
    "broadphase_coarse",
    "get_preset",
    "list_presets",
    "PRESETS",
    # Validation
    "validate_params",
    "validate_and_warn",
    "PARAM_BOUNDS",
]
