"""Parameter validation with bounds checking.

Catches grid configurations that would fail at construction or that are
legal but likely to perform badly.
"""

from typing import List, Tuple
import numpy as np

from .config import GridParams


PARAM_BOUNDS = {
    "num_dims": (1, 16, "axes"),
    "hash_base": (2, 1 << 31, "multiplier"),
    "max_query_cells": (1, 1 << 40, "cells"),
}

MAX_ANISOTROPY = 100.0


def validate_params(params: GridParams) -> Tuple[bool, List[str]]:
    """
    Validate GridParams against bounds.

    Parameters
    ----------
    params : GridParams
        Parameters to validate

    Returns
    -------
    is_valid : bool
        True if all parameters are valid
    warnings : list of str
        List of validation warnings/errors
    """
    warnings = []

    for param_name, (min_val, max_val, unit) in PARAM_BOUNDS.items():
        value = getattr(params, param_name, None)

        if value is None:
            continue  # Optional parameter

        if value < min_val:
            warnings.append(
                f"{param_name} = {value} {unit} is below minimum {min_val} {unit}"
            )
        elif value > max_val:
            warnings.append(
                f"{param_name} = {value} {unit} exceeds maximum {max_val} {unit}"
            )

    if np.isscalar(params.cell_size):
        sizes = np.array([params.cell_size], dtype=float)
    else:
        sizes = np.array(params.cell_size, dtype=float)
        if sizes.shape[0] != params.num_dims:
            warnings.append(
                f"cell_size has {sizes.shape[0]} components but num_dims is {params.num_dims}"
            )

    if sizes.size == 0 or not np.all(np.isfinite(sizes)) or np.any(sizes <= 0):
        warnings.append(f"cell_size {sizes.tolist()} must be positive and finite")
    elif sizes.max() / sizes.min() > MAX_ANISOTROPY:
        warnings.append(
            f"cell_size ratio {sizes.max() / sizes.min():.1f} exceeds {MAX_ANISOTROPY:.0f}, "
            "ball queries will scan many cells along the fine axes"
        )

    is_valid = len(warnings) == 0
    return is_valid, warnings


def validate_and_warn(params: GridParams) -> GridParams:
    """
    Validate parameters and print warnings.

    Parameters
    ----------
    params : GridParams
        Parameters to validate

    Returns
    -------
    params : GridParams
        Same parameters (for chaining)
    """
    is_valid, warnings = validate_params(params)

    if not is_valid:
        print(f"Grid parameter validation warnings ({len(warnings)}):")
        for warning in warnings:
            print(f"  - {warning}")

    return params
