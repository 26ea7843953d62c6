"""Tests for grid parameter presets and validation."""

import pytest
from grid_subdivision.params import (
    GridParams,
    get_preset,
    list_presets,
    validate_params,
    validate_and_warn,
)


def test_list_presets():
    presets = list_presets()
    assert isinstance(presets, list)
    assert "unit_3d" in presets
    assert "broadphase_coarse" in presets


def test_get_preset():
    params = get_preset("voxel_1mm")
    assert params.num_dims == 3
    assert params.cell_size == 0.001
    assert params.max_query_cells == 1_000_000


def test_get_unknown_preset():
    with pytest.raises(ValueError, match="Unknown preset 'hexagonal'"):
        get_preset("hexagonal")


def test_presets_are_valid():
    for name in list_presets():
        is_valid, warnings = validate_params(get_preset(name))
        assert is_valid is True, warnings


def test_validate_bad_cell_size():
    is_valid, warnings = validate_params(GridParams(num_dims=2, cell_size=(1.0, -1.0)))
    assert is_valid is False
    assert any("positive" in w for w in warnings)


def test_validate_dimension_mismatch():
    is_valid, warnings = validate_params(GridParams(num_dims=3, cell_size=(1.0, 1.0)))
    assert is_valid is False
    assert any("num_dims is 3" in w for w in warnings)


def test_validate_hash_base_and_anisotropy():
    is_valid, warnings = validate_params(
        GridParams(num_dims=2, cell_size=(1000.0, 1.0), hash_base=1)
    )
    assert is_valid is False
    assert any("hash_base" in w for w in warnings)
    assert any("ratio" in w for w in warnings)


def test_validate_and_warn_prints(capsys):
    params = GridParams(num_dims=0, cell_size=1.0)
    assert validate_and_warn(params) is params
    out = capsys.readouterr().out
    assert "num_dims" in out


def test_params_dict_roundtrip():
    params = GridParams(num_dims=2, cell_size=[0.5, 2.0], hash_base=31, max_query_cells=500)
    assert params.cell_size == (0.5, 2.0)
    assert GridParams.from_dict(params.to_dict()) == params


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
