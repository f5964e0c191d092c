# File: tests/test_catalog.py
"""
Test the material presets and default inputs.
"""

import pytest

from mini_beam.catalog import (
    MATERIALS,
    STEEL,
    DEFAULT_INPUT,
    DEFAULT_SECTION,
    DEFAULT_LOAD_CASES,
    DEFAULT_COMBOS,
)
from mini_beam.model import BeamType, LoadCombo, Material, RectangleSection


def test_material_creation():
    mat = Material(name="Test Material", E=10e9, yield_strength=40e6)

    assert mat.name == "Test Material"
    assert mat.E == 10e9
    assert mat.yield_strength == 40e6

    with pytest.raises(Exception):  # dataclass.FrozenInstanceError
        mat.E = 20e9


def test_material_presets_are_reasonable():
    assert len(MATERIALS) == 10
    for key, mat in MATERIALS.items():
        assert isinstance(mat, Material), key
        # Pa, not GPa / MPa
        assert 1e9 < mat.E < 1e12, key
        assert 1e6 < mat.yield_strength < 1e10, key

    assert MATERIALS["steel-a36"].yield_strength == 250e6
    assert MATERIALS["al-6061"].E == 69e9


def test_default_input():
    assert DEFAULT_INPUT.material == STEEL
    assert DEFAULT_INPUT.section == DEFAULT_SECTION == RectangleSection(width=0.05, height=0.10)
    assert DEFAULT_INPUT.beam_type is BeamType.SIMPLY_SUPPORTED
    assert DEFAULT_INPUT.n_elem == 100
    assert BeamType("fixed-fixed") is BeamType.FIXED_FIXED


def test_default_cases_and_combos():
    assert [c.id for c in DEFAULT_LOAD_CASES] == ["D", "L"]
    assert all(isinstance(c.loads, tuple) for c in DEFAULT_LOAD_CASES)

    c1, c2 = DEFAULT_COMBOS
    assert c1.factor("D") == 1.0 and c1.factor("L") == 1.0
    assert c2.factor("D") == 1.2 and c2.factor("L") == 1.6


def test_combo_factor_defaults_to_zero():
    combo = LoadCombo(id="W", name="wind only", factors={"W": 1.0})
    assert combo.factor("W") == 1.0
    assert combo.factor("D") == 0.0
