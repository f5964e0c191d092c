# File: tests/test_section.py
"""
Test cross-section property formulas (I, c, A).
"""

import math

import numpy as np
import pytest

from mini_beam.model import RectangleSection, CircleSection, HollowCircleSection, IBeamSection
from mini_beam.section import SectionProperties, section_properties


def test_rectangle_properties():
    props = section_properties(RectangleSection(width=0.05, height=0.10))

    assert np.isclose(props.I, 0.05 * 0.10**3 / 12)
    assert np.isclose(props.c, 0.05)
    assert np.isclose(props.A, 0.005)
    # S = b h² / 6 for a rectangle
    assert np.isclose(props.S, 0.05 * 0.10**2 / 6)


def test_circle_properties():
    d = 0.08
    props = section_properties(CircleSection(diameter=d))

    assert np.isclose(props.I, math.pi * d**4 / 64)
    assert np.isclose(props.c, d / 2)
    assert np.isclose(props.A, math.pi * d**2 / 4)


def test_hollow_circle_properties():
    props = section_properties(HollowCircleSection(outer_diameter=0.1, inner_diameter=0.08))

    assert np.isclose(props.I, math.pi * (0.1**4 - 0.08**4) / 64)
    assert np.isclose(props.c, 0.05)
    assert np.isclose(props.A, math.pi * (0.1**2 - 0.08**2) / 4)


def test_hollow_circle_converges_to_solid():
    """
    As the bore shrinks to nothing, the tube must become a solid bar.
    """
    solid = section_properties(CircleSection(diameter=0.1))

    for di in (1e-2, 1e-3, 1e-5):
        tube = section_properties(HollowCircleSection(outer_diameter=0.1, inner_diameter=di))
        assert tube.I < solid.I
        assert tube.A < solid.A

    tube = section_properties(HollowCircleSection(outer_diameter=0.1, inner_diameter=1e-6))
    assert np.isclose(tube.I, solid.I, rtol=1e-12)
    assert np.isclose(tube.A, solid.A, rtol=1e-9)
    assert tube.c == solid.c


def test_ibeam_matches_box_minus_voids():
    """
    A doubly symmetric I-beam is the outer rectangle bf × h minus the two
    side voids (bf - tw) × hw. Both routes must give the same I and A.
    """
    h, bf, tf, tw = 0.30, 0.15, 0.010, 0.008
    sec = IBeamSection(height=h, flange_width=bf, flange_thickness=tf, web_thickness=tw)
    props = section_properties(sec)

    hw = h - 2 * tf
    assert np.isclose(sec.web_height, hw)

    I_expected = bf * h**3 / 12 - (bf - tw) * hw**3 / 12
    A_expected = bf * h - (bf - tw) * hw

    assert np.isclose(props.I, I_expected, rtol=1e-12)
    assert np.isclose(props.A, A_expected, rtol=1e-12)
    assert np.isclose(props.c, h / 2)


def test_unknown_section_type_rejected():
    with pytest.raises(TypeError, match="Unsupported section type"):
        section_properties("square")


def test_section_properties_frozen():
    props = SectionProperties(I=1.0, c=0.5, A=2.0)
    with pytest.raises(Exception):  # dataclass.FrozenInstanceError
        props.I = 3.0
