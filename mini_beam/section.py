# mini_beam/section.py
"""
CROSS-SECTION PROPERTIES
========================

Derives the three numbers the solver needs from a section's geometry:

    I : second moment of area about the bending axis (m⁴)
    c : distance from the neutral axis to the extreme fiber (m)
    A : cross-sectional area (m²)

Every supported shape is symmetric about mid-height, so c is always half
the overall depth. Geometry is assumed positive (checked by the caller).
"""

import math
from dataclasses import dataclass

from .model import (
    Section,
    RectangleSection,
    CircleSection,
    HollowCircleSection,
    IBeamSection,
)


@dataclass(frozen=True)
class SectionProperties:
    I: float  # m⁴
    c: float  # m
    A: float  # m²

    @property
    def S(self) -> float:
        """Elastic section modulus I / c (m³)."""
        return self.I / self.c


def section_properties(section: Section) -> SectionProperties:
    """
    Compute I, c and A for a section.

    Rectangle:     I = b·h³/12,              c = h/2,  A = b·h
    Circle:        I = π·d⁴/64,              c = d/2,  A = π·d²/4
    Hollow circle: I = π·(Do⁴ - Di⁴)/64,     c = Do/2, A = π·(Do² - Di²)/4
    I-beam:        two flanges (own I + parallel-axis shift) plus the web

    Raises:
        TypeError: If `section` is not one of the known section types
    """
    if isinstance(section, RectangleSection):
        b, h = section.width, section.height
        return SectionProperties(I=b * h**3 / 12.0, c=h / 2.0, A=b * h)

    if isinstance(section, CircleSection):
        d = section.diameter
        return SectionProperties(I=math.pi * d**4 / 64.0, c=d / 2.0, A=math.pi * d * d / 4.0)

    if isinstance(section, HollowCircleSection):
        Do, Di = section.outer_diameter, section.inner_diameter
        return SectionProperties(
            I=math.pi * (Do**4 - Di**4) / 64.0,
            c=Do / 2.0,
            A=math.pi * (Do * Do - Di * Di) / 4.0,
        )

    if isinstance(section, IBeamSection):
        h = section.height
        bf = section.flange_width
        tf = section.flange_thickness
        tw = section.web_thickness
        web_h = section.web_height

        I_flange = bf * tf**3 / 12.0
        d = h / 2.0 - tf / 2.0  # flange centroid to neutral axis
        I = 2.0 * (I_flange + bf * tf * d * d) + tw * web_h**3 / 12.0
        A = 2.0 * bf * tf + tw * web_h
        return SectionProperties(I=I, c=h / 2.0, A=A)

    raise TypeError(f"Unsupported section type: {type(section).__name__}")
