# mini_beam/model.py
"""Material, Section, BeamInput, Load, LoadCase, LoadCombo (frozen dataclasses)."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Tuple, Union


@dataclass(frozen=True)
class Material:
    name: str
    E: float               # Young's modulus (Pa)
    yield_strength: float  # Pa


# ---------------------------------------------------------------------------
# Cross sections (closed variant set)
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class RectangleSection:
    width: float
    height: float


@dataclass(frozen=True)
class CircleSection:
    diameter: float


@dataclass(frozen=True)
class HollowCircleSection:
    outer_diameter: float
    inner_diameter: float


@dataclass(frozen=True)
class IBeamSection:
    """
    Doubly symmetric I-beam. Web height is implied: height - 2 * flange_thickness.
    """
    height: float
    flange_width: float
    flange_thickness: float
    web_thickness: float

    @property
    def web_height(self) -> float:
        return self.height - 2.0 * self.flange_thickness


Section = Union[RectangleSection, CircleSection, HollowCircleSection, IBeamSection]


# ---------------------------------------------------------------------------
# Beam definition
# ---------------------------------------------------------------------------

class BeamType(Enum):
    """Support configurations for a single span."""
    SIMPLY_SUPPORTED = "simply-supported"
    CANTILEVER = "cantilever"            # fixed at x = 0, free at x = L
    FIXED_FIXED = "fixed-fixed"


@dataclass(frozen=True)
class BeamInput:
    """
    Everything one analysis run needs besides the loads.

    Section and Material are held by value; BeamInput never changes after
    an analysis starts.
    """
    L: float
    beam_type: BeamType
    section: Section
    material: Material
    fos_target: float
    n_elem: int            # requested; the mesh uses at least CONFIG.min_elements


# ---------------------------------------------------------------------------
# Loads (closed variant set, positive = downward)
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class PointLoad:
    P: float   # N
    x: float   # m from left end


@dataclass(frozen=True)
class UniformLoad:
    w: float   # N/m on [min(x1, x2), max(x1, x2)]
    x1: float
    x2: float


@dataclass(frozen=True)
class TriangularLoad:
    """Linear ramp from w1 at min(x1, x2) to w2 at max(x1, x2)."""
    w1: float
    w2: float
    x1: float
    x2: float


Load = Union[PointLoad, UniformLoad, TriangularLoad]


@dataclass(frozen=True)
class LoadCase:
    id: str
    name: str
    loads: Tuple[Load, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "loads", tuple(self.loads))


@dataclass(frozen=True)
class LoadCombo:
    """
    Scale factors per load case id. Cases missing from `factors` count as 0.
    """
    id: str
    name: str
    factors: Dict[str, float] = field(default_factory=dict)

    def factor(self, case_id: str) -> float:
        return float(self.factors.get(case_id, 0.0))
