# mini_beam/__init__.py - Single-span beam finite-element analysis
"""
MINI-BEAM: Static Analysis of a Single-Span Beam
================================================

Euler–Bernoulli beam under point, uniform and triangular loads, solved with
Hermite cubic elements. Produces reactions, shear / moment / deflection /
stress diagrams, peak values and a factor-of-safety check, per load case
and per load combination.

ARCHITECTURE:
-------------
    kernel/         Element-agnostic core (DOF indexing, assembly, solve)
    model.py        Value objects (Material, sections, BeamInput, loads)
    section.py      Cross-section properties (I, c, A)
    elements.py     Hermite shape functions, element stiffness, Gauss rule
    loads.py        Consistent / point-load nodal forces, combo load scaling
    assembly.py     Beam mesh and global K / F
    supports.py     Beam type → constrained DOFs and reactions
    post.py         Station sampling, maxima, safety, AnalysisResult
    combine.py      Load combinations by superposition
    analysis.py     analyze() / combine()
    catalog.py      Material presets and default inputs
    config.py       Numerical constants
"""

import logging

from .analysis import analyze, combine, analyze_load_cases, analyze_combo
from .combine import IncompatibleSamplingError, EmptyCaseSetError
from .errors import BeamAnalysisError
from .kernel import SingularSystemError
from .model import (
    Material,
    RectangleSection,
    CircleSection,
    HollowCircleSection,
    IBeamSection,
    BeamType,
    BeamInput,
    PointLoad,
    UniformLoad,
    TriangularLoad,
    LoadCase,
    LoadCombo,
)
from .post import AnalysisResult, SamplePoint
from .section import SectionProperties, section_properties

# Silent unless the application configures logging
logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
