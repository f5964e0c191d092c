# mini_beam/catalog.py
"""
CATALOG: MATERIAL PRESETS AND DEFAULT INPUTS
============================================

Reference values so callers don't hardcode E = 200e9, yield = 250e6 in
every script. These are plain constants; nothing here is persisted.

- MATERIALS: common structural materials keyed by a short id.
  E and yield strength in Pa.
- DEFAULT_INPUT / DEFAULT_LOAD_CASES / DEFAULT_COMBOS: a 5 m simply
  supported steel beam with a dead and a live load case, and two
  combinations (service 1.0D + 1.0L, factored 1.2D + 1.6L).
"""

from .model import (
    Material,
    RectangleSection,
    BeamInput,
    BeamType,
    PointLoad,
    UniformLoad,
    LoadCase,
    LoadCombo,
)

GPa = 1e9
MPa = 1e6


# ============================================================================
# MATERIAL DEFINITIONS
# ============================================================================

MATERIALS = {
    "steel-a36": Material(name="Steel A36", E=200 * GPa, yield_strength=250 * MPa),
    "steel-a572": Material(name="Steel A572", E=200 * GPa, yield_strength=345 * MPa),
    "al-6061": Material(name="Aluminum 6061", E=69 * GPa, yield_strength=240 * MPa),
    "al-7075": Material(name="Aluminum 7075", E=71.7 * GPa, yield_strength=503 * MPa),
    "titanium": Material(name="Titanium", E=113.8 * GPa, yield_strength=880 * MPa),
    "concrete-28": Material(name="Concrete 28MPa", E=30 * GPa, yield_strength=28 * MPa),
    "concrete-35": Material(name="Concrete 35MPa", E=32 * GPa, yield_strength=35 * MPa),
    "douglas-fir": Material(name="Douglas Fir", E=13 * GPa, yield_strength=50 * MPa),
    "southern-pine": Material(name="Southern Pine", E=11 * GPa, yield_strength=45 * MPa),
    "carbon-fiber": Material(name="Carbon Fiber", E=150 * GPa, yield_strength=600 * MPa),
}

# Generic structural steel used by the defaults
STEEL = Material(name="Structural Steel", E=200 * GPa, yield_strength=250 * MPa)


# ============================================================================
# DEFAULT BEAM AND LOADING
# ============================================================================

DEFAULT_SECTION = RectangleSection(width=0.05, height=0.10)  # 50 x 100 mm

DEFAULT_INPUT = BeamInput(
    L=5.0,
    beam_type=BeamType.SIMPLY_SUPPORTED,
    section=DEFAULT_SECTION,
    material=STEEL,
    fos_target=2.0,
    n_elem=100,
)

DEFAULT_LOAD_CASES = (
    LoadCase(id="D", name="Dead Load", loads=(UniformLoad(w=1000.0, x1=0.0, x2=5.0),)),
    LoadCase(id="L", name="Live Load", loads=(PointLoad(P=2000.0, x=2.5),)),
)

DEFAULT_COMBOS = (
    LoadCombo(id="C1", name="1.0D + 1.0L", factors={"D": 1.0, "L": 1.0}),
    LoadCombo(id="C2", name="1.2D + 1.6L", factors={"D": 1.2, "L": 1.6}),
)
