# mini_beam/analysis.py
"""
PUBLIC ANALYSIS INTERFACE
=========================

    analyze(beam, loads)              -> AnalysisResult   (one load case)
    combine(case_results, combo)      -> AnalysisResult   (superposition)

Each call is a pure function of its arguments: it allocates its own
matrices, keeps no state between calls, and either returns a complete
result or raises a BeamAnalysisError subclass.

PIPELINE (one case):
--------------------
    section_properties → assemble_beam_system → constrained_dofs
        → solve_linear → ResponseSampler → compute_maxima / check_safety
"""

import logging
from typing import Dict, Iterable, Mapping, Sequence

from .assembly import assemble_beam_system
from .combine import combine_results
from .kernel import solve_linear
from .loads import build_combo_loads
from .model import BeamInput, Load, LoadCase, LoadCombo
from .post import AnalysisResult, ResponseSampler, compute_maxima, check_safety
from .section import section_properties
from .supports import constrained_dofs, extract_reactions

logger = logging.getLogger(__name__)


def analyze(beam: BeamInput, loads: Sequence[Load]) -> AnalysisResult:
    """
    Analyze one load case.

    Args:
        beam: Span, supports, section, material, FOS target, element count
        loads: Point / uniform / triangular loads (positive = downward)

    Returns:
        AnalysisResult with reactions, station samples, maxima and safety

    Raises:
        SingularSystemError: If the constrained stiffness matrix is singular
    """
    loads = tuple(loads)
    props = section_properties(beam.section)

    K, F, mesh = assemble_beam_system(beam, loads)
    fixed = constrained_dofs(beam.beam_type, mesh.n_nodes)
    d, R, _ = solve_linear(K, F, fixed)

    samples = tuple(ResponseSampler(mesh, d, beam.material.E, props))
    peaks = compute_maxima(samples)
    safety = check_safety(beam.material.yield_strength, peaks.sigma.value, beam.fos_target)

    logger.debug(
        "%s L=%g n_elem=%d: %d loads, %d stations, |M|max=%.4e at x=%.4f",
        beam.beam_type.value, beam.L, mesh.n_elem, len(loads), len(samples), peaks.M.value, peaks.M.x,
    )

    return AnalysisResult(
        input=beam,
        section_props=props,
        reactions=extract_reactions(beam.beam_type, R, mesh.n_nodes),
        samples=samples,
        max=peaks,
        safety=safety,
    )


def combine(case_results: Mapping[str, AnalysisResult], combo: LoadCombo) -> AnalysisResult:
    """
    Combine precomputed single-case results with the combo's factors.

    Raises:
        EmptyCaseSetError: If case_results is empty
        IncompatibleSamplingError: If the cases were sampled on different grids
    """
    return combine_results(case_results, combo)


def analyze_load_cases(beam: BeamInput, load_cases: Iterable[LoadCase]) -> Dict[str, AnalysisResult]:
    """Run `analyze` once per load case, keyed by case id (input order kept)."""
    return {case.id: analyze(beam, case.loads) for case in load_cases}


def analyze_combo(
    beam: BeamInput,
    load_cases: Iterable[LoadCase],
    combo: LoadCombo,
    method: str = "superpose",
) -> AnalysisResult:
    """
    Evaluate a load combination directly from load cases.

    method:
        "superpose"   - analyze every case, then combine the results
        "scale_loads" - scale the loads by their case factors and analyze once

    Both give the same V, M and w; "scale_loads" reports reactions only for
    the keys of the beam's support type.
    """
    load_cases = list(load_cases)
    if method == "superpose":
        return combine(analyze_load_cases(beam, load_cases), combo)
    if method == "scale_loads":
        return analyze(beam, build_combo_loads(load_cases, combo))
    raise ValueError(f"method must be 'superpose' or 'scale_loads', got {method!r}")
