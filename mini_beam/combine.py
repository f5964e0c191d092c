# mini_beam/combine.py
"""
LOAD COMBINATIONS BY SUPERPOSITION
==================================

The model is linear-elastic, so the response to a factored sum of load
cases is the factored sum of the per-case responses:

    V_combo(x) = Σ f_case · V_case(x)     (same for M and w)

Stress is NOT superposed. σ = |M|·c/I is nonlinear in M (absolute value),
so adding per-case stresses would hide sign cancellation between cases.
It is recomputed from the combined moment instead.

All case results must share the same station grid; anything else is
reported, never patched up.
"""

import logging
from typing import Dict, Mapping

from .config import CONFIG
from .errors import BeamAnalysisError
from .model import LoadCombo
from .post import AnalysisResult, SamplePoint, bending_stress, compute_maxima, check_safety
from .supports import REACTION_KEYS

logger = logging.getLogger(__name__)


class IncompatibleSamplingError(BeamAnalysisError):
    """Raised when case results were sampled on different grids (span or station count)."""
    pass


class EmptyCaseSetError(BeamAnalysisError):
    """Raised when a combination is requested with no case results."""
    pass


def _check_grids(case_results: Mapping[str, AnalysisResult], grid_tol: float) -> None:
    ref_id, ref = next(iter(case_results.items()))
    for case_id, result in case_results.items():
        if len(result.samples) != len(ref.samples):
            raise IncompatibleSamplingError(
                f"Case {case_id!r} has {len(result.samples)} stations, case {ref_id!r} has "
                f"{len(ref.samples)}. Use the same span and element count for all cases."
            )
        for i, (a, b) in enumerate(zip(ref.samples, result.samples)):
            if abs(a.x - b.x) > grid_tol:
                raise IncompatibleSamplingError(
                    f"Station {i}: case {case_id!r} at x={b.x!r}, case {ref_id!r} at x={a.x!r}. "
                    f"Use the same span and element count for all cases."
                )


def combine_results(
    case_results: Mapping[str, AnalysisResult],
    combo: LoadCombo,
    grid_tol: float = CONFIG.grid_tol,
) -> AnalysisResult:
    """
    Factor-weighted superposition of single-case results.

    Args:
        case_results: {case_id: AnalysisResult}, all on the same station grid.
            The first entry is the reference for input, section and grid.
        combo: Factors per case id; ids missing from combo.factors use 0.

    Returns:
        A new AnalysisResult with combined samples, reactions, maxima and safety.

    Raises:
        EmptyCaseSetError: If case_results is empty
        IncompatibleSamplingError: If any case's grid differs from the reference
    """
    if not case_results:
        raise EmptyCaseSetError(f"No load case results to combine for combo {combo.id!r}.")

    _check_grids(case_results, grid_tol)

    unknown = set(combo.factors) - set(case_results)
    if unknown:
        logger.warning("Combo %s references cases without results: %s", combo.id, sorted(unknown))

    base = next(iter(case_results.values()))
    factors = {case_id: combo.factor(case_id) for case_id in case_results}
    I, c = base.section_props.I, base.section_props.c

    samples = []
    for i, ref_point in enumerate(base.samples):
        V = M = w = 0.0
        for case_id, result in case_results.items():
            f = factors[case_id]
            p = result.samples[i]
            V += f * p.V
            M += f * p.M
            w += f * p.w
        samples.append(SamplePoint(x=ref_point.x, V=V, M=M, w=w, sigma=bending_stress(M, I, c)))

    reactions: Dict[str, float] = {}
    for key in REACTION_KEYS:
        reported = [(case_id, r.reactions[key]) for case_id, r in case_results.items() if key in r.reactions]
        if reported:
            reactions[key] = sum(factors[case_id] * val for case_id, val in reported)

    peaks = compute_maxima(samples)
    safety = check_safety(base.input.material.yield_strength, peaks.sigma.value, base.input.fos_target)

    logger.debug("Combined %d cases into %s: |M|max=%.4e at x=%.4f",
                 len(case_results), combo.id, peaks.M.value, peaks.M.x)

    return AnalysisResult(
        input=base.input,
        section_props=base.section_props,
        reactions=reactions,
        samples=tuple(samples),
        max=peaks,
        safety=safety,
    )
