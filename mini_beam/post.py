# mini_beam/post.py
"""Station sampling of V, M, w, sigma; peak values; factor of safety."""

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, Tuple

import numpy as np
import pandas as pd

from .assembly import BeamMesh
from .config import CONFIG
from .elements import (
    hermite_shape_functions,
    hermite_second_derivatives,
    hermite_third_derivatives,
)
from .model import BeamInput
from .section import SectionProperties

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SamplePoint:
    """Response at one station."""
    x: float       # m
    V: float       # shear (N)
    M: float       # moment (N·m)
    w: float       # deflection (m, positive downward)
    sigma: float   # bending stress at the extreme fiber (Pa, ≥ 0)


@dataclass(frozen=True)
class PeakValue:
    value: float   # largest absolute value
    x: float       # first station where it occurs


@dataclass(frozen=True)
class Maxima:
    V: PeakValue
    M: PeakValue
    sigma: PeakValue
    deflection: PeakValue


@dataclass(frozen=True)
class SafetyCheck:
    fos_actual: float
    ok: bool


@dataclass(frozen=True)
class AnalysisResult:
    """
    Outcome of one load case or one combination.

    Never modified after creation; combinations build new instances.
    `reactions` holds the subset of R0, RL, M0, ML the supports provide.
    """
    input: BeamInput
    section_props: SectionProperties
    reactions: Dict[str, float]
    samples: Tuple[SamplePoint, ...]
    max: Maxima
    safety: SafetyCheck

    def positions(self) -> np.ndarray:
        """Station grid x as an array."""
        return np.array([p.x for p in self.samples], dtype=float)

    def to_dataframe(self) -> pd.DataFrame:
        """Samples as a table with columns x, V, M, w, sigma."""
        return pd.DataFrame(
            [(p.x, p.V, p.M, p.w, p.sigma) for p in self.samples],
            columns=["x", "V", "M", "w", "sigma"],
        )


def sample_count(n_elem: int) -> int:
    """Number of sampling intervals: max(60, 6 · n_elem). Stations = count + 1."""
    return max(CONFIG.min_samples, CONFIG.samples_per_element * int(n_elem))


def bending_stress(M: float, I: float, c: float, inertia_floor: float = CONFIG.inertia_floor) -> float:
    """σ = |M|·c / I, with I replaced by `inertia_floor` when it is zero."""
    return abs(M) * c / (I or inertia_floor)


class ResponseSampler:
    """
    Lazily walks a uniform station grid over [0, L] and rebuilds the
    response from the element displacements.

    Iterating twice restarts from x = 0. Per station:

        w     = N(s)  · u_e
        M     = EI · B2(s) · u_e
        V     = EI · B3    · u_e     (constant inside an element)
        sigma = |M| · c / I

    Parameters:
    -----------
    mesh : BeamMesh
        Mesh the displacements were solved on
    d : np.ndarray
        Global displacement vector (2 DOFs per node)
    E : float
        Young's modulus
    props : SectionProperties
    """

    def __init__(self, mesh: BeamMesh, d: np.ndarray, E: float, props: SectionProperties):
        self.mesh = mesh
        self.d = d
        self.EI = E * props.I
        self.props = props
        self.n_intervals = sample_count(mesh.n_elem)

    def __len__(self) -> int:
        return self.n_intervals + 1

    def positions(self) -> np.ndarray:
        ns = self.n_intervals
        return np.array([self.mesh.L * i / ns for i in range(ns + 1)], dtype=float)

    def __iter__(self) -> Iterator[SamplePoint]:
        mesh = self.mesh
        ns = self.n_intervals
        I, c = self.props.I, self.props.c

        for i in range(ns + 1):
            x = mesh.L * i / ns
            e = mesh.element_index(x)
            Le = mesh.element_length(e)
            s = mesh.local_coordinate(e, x)
            ue = self.d[mesh.element_dofs(e)]

            w = float(hermite_shape_functions(s, Le) @ ue)
            curvature = float(hermite_second_derivatives(s, Le) @ ue)
            w3 = float(hermite_third_derivatives(s, Le) @ ue)

            M = self.EI * curvature
            V = self.EI * w3
            yield SamplePoint(x=x, V=V, M=M, w=w, sigma=bending_stress(M, I, c))


def compute_maxima(samples: Iterable[SamplePoint]) -> Maxima:
    """
    Largest |V|, |M|, |sigma|, |w| and where they occur.

    Samples are scanned in order (ascending x); a strict comparison keeps
    the first station on ties.
    """
    best = {key: PeakValue(-np.inf, 0.0) for key in ("V", "M", "sigma", "deflection")}

    for p in samples:
        for key, val in (("V", p.V), ("M", p.M), ("sigma", p.sigma), ("deflection", p.w)):
            a = abs(val)
            if a > best[key].value:
                best[key] = PeakValue(a, p.x)

    return Maxima(**best)


def check_safety(
    yield_strength: float,
    max_sigma: float,
    fos_target: float,
    stress_floor: float = CONFIG.stress_floor,
) -> SafetyCheck:
    """
    Factor of safety = yield / peak stress, compared against the target.

    Zero stress is replaced by `stress_floor`, giving a large finite FOS.
    """
    fos = yield_strength / (max_sigma or stress_floor)
    ok = fos >= fos_target
    logger.debug("FOS %.3f (target %.3f): %s", fos, fos_target, "ok" if ok else "FAIL")
    return SafetyCheck(fos_actual=fos, ok=ok)
