# mini_beam/loads.py
"""Equivalent nodal loads for point and distributed loads."""

import logging
from typing import Iterable, List, Sequence

import numpy as np

from .config import CONFIG
from .elements import hermite_shape_functions, gauss_legendre
from .model import Load, LoadCase, LoadCombo, PointLoad, UniformLoad, TriangularLoad

logger = logging.getLogger(__name__)


def distributed_intensity_at(x: float, loads: Iterable[Load]) -> float:
    """
    Net distributed load intensity q(x) in N/m (positive = downward).

    Every UDL and triangular load whose interval covers x contributes, so
    overlapping distributed loads add up. Interval ends are inclusive.
    Point loads are ignored here; they are projected separately.

    Parameters:
    -----------
    x : float
        Global position along the beam (m)
    loads : iterable of Load
        Loads of one case

    Returns:
    --------
    float
        Sum of covering intensities at x
    """
    q = 0.0
    for load in loads:
        if isinstance(load, UniformLoad):
            if min(load.x1, load.x2) <= x <= max(load.x1, load.x2):
                q += load.w
        elif isinstance(load, TriangularLoad):
            a = min(load.x1, load.x2)
            b = max(load.x1, load.x2)
            if a <= x <= b:
                t = (x - a) / (b - a) if b > a else 0.0
                q += load.w1 + (load.w2 - load.w1) * t
        elif not isinstance(load, PointLoad):
            raise TypeError(f"Unsupported load type: {type(load).__name__}")
    return q


def element_load_vector(
    x1: float,
    Le: float,
    loads: Sequence[Load],
    n_gauss: int = CONFIG.gauss_points,
    skip_tol: float = CONFIG.intensity_skip_tol,
) -> np.ndarray:
    """
    Consistent load vector fe = ∫ Nᵀ q(x) dx over one element.

    The integral is evaluated with Gauss–Legendre quadrature on the element.
    Quadrature points where |q| < skip_tol are skipped.

    Parameters:
    -----------
    x1 : float
        Global x of the element's left node
    Le : float
        Element length
    loads : sequence of Load
        Loads of one case (point loads are ignored)

    Returns:
    --------
    np.ndarray
        Shape (4,): [F_i, M_i, F_j, M_j] in element DOF order
    """
    fe = np.zeros(4, dtype=float)
    s_pts, weights = gauss_legendre(n_gauss)
    for s, wt in zip(s_pts, weights):
        q = distributed_intensity_at(x1 + s * Le, loads)
        if abs(q) < skip_tol:
            continue
        fe += hermite_shape_functions(s, Le) * q * (wt * Le)
    return fe


def point_load_nodal_forces(P: float, s: float, Le: float) -> np.ndarray:
    """
    Equivalent nodal forces of a point load P at normalized position s of an element.

    Returns:
        Shape (4,): P · N(s)
    """
    return P * hermite_shape_functions(s, Le)


def scale_load(load: Load, factor: float) -> Load:
    """Return a copy of `load` with its magnitude(s) multiplied by `factor`."""
    if isinstance(load, PointLoad):
        return PointLoad(P=load.P * factor, x=load.x)
    if isinstance(load, UniformLoad):
        return UniformLoad(w=load.w * factor, x1=load.x1, x2=load.x2)
    if isinstance(load, TriangularLoad):
        return TriangularLoad(w1=load.w1 * factor, w2=load.w2 * factor, x1=load.x1, x2=load.x2)
    raise TypeError(f"Unsupported load type: {type(load).__name__}")


def build_combo_loads(
    load_cases: Iterable[LoadCase],
    combo: LoadCombo,
    skip_tol: float = CONFIG.factor_skip_tol,
) -> List[Load]:
    """
    Flatten load cases into one load list, each load scaled by its case factor.

    Cases whose factor is (numerically) zero are dropped. Analyzing the
    returned list gives the same V, M and w as superposing the per-case
    results, since the model is linear.
    """
    out: List[Load] = []
    for case in load_cases:
        f = combo.factor(case.id)
        if abs(f) < skip_tol:
            continue
        out.extend(scale_load(load, f) for load in case.loads)
    logger.debug("Combo %s: %d scaled loads", combo.id, len(out))
    return out
