# mini_beam/elements.py
"""Beam element: Hermite shape functions, stiffness, Gauss rule."""

import numpy as np
from typing import Tuple


def hermite_shape_functions(s: float, Le: float) -> np.ndarray:
    """
    Hermite cubic shape functions for a 2-node beam element.

    Parameters:
    -----------
    s : float
        Normalized coordinate along element, 0 ≤ s ≤ 1 (s = x_local / Le)
    Le : float
        Element length (m)

    Returns:
    --------
    np.ndarray
        [N1, N2, N3, N4] so that w(s) = N1*w_i + N2*theta_i + N3*w_j + N4*theta_j
        N2 and N4 already include the factor Le.
    """
    s2 = s * s
    s3 = s2 * s
    return np.array([
        1.0 - 3.0*s2 + 2.0*s3,
        Le * (s - 2.0*s2 + s3),
        3.0*s2 - 2.0*s3,
        Le * (-s2 + s3),
    ], dtype=float)


def hermite_second_derivatives(s: float, Le: float) -> np.ndarray:
    """
    d²N/dx² at s. Curvature w'' = B2 · u_e, so M = EI · w''.

    d/dx = (1/Le) d/ds, hence d²/dx² = (1/Le²) d²/ds².
    """
    Le2 = Le * Le
    return np.array([
        (-6.0 + 12.0*s) / Le2,
        (-4.0 + 6.0*s) / Le,
        (6.0 - 12.0*s) / Le2,
        (-2.0 + 6.0*s) / Le,
    ], dtype=float)


def hermite_third_derivatives(s: float, Le: float) -> np.ndarray:
    """
    d³N/dx³. Constant within the element, so V = EI · w''' is piecewise constant.

    `s` is accepted for symmetry with the other basis functions.
    """
    Le2 = Le * Le
    Le3 = Le2 * Le
    return np.array([
        12.0 / Le3,
        6.0 / Le2,
        -12.0 / Le3,
        6.0 / Le2,
    ], dtype=float)


def beam_element_stiffness(EI: float, Le: float) -> np.ndarray:
    """
    Euler–Bernoulli beam element stiffness.
    DOF order: [w_i, theta_i, w_j, theta_j]
    """
    L = Le
    L2 = L * L
    c = EI / (L2 * L)

    k = np.array([
        [ 12*c,     6*L*c,  -12*c,     6*L*c],
        [6*L*c,   4*L2*c,  -6*L*c,   2*L2*c],
        [-12*c,   -6*L*c,   12*c,    -6*L*c],
        [6*L*c,   2*L2*c,  -6*L*c,   4*L2*c],
    ], dtype=float)
    return k


def gauss_legendre(n_points: int = 4) -> Tuple[np.ndarray, np.ndarray]:
    """
    Gauss–Legendre nodes and weights mapped from [-1, 1] to [0, 1].

    Returns:
        s: Normalized positions in [0, 1]
        weights: Weights summing to 1 (multiply by Le to integrate over the element)
    """
    xi, wts = np.polynomial.legendre.leggauss(n_points)
    return (xi + 1.0) / 2.0, wts / 2.0
