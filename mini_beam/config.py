# mini_beam/config.py
"""
Solver configuration and numerical defaults.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class SolverConfig:
    """Numerical constants shared by assembly, solve and post-processing."""

    # Discretization
    min_elements: int = 2
    gauss_points: int = 4

    # Sampling grid for diagrams: max(min_samples, samples_per_element * n_elem)
    min_samples: int = 60
    samples_per_element: int = 6

    # Elimination: best pivot below this means the system is singular
    pivot_tol: float = 1e-14

    # Mechanism check: condition number of the diagonally scaled free-free block
    cond_limit: float = 1e14

    # Quadrature points with |q| below this contribute nothing
    intensity_skip_tol: float = 1e-14

    # Superposition: two stations are the same if |x_a - x_b| <= grid_tol
    grid_tol: float = 1e-9

    # Floors guarding divisions
    inertia_floor: float = 1e-18
    stress_floor: float = 1e-12

    # Load cases with |factor| below this are dropped when scaling loads
    factor_skip_tol: float = 1e-12


# Global config instance
CONFIG = SolverConfig()
