# File: tests/test_solver.py
"""
Test the Gaussian elimination solver and the partitioned boundary-condition solve.
"""

from dataclasses import replace

import numpy as np
import pytest
import scipy.linalg

from mini_beam.assembly import assemble_beam_system
from mini_beam.catalog import DEFAULT_INPUT
from mini_beam.errors import BeamAnalysisError
from mini_beam.kernel import gauss_solve, solve_linear, SingularSystemError
from mini_beam.model import BeamType, PointLoad
from mini_beam.section import section_properties
from mini_beam.supports import constrained_dofs


def test_gauss_solve_matches_scipy():
    rng = np.random.default_rng(42)
    A = rng.normal(size=(8, 8)) + 8 * np.eye(8)
    b = rng.normal(size=8)

    np.testing.assert_allclose(gauss_solve(A, b), scipy.linalg.solve(A, b), rtol=1e-10)


def test_gauss_solve_needs_pivoting():
    """
    Zero on the first diagonal: only a row swap makes this solvable.
    """
    A = np.array([[0.0, 2.0, 1.0],
                  [1.0, 1.0, 0.0],
                  [3.0, 0.0, 1.0]])
    b = np.array([5.0, 3.0, 6.0])

    x = gauss_solve(A, b)
    np.testing.assert_allclose(A @ x, b, rtol=1e-12)


def test_gauss_solve_does_not_mutate_inputs():
    A = np.array([[4.0, 1.0], [1.0, 3.0]])
    b = np.array([1.0, 2.0])
    A_before, b_before = A.copy(), b.copy()

    gauss_solve(A, b)

    np.testing.assert_array_equal(A, A_before)
    np.testing.assert_array_equal(b, b_before)


def test_gauss_solve_singular():
    A = np.array([[1.0, 2.0], [2.0, 4.0]])
    with pytest.raises(SingularSystemError, match="Singular system"):
        gauss_solve(A, np.array([1.0, 2.0]))


def test_singular_error_is_analysis_error():
    assert issubclass(SingularSystemError, BeamAnalysisError)
    assert issubclass(SingularSystemError, RuntimeError)


def test_unconstrained_spring_is_mechanism():
    """
    A free two-node spring has a rigid-body mode; with no fixed DOFs the
    solve must fail instead of returning inf/nan displacements.
    """
    k = 2.0
    K = np.array([[k, -k], [-k, k]])
    F = np.array([0.0, 1.0])

    with pytest.raises(SingularSystemError):
        solve_linear(K, F, fixed_dofs=[])

    d, R, free = solve_linear(K, F, fixed_dofs=[0])
    assert np.isclose(d[1], 0.5)
    assert d[0] == 0.0
    np.testing.assert_array_equal(free, [1])
    # support pushes back with the applied load
    assert np.isclose(R[0], -1.0)
    assert np.isclose(R[1], 0.0, atol=1e-12)


def test_all_dofs_fixed_returns_zero_displacement():
    K = np.array([[2.0, -1.0], [-1.0, 2.0]])
    F = np.array([3.0, 4.0])

    d, R, free = solve_linear(K, F, fixed_dofs=[0, 1])

    np.testing.assert_array_equal(d, 0.0)
    np.testing.assert_allclose(R, -F)
    assert free.size == 0


def test_reactions_use_full_stiffness():
    """
    R = K·d - F at the fixed DOF includes the coupling K[fixed, free]·d_free.
    """
    K = np.array([[3.0, -1.0, 0.0],
                  [-1.0, 2.0, -1.0],
                  [0.0, -1.0, 1.0]])
    F = np.array([0.0, 0.0, 2.0])

    d, R, _ = solve_linear(K, F, fixed_dofs=[0])

    assert np.isclose(R[0], K[0, 1] * d[1] + K[0, 2] * d[2])
    assert np.isclose(R[0] + F.sum(), 0.0)


@pytest.mark.parametrize("n_elem", [4, 20, 100])
@pytest.mark.parametrize("fixed_dofs", [[], [0], [1]], ids=["free", "pinned-left", "clamped-rotation"])
def test_underconstrained_beam_is_mechanism(fixed_dofs, n_elem):
    """
    A real beam stiffness (entries ~ EI/Le^3, up to ~1e10) with a rigid-body
    mode left: round-off keeps the last pivot well above any absolute
    threshold, yet the solve must still refuse.
    """
    beam = replace(DEFAULT_INPUT, n_elem=n_elem)
    K, F, _ = assemble_beam_system(beam, [PointLoad(P=1000.0, x=2.5)])

    with pytest.raises(SingularSystemError):
        solve_linear(K, F, fixed_dofs=fixed_dofs)


@pytest.mark.parametrize("n_elem", [20, 100, 500])
def test_stiff_cantilever_still_solves(n_elem):
    """
    Scaling the mechanism check must not reject fine, well-supported meshes.
    Tip deflection of an end-loaded cantilever: P·L³ / (3·E·I).
    """
    beam = replace(DEFAULT_INPUT, beam_type=BeamType.CANTILEVER, n_elem=n_elem)
    P = 1000.0
    K, F, mesh = assemble_beam_system(beam, [PointLoad(P=P, x=beam.L)])

    d, R, _ = solve_linear(K, F, constrained_dofs(beam.beam_type, mesh.n_nodes))

    EI = beam.material.E * section_properties(beam.section).I
    assert np.isclose(d[-2], P * beam.L**3 / (3 * EI), rtol=1e-5)
    assert np.isclose(R[0], -P, rtol=1e-5)
