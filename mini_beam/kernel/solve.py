# mini_beam/kernel/solve.py
"""Dense linear solver with partial pivoting, mechanism detection and boundary-condition partitioning."""

import logging

import numpy as np

from ..config import CONFIG
from ..errors import BeamAnalysisError

logger = logging.getLogger(__name__)


class SingularSystemError(BeamAnalysisError):
    """Raised when elimination finds no usable pivot (unstable or ill-posed supports)."""
    pass


def gauss_solve(
    A: np.ndarray,
    b: np.ndarray,
    pivot_tol: float = CONFIG.pivot_tol
) -> np.ndarray:
    """
    Solve A·x = b by Gauss–Jordan elimination with partial pivoting.

    For each column k the row with the largest |A[i, k]| (i ≥ k) is swapped
    into place, the pivot row is normalized, and column k is eliminated from
    every other row. Works on copies; A and b are left untouched.

    Args:
        A: Square coefficient matrix (n x n)
        b: Right-hand side (n,)
        pivot_tol: Smallest acceptable pivot, relative to max|A|
                   (absolute when max|A| < 1)

    Returns:
        x: Solution vector (n,)

    Raises:
        SingularSystemError: If the best pivot in some column is below the scaled tolerance
    """
    M = np.array(A, dtype=float, copy=True)
    x = np.array(b, dtype=float, copy=True)
    n = x.shape[0]

    # Threshold follows the magnitude of A so stiff and soft systems behave alike
    tol = pivot_tol * max(1.0, float(np.abs(M).max())) if n else pivot_tol

    for k in range(n):
        piv = k + int(np.argmax(np.abs(M[k:, k])))
        best = abs(M[piv, k])
        if best < tol:
            raise SingularSystemError(
                f"Singular system: best pivot |{best:.3e}| in column {k} is below "
                f"{tol:.0e}. Check supports / inputs."
            )

        if piv != k:
            M[[k, piv]] = M[[piv, k]]
            x[[k, piv]] = x[[piv, k]]

        diag = M[k, k]
        M[k, k:] /= diag
        x[k] /= diag

        for i in range(n):
            if i == k:
                continue
            f = M[i, k]
            if f == 0.0:
                continue
            M[i, k:] -= f * M[k, k:]
            x[i] -= f * x[k]

    return x


def solve_linear(
    K: np.ndarray,
    F: np.ndarray,
    fixed_dofs: list[int],
    pivot_tol: float = CONFIG.pivot_tol,
    cond_limit: float = CONFIG.cond_limit
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Solve K·d = F with fixed DOFs (zero displacement) enforced by partitioning.

    The free-free block is diagonally scaled (D·Kff·D with D = 1/sqrt(diag))
    so translations and rotations share one scale, then checked for
    conditioning before elimination. A rigid-body mode left by too few
    supports makes the scaled block numerically singular.

    Args:
        K: Global stiffness matrix (ndof x ndof)
        F: Global load vector (ndof,)
        fixed_dofs: Constrained DOF indices (displacement = 0)
        pivot_tol: Passed to gauss_solve
        cond_limit: Max condition number of the scaled free-free block

    Returns:
        d: Displacement vector (ndof,)
        R: Reaction vector K·d - F (ndof,); nonzero only at fixed DOFs
        free: Array of free DOF indices

    Raises:
        SingularSystemError: If the free-free block is singular or a mechanism
    """
    ndof = K.shape[0]

    # Partition DOFs
    fixed = set(fixed_dofs)
    free = np.array([i for i in range(ndof) if i not in fixed], dtype=int)

    d = np.zeros(ndof, dtype=float)
    if free.size:
        Kff = K[np.ix_(free, free)]
        Ff = F[free]

        diag = np.diag(Kff)
        if not np.all(diag > 0.0):
            k = int(np.argmin(diag))
            raise SingularSystemError(
                f"Singular system: free DOF {free[k]} has no stiffness "
                f"(K[{free[k]},{free[k]}] = {diag[k]:.3e}). Check supports / inputs."
            )
        D = 1.0 / np.sqrt(diag)
        Ks = Kff * np.outer(D, D)

        cond = np.linalg.cond(Ks)
        if not np.isfinite(cond) or cond > cond_limit:
            raise SingularSystemError(
                f"Singular system: unstable supports (cond={cond:.2e}). "
                f"Need cond < {cond_limit:.0e}."
            )

        df = D * gauss_solve(Ks, D * Ff, pivot_tol)
        if not np.all(np.isfinite(df)):
            raise SingularSystemError("Solution contains non-finite displacements.")
        d[free] = df

    logger.debug("Solved %d free of %d DOFs (fixed=%s)", free.size, ndof, sorted(fixed))

    # Reactions use the full K so coupling with free DOFs is included
    R = K @ d - F

    return d, R, free
