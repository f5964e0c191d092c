# mini_beam/kernel/assemble.py
"""
ASSEMBLY: Global Matrix Assembly
================================

The scatter-add that builds global K and F from element-level data.
Assembly does not care what the element is; it needs:

- Total number of DOFs
- For each element: its DOF map and its stiffness matrix / load vector

USAGE:
------
    contributions = []
    for e in range(n_elem):
        dof_map = dof.element_dof_map([e, e + 1])
        contributions.append((dof_map, beam_element_stiffness(EI, Le)))

    K = assemble_global_K(ndof, contributions)
"""

import numpy as np
from typing import List, Sequence, Tuple


def assemble_global_K(
    ndof: int,
    contributions: List[Tuple[List[int], np.ndarray]]
) -> np.ndarray:
    """
    Assemble the global stiffness matrix from element contributions.

    ALGORITHM:
    ----------
    K = zeros(ndof × ndof)
    for each element:
        for each (a, b) in ke:
            K[dof_map[a], dof_map[b]] += ke[a, b]

    Parameters:
    -----------
    ndof : int
        Total number of DOFs (2 × n_nodes for a beam)
    contributions : List[Tuple[List[int], np.ndarray]]
        (dof_map, ke) per element; ke has shape (len(dof_map), len(dof_map))

    Returns:
    --------
    np.ndarray
        Global stiffness matrix K, shape (ndof, ndof).
        Symmetric positive semi-definite until supports are applied.
    """
    K = np.zeros((ndof, ndof), dtype=float)

    for dof_map, ke in contributions:
        n = len(dof_map)
        assert ke.shape == (n, n), \
            f"Element ke shape {ke.shape} doesn't match dof_map length {n}"

        for a in range(n):
            ia = dof_map[a]
            for b in range(n):
                K[ia, dof_map[b]] += ke[a, b]

    return K


def assemble_global_F(
    ndof: int,
    contributions: List[Tuple[List[int], np.ndarray]]
) -> np.ndarray:
    """
    Assemble the global load vector from element contributions.

    Same scatter-add as assemble_global_K, for (dof_map, fe) pairs.
    """
    F = np.zeros(ndof, dtype=float)

    for dof_map, fe in contributions:
        add_element_load(F, dof_map, fe)

    return F


def add_element_load(F: np.ndarray, dof_map: Sequence[int], fe: np.ndarray) -> None:
    """
    Add an element-level load vector into the global F (in-place).

    Used for point loads, which are projected onto one element's DOFs
    through the shape functions.
    """
    assert fe.shape == (len(dof_map),), \
        f"Element fe shape {fe.shape} doesn't match dof_map length {len(dof_map)}"

    for a, ia in enumerate(dof_map):
        F[ia] += fe[a]
