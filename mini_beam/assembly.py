# mini_beam/assembly.py
"""Global K / F assembly for a single-span beam mesh."""

import logging
import math
from dataclasses import dataclass
from typing import Sequence, Tuple

import numpy as np

from .config import CONFIG
from .elements import beam_element_stiffness
from .kernel import DOF_BEAM, assemble_global_K, assemble_global_F, add_element_load
from .loads import element_load_vector, point_load_nodal_forces
from .model import BeamInput, Load, PointLoad
from .section import section_properties

logger = logging.getLogger(__name__)

DOF_PER_NODE = DOF_BEAM.dof_per_node  # w, theta


@dataclass(frozen=True)
class BeamMesh:
    """
    Uniform 1-D mesh of [0, L]: n_elem elements, n_elem + 1 nodes.
    Node 0 is the left end, node n_elem the right end.
    """
    L: float
    n_elem: int
    xs: np.ndarray

    @property
    def n_nodes(self) -> int:
        return self.n_elem + 1

    @property
    def ndof(self) -> int:
        return DOF_BEAM.ndof(self.n_nodes)

    def element_length(self, e: int) -> float:
        return float(self.xs[e + 1] - self.xs[e])

    def element_dofs(self, e: int) -> list[int]:
        return DOF_BEAM.element_dof_map([e, e + 1])

    def element_index(self, x: float) -> int:
        """
        Element owning position x: floor(x / L · n_elem), clamped to [0, n_elem - 1].

        A position on an interior node belongs to the element on its right;
        x = L belongs to the last element.
        """
        e = math.floor((x / self.L) * self.n_elem)
        return min(max(e, 0), self.n_elem - 1)

    def local_coordinate(self, e: int, x: float) -> float:
        """Normalized position s of x inside element e."""
        Le = self.element_length(e)
        return (x - self.xs[e]) / Le if Le > 0 else 0.0


def build_mesh(L: float, n_elem: int, min_elements: int = CONFIG.min_elements) -> BeamMesh:
    """Split [0, L] into max(min_elements, n_elem) equal elements."""
    n = max(min_elements, int(n_elem))
    xs = np.array([L * i / n for i in range(n + 1)], dtype=float)
    return BeamMesh(L=float(L), n_elem=n, xs=xs)


def assemble_beam_system(
    beam: BeamInput,
    loads: Sequence[Load],
) -> Tuple[np.ndarray, np.ndarray, BeamMesh]:
    """
    Build the global stiffness matrix and load vector for one load case.

    1. Mesh the span.
    2. For every element: closed-form ke and consistent fe (Gauss quadrature
       of the distributed intensity), scatter-added into K and F.
    3. Project each point load onto its owning element through the
       shape functions and add the nodal forces into F.

    Parameters:
    -----------
    beam : BeamInput
        Span, section, material and element count
    loads : sequence of Load
        Loads of one case

    Returns:
    --------
    K : np.ndarray
        Global stiffness, shape (2(n+1), 2(n+1))
    F : np.ndarray
        Global load vector, shape (2(n+1),)
    mesh : BeamMesh
    """
    mesh = build_mesh(beam.L, beam.n_elem)
    EI = beam.material.E * section_properties(beam.section).I

    k_contrib = []
    f_contrib = []
    for e in range(mesh.n_elem):
        Le = mesh.element_length(e)
        dof_map = mesh.element_dofs(e)
        k_contrib.append((dof_map, beam_element_stiffness(EI, Le)))
        f_contrib.append((dof_map, element_load_vector(mesh.xs[e], Le, loads)))

    K = assemble_global_K(mesh.ndof, k_contrib)
    F = assemble_global_F(mesh.ndof, f_contrib)

    for load in loads:
        if not isinstance(load, PointLoad):
            continue
        xp = min(max(load.x, 0.0), mesh.L)
        if xp != load.x:
            logger.warning("Point load at x=%g lies outside [0, %g]; clamped to %g", load.x, mesh.L, xp)
        e = mesh.element_index(xp)
        s = mesh.local_coordinate(e, xp)
        add_element_load(F, mesh.element_dofs(e), point_load_nodal_forces(load.P, s, mesh.element_length(e)))

    logger.debug("Assembled %d elements, %d DOFs, EI=%.4e", mesh.n_elem, mesh.ndof, EI)
    return K, F, mesh
