# mini_beam/supports.py
"""
SUPPORTS: BEAM TYPE → CONSTRAINED DOFs AND REACTIONS
====================================================

Node 0 is the left end, node n_nodes - 1 the right end. Every constrained
DOF has zero prescribed displacement.

| Beam type        | Constrained DOFs              | Reactions         |
|------------------|-------------------------------|-------------------|
| simply-supported | w@0, w@L                      | R0, RL            |
| cantilever       | w@0, theta@0                  | R0, M0            |
| fixed-fixed      | w@0, theta@0, w@L, theta@L    | R0, M0, RL, ML    |

Reactions come from R = K·d - F over the full K (see kernel.solve),
read back at the constrained DOFs.
"""

from typing import Dict, List, Tuple

import numpy as np

from .kernel import DOF_BEAM
from .kernel.dof import W, THETA
from .model import BeamType

# (reaction key, end, local dof); end 0 = left node, 1 = right node
_SUPPORT_TABLE: Dict[BeamType, Tuple[Tuple[str, int, int], ...]] = {
    BeamType.SIMPLY_SUPPORTED: (("R0", 0, W), ("RL", 1, W)),
    BeamType.CANTILEVER: (("R0", 0, W), ("M0", 0, THETA)),
    BeamType.FIXED_FIXED: (("R0", 0, W), ("M0", 0, THETA), ("RL", 1, W), ("ML", 1, THETA)),
}

REACTION_KEYS = ("R0", "RL", "M0", "ML")


def _restraints(beam_type: BeamType, n_nodes: int) -> List[Tuple[str, int]]:
    try:
        table = _SUPPORT_TABLE[beam_type]
    except KeyError:
        raise ValueError(f"Unknown beam type: {beam_type!r}") from None
    last = n_nodes - 1
    return [(key, DOF_BEAM.idx(0 if end == 0 else last, local)) for key, end, local in table]


def constrained_dofs(beam_type: BeamType, n_nodes: int) -> List[int]:
    """
    Global indices of the constrained DOFs.

    >>> constrained_dofs(BeamType.SIMPLY_SUPPORTED, 11)
    [0, 20]
    """
    return [dof for _, dof in _restraints(beam_type, n_nodes)]


def reaction_keys(beam_type: BeamType) -> List[str]:
    """Reaction keys reported for a beam type."""
    return [key for key, _, _ in _SUPPORT_TABLE[beam_type]]


def extract_reactions(beam_type: BeamType, R: np.ndarray, n_nodes: int) -> Dict[str, float]:
    """
    Map the reaction vector to named support reactions.

    R0/RL are vertical reactions (N), M0/ML support moments (N·m), all with
    the DOF sign convention (w positive downward).
    """
    return {key: float(R[dof]) for key, dof in _restraints(beam_type, n_nodes)}
