# mini_beam/kernel/dof.py
"""
DOF MANAGER: Degree of Freedom Indexing
=======================================

Maps (node_id, local_dof) to a global DOF index. A beam node carries two
DOFs:

    local 0 : transverse displacement w (positive downward)
    local 1 : rotation theta

so node n owns global DOFs 2n and 2n + 1, and an element between nodes
e and e + 1 maps to [2e, 2e + 1, 2e + 2, 2e + 3].

USAGE:
------
    dof = DOFManager(dof_per_node=2)
    dof.idx(node_id=3, local_dof=1)   # → 7
    dof.element_dof_map([3, 4])       # → [6, 7, 8, 9]
"""

from dataclasses import dataclass
from typing import List

W = 0       # transverse displacement
THETA = 1   # rotation


@dataclass(frozen=True)
class DOFManager:
    """
    Degree-of-freedom indexing for a nodal model.

    Attributes:
    -----------
    dof_per_node : int
        Number of DOFs per node (2 for a plane beam: w, theta)

    Examples:
    ---------
    >>> dof = DOFManager(dof_per_node=2)
    >>> dof.idx(0, 1)
    1
    >>> dof.ndof(5)
    10
    """
    dof_per_node: int

    def idx(self, node_id: int, local_dof: int) -> int:
        """Global DOF index of a node's local DOF."""
        return self.dof_per_node * node_id + local_dof

    def ndof(self, n_nodes: int) -> int:
        """Total DOFs (size of K) for n_nodes nodes."""
        return self.dof_per_node * n_nodes

    def node_dofs(self, node_id: int) -> List[int]:
        """
        All global DOF indices of one node.

        >>> DOFManager(dof_per_node=2).node_dofs(2)
        [4, 5]
        """
        base = self.dof_per_node * node_id
        return list(range(base, base + self.dof_per_node))

    def element_dof_map(self, node_ids: List[int]) -> List[int]:
        """
        Flattened global DOF indices for an element connecting `node_ids`.

        Used to scatter element matrices into, and gather element
        displacements from, the global system.
        """
        result = []
        for node_id in node_ids:
            result.extend(self.node_dofs(node_id))
        return result


DOF_BEAM = DOFManager(dof_per_node=2)   # w, theta
