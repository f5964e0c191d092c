# mini_beam/kernel/__init__.py - Element-agnostic analysis core
"""
KERNEL: THE ELEMENT-AGNOSTIC FOUNDATION
=======================================

Assembly and solving don't care what the element is. They just need:
- A way to map (node_id, local_dof) → global_dof_index
- Element stiffness matrices / load vectors (any size)
- Fixed DOF lists
- Load vectors

The beam element itself lives in mini_beam.elements; the plumbing is here.
"""

from .dof import DOFManager, DOF_BEAM
from .assemble import assemble_global_K, assemble_global_F, add_element_load
from .solve import gauss_solve, solve_linear, SingularSystemError

__all__ = [
    'DOFManager',
    'DOF_BEAM',
    'assemble_global_K',
    'assemble_global_F',
    'add_element_load',
    'gauss_solve',
    'solve_linear',
    'SingularSystemError',
]
