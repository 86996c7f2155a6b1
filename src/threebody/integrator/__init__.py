"""
Integrator module for three-body simulations.

Provides time integration algorithms:
- SequentialLeapfrog: chained single-body kick-drift-kick (default)
- SymmetricLeapfrog: whole-system velocity Verlet, for comparison
- advance_body: the single-body kick-drift-kick update
"""

from .integrator import Integrator
from .sequential_leapfrog import STEP_ORDER, SequentialLeapfrog, advance_body
from .symmetric_leapfrog import SymmetricLeapfrog

INTEGRATORS = {
    "sequential": SequentialLeapfrog,
    "symmetric": SymmetricLeapfrog,
}

__all__ = [
    "Integrator",
    "SequentialLeapfrog",
    "SymmetricLeapfrog",
    "advance_body",
    "STEP_ORDER",
    "INTEGRATORS",
]
