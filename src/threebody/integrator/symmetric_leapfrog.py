"""
Whole-system leapfrog integrator.

The textbook kick-drift-kick scheme where every acceleration in a
half-step is evaluated against one consistent set of positions. Kept as
a reference to compare against the sequential scheme.
"""
from typing import TYPE_CHECKING, List

import numpy as np
from numpy.typing import NDArray

from .integrator import Integrator
from .sequential_leapfrog import STEP_ORDER

if TYPE_CHECKING:
    from threebody.core import ThreeBodyState
    from threebody.force import GravitationalForce


class SymmetricLeapfrog(Integrator):
    """
    Symmetric (velocity Verlet) leapfrog over the whole system.

    Algorithm (for each time step dt):
        1. v(t + dt/2) = v(t) + (1/2) * a(t) * dt        for all bodies
        2. r(t + dt) = r(t) + v(t + dt/2) * dt           for all bodies
        3. Compute a(t + dt) from the new positions
        4. v(t + dt) = v(t + dt/2) + (1/2) * a(t + dt) * dt

    Properties:
        - Time-reversible
        - Symplectic
        - Conserves total momentum to rounding error
    """

    def step(
        self,
        state: "ThreeBodyState",
        force: "GravitationalForce",
    ) -> None:
        """
        Advance all three bodies by one symmetric leapfrog step.

        Args:
            state: The three-body state to integrate.
            force: Pairwise force evaluator.
        """
        dt = self.dt
        bodies = state.bodies

        # Step 1: half kick from a(t)
        accelerations = self._compute_accelerations(state, force)
        for body, acceleration in zip(bodies, accelerations):
            body.acceleration = acceleration
            body.velocity += 0.5 * acceleration * dt

        # Step 2: drift every body before any force is re-evaluated
        for body in bodies:
            body.position += body.velocity * dt

        # Steps 3-4: second half kick from a(t + dt)
        accelerations = self._compute_accelerations(state, force)
        for body, acceleration in zip(bodies, accelerations):
            body.acceleration = acceleration
            body.velocity += 0.5 * acceleration * dt

        self._advance_clock(state)

    @staticmethod
    def _compute_accelerations(
        state: "ThreeBodyState",
        force: "GravitationalForce",
    ) -> List[NDArray[np.floating]]:
        bodies = state.bodies
        accelerations = []
        for index, other_a, other_b in STEP_ORDER:
            body = bodies[index]
            total = force.compute(body, bodies[other_a]) + force.compute(body, bodies[other_b])
            accelerations.append(total / body.mass)
        return accelerations

    def get_name(self) -> str:
        """Return integrator name with timestep."""
        return f"SymmetricLeapfrog(dt={self.dt})"
