"""
Sequential leapfrog integrator.

Each body is advanced with its own kick-drift-kick update while the other
two are held fixed, and the three updates are chained in a fixed order
within one step. This is not the textbook whole-system leapfrog: bodies
processed later in a step see the already-updated positions of bodies
processed earlier. The chained order changes trajectories in chaotic
regimes, so it is kept exactly as is.
"""
from typing import TYPE_CHECKING, Tuple

from .integrator import Integrator

if TYPE_CHECKING:
    from threebody.core import Body, ThreeBodyState
    from threebody.force import GravitationalForce

# (self, other_a, other_b) index triples, in stepping order
STEP_ORDER: Tuple[Tuple[int, int, int], ...] = (
    (0, 1, 2),
    (1, 0, 2),
    (2, 0, 1),
)


def advance_body(
    body: "Body",
    other1: "Body",
    other2: "Body",
    dt: float,
    force: "GravitationalForce",
) -> None:
    """
    Advance one body by dt against two bodies held fixed.

    Algorithm:
        1. a = (F(body, other1) + F(body, other2)) / m at current positions
        2. v += 0.5 * a * dt
        3. x += v * dt
        4. a = (F(body, other1) + F(body, other2)) / m with the new x and
           the unchanged positions of other1 and other2
        5. v += 0.5 * a * dt

    Args:
        body: Body to advance; mutated in place.
        other1: First neighbour, read only.
        other2: Second neighbour, read only.
        dt: Time step.
        force: Pairwise force evaluator.
    """
    force_1 = force.compute(body, other1)
    force_2 = force.compute(body, other2)
    body.acceleration = (force_1 + force_2) / body.mass

    # Half kick
    body.velocity += 0.5 * body.acceleration * dt

    # Drift
    body.position += body.velocity * dt

    # Neighbours have not moved within this call
    force_1 = force.compute(body, other1)
    force_2 = force.compute(body, other2)
    body.acceleration = (force_1 + force_2) / body.mass

    # Second half kick
    body.velocity += 0.5 * body.acceleration * dt


class SequentialLeapfrog(Integrator):
    """
    Three chained single-body leapfrog updates per step.

    Order within one step:
        body1 against (body2, body3)
        body2 against (body1, body3)   # body1 already advanced
        body3 against (body1, body2)   # body1 and body2 already advanced

    Properties:
        - Each single-body update is time-reversible on its own
        - The chained order breaks exact reversibility and exact momentum
          conservation; both drift by O(dt^2) per step and stay bounded
          for moderate runs
        - Must not be parallelised over bodies

    Example:
        >>> from threebody.integrator import SequentialLeapfrog
        >>> integrator = SequentialLeapfrog(dt=1e-4)
        >>> for _ in range(1000):
        ...     integrator.step(state, gravity)
    """

    def step(
        self,
        state: "ThreeBodyState",
        force: "GravitationalForce",
    ) -> None:
        """
        Advance all three bodies by one sequential leapfrog step.

        Args:
            state: The three-body state to integrate.
            force: Pairwise force evaluator.
        """
        bodies = state.bodies
        for index, other_a, other_b in STEP_ORDER:
            advance_body(bodies[index], bodies[other_a], bodies[other_b], self.dt, force)

        self._advance_clock(state)

    def get_name(self) -> str:
        """Return integrator name with timestep."""
        return f"SequentialLeapfrog(dt={self.dt})"
