"""
Pairwise Newtonian gravity.

The force evaluator is a pure function of two bodies' masses and positions.
The order of floating-point operations is fixed so that trajectories are
reproducible bit for bit across runs and platforms.
"""
import math
from itertools import combinations
from typing import TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

from threebody.core.constants import G_DEFAULT
from threebody.core.exceptions import CoincidentBodiesError

if TYPE_CHECKING:
    from threebody.core import Body, ThreeBodyState


class GravitationalForce:
    """
    Inverse-square gravitational force law.

    F_AB = G * m_A * m_B * (r_B - r_A) / |r_B - r_A|^3

    The extra power of r in the denominator normalizes the separation
    vector, so no separate unit-vector division is needed. No softening is
    applied.

    Attributes:
        gravitational_constant: G in normalized units (default: 1.0).

    Example:
        >>> from threebody.force import GravitationalForce
        >>> gravity = GravitationalForce()
        >>> gravity.compute(body_a, body_b)
        array([0.25, 0.  ])
    """

    def __init__(self, gravitational_constant: float = G_DEFAULT) -> None:
        """
        Initialize the force law.

        Args:
            gravitational_constant: Value of G. Must be finite.
        """
        if not math.isfinite(gravitational_constant):
            raise ValueError(
                f"Gravitational constant must be finite, got {gravitational_constant}"
            )
        self.gravitational_constant = float(gravitational_constant)

    def compute(self, body_a: "Body", body_b: "Body") -> NDArray[np.floating]:
        """
        Force experienced by body_a due to body_b.

        Args:
            body_a: Body the force acts on.
            body_b: Body exerting the force.

        Returns:
            (2,) force vector pointing from body_a toward body_b.

        Raises:
            CoincidentBodiesError: If the two positions coincide exactly.
        """
        d = body_b.position - body_a.position
        r = math.sqrt(d[0] * d[0] + d[1] * d[1])
        if r == 0.0:
            raise CoincidentBodiesError(
                f"Bodies {body_a.name or '?'} and {body_b.name or '?'} "
                f"coincide at {body_a.position.tolist()}"
            )
        r_cubed = r * r * r
        return self.gravitational_constant * body_a.mass * body_b.mass * d / r_cubed

    def compute_pair_potential(self, body_a: "Body", body_b: "Body") -> float:
        """Return the pair potential energy -G * m_A * m_B / r."""
        r = body_a.distance_to(body_b)
        if r == 0.0:
            raise CoincidentBodiesError("Potential energy undefined at zero separation")
        return -self.gravitational_constant * body_a.mass * body_b.mass / r

    def compute_potential_energy(self, state: "ThreeBodyState") -> float:
        """Return the total potential energy summed over the three pairs."""
        return sum(
            self.compute_pair_potential(a, b) for a, b in combinations(state.bodies, 2)
        )

    def compute_total_energy(self, state: "ThreeBodyState") -> float:
        """Return kinetic plus potential energy of the state."""
        return state.compute_kinetic_energy() + self.compute_potential_energy(state)

    def get_name(self) -> str:
        """Return force law name with G."""
        return f"Gravity(G={self.gravitational_constant})"
