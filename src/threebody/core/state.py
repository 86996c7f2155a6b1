"""
State classes for three-body simulations.

This module provides the ThreeBodyState container that owns the three
bodies for the duration of a run, and the Snapshot record handed to
consumers after each step.
"""
from dataclasses import dataclass
from typing import Iterator, Sequence, Tuple

import numpy as np
from numpy.typing import NDArray

from .body import Body
from .constants import N_BODIES


@dataclass(frozen=True)
class Snapshot:
    """
    Read-only copy of the system at one timestep.

    Attributes:
        time: Simulated time of the snapshot.
        step: Number of steps taken so far.
        positions: (3, 2) array of body positions.
        velocities: (3, 2) array of body velocities.
    """
    time: float
    step: int
    positions: NDArray[np.floating]
    velocities: NDArray[np.floating]

    def to_dict(self) -> dict:
        return {
            "time": self.time,
            "step": self.step,
            "positions": self.positions.tolist(),
            "velocities": self.velocities.tolist(),
        }


class ThreeBodyState:
    """
    Mutable state of exactly three gravitating bodies.

    The state is owned by the driver loop. Integrators borrow it for the
    duration of one step, mutate the bodies in place and advance ``time``
    and ``step``; they keep no references between calls.

    Attributes:
        bodies: Tuple of the three Body instances, in stepping order.
        time: Current simulated time (default: 0.0).
        step: Current step number (default: 0).

    Example:
        >>> from threebody.core import Body, ThreeBodyState
        >>> state = ThreeBodyState([
        ...     Body(1.0, [-1.0, 0.0], [0.0, 0.0]),
        ...     Body(1.0, [1.0, 0.0], [0.0, 0.0]),
        ...     Body(1.0, [0.0, 0.0], [0.0, 0.0]),
        ... ])
        >>> state.positions().shape
        (3, 2)
    """

    def __init__(
        self,
        bodies: Sequence[Body],
        time: float = 0.0,
        step: int = 0,
    ) -> None:
        """
        Initialize a state.

        Args:
            bodies: Exactly three distinct Body instances.
            time: Initial simulated time.
            step: Initial step count.

        Raises:
            ValueError: If the number of bodies is not three or the same
                Body object is passed more than once.
        """
        bodies = tuple(bodies)
        if len(bodies) != N_BODIES:
            raise ValueError(f"Expected {N_BODIES} bodies, got {len(bodies)}")
        if len({id(body) for body in bodies}) != N_BODIES:
            raise ValueError("Bodies must be distinct objects")

        self.bodies: Tuple[Body, Body, Body] = bodies
        self.time = float(time)
        self.step = int(step)

    def __iter__(self) -> Iterator[Body]:
        return iter(self.bodies)

    def __getitem__(self, index: int) -> Body:
        return self.bodies[index]

    def __len__(self) -> int:
        return N_BODIES

    def masses(self) -> NDArray[np.floating]:
        """Return (3,) array of body masses."""
        return np.array([body.mass for body in self.bodies], dtype=np.float64)

    def positions(self) -> NDArray[np.floating]:
        """Return (3, 2) array of body positions (a copy)."""
        return np.array([body.position for body in self.bodies], dtype=np.float64)

    def velocities(self) -> NDArray[np.floating]:
        """Return (3, 2) array of body velocities (a copy)."""
        return np.array([body.velocity for body in self.bodies], dtype=np.float64)

    def compute_kinetic_energy(self) -> float:
        """
        Compute total kinetic energy.

        KE = (1/2) * sum_i m_i * |v_i|^2
        """
        return sum(body.kinetic_energy() for body in self.bodies)

    def get_momentum(self) -> NDArray[np.floating]:
        """Return (2,) total linear momentum sum_i m_i * v_i."""
        return np.sum(self.masses()[:, np.newaxis] * self.velocities(), axis=0)

    def get_center_of_mass(self) -> NDArray[np.floating]:
        """Return (2,) center of mass position."""
        masses = self.masses()
        return np.sum(masses[:, np.newaxis] * self.positions(), axis=0) / np.sum(masses)

    def zero_momentum(self) -> None:
        """
        Remove center of mass velocity.

        Only meant for preparing initial conditions; the integrator never
        calls it.
        """
        com_velocity = self.get_momentum() / np.sum(self.masses())
        for body in self.bodies:
            body.velocity -= com_velocity

    def snapshot(self) -> Snapshot:
        """Return a read-only copy of the current positions and velocities."""
        positions = self.positions()
        velocities = self.velocities()
        positions.setflags(write=False)
        velocities.setflags(write=False)
        return Snapshot(
            time=self.time,
            step=self.step,
            positions=positions,
            velocities=velocities,
        )

    def copy(self) -> "ThreeBodyState":
        """Create a deep copy of the state."""
        return ThreeBodyState(
            [body.copy() for body in self.bodies],
            time=self.time,
            step=self.step,
        )

    def __repr__(self) -> str:
        names = [body.name or f"body{i + 1}" for i, body in enumerate(self.bodies)]
        return (
            f"ThreeBodyState(bodies={names}, "
            f"time={self.time}, step={self.step})"
        )
