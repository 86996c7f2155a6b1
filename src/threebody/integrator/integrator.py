"""
Abstract base class for time integrators.

This module provides the Integrator ABC that defines the interface
for the fixed-step integration schemes.
"""
import math
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from threebody.core import ThreeBodyState
    from threebody.force import GravitationalForce


class Integrator(ABC):
    """
    Abstract base for time integration algorithms (Strategy Pattern).

    Integrators advance all three bodies by one fixed timestep, mutating
    positions, velocities and accelerations in place.

    Attributes:
        dt: Time step size. Negative values integrate backwards in time.

    Example:
        >>> from threebody.integrator import SequentialLeapfrog
        >>> integrator = SequentialLeapfrog(dt=1e-4)
        >>> integrator.step(state, gravity)
    """

    def __init__(self, dt: float) -> None:
        """
        Initialize integrator.

        Args:
            dt: Time step size in simulation time units.

        Raises:
            ValueError: If dt is zero or not finite.
        """
        if not math.isfinite(dt) or dt == 0:
            raise ValueError(f"Time step must be non-zero and finite, got {dt}")
        self.dt = float(dt)

    @abstractmethod
    def step(
        self,
        state: "ThreeBodyState",
        force: "GravitationalForce",
    ) -> None:
        """
        Advance the state by one time step.

        Updates every body's position, velocity and acceleration, then
        state.time and state.step.

        Args:
            state: The three-body state to integrate.
            force: Pairwise force evaluator.
        """
        pass

    @abstractmethod
    def get_name(self) -> str:
        """Get human-readable name of this integrator."""
        pass

    def _advance_clock(self, state: "ThreeBodyState") -> None:
        state.time += self.dt
        state.step += 1
