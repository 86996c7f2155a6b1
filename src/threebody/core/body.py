"""
Body class for three-body simulations.

This module provides the Body dataclass representing a single point mass.
"""
import math
from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray

from .constants import DIMENSIONS


@dataclass
class Body:
    """
    A single point mass in the plane.

    The mass is fixed for the lifetime of the body. Position and velocity
    are evolved in place by the integrator; acceleration only caches the
    result of the most recent force evaluation and is not an input.

    Attributes:
        mass: Positive mass in normalized units.
        position: (2,) array with the x and y coordinates.
        velocity: (2,) array with the x and y velocity components.
        acceleration: (2,) array, zero at creation.
        name: Display label (default: "").

    Example:
        >>> from threebody.core import Body
        >>> body = Body(mass=1.0, position=[-1.0, 0.0], velocity=[0.18428, 0.58719])
        >>> body.acceleration
        array([0., 0.])
    """
    mass: float
    position: NDArray[np.floating]
    velocity: NDArray[np.floating]
    acceleration: NDArray[np.floating] = field(
        default_factory=lambda: np.zeros(DIMENSIONS)
    )
    name: str = ""

    def __post_init__(self) -> None:
        """Validate body properties after initialization."""
        mass = float(self.mass)
        if not math.isfinite(mass) or mass <= 0:
            raise ValueError(f"Body mass must be positive, got {mass}")
        object.__setattr__(self, "mass", mass)

        self.position = np.array(self.position, dtype=np.float64)
        self.velocity = np.array(self.velocity, dtype=np.float64)
        self.acceleration = np.array(self.acceleration, dtype=np.float64)

        for label, vector in (
            ("Position", self.position),
            ("Velocity", self.velocity),
            ("Acceleration", self.acceleration),
        ):
            if vector.shape != (DIMENSIONS,):
                raise ValueError(
                    f"{label} must be a ({DIMENSIONS},) vector, got shape {vector.shape}"
                )
            if not np.all(np.isfinite(vector)):
                raise ValueError(f"{label} must be finite, got {vector.tolist()}")

    def __setattr__(self, name: str, value) -> None:
        # mass is assigned once by __init__ and never again
        if name == "mass" and "mass" in self.__dict__:
            raise AttributeError("Body mass is fixed at creation")
        super().__setattr__(name, value)

    @property
    def momentum(self) -> NDArray[np.floating]:
        """Return the linear momentum m * v."""
        return self.mass * self.velocity

    def kinetic_energy(self) -> float:
        """Return (1/2) * m * |v|^2."""
        return 0.5 * self.mass * float(np.dot(self.velocity, self.velocity))

    def distance_to(self, other: "Body") -> float:
        """Return Euclidean distance to another body."""
        return float(np.linalg.norm(other.position - self.position))

    def copy(self) -> "Body":
        """Create a deep copy of the body."""
        return Body(
            mass=self.mass,
            position=self.position.copy(),
            velocity=self.velocity.copy(),
            acceleration=self.acceleration.copy(),
            name=self.name,
        )
