"""
Core module for three-body simulations.

This module provides the fundamental classes:
- Body: A single point mass with position, velocity and acceleration
- ThreeBodyState: Container owning exactly three bodies
- Snapshot: Read-only copy of the state after a step
- CoincidentBodiesError: Raised at zero separation
"""

from .body import Body
from .constants import (
    DIMENSIONS,
    DT_DEFAULT,
    G_DEFAULT,
    N_BODIES,
    TOTAL_TIME_DEFAULT,
)
from .exceptions import CoincidentBodiesError
from .state import Snapshot, ThreeBodyState

__all__ = [
    # Classes
    "Body",
    "ThreeBodyState",
    "Snapshot",
    "CoincidentBodiesError",
    # Constants
    "G_DEFAULT",
    "N_BODIES",
    "DIMENSIONS",
    "DT_DEFAULT",
    "TOTAL_TIME_DEFAULT",
]
