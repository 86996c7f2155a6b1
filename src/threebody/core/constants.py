"""
Numerical constants for three-body simulations.

All quantities are in normalized (dimensionless) units.
"""
from typing import Final

# Normalized gravitational constant
G_DEFAULT: Final[float] = 1.0

# Number of bodies handled by the integrator
N_BODIES: Final[int] = 3

# Spatial dimension of positions and velocities
DIMENSIONS: Final[int] = 2

# Default fixed time step
DT_DEFAULT: Final[float] = 1e-4

# Default total simulated time
TOTAL_TIME_DEFAULT: Final[float] = 100.0
