"""
Simulator module for three-body simulations.

Provides the main simulation driver:
- Simulator: Orchestrates the stepping loop
- SimulatorBuilder: Builder pattern for construction
"""

from .simulator import Simulator, SimulatorBuilder

__all__ = [
    "Simulator",
    "SimulatorBuilder",
]
