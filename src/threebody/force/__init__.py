"""
Force module for three-body simulations.

Provides:
- GravitationalForce: pairwise inverse-square force law with named G
"""

from .gravity import GravitationalForce

__all__ = [
    "GravitationalForce",
]
