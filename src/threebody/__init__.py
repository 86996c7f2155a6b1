"""
threebody - Planar three-body gravitational integrator.

A small Python package that advances three point masses under mutual
Newtonian gravity with a fixed-step, sequential kick-drift-kick scheme
and exposes a snapshot of the state after every step.

Main features:
- Pairwise inverse-square force law with a configurable G
- Sequential leapfrog integrator (plus a symmetric variant for comparison)
- Catalogue of classic initial conditions (bumblebee, yin-yang, goggles, ...)
- YAML configuration, observers, CLI and an optional REST API
"""

__version__ = "0.1.0"
__author__ = "threebody Team"
