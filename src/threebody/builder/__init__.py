"""
Builder module for three-body simulations.

Provides:
- Scenario catalogue of classic initial conditions
- YAML configuration loading into a ready-to-run Simulator
"""

from .config_loader import (
    build_simulation_from_config,
    get_section,
    load_and_run,
    load_yaml,
)
from .scenarios import (
    DEFAULT_SCENARIO,
    BodySpec,
    Scenario,
    collinear_scenario,
    get_scenario,
    list_scenarios,
    state_from_bodies,
)

__all__ = [
    "BodySpec",
    "Scenario",
    "DEFAULT_SCENARIO",
    "collinear_scenario",
    "get_scenario",
    "list_scenarios",
    "state_from_bodies",
    "load_yaml",
    "get_section",
    "build_simulation_from_config",
    "load_and_run",
]
