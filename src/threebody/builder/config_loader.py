"""
Configuration loader for YAML-based simulation setup.

Provides functions to build a Simulator from a configuration dictionary
or a YAML file. Every malformed value surfaces as ValueError so callers
only have one configuration error type to handle.
"""
import logging
from pathlib import Path
from typing import Any, Callable, Dict, List, TypeVar, Union

import yaml

from threebody.core import DT_DEFAULT, G_DEFAULT, TOTAL_TIME_DEFAULT, ThreeBodyState
from threebody.force import GravitationalForce
from threebody.integrator import INTEGRATORS, Integrator
from threebody.observer import EnergyObserver, LogObserver, Observer, TrajectoryObserver
from threebody.simulator import Simulator

from .scenarios import DEFAULT_SCENARIO, get_scenario, state_from_bodies

logger = logging.getLogger(__name__)

T = TypeVar("T")


def load_yaml(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load YAML configuration file.

    Args:
        path: Path to YAML file.

    Returns:
        Dictionary with configuration.
    """
    with open(path, "r") as f:
        config = yaml.safe_load(f)
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ValueError(f"Configuration root must be a mapping, got {type(config).__name__}")
    return config


def get_section(config: Dict[str, Any], key: str) -> Dict[str, Any]:
    """
    Return a nested mapping from config.

    A missing or empty section (``integrator:`` with nothing under it)
    yields an empty dict.

    Raises:
        ValueError: If the section is present but not a mapping.
    """
    section = config.get(key)
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ValueError(
            f"Section '{key}' must be a mapping, got {type(section).__name__}"
        )
    return section


def _get_value(
    section: Dict[str, Any],
    key: str,
    default: T,
    convert: Callable[[Any], T],
) -> T:
    """Read and convert one scalar; an empty value falls back to default."""
    value = section.get(key)
    if value is None:
        return default
    try:
        return convert(value)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Invalid value for '{key}': {value!r}") from e


def _parse_force(config: Dict[str, Any]) -> GravitationalForce:
    """Parse force law from config."""
    return GravitationalForce(
        gravitational_constant=_get_value(config, "gravitational_constant", G_DEFAULT, float)
    )


def _parse_state(config: Dict[str, Any]) -> ThreeBodyState:
    """Parse initial bodies from config (explicit bodies win over scenario)."""
    if config.get("bodies") is not None:
        return state_from_bodies(config["bodies"])

    name = config.get("scenario") or DEFAULT_SCENARIO
    if not isinstance(name, str):
        raise ValueError(f"Scenario must be a name, got {name!r}")
    try:
        scenario = get_scenario(name)
    except KeyError as e:
        raise ValueError(e.args[0]) from e
    return scenario.build_state()


def _parse_integrator(config: Dict[str, Any]) -> Integrator:
    """Parse integrator from config."""
    int_config = get_section(config, "integrator")
    int_type = str(int_config.get("type") or "sequential").lower()
    if int_type not in INTEGRATORS:
        raise ValueError(
            f"Unknown integrator type: {int_type}. "
            f"Choose from: {', '.join(sorted(INTEGRATORS))}"
        )
    dt = _get_value(int_config, "dt", DT_DEFAULT, float)
    return INTEGRATORS[int_type](dt=dt)


def _parse_num_steps(config: Dict[str, Any], dt: float) -> int:
    """Parse run length; an explicit step count wins over total_time."""
    run_config = get_section(config, "run")
    if run_config.get("steps") is not None:
        steps = _get_value(run_config, "steps", 0, int)
    else:
        total_time = _get_value(run_config, "total_time", TOTAL_TIME_DEFAULT, float)
        steps = int(total_time / dt)
    if steps < 0:
        raise ValueError(f"Number of steps must be >= 0, got {steps}")
    return steps


def _parse_observers(
    config: Dict[str, Any],
    force: GravitationalForce,
) -> List[Observer]:
    """Create observers from config."""
    observers: List[Observer] = []
    obs_config = get_section(config, "observers")

    if obs_config.get("energy", True):
        observers.append(
            EnergyObserver(force, interval=_get_value(obs_config, "energy_interval", 1000, int))
        )

    if obs_config.get("log", True):
        observers.append(
            LogObserver(force, interval=_get_value(obs_config, "log_interval", 100000, int))
        )

    if obs_config.get("trajectory", False):
        observers.append(
            TrajectoryObserver(
                interval=_get_value(obs_config, "trajectory_interval", 100, int)
            )
        )

    return observers


def build_simulation_from_config(config: Dict[str, Any]) -> Simulator:
    """
    Build a complete Simulator from configuration dictionary.

    Args:
        config: Configuration dictionary (typically from YAML).

    Returns:
        Configured Simulator ready to run.

    Raises:
        ValueError: If any section or value is malformed.

    Example config:
        gravitational_constant: 1.0
        scenario: bumblebee
        integrator:
          type: sequential
          dt: 0.0001
        run:
          total_time: 100.0
        observers:
          energy_interval: 1000
          log_interval: 100000
    """
    force = _parse_force(config)
    state = _parse_state(config)
    integrator = _parse_integrator(config)
    observers = _parse_observers(config, force)

    logger.debug("Built %r with %s", state, integrator.get_name())
    return Simulator(
        state=state,
        integrator=integrator,
        force=force,
        observers=observers,
    )


def load_and_run(path: Union[str, Path]) -> Simulator:
    """
    Load configuration from YAML and run simulation.

    Args:
        path: Path to YAML configuration file.

    Returns:
        Simulator after run completes.
    """
    config = load_yaml(path)
    sim = build_simulation_from_config(config)
    sim.run(num_steps=_parse_num_steps(config, sim.integrator.dt))
    return sim
