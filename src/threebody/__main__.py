"""Command-line entry point.

Usage::

    python -m threebody                               # bumblebee, t = 100
    python -m threebody --scenario figure_eight --total-time 10
    python -m threebody --config examples/bumblebee.yaml
    python -m threebody --list-scenarios
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Any, Dict, List, Optional

import numpy as np
import yaml

import threebody
from threebody.builder import list_scenarios, load_yaml
from threebody.builder.config_loader import (
    _parse_num_steps,
    build_simulation_from_config,
    get_section,
)
from threebody.core import CoincidentBodiesError
from threebody.integrator import INTEGRATORS
from threebody.logging_config import LOG_LEVELS, configure_logging
from threebody.observer import EnergyObserver

logger = logging.getLogger("threebody")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m threebody",
        description="Integrate a planar three-body problem with a fixed-step leapfrog.",
    )
    parser.add_argument("--config", help="YAML configuration file")
    parser.add_argument("--scenario", help="Named initial conditions (see --list-scenarios)")
    parser.add_argument("--dt", type=float, help="Time step (default: 1e-4)")
    parser.add_argument("--total-time", type=float, help="Simulated time (default: 100)")
    parser.add_argument("--steps", type=int, help="Number of steps (overrides --total-time)")
    parser.add_argument(
        "--integrator",
        choices=sorted(INTEGRATORS),
        help="Stepping scheme (default: sequential)",
    )
    parser.add_argument(
        "-G", "--gravitational-constant", type=float, help="Gravitational constant (default: 1.0)"
    )
    parser.add_argument("--log-interval", type=int, help="Steps between progress lines")
    parser.add_argument(
        "--log-level",
        default="info",
        choices=LOG_LEVELS,
        help="Log level (default: info)",
    )
    parser.add_argument(
        "--list-scenarios", action="store_true", help="List scenarios and exit"
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {threebody.__version__}"
    )
    return parser


def merge_args(config: Dict[str, Any], args: argparse.Namespace) -> Dict[str, Any]:
    """Overlay command-line options on a configuration dictionary."""
    merged = dict(config)
    merged["integrator"] = dict(get_section(config, "integrator"))
    merged["run"] = dict(get_section(config, "run"))
    merged["observers"] = dict(get_section(config, "observers"))

    if args.scenario is not None:
        merged.pop("bodies", None)
        merged["scenario"] = args.scenario
    if args.gravitational_constant is not None:
        merged["gravitational_constant"] = args.gravitational_constant
    if args.integrator is not None:
        merged["integrator"]["type"] = args.integrator
    if args.dt is not None:
        merged["integrator"]["dt"] = args.dt
    if args.total_time is not None:
        merged["run"].pop("steps", None)
        merged["run"]["total_time"] = args.total_time
    if args.steps is not None:
        merged["run"]["steps"] = args.steps
    if args.log_interval is not None:
        merged["observers"]["log_interval"] = args.log_interval
    return merged


def run(config: Dict[str, Any]) -> None:
    """Build, run and summarise one simulation."""
    sim = build_simulation_from_config(config)
    num_steps = _parse_num_steps(config, sim.integrator.dt)

    logger.info(
        "%s | %s | %s | %d steps",
        sim.state,
        sim.integrator.get_name(),
        sim.force.get_name(),
        num_steps,
    )
    sim.run(num_steps)

    np.set_printoptions(precision=6, suppress=True)
    for i, body in enumerate(sim.state.bodies):
        logger.info(
            "%-8s x=%s v=%s",
            body.name or f"body{i + 1}",
            body.position,
            body.velocity,
        )
    for observer in sim.observers:
        if isinstance(observer, EnergyObserver):
            logger.info(
                "Energy drift: %.3e | Momentum drift: %.3e",
                observer.get_energy_drift(),
                observer.get_momentum_drift(),
            )


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.log_level)

    if args.list_scenarios:
        for name in list_scenarios():
            print(name)
        return 0

    try:
        config = load_yaml(args.config) if args.config else {}
        run(merge_args(config, args))
        return 0
    except (OSError, ValueError, yaml.YAMLError, CoincidentBodiesError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
