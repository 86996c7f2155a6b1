#!/usr/bin/env python3
"""
Example: Sequential vs. Symmetric Leapfrog

Integrates the same scenario with both stepping schemes and reports
energy drift, momentum drift and how far the trajectories separate.

Usage:
    python examples/compare_schemes.py [scenario] [total_time]
"""
import sys

import numpy as np

from threebody.builder import get_scenario
from threebody.force import GravitationalForce
from threebody.integrator import SequentialLeapfrog, SymmetricLeapfrog
from threebody.observer import EnergyObserver
from threebody.simulator import Simulator


def run_scheme(integrator, scenario_name, total_time):
    gravity = GravitationalForce()
    energy_obs = EnergyObserver(gravity, interval=1000)
    sim = Simulator(
        state=get_scenario(scenario_name).build_state(),
        integrator=integrator,
        force=gravity,
        observers=[energy_obs],
    )
    sim.run_until(total_time)
    return sim, energy_obs


def main():
    scenario_name = sys.argv[1] if len(sys.argv) > 1 else "bumblebee"
    total_time = float(sys.argv[2]) if len(sys.argv) > 2 else 5.0
    dt = 1e-4

    print("=" * 60)
    print(f"  {scenario_name.upper()}: t = {total_time}, dt = {dt}")
    print("=" * 60)

    results = {}
    for integrator in (SequentialLeapfrog(dt=dt), SymmetricLeapfrog(dt=dt)):
        sim, energy_obs = run_scheme(integrator, scenario_name, total_time)
        results[integrator.get_name()] = sim.state.positions()
        print(f"\n{integrator.get_name()}")
        print(f"  Steps:          {sim.get_total_steps()}")
        print(f"  Energy drift:   {energy_obs.get_energy_drift():.3e}")
        print(f"  Momentum drift: {energy_obs.get_momentum_drift():.3e}")

    sequential, symmetric = results.values()
    separation = np.max(np.linalg.norm(sequential - symmetric, axis=1))
    print(f"\nMax position difference between schemes: {separation:.3e}")
    print("=" * 60)


if __name__ == "__main__":
    main()
