"""
Backend service layer for threebody.

Framework-independent orchestration consumed by the CLI and the FastAPI
transport layer. No references to HTTP or argument parsing belong here.
"""
from __future__ import annotations

import logging
from typing import Callable, Optional

from threebody.builder.config_loader import (
    _parse_num_steps,
    build_simulation_from_config,
)
from threebody.core.schemas import RunConfig, SimulationSummary, TrajectoryData
from threebody.core.state import Snapshot
from threebody.observer import EnergyObserver, TrajectoryObserver
from threebody.simulator import Simulator

logger = logging.getLogger(__name__)


class ThreeBodyService:
    """Stateful simulation backend.  One instance per session."""

    def __init__(self):
        self._simulator: Optional[Simulator] = None
        self._trajectory: Optional[TrajectoryObserver] = None
        self._energy: Optional[EnergyObserver] = None
        self._num_steps = 0
        self._running = False

    # ------------------------------------------------------------------ #
    #  Properties
    # ------------------------------------------------------------------ #

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def has_simulation(self) -> bool:
        return self._simulator is not None

    @property
    def simulator(self) -> Simulator:
        if self._simulator is None:
            raise RuntimeError("No simulation built")
        return self._simulator

    # ------------------------------------------------------------------ #
    #  Build
    # ------------------------------------------------------------------ #

    def build(self, config: RunConfig) -> SimulationSummary:
        """Build a Simulator from *config*.

        Returns a :class:`SimulationSummary` (no JSON, no HTTP).
        """
        if self._running:
            raise RuntimeError("Simulation already running.")
        if config.sample_interval < 1:
            raise ValueError(
                f"Sample interval must be >= 1, got {config.sample_interval}"
            )

        raw = config.to_dict()
        raw["observers"] = {"energy": False, "log": False, "trajectory": False}
        simulator = build_simulation_from_config(raw)

        self._trajectory = TrajectoryObserver(interval=config.sample_interval)
        self._energy = EnergyObserver(simulator.force, interval=config.sample_interval)
        simulator.observers.extend([self._trajectory, self._energy])

        self._num_steps = _parse_num_steps(raw, simulator.integrator.dt)
        self._simulator = simulator

        state = simulator.state
        return SimulationSummary(
            bodies=[
                {
                    "name": body.name,
                    "mass": body.mass,
                    "position": body.position.tolist(),
                    "velocity": body.velocity.tolist(),
                }
                for body in state.bodies
            ],
            integrator=simulator.integrator.get_name(),
            force=simulator.force.get_name(),
            dt=simulator.integrator.dt,
            num_steps=self._num_steps,
            initial_energy=simulator.force.compute_total_energy(state),
        )

    # ------------------------------------------------------------------ #
    #  Simulation (synchronous)
    # ------------------------------------------------------------------ #

    def run(
        self,
        on_update: Optional[Callable[[Snapshot], None]] = None,
    ) -> TrajectoryData:
        """Run the configured number of steps, calling *on_update* per sample."""
        simulator = self.simulator
        if self._running:
            raise RuntimeError("Simulation already running.")

        self._running = True
        completed = True
        sample_interval = self._trajectory.interval
        logger.info(
            "Running %d steps with %s", self._num_steps, simulator.integrator.get_name()
        )
        try:
            for snapshot in simulator.iter_snapshots(self._num_steps):
                if on_update is not None and snapshot.step % sample_interval == 0:
                    on_update(snapshot)
                if not self._running:
                    completed = False
                    logger.info("Simulation stopped at step %d", snapshot.step)
                    break
        finally:
            self._running = False

        return self.get_trajectory(completed=completed)

    def stop(self) -> None:
        self._running = False

    def get_trajectory(self, completed: bool = True) -> TrajectoryData:
        if self._trajectory is None or self._energy is None:
            raise RuntimeError("No trajectory data available")
        frames = self._trajectory.frames
        return TrajectoryData(
            steps=[frame.step for frame in frames],
            times=[float(frame.time) for frame in frames],
            positions=[frame.positions.tolist() for frame in frames],
            total_energy=[float(e) for e in self._energy.total_energies],
            energy_drift=float(self._energy.get_energy_drift()),
            momentum_drift=float(self._energy.get_momentum_drift()),
            completed=completed,
        )
