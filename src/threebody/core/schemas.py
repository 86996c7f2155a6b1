"""
Shared payload schemas for the CLI, service and API.

Defines the data structures that the service layer consumes and
produces. Keeping them in one place prevents drift between the call
paths.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .constants import DT_DEFAULT, G_DEFAULT, TOTAL_TIME_DEFAULT


# ------------------------------------------------------------------ #
#  Input schemas
# ------------------------------------------------------------------ #


@dataclass
class RunConfig:
    """Everything needed to build and run one simulation."""

    scenario: Optional[str] = "bumblebee"
    bodies: Optional[List[Dict[str, Any]]] = None
    gravitational_constant: float = G_DEFAULT
    integrator: Dict[str, Any] = field(
        default_factory=lambda: {"type": "sequential", "dt": DT_DEFAULT}
    )
    run: Dict[str, Any] = field(
        default_factory=lambda: {"total_time": TOTAL_TIME_DEFAULT}
    )
    sample_interval: int = 100

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "RunConfig":
        return cls(
            scenario=d.get("scenario", "bumblebee"),
            bodies=d.get("bodies"),
            gravitational_constant=float(d.get("gravitational_constant", G_DEFAULT)),
            integrator=d.get("integrator", {"type": "sequential", "dt": DT_DEFAULT}),
            run=d.get("run", {"total_time": TOTAL_TIME_DEFAULT}),
            sample_interval=int(d.get("sample_interval", 100)),
        )

    def to_dict(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {
            "gravitational_constant": self.gravitational_constant,
            "integrator": self.integrator,
            "run": self.run,
            "sample_interval": self.sample_interval,
        }
        if self.bodies is not None:
            d["bodies"] = self.bodies
        elif self.scenario is not None:
            d["scenario"] = self.scenario
        return d


# ------------------------------------------------------------------ #
#  Output schemas
# ------------------------------------------------------------------ #


@dataclass
class SimulationSummary:
    """Summary returned after a successful build."""

    bodies: List[Dict[str, Any]]
    integrator: str
    force: str
    dt: float
    num_steps: int
    initial_energy: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "bodies": self.bodies,
            "integrator": self.integrator,
            "force": self.force,
            "dt": self.dt,
            "num_steps": self.num_steps,
            "initial_energy": self.initial_energy,
        }


@dataclass
class TrajectoryData:
    """Sampled positions and conservation diagnostics from a run."""

    steps: List[int]
    times: List[float]
    positions: List[List[List[float]]]
    total_energy: List[float]
    energy_drift: float
    momentum_drift: float
    completed: bool

    def to_dict(self) -> Dict[str, Any]:
        return {
            "steps": self.steps,
            "times": self.times,
            "positions": self.positions,
            "total_energy": self.total_energy,
            "energy_drift": self.energy_drift,
            "momentum_drift": self.momentum_drift,
            "completed": self.completed,
        }
