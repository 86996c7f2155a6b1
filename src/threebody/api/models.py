"""
Pydantic request / response models for the threebody REST API.

All validation, field constraints, and serialisation logic lives here.
Routes import these models; they never define their own.
"""
from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

MAX_STEPS = 1_000_000


# ------------------------------------------------------------------ #
#  Request models
# ------------------------------------------------------------------ #


class BodyModel(BaseModel):
    """One body's initial conditions."""

    name: str = ""
    mass: float = Field(..., gt=0, description="Positive mass")
    position: List[float] = Field(..., min_length=2, max_length=2)
    velocity: List[float] = Field(..., min_length=2, max_length=2)


class SimulationRequest(BaseModel):
    """Payload for ``POST /simulate``."""

    scenario: Optional[str] = Field(
        "bumblebee", description="Scenario name, ignored when bodies are given"
    )
    bodies: Optional[List[BodyModel]] = Field(
        None, description="Explicit initial conditions for exactly three bodies"
    )
    gravitational_constant: float = Field(1.0, description="Gravitational constant G")
    integrator: Literal["sequential", "symmetric"] = Field(
        "sequential", description="Stepping scheme"
    )
    dt: float = Field(1e-4, description="Fixed time step (non-zero)")
    num_steps: int = Field(10000, gt=0, le=MAX_STEPS, description="Integration steps")
    sample_interval: int = Field(100, gt=0, description="Steps between samples")

    @field_validator("bodies")
    @classmethod
    def exactly_three_bodies(
        cls, v: Optional[List[BodyModel]]
    ) -> Optional[List[BodyModel]]:
        if v is not None and len(v) != 3:
            raise ValueError(f"Exactly 3 bodies are required, got {len(v)}")
        return v

    @field_validator("dt")
    @classmethod
    def dt_non_zero(cls, v: float) -> float:
        if v == 0:
            raise ValueError("dt must be non-zero")
        return v

    @model_validator(mode="after")
    def sample_interval_le_steps(self) -> "SimulationRequest":
        if self.sample_interval > self.num_steps:
            raise ValueError("sample_interval must be <= num_steps")
        return self


# ------------------------------------------------------------------ #
#  Response models
# ------------------------------------------------------------------ #


class ScenarioPayload(BaseModel):
    """Catalogued initial conditions."""

    name: str
    description: str
    extent: float
    bodies: List[BodyModel]


class ScenariosResponse(BaseModel):
    """Response for ``GET /scenarios``."""

    ok: bool = True
    scenarios: List[ScenarioPayload]


class SummaryPayload(BaseModel):
    """Simulation summary returned with every run."""

    bodies: List[BodyModel]
    integrator: str
    force: str
    dt: float
    num_steps: int
    initial_energy: float


class TrajectoryPayload(BaseModel):
    """Sampled positions and conservation diagnostics."""

    steps: List[int]
    times: List[float]
    positions: List[List[List[float]]]
    total_energy: List[float]
    energy_drift: float
    momentum_drift: float
    completed: bool


class SimulationResponse(BaseModel):
    """Response for ``POST /simulate``."""

    ok: bool = True
    summary: SummaryPayload
    trajectory: TrajectoryPayload


class HealthResponse(BaseModel):
    """Response for ``GET /health``: liveness plus the server's limits."""

    status: str = "ok"
    version: str
    integrators: List[str]
    scenarios: List[str]
    max_steps: int = MAX_STEPS
