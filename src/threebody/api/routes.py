"""
API routes: thin adapters that delegate to :class:`ThreeBodyService`.

CoincidentBodiesError is mapped to 400 by the application, not here.
"""
from __future__ import annotations

from fastapi import APIRouter, HTTPException

from threebody.api.models import (
    ScenariosResponse,
    SimulationRequest,
    SimulationResponse,
)
from threebody.builder import get_scenario, list_scenarios
from threebody.core.schemas import RunConfig
from threebody.core.service import ThreeBodyService

router = APIRouter()


@router.get("/scenarios", response_model=ScenariosResponse, tags=["scenarios"])
def get_scenarios():
    scenarios = [get_scenario(name).to_dict() for name in list_scenarios()]
    return {"ok": True, "scenarios": scenarios}


@router.post("/simulate", response_model=SimulationResponse, tags=["simulation"])
def simulate(req: SimulationRequest):
    # Each request integrates its own state; nothing is shared between calls.
    service = ThreeBodyService()
    config = RunConfig(
        scenario=req.scenario,
        bodies=[b.model_dump() for b in req.bodies] if req.bodies is not None else None,
        gravitational_constant=req.gravitational_constant,
        integrator={"type": req.integrator, "dt": req.dt},
        run={"steps": req.num_steps},
        sample_interval=req.sample_interval,
    )
    try:
        summary = service.build(config)
        trajectory = service.run()
    except (RuntimeError, ValueError) as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"ok": True, "summary": summary.to_dict(), "trajectory": trajectory.to_dict()}
