"""
FastAPI application for serving three-body trajectories.

Usage::

    uvicorn threebody.api.app:app
    python -m threebody.api --cors-origin http://localhost:5173

The scenario catalogue, the available stepping schemes and the per-request
step cap are published both in the OpenAPI description and on ``/health``
so clients can size their requests before posting one.
"""
import logging
from typing import Optional, Sequence

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

import threebody
from threebody.api.models import MAX_STEPS, HealthResponse
from threebody.api.routes import router
from threebody.builder import DEFAULT_SCENARIO, list_scenarios
from threebody.core import CoincidentBodiesError
from threebody.integrator import INTEGRATORS

logger = logging.getLogger(__name__)

OPENAPI_TAGS = [
    {"name": "scenarios", "description": "Catalogued initial conditions."},
    {"name": "simulation", "description": "Integrate and sample a trajectory."},
]


def _describe() -> str:
    return (
        "Planar three-body integrator with a sequential leapfrog scheme.\n\n"
        f"* Scenarios: {', '.join(list_scenarios())} (default: {DEFAULT_SCENARIO})\n"
        f"* Integrators: {', '.join(sorted(INTEGRATORS))}\n"
        f"* At most {MAX_STEPS:,} steps per request"
    )


async def _coincident_bodies_handler(
    request: Request, exc: CoincidentBodiesError
) -> JSONResponse:
    # Zero separation is an input problem, not a server fault.
    logger.info("Rejected %s: %s", request.url.path, exc)
    return JSONResponse(status_code=400, content={"detail": str(exc)})


def create_app(cors_origins: Optional[Sequence[str]] = None) -> FastAPI:
    """
    Create the application.

    Args:
        cors_origins: Browser origins allowed to call the API. Any origin
            is allowed when omitted; the API holds no credentials.
    """
    application = FastAPI(
        title="threebody API",
        version=threebody.__version__,
        description=_describe(),
        openapi_tags=OPENAPI_TAGS,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=list(cors_origins) if cors_origins else ["*"],
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )
    application.add_exception_handler(CoincidentBodiesError, _coincident_bodies_handler)

    @application.get("/health", response_model=HealthResponse)
    def health():
        return HealthResponse(
            version=threebody.__version__,
            integrators=sorted(INTEGRATORS),
            scenarios=list_scenarios(),
        )

    application.include_router(router, prefix="/api")
    return application


app = create_app()
