"""FastAPI dependency injection factories.

The ServiceGate is created in the application lifespan and stored on
``app.state``; endpoints receive it (or the ready service) via Depends().
"""

from fastapi import Depends, HTTPException, Request

from salary_predictor.engine.service import PredictionService, ServiceGate
from salary_predictor.errors import ServiceUnavailableError


def get_gate(request: Request) -> ServiceGate:
    return request.app.state.gate


def get_service(gate: ServiceGate = Depends(get_gate)) -> PredictionService:
    """Ready service, or 503 while the dataset has not loaded."""
    try:
        return gate.require()
    except ServiceUnavailableError as exc:
        raise HTTPException(status_code=503, detail=str(exc)) from exc
