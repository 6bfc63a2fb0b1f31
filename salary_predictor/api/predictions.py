"""FastAPI prediction endpoints.

GET  /v1/options           enumerated form choices with display labels
POST /v1/predictions       two-country prediction plus display strings
POST /v1/dataset/reload    user-initiated retry of the dataset load
GET  /v1/dataset           dataset status (source, size, coverage gaps)
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from salary_predictor.api.dependencies import get_gate, get_service
from salary_predictor.engine.service import (
    PredictionService,
    ServiceGate,
    validate_input,
)
from salary_predictor.errors import InputValidationError, MissingDataError
from salary_predictor.models.common import SalaryPredictorBase
from salary_predictor.models.prediction import PredictionResult
from salary_predictor.presentation.formatting import RenderedPrediction, render
from salary_predictor.presentation.labels import choices

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1", tags=["predictions"])


# ---------------------------------------------------------------------------
# Request / Response schemas
# ---------------------------------------------------------------------------


class PredictionRequest(SalaryPredictorBase):
    """Raw form values; completeness is checked by validate_input()."""

    education: str | None = None
    experience: str | None = None
    job_category: str | None = None
    industry: str | None = None


class PredictionResponse(SalaryPredictorBase):
    prediction: PredictionResult
    display: RenderedPrediction
    usd_to_jpy: float


class DatasetStatusResponse(SalaryPredictorBase):
    ready: bool
    source: str
    base_salary_count: int = 0
    coverage_gap_count: int = 0
    coverage_gaps: list[str] = []
    error: str | None = None


def _status(gate: ServiceGate) -> DatasetStatusResponse:
    if not gate.is_ready:
        return DatasetStatusResponse(
            ready=False,
            source=str(gate.source),
            error=str(gate.last_error) if gate.last_error else None,
        )
    dataset = gate.require().dataset
    return DatasetStatusResponse(
        ready=True,
        source=str(gate.source),
        base_salary_count=len(dataset.base_salaries),
        coverage_gap_count=len(dataset.coverage_gaps),
        coverage_gaps=list(dataset.coverage_gaps[:50]),
        error=str(gate.last_error) if gate.last_error else None,
    )


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------


@router.get("/options")
async def get_options() -> dict[str, list[dict[str, str]]]:
    return choices()


@router.post("/predictions", response_model=PredictionResponse)
async def create_prediction(
    body: PredictionRequest,
    service: PredictionService = Depends(get_service),
) -> PredictionResponse:
    try:
        prediction_input = validate_input(body.model_dump(by_alias=True))
    except InputValidationError as exc:
        raise HTTPException(
            status_code=422,
            detail={"message": str(exc), "missing_fields": exc.missing_fields},
        ) from exc

    try:
        result = service.predict(prediction_input)
    except MissingDataError as exc:
        logger.warning("Prediction failed for %s: %s", prediction_input, exc)
        raise HTTPException(status_code=404, detail=str(exc)) from exc

    rate = service.dataset.usd_to_jpy
    return PredictionResponse(
        prediction=result,
        display=render(result, prediction_input, rate),
        usd_to_jpy=rate,
    )


@router.get("/dataset", response_model=DatasetStatusResponse)
async def get_dataset_status(
    gate: ServiceGate = Depends(get_gate),
) -> DatasetStatusResponse:
    return _status(gate)


@router.post("/dataset/reload", response_model=DatasetStatusResponse)
async def reload_dataset(
    gate: ServiceGate = Depends(get_gate),
) -> DatasetStatusResponse:
    """Retry the load. 503 when it fails, even if older data is still served."""
    ok = await gate.retry()
    if not ok:
        raise HTTPException(status_code=503, detail=str(gate.last_error))
    return _status(gate)
