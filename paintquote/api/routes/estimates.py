"""Single-service estimate route."""

from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException

from paintquote.api.deps import get_rates
from paintquote.api.schemas import EstimateEnvelope, estimate_response
from paintquote.engine.services import UnknownServiceError, estimate_service
from paintquote.engine.validation import InputValidationError
from paintquote.models.rates import RateTable

router = APIRouter(prefix="/api/v1", tags=["estimates"])


def validation_http_error(e: InputValidationError) -> HTTPException:
    return HTTPException(status_code=422, detail={"field": e.field, "message": e.message})


@router.post("/estimates/{service_id}", response_model=EstimateEnvelope)
def create_estimate(
    service_id: str,
    params: dict[str, Any] = Body(default={}),
    rates: RateTable = Depends(get_rates),
):
    """Estimate one service. `estimate` is null until the payload is computable."""
    try:
        estimate = estimate_service(service_id, params, rates)
    except UnknownServiceError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except InputValidationError as e:
        raise validation_http_error(e)
    return EstimateEnvelope(service_id=service_id, estimate=estimate_response(estimate))
