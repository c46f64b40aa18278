"""Single-service draft routes (the quote form's saved progress)."""

import logging

from fastapi import APIRouter, Depends, HTTPException

from paintquote.api.deps import get_draft_store, get_rates
from paintquote.api.routes.estimates import validation_http_error
from paintquote.api.schemas import DraftRequest, DraftResponse, estimate_response
from paintquote.data.base import SnapshotStore
from paintquote.engine.services import UnknownServiceError, estimate_service
from paintquote.engine.validation import InputValidationError
from paintquote.models.estimate import EstimateBreakdown
from paintquote.models.rates import RateTable

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/drafts", tags=["drafts"])


@router.put("/{session_id}", response_model=DraftResponse)
def save_draft(
    session_id: str,
    req: DraftRequest,
    store: SnapshotStore = Depends(get_draft_store),
    rates: RateTable = Depends(get_rates),
):
    try:
        estimate = estimate_service(req.service_id, req.params, rates)
    except UnknownServiceError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except InputValidationError as e:
        raise validation_http_error(e)

    snapshot = {
        "service_id": req.service_id,
        "params": req.params,
        "estimate": estimate.to_dict() if estimate is not None else None,
    }
    try:
        store.save(session_id, snapshot)
    except Exception:
        logger.warning("Failed to persist draft %s", session_id, exc_info=True)

    return DraftResponse(
        session_id=session_id,
        service_id=req.service_id,
        params=req.params,
        estimate=estimate_response(estimate),
    )


@router.get("/{session_id}", response_model=DraftResponse)
def get_draft(session_id: str, store: SnapshotStore = Depends(get_draft_store)):
    try:
        snapshot = store.load(session_id)
    except Exception:
        logger.warning("Failed to load draft %s", session_id, exc_info=True)
        snapshot = None
    if snapshot is None:
        raise HTTPException(status_code=404, detail="No saved draft")

    estimate = snapshot.get("estimate")
    return DraftResponse(
        session_id=session_id,
        service_id=snapshot["service_id"],
        params=snapshot.get("params", {}),
        estimate=estimate_response(EstimateBreakdown.from_dict(estimate) if estimate else None),
    )
