"""/v1/history - local list of the user's final decisions"""

import logging
from fastapi import APIRouter, Body, Depends, HTTPException, Query, Request
from sqlalchemy.orm import Session

from clarity_compass.api.dependencies import get_request_id
from clarity_compass.api.v1.schemas import ClearHistoryResponse, DecisionCreate, HistoryItem, HistoryResponse
from clarity_compass.config import settings
from clarity_compass.infrastructure.database.repositories import DecisionHistoryRepository, to_record
from clarity_compass.infrastructure.database.session import get_db
from clarity_compass.infrastructure.observability.logging import log_decision_saved
from clarity_compass.infrastructure.observability.metrics import history_cleared_counter, record_decision_saved

router = APIRouter()


def _to_item(entry) -> HistoryItem:
    record = to_record(entry)
    return HistoryItem(
        id=record.id,
        type=record.type,
        context=record.context,
        date=record.date,
        decision=record.decision,
        details=record.details,
    )


@router.post("/history", response_model=HistoryItem, status_code=201)
def save_decision(
    request: Request,
    request_body: DecisionCreate = Body(...),
    db: Session = Depends(get_db),
):
    """
    Append a final decision to the history.

    The body's `type` selects its shape: Yes/No, Multiple Choice,
    Financial Spending, Weighted Analysis or Financial Analysis.
    """
    request_id = get_request_id(request)
    context, decision, details = request_body.history_fields()

    try:
        entry = DecisionHistoryRepository(db).add_decision(
            decision_type=request_body.type,
            context=context,
            decision=decision,
            details=details,
        )
        db.commit()
        db.refresh(entry)
    except Exception as e:
        db.rollback()
        logging.error(f"Failed to save decision: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    record_decision_saved(request_body.type)
    log_decision_saved(request_id, str(entry.id), request_body.type)

    return _to_item(entry)


@router.get("/history", response_model=HistoryResponse)
def get_history(
    limit: int = Query(settings.history_default_limit, ge=1, le=500, description="Maximum entries returned"),
    db: Session = Depends(get_db),
):
    """
    Retrieve saved decisions.

    Returns:
        Decisions newest first
    """
    entries = DecisionHistoryRepository(db).list_decisions(limit=limit)
    return HistoryResponse(decisions=[_to_item(e) for e in entries])


@router.delete("/history", response_model=ClearHistoryResponse)
def clear_history(request: Request, db: Session = Depends(get_db)):
    """Permanently delete the whole decision history"""
    request_id = get_request_id(request)
    try:
        deleted = DecisionHistoryRepository(db).clear()
        db.commit()
    except Exception as e:
        db.rollback()
        logging.error(f"Failed to clear history: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    history_cleared_counter.inc()
    logging.info("History cleared", extra={"request_id": request_id, "deleted": deleted})

    return ClearHistoryResponse(deleted=deleted)
