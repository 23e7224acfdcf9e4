"""Engagement and call-outcome API routes."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from leadintel.db.session import get_db
from leadintel.schemas.engagement import (
    CallLogCreate,
    CallLogRead,
    CallRecordResponse,
    EngagementEventCreate,
    EngagementEventResponse,
    EngagementScoreRead,
)
from leadintel.services.call_log import record_call
from leadintel.services.engagement.engagement_accumulator import (
    EngagementReferenceError,
    apply_event,
    get_engagement_score,
    list_above_threshold,
)

router = APIRouter()
calls_router = APIRouter()


@router.post("/events", response_model=EngagementEventResponse)
def api_apply_event(
    data: EngagementEventCreate,
    db: Session = Depends(get_db),
) -> EngagementEventResponse:
    """Apply one engagement event. Unknown event types are accepted and ignored."""
    try:
        record = apply_event(
            db,
            data.company_id,
            data.event_type,
            data.project_id,
            occurred_at=data.occurred_at,
        )
    except EngagementReferenceError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from None
    if record is None:
        return EngagementEventResponse(applied=False)
    return EngagementEventResponse(
        applied=True, engagement=EngagementScoreRead.model_validate(record)
    )


@router.get("/projects/{project_id}", response_model=list[EngagementScoreRead])
def api_list_engaged(
    project_id: int,
    min_score: int | None = Query(None, ge=0),
    db: Session = Depends(get_db),
) -> list[EngagementScoreRead]:
    """Engagement records for a project at or above min_score (default 60), highest first."""
    return [
        EngagementScoreRead.model_validate(r)
        for r in list_above_threshold(db, project_id, min_score)
    ]


@router.get("/companies/{company_id}/projects/{project_id}", response_model=EngagementScoreRead)
def api_get_engagement(
    company_id: int,
    project_id: int,
    db: Session = Depends(get_db),
) -> EngagementScoreRead:
    record = get_engagement_score(db, company_id, project_id)
    if record is None:
        raise HTTPException(status_code=404, detail="No engagement recorded")
    return EngagementScoreRead.model_validate(record)


@calls_router.post("", response_model=CallRecordResponse, status_code=201)
def api_record_call(data: CallLogCreate, db: Session = Depends(get_db)) -> CallRecordResponse:
    """Record a call outcome; connected calls and appointments add engagement."""
    try:
        recorded = record_call(
            db,
            data.company_id,
            data.result,
            duration=data.duration,
            notes=data.notes,
            project_id=data.project_id,
            called_at=data.called_at,
        )
    except EngagementReferenceError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from None
    if recorded is None:
        raise HTTPException(status_code=404, detail="Company not found")
    call, engagement = recorded
    return CallRecordResponse(
        call=CallLogRead.model_validate(call),
        engagement=EngagementScoreRead.model_validate(engagement) if engagement else None,
    )
