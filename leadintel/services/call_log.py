"""Call outcome recording. Connected calls also feed the engagement accumulator."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from sqlalchemy.orm import Session

from leadintel.models import CallLog, Company, EngagementScore
from leadintel.services.engagement.engagement_accumulator import apply_event

logger = logging.getLogger(__name__)

# call result -> engagement event
CALL_RESULT_EVENTS: dict[str, str] = {
    "アポ獲得": "call_appointment",
    "接続": "call_connected",
    "資料送付": "call_connected",
}


def record_call(
    db: Session,
    company_id: int,
    result: str,
    *,
    duration: int = 0,
    notes: str | None = None,
    project_id: int | None = None,
    called_at: datetime | None = None,
) -> tuple[CallLog, EngagementScore | None] | None:
    """Store a call outcome and apply the matching engagement event, if any.

    project_id defaults to the company's project. Returns None if the company
    does not exist.

    Raises:
        EngagementReferenceError: The call maps to an engagement event but no
            project can be resolved. The call log is still stored.
    """
    company = db.query(Company).filter(Company.id == company_id).first()
    if company is None:
        return None
    if project_id is None:
        project_id = company.project_id

    call = CallLog(
        company_id=company_id,
        project_id=project_id,
        result=result,
        duration=duration,
        notes=notes,
        called_at=called_at or datetime.now(timezone.utc),
    )
    db.add(call)
    db.commit()
    db.refresh(call)

    event_type = CALL_RESULT_EVENTS.get(result)
    engagement = None
    if event_type is not None:
        engagement = apply_event(db, company_id, event_type, project_id, occurred_at=call.called_at)
    return call, engagement
