"""Engagement accumulator — per (company, project) running score.

apply_event is read-modify-write. Events for the same key are serialized by
an in-process lock (one of a fixed set of stripes, chosen by key) plus a row
lock (SELECT ... FOR UPDATE). The locked read always reloads the row, so a
session holding a stale copy still adds to the committed totals and
total_score always equals the sum of the channel scores. A concurrent first
insert for the same key surfaces as IntegrityError on the unique constraint
and is retried once as an update.
"""

from __future__ import annotations

import logging
import threading
from datetime import datetime, timezone

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from leadintel.config import get_settings
from leadintel.models import Company, EngagementEvent, EngagementScore, Project
from leadintel.services.engagement.engagement_constants import (
    CHANNEL_FIELDS,
    EVENT_POINTS,
    alert_level_for,
    trend_for,
)

logger = logging.getLogger(__name__)


class EngagementReferenceError(ValueError):
    """Raised when an event references a company or project that cannot be resolved.

    The event is dropped; callers report it and do not retry.
    """

    pass


_LOCK_STRIPES = 64
_key_locks: tuple[threading.Lock, ...] = tuple(threading.Lock() for _ in range(_LOCK_STRIPES))


def _lock_for(company_id: int, project_id: int) -> threading.Lock:
    return _key_locks[hash((company_id, project_id)) % _LOCK_STRIPES]


def resolve_project_id(db: Session, company_id: int, project_id: int | None) -> int:
    """Validate references and return the project the event applies to.

    When project_id is omitted the company's own project is used.

    Raises:
        EngagementReferenceError: Unknown company, unknown project, or no project to resolve.
    """
    company = db.query(Company).filter(Company.id == company_id).first()
    if company is None:
        raise EngagementReferenceError(f"Company {company_id} not found")

    if project_id is None:
        project_id = company.project_id
        if project_id is None:
            raise EngagementReferenceError(
                f"Company {company_id} has no project; project_id is required"
            )

    exists = db.query(Project.id).filter(Project.id == project_id).first()
    if exists is None:
        raise EngagementReferenceError(f"Project {project_id} not found")
    return project_id


def _apply_locked(
    db: Session,
    company_id: int,
    project_id: int,
    event_type: str,
    points: int,
    channel: str,
    occurred_at: datetime,
) -> EngagementScore:
    field = CHANNEL_FIELDS[channel]
    record = (
        db.query(EngagementScore)
        .filter(
            EngagementScore.company_id == company_id,
            EngagementScore.project_id == project_id,
        )
        .with_for_update()
        .populate_existing()
        .first()
    )
    if record is None:
        record = EngagementScore(
            company_id=company_id,
            project_id=project_id,
            call_score=0,
            document_score=0,
            web_activity_score=0,
            social_score=0,
        )
        setattr(record, field, points)
        record.total_score = points
        # First write is always rising regardless of points.
        record.score_trend = "rising"
        db.add(record)
    else:
        setattr(record, field, getattr(record, field) + points)
        record.total_score = record.total_score + points
        record.score_trend = trend_for(points)

    record.alert_level = alert_level_for(record.total_score)
    record.last_activity_at = occurred_at
    record.calculated_at = occurred_at

    db.add(
        EngagementEvent(
            company_id=company_id,
            project_id=project_id,
            event_type=event_type,
            channel=channel,
            points=points,
            total_after=record.total_score,
            occurred_at=occurred_at,
        )
    )
    db.commit()
    db.refresh(record)
    return record


def apply_event(
    db: Session,
    company_id: int,
    event_type: str,
    project_id: int | None = None,
    *,
    occurred_at: datetime | None = None,
) -> EngagementScore | None:
    """Apply one engagement event to the (company, project) aggregate.

    Args:
        db: Database session.
        company_id: Company the event concerns.
        event_type: Key of EVENT_POINTS. Unknown types are ignored.
        project_id: Project; defaults to the company's project.
        occurred_at: Activity time (default: now).

    Returns:
        The updated EngagementScore, or None for an unknown event type.

    Raises:
        EngagementReferenceError: When the company or project cannot be resolved.
    """
    entry = EVENT_POINTS.get(event_type)
    if entry is None:
        logger.debug("Ignoring unknown engagement event type %r", event_type)
        return None
    points, channel = entry

    try:
        resolved = resolve_project_id(db, company_id, project_id)
    except EngagementReferenceError as exc:
        logger.warning("Dropping engagement event %s: %s", event_type, exc)
        raise

    occurred_at = occurred_at or datetime.now(timezone.utc)
    with _lock_for(company_id, resolved):
        try:
            record = _apply_locked(db, company_id, resolved, event_type, points, channel, occurred_at)
        except IntegrityError:
            db.rollback()
            logger.info(
                "Concurrent first write for company_id=%s project_id=%s; retrying as update",
                company_id,
                resolved,
            )
            record = _apply_locked(db, company_id, resolved, event_type, points, channel, occurred_at)

    logger.info(
        "Engagement updated: company_id=%s project_id=%s event=%s total=%d alert=%s",
        company_id,
        resolved,
        event_type,
        record.total_score,
        record.alert_level,
    )
    return record


def get_engagement_score(db: Session, company_id: int, project_id: int) -> EngagementScore | None:
    """Return the aggregate for a key, or None if no event has been applied yet."""
    return (
        db.query(EngagementScore)
        .filter(
            EngagementScore.company_id == company_id,
            EngagementScore.project_id == project_id,
        )
        .first()
    )


def list_above_threshold(
    db: Session,
    project_id: int,
    min_score: int | None = None,
) -> list[EngagementScore]:
    """Records for a project with total_score >= min_score, highest first.

    min_score defaults to ENGAGEMENT_HIGH_SCORE_THRESHOLD (60). Ties ordered by company id.
    """
    if min_score is None:
        min_score = get_settings().engagement_high_score_threshold
    return (
        db.query(EngagementScore)
        .filter(
            EngagementScore.project_id == project_id,
            EngagementScore.total_score >= min_score,
        )
        .order_by(EngagementScore.total_score.desc(), EngagementScore.company_id.asc())
        .all()
    )


def list_engagement_events(db: Session, company_id: int, project_id: int) -> list[EngagementEvent]:
    """Mutation history for a key, oldest first."""
    return (
        db.query(EngagementEvent)
        .filter(
            EngagementEvent.company_id == company_id,
            EngagementEvent.project_id == project_id,
        )
        .order_by(EngagementEvent.occurred_at.asc(), EngagementEvent.id.asc())
        .all()
    )
