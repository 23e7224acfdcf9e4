"""Pivot alert service — run the detector for a project and manage alert status.

The detector only creates PivotAlert rows. With dedup enabled (default,
PIVOT_ALERT_DEDUP) a rule is skipped while an open alert of the same type
(active or acknowledged) already exists for the project.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from sqlalchemy.orm import Session

from leadintel.config import get_settings
from leadintel.models import CallLog, Company, PivotAlert, Project
from leadintel.services.pivot.pivot_rules import aggregate_call_outcomes, evaluate_pivot_rules

logger = logging.getLogger(__name__)

PIVOT_ALERT_STATUSES: tuple[str, ...] = ("active", "acknowledged", "resolved", "dismissed")

ALLOWED_TRANSITIONS: dict[str, frozenset[str]] = {
    "active": frozenset({"acknowledged", "resolved", "dismissed"}),
    "acknowledged": frozenset({"resolved", "dismissed"}),
    "resolved": frozenset(),
    "dismissed": frozenset(),
}
OPEN_STATUSES = ("active", "acknowledged")


class InvalidStatusTransitionError(ValueError):
    """Raised when a status change is not allowed from the record's current status."""

    pass


def project_call_results(db: Session, project_id: int) -> list[str]:
    """Result strings of every call against a company that belongs to the project."""
    rows = (
        db.query(CallLog.result)
        .join(Company, Company.id == CallLog.company_id)
        .filter(Company.project_id == project_id)
        .all()
    )
    return [row[0] for row in rows]


def detect_pivot_alerts(
    db: Session,
    project_id: int,
    *,
    dedupe: bool | None = None,
) -> list[PivotAlert] | None:
    """Evaluate pivot rules for a project and persist any new alerts.

    Args:
        db: Database session.
        project_id: Project to evaluate.
        dedupe: Override PIVOT_ALERT_DEDUP for this call.

    Returns:
        Newly created alerts (possibly empty), or None if the project does not exist.
    """
    project = db.query(Project).filter(Project.id == project_id).first()
    if project is None:
        return None
    if dedupe is None:
        dedupe = get_settings().pivot_alert_dedup

    stats = aggregate_call_outcomes(project_call_results(db, project_id))
    drafts = evaluate_pivot_rules(stats, project.min_appointment_rate)

    created: list[PivotAlert] = []
    for draft in drafts:
        if dedupe:
            existing = (
                db.query(PivotAlert.id)
                .filter(
                    PivotAlert.project_id == project_id,
                    PivotAlert.alert_type == draft.alert_type,
                    PivotAlert.status.in_(OPEN_STATUSES),
                )
                .first()
            )
            if existing is not None:
                logger.debug(
                    "Skipping %s alert for project_id=%s: open alert exists",
                    draft.alert_type,
                    project_id,
                )
                continue
        alert = PivotAlert(
            project_id=project_id,
            alert_type=draft.alert_type,
            severity=draft.severity,
            current_metrics=draft.current_metrics,
            threshold_metrics=draft.threshold_metrics,
            rejection_analysis=draft.rejection_analysis,
            pivot_suggestions=draft.pivot_suggestions,
            recommended_action=draft.recommended_action,
            status="active",
        )
        db.add(alert)
        created.append(alert)

    if created:
        db.commit()
        for alert in created:
            db.refresh(alert)
        logger.info(
            "Pivot alerts created: project_id=%s types=%s",
            project_id,
            [a.alert_type for a in created],
        )
    return created


def run_pivot_scan(db: Session, *, dedupe: bool | None = None) -> dict:
    """Run the detector for every active project.

    Returns:
        dict with status, projects_scanned, alerts_created.
    """
    project_ids = [
        row[0]
        for row in db.query(Project.id).filter(Project.status == "active").order_by(Project.id).all()
    ]
    alerts_created = 0
    for project_id in project_ids:
        alerts_created += len(detect_pivot_alerts(db, project_id, dedupe=dedupe) or [])

    logger.info(
        "Pivot scan complete: projects_scanned=%d alerts_created=%d",
        len(project_ids),
        alerts_created,
    )
    return {
        "status": "completed",
        "projects_scanned": len(project_ids),
        "alerts_created": alerts_created,
    }


def list_active_pivot_alerts(db: Session, project_id: int) -> list[PivotAlert]:
    """Active alerts for a project, newest first."""
    return (
        db.query(PivotAlert)
        .filter(PivotAlert.project_id == project_id, PivotAlert.status == "active")
        .order_by(PivotAlert.created_at.desc(), PivotAlert.id.desc())
        .all()
    )


def update_pivot_alert_status(
    db: Session,
    alert_id: int,
    status: str,
    operator_id: str | None = None,
) -> PivotAlert | None:
    """Transition an alert's status.

    Acknowledging records operator_id and acknowledged_at. Returns None if the
    alert does not exist.

    Raises:
        InvalidStatusTransitionError: Unknown status or transition not allowed.
    """
    alert = db.query(PivotAlert).filter(PivotAlert.id == alert_id).first()
    if alert is None:
        return None
    if status not in ALLOWED_TRANSITIONS.get(alert.status, frozenset()):
        raise InvalidStatusTransitionError(
            f"Cannot change pivot alert from '{alert.status}' to '{status}'"
        )

    alert.status = status
    if status == "acknowledged":
        alert.acknowledged_by = operator_id
        alert.acknowledged_at = datetime.now(timezone.utc)
    db.commit()
    db.refresh(alert)
    return alert
