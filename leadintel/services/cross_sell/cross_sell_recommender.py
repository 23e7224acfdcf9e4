"""Cross-sell recommender — re-target rejected leads at other active campaigns.

For each of the first N rejected companies of a source project (distinct,
ordered by first rejection) and each other active project, score the pair and
keep it when the score reaches the inclusion bar. With dedup enabled (default,
CROSS_SELL_DEDUP) a triple is skipped while a non-dismissed recommendation for
the same (source, target, company) already exists. Recommendations are
persisted in one batch, in generation order.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone

from sqlalchemy.orm import Session

from leadintel.config import get_settings
from leadintel.models import CallLog, Company, CrossSellRecommendation, Project

logger = logging.getLogger(__name__)

REJECTION_RESULTS: tuple[str, ...] = ("断り", "NG")
REJECTION_CATEGORY = "断り"

CROSS_SELL_BASE_SCORE: int = 40
INDUSTRY_MATCH_POINTS: int = 25
SIZE_MATCH_POINTS: int = 10
SIZE_MIN_EMPLOYEES: int = 50
REGION_MATCH_POINTS: int = 10
REGION_CITIES: tuple[str, ...] = ("東京", "大阪")
REACHABLE_POINTS: int = 5
INCLUSION_MIN_SCORE: int = 60

DEFAULT_REASON = "Fits the target profile of another product"

CROSS_SELL_TRANSITIONS: dict[str, frozenset[str]] = {
    "suggested": frozenset({"accepted", "contacted", "converted", "dismissed"}),
    "accepted": frozenset({"contacted", "converted", "dismissed"}),
    "contacted": frozenset({"converted", "dismissed"}),
    "converted": frozenset(),
    "dismissed": frozenset(),
}


class CrossSellStatusError(ValueError):
    """Raised when a recommendation status change is not allowed."""

    pass


@dataclass
class RejectedLead:
    company: Company
    first_rejected_at: datetime
    detail: str | None


def score_cross_sell(
    *,
    industry: str | None,
    employees: int | None,
    location: str | None,
    target_description: str | None,
) -> tuple[int, list[str]]:
    """Score a rejected company against another project's description.

    Returns (score, reasons). Reasons fall back to a default when none apply.
    """
    score = CROSS_SELL_BASE_SCORE
    reasons: list[str] = []

    if industry and target_description and industry in target_description:
        score += INDUSTRY_MATCH_POINTS
        reasons.append("Industry match")
    if (employees or 0) >= SIZE_MIN_EMPLOYEES:
        score += SIZE_MATCH_POINTS
        reasons.append("Company size fits")
    if location and any(city in location for city in REGION_CITIES):
        score += REGION_MATCH_POINTS
        reasons.append("Region match")
    score += REACHABLE_POINTS

    return score, reasons or [DEFAULT_REASON]


def rejected_leads(db: Session, source_project_id: int, limit: int | None = None) -> list[RejectedLead]:
    """Distinct companies rejected in a project, in order of first rejection."""
    if limit is None:
        limit = get_settings().cross_sell_max_rejected
    rows = (
        db.query(CallLog, Company)
        .join(Company, Company.id == CallLog.company_id)
        .filter(
            CallLog.project_id == source_project_id,
            CallLog.result.in_(REJECTION_RESULTS),
        )
        .order_by(CallLog.called_at.asc(), CallLog.id.asc())
        .all()
    )
    seen: set[int] = set()
    leads: list[RejectedLead] = []
    for call, company in rows:
        if company.id in seen:
            continue
        seen.add(company.id)
        leads.append(RejectedLead(company=company, first_rejected_at=call.called_at, detail=call.notes))
        if len(leads) >= limit:
            break
    return leads


def _existing_triples(db: Session, source_project_id: int) -> set[tuple[int, int]]:
    """(target_project_id, company_id) pairs already recommended from a source, dismissed excluded."""
    rows = (
        db.query(CrossSellRecommendation.target_project_id, CrossSellRecommendation.company_id)
        .filter(
            CrossSellRecommendation.source_project_id == source_project_id,
            CrossSellRecommendation.status != "dismissed",
        )
        .all()
    )
    return {(row[0], row[1]) for row in rows}


def generate_cross_sell_recommendations(
    db: Session,
    source_project_id: int,
    *,
    dedupe: bool | None = None,
) -> list[CrossSellRecommendation] | None:
    """Generate and persist recommendations from a source project's rejected leads.

    Args:
        db: Database session.
        source_project_id: Project whose rejected leads are re-targeted.
        dedupe: Override CROSS_SELL_DEDUP for this call.

    Returns the created recommendations (possibly empty), or None if the
    source project does not exist.
    """
    source = db.query(Project).filter(Project.id == source_project_id).first()
    if source is None:
        return None

    leads = rejected_leads(db, source_project_id)
    if not leads:
        return []
    targets = (
        db.query(Project)
        .filter(Project.id != source_project_id, Project.status == "active")
        .order_by(Project.id)
        .all()
    )
    if not targets:
        return []
    if dedupe is None:
        dedupe = get_settings().cross_sell_dedup
    existing = _existing_triples(db, source_project_id) if dedupe else set()

    recommendations: list[CrossSellRecommendation] = []
    for lead in leads:
        for target in targets:
            if (target.id, lead.company.id) in existing:
                continue
            score, reasons = score_cross_sell(
                industry=lead.company.industry,
                employees=lead.company.employees,
                location=lead.company.location,
                target_description=target.description,
            )
            if score < INCLUSION_MIN_SCORE:
                continue
            recommendations.append(
                CrossSellRecommendation(
                    source_project_id=source_project_id,
                    target_project_id=target.id,
                    company_id=lead.company.id,
                    match_score=score,
                    match_reasons=reasons,
                    original_rejection_category=REJECTION_CATEGORY,
                    original_rejection_detail=lead.detail,
                    status="suggested",
                )
            )

    if recommendations:
        db.add_all(recommendations)
        db.commit()
        for rec in recommendations:
            db.refresh(rec)

    logger.info(
        "Cross-sell generated: source_project_id=%s rejected=%d targets=%d recommendations=%d",
        source_project_id,
        len(leads),
        len(targets),
        len(recommendations),
    )
    return recommendations


def run_cross_sell(db: Session, *, dedupe: bool | None = None) -> dict:
    """Generate recommendations from every active project.

    Returns:
        dict with status, projects_scanned, recommendations_created.
    """
    project_ids = [
        row[0]
        for row in db.query(Project.id).filter(Project.status == "active").order_by(Project.id).all()
    ]
    created = 0
    for project_id in project_ids:
        created += len(generate_cross_sell_recommendations(db, project_id, dedupe=dedupe) or [])
    return {
        "status": "completed",
        "projects_scanned": len(project_ids),
        "recommendations_created": created,
    }


def list_cross_sell_for_target(db: Session, target_project_id: int) -> list[CrossSellRecommendation]:
    """Suggested recommendations targeting a project, best match first."""
    return (
        db.query(CrossSellRecommendation)
        .filter(
            CrossSellRecommendation.target_project_id == target_project_id,
            CrossSellRecommendation.status == "suggested",
        )
        .order_by(CrossSellRecommendation.match_score.desc(), CrossSellRecommendation.id.asc())
        .all()
    )


def update_cross_sell_status(
    db: Session,
    recommendation_id: int,
    status: str,
) -> CrossSellRecommendation | None:
    """Move a recommendation forward and stamp actioned_at.

    Returns None if the recommendation does not exist.

    Raises:
        CrossSellStatusError: Unknown status or transition not allowed.
    """
    rec = (
        db.query(CrossSellRecommendation)
        .filter(CrossSellRecommendation.id == recommendation_id)
        .first()
    )
    if rec is None:
        return None
    if status not in CROSS_SELL_TRANSITIONS.get(rec.status, frozenset()):
        raise CrossSellStatusError(
            f"Cannot change recommendation from '{rec.status}' to '{status}'"
        )
    rec.status = status
    rec.actioned_at = datetime.now(timezone.utc)
    db.commit()
    db.refresh(rec)
    return rec
