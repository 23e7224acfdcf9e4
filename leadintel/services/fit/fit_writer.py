"""Fit score writer — runs the fit engine and stores rank/score/reasons on Company."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from sqlalchemy.orm import Session

from leadintel.models import Company
from leadintel.services.fit.fit_engine import FitScoreResult, compute_fit_score

logger = logging.getLogger(__name__)


def score_company(company: Company) -> FitScoreResult:
    """Run the fit engine on a Company row without persisting."""
    return compute_fit_score(
        industry=company.industry,
        employees=company.employees,
        location=company.location,
        enrichment=company.enrichment,
    )


def apply_fit_score(company: Company) -> FitScoreResult:
    """Score a Company and set its fit fields. Caller commits."""
    result = score_company(company)
    company.rank = result.rank
    company.score = result.score
    company.score_reasons = list(result.reasons)
    company.scored_at = datetime.now(timezone.utc)
    return result


def score_and_store_company(db: Session, company_id: int) -> Company | None:
    """Re-score one company and persist. Returns None if the company does not exist."""
    company = db.query(Company).filter(Company.id == company_id).first()
    if company is None:
        return None
    apply_fit_score(company)
    db.commit()
    db.refresh(company)
    return company


def rescore_companies(db: Session, client_id: int | None = None) -> dict:
    """Re-score every company (optionally for one client).

    Returns:
        dict with status, companies_scored, rank_counts.
    """
    query = db.query(Company)
    if client_id is not None:
        query = query.filter(Company.client_id == client_id)
    companies = query.order_by(Company.id).all()

    rank_counts = {"S": 0, "A": 0, "B": 0, "C": 0}
    for company in companies:
        result = apply_fit_score(company)
        rank_counts[result.rank] += 1
    db.commit()

    logger.info(
        "Fit scoring complete: companies_scored=%d rank_counts=%s",
        len(companies),
        rank_counts,
    )
    return {
        "status": "completed",
        "companies_scored": len(companies),
        "rank_counts": rank_counts,
    }
