"""IntentProfile writer — replaces a company's profile wholesale on every analysis."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any

from sqlalchemy.orm import Session

from leadintel.models import Company, IntentProfile
from leadintel.services.intent.intent_engine import analyze_intent

logger = logging.getLogger(__name__)


def analyze_and_store_intent(
    db: Session,
    company_id: int,
    snapshot: Mapping[str, Any] | None,
) -> IntentProfile | None:
    """Analyze a scrape snapshot and upsert the company's IntentProfile.

    Every field is overwritten; nothing from a previous analysis survives.
    Returns None if the company does not exist.
    """
    company = db.query(Company).filter(Company.id == company_id).first()
    if company is None:
        return None

    analysis = analyze_intent(snapshot)
    values = {
        "intent_score": analysis.score,
        "intent_level": analysis.level,
        "buying_stage": analysis.buying_stage,
        "signals": analysis.signals,
        "summary": analysis.summary,
        "is_hiring": analysis.is_hiring,
        "job_count": analysis.job_count,
        "hiring_urgency": analysis.hiring_urgency,
        "has_recent_funding": analysis.has_recent_funding,
        "social_activity": analysis.social_activity,
        "snapshot": dict(snapshot) if snapshot else None,
        "analyzed_at": datetime.now(timezone.utc),
    }

    profile = db.query(IntentProfile).filter(IntentProfile.company_id == company_id).first()
    if profile is not None:
        for key, value in values.items():
            setattr(profile, key, value)
    else:
        profile = IntentProfile(company_id=company_id, **values)
        db.add(profile)

    db.commit()
    db.refresh(profile)
    logger.info(
        "Intent profile stored: company_id=%s score=%d level=%s stage=%s",
        company_id,
        analysis.score,
        analysis.level,
        analysis.buying_stage,
    )
    return profile


def get_intent_profile(db: Session, company_id: int) -> IntentProfile | None:
    """Return the current IntentProfile for a company, or None."""
    return db.query(IntentProfile).filter(IntentProfile.company_id == company_id).first()
