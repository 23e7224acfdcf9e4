"""Internal job endpoints for cron/scripts.

These endpoints are secured with a static token (X-Internal-Token header).
They are meant for automated triggers only.
"""

from __future__ import annotations

import logging
import secrets

from fastapi import APIRouter, Depends, Header, HTTPException, Query
from sqlalchemy.orm import Session

from leadintel.config import get_settings
from leadintel.db.session import get_db

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/internal", include_in_schema=False)


# ── Token dependency ────────────────────────────────────────────────


def _require_internal_token(x_internal_token: str = Header(...)) -> None:
    """Validate the internal job token from the request header.

    Uses constant-time comparison. Raises 403 if the token is empty or does
    not match the configured value.
    """
    expected = get_settings().internal_job_token
    if not expected or not secrets.compare_digest(x_internal_token, expected):
        logger.warning("Internal endpoint auth failed: invalid or missing token")
        raise HTTPException(status_code=403, detail="Invalid internal token")


# ── Endpoints ───────────────────────────────────────────────────────


@router.post("/run_pivot_scan")
def run_pivot_scan_job(
    db: Session = Depends(get_db),
    _token: None = Depends(_require_internal_token),
):
    """Run the pivot alert detector across all active projects."""
    from leadintel.services.pivot.pivot_alert_service import run_pivot_scan

    try:
        return run_pivot_scan(db)
    except Exception as exc:
        logger.exception("Internal pivot scan failed")
        return {"status": "failed", "error": str(exc)}


@router.post("/run_cross_sell")
def run_cross_sell_job(
    db: Session = Depends(get_db),
    _token: None = Depends(_require_internal_token),
):
    """Generate cross-sell recommendations from every active project."""
    from leadintel.services.cross_sell.cross_sell_recommender import run_cross_sell

    try:
        return run_cross_sell(db)
    except Exception as exc:
        logger.exception("Internal cross-sell generation failed")
        return {"status": "failed", "error": str(exc)}


@router.post("/run_fit_scoring")
def run_fit_scoring_job(
    db: Session = Depends(get_db),
    _token: None = Depends(_require_internal_token),
    client_id: int | None = Query(None, description="Limit re-scoring to one client"),
):
    """Re-run the fit scorer over all companies (or one client's)."""
    from leadintel.services.fit.fit_writer import rescore_companies

    try:
        return rescore_companies(db, client_id=client_id)
    except Exception as exc:
        logger.exception("Internal fit scoring failed")
        return {"status": "failed", "error": str(exc)}
