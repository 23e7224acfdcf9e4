"""Fit scoring engine — static company attributes → score, rank, reasons.

Pure function. Reasons are appended in evaluation order: employees, industry,
location, then enrichment (revenue, capital, listing, grade, website, email).
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from leadintel.scoring_rules.loader import get_high_potential_industries, get_major_cities
from leadintel.services.fit.fit_constants import (
    CAPITAL_BANDS,
    EMAIL_BONUS,
    EMPLOYEE_BANDS,
    FIT_BASE_SCORE,
    FIT_MAX_SCORE,
    GRADE_BONUS,
    INDUSTRY_BONUS,
    LISTED_BONUS,
    PRIMARY_CITY_BONUS,
    REVENUE_BANDS,
    SECONDARY_CITY_BONUS,
    UNLISTED_VALUE,
    WEBSITE_BONUS,
    FitRank,
    fit_rank,
)

_NON_DIGITS = re.compile(r"[^0-9]")


@dataclass
class FitScoreResult:
    """Fit scorer output."""

    score: int
    rank: FitRank
    reasons: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"score": self.score, "rank": self.rank, "reasons": list(self.reasons)}


def parse_amount(value: Any) -> int | None:
    """Parse a yen amount that may be an int or free text like '1,200,000,000円'.

    Strings are reduced to their digits. Returns None when nothing numeric remains.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return int(value)
    digits = _NON_DIGITS.sub("", str(value))
    return int(digits) if digits else None


def _first_band(value: int, bands: tuple[tuple[int, int, str], ...]) -> tuple[int, str] | None:
    for threshold, points, reason in bands:
        if value >= threshold:
            return points, reason
    return None


def compute_fit_score(
    *,
    industry: str | None = None,
    employees: int | None = None,
    location: str | None = None,
    enrichment: Mapping[str, Any] | None = None,
) -> FitScoreResult:
    """Score a company on static attributes.

    Args:
        industry: Industry label; exact membership in the configured set.
        employees: Employee count.
        location: Free-text location; matched by substring.
        enrichment: Optional externally sourced fields (revenue, capital,
            listing_status, grade, website, email).

    Returns:
        FitScoreResult with score in [50, 100], rank and ordered reasons.
    """
    score = FIT_BASE_SCORE
    reasons: list[str] = []

    if employees:
        band = _first_band(employees, EMPLOYEE_BANDS)
        if band:
            score += band[0]
            reasons.append(band[1])

    if industry and industry in get_high_potential_industries():
        score += INDUSTRY_BONUS
        reasons.append(f"{industry} industry has a strong adoption track record")

    if location:
        primary, secondary = get_major_cities()
        if any(city in location for city in primary):
            score += PRIMARY_CITY_BONUS
            reasons.append("Located in the capital area; easy to visit")
        elif any(city in location for city in secondary):
            score += SECONDARY_CITY_BONUS
            reasons.append("Located in a major city; visits possible")

    if enrichment:
        revenue = parse_amount(enrichment.get("revenue"))
        if revenue is not None:
            band = _first_band(revenue, REVENUE_BANDS)
            if band:
                score += band[0]
                reasons.append(band[1])

        capital = parse_amount(enrichment.get("capital"))
        if capital is not None:
            band = _first_band(capital, CAPITAL_BANDS)
            if band:
                score += band[0]
                reasons.append(band[1])

        listing_status = enrichment.get("listing_status")
        if listing_status and listing_status != UNLISTED_VALUE:
            score += LISTED_BONUS
            reasons.append(f"Listed company ({listing_status}); high credibility")

        grade = enrichment.get("grade")
        if grade in GRADE_BONUS:
            score += GRADE_BONUS[grade]
            reasons.append(f"Corporate grade {grade}")

        if enrichment.get("website"):
            score += WEBSITE_BONUS
            reasons.append("Has a website (research possible)")

        if enrichment.get("email"):
            score += EMAIL_BONUS
            reasons.append("Contact email known")

    score = min(score, FIT_MAX_SCORE)
    return FitScoreResult(score=score, rank=fit_rank(score), reasons=reasons)
