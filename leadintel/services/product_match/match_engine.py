"""Product match engine — (product target profile, company) → match score and level.

Pure function. Location matching is substring-based since locations are free text.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any, Literal

MatchLevel = Literal["excellent", "good", "fair", "low"]

MATCH_BASE_SCORE: int = 50
INDUSTRY_MATCH_POINTS: int = 20
EMPLOYEE_MATCH_POINTS: int = 15
LOCATION_MATCH_POINTS: int = 10

DEFAULT_EMPLOYEE_MIN: int = 0
DEFAULT_EMPLOYEE_MAX: int = 10000

MATCH_LEVEL_THRESHOLDS: tuple[tuple[int, MatchLevel], ...] = (
    (80, "excellent"),
    (65, "good"),
    (50, "fair"),
)

PROACTIVE_MIN_SCORE: int = 70
MAX_TALKING_POINTS: int = 3

POTENTIAL_OBJECTIONS: tuple[str, ...] = (
    "Budget constraints",
    "Timing (may already use an existing solution)",
)


@dataclass
class ProductMatch:
    """Product match scorer output."""

    score: int
    level: MatchLevel
    reasons: list[dict[str, Any]] = field(default_factory=list)
    recommended_approach: str = ""
    talking_points: list[str] = field(default_factory=list)
    potential_objections: list[str] = field(default_factory=list)


def match_level(score: int) -> MatchLevel:
    """>=80 excellent, >=65 good, >=50 fair, else low."""
    for threshold, level in MATCH_LEVEL_THRESHOLDS:
        if score >= threshold:
            return level
    return "low"


def compute_product_match(
    *,
    target_industries: Sequence[str] | None,
    target_employee_min: int | None,
    target_employee_max: int | None,
    target_locations: Sequence[str] | None,
    benefits: Sequence[str] | None,
    industry: str | None,
    employees: int | None,
    location: str | None,
) -> ProductMatch:
    """Score one company against a product's target profile."""
    score = MATCH_BASE_SCORE
    reasons: list[dict[str, Any]] = []

    if industry and target_industries and industry in target_industries:
        score += INDUSTRY_MATCH_POINTS
        reasons.append(
            {
                "category": "industry",
                "reason": f"{industry} is a target industry",
                "score": INDUSTRY_MATCH_POINTS,
            }
        )

    if employees is not None:
        low = DEFAULT_EMPLOYEE_MIN if target_employee_min is None else target_employee_min
        high = DEFAULT_EMPLOYEE_MAX if target_employee_max is None else target_employee_max
        if low <= employees <= high:
            score += EMPLOYEE_MATCH_POINTS
            reasons.append(
                {
                    "category": "company_size",
                    "reason": f"{employees} employees is within the target range",
                    "score": EMPLOYEE_MATCH_POINTS,
                }
            )

    if location and target_locations:
        if any(target and target in location for target in target_locations):
            score += LOCATION_MATCH_POINTS
            reasons.append(
                {
                    "category": "location",
                    "reason": "Located in a target area",
                    "score": LOCATION_MATCH_POINTS,
                }
            )

    return ProductMatch(
        score=score,
        level=match_level(score),
        reasons=reasons,
        recommended_approach=(
            "Proactive approach: lead with concrete outcomes"
            if score >= PROACTIVE_MIN_SCORE
            else "Cautious approach: start by uncovering needs"
        ),
        talking_points=list(benefits or [])[:MAX_TALKING_POINTS],
        potential_objections=list(POTENTIAL_OBJECTIONS),
    )


def match_company(product: Any, company: Any) -> ProductMatch:
    """Score ORM (or attribute-compatible) product and company objects."""
    return compute_product_match(
        target_industries=product.target_industries,
        target_employee_min=product.target_employee_min,
        target_employee_max=product.target_employee_max,
        target_locations=product.target_locations,
        benefits=product.benefits,
        industry=company.industry,
        employees=company.employees,
        location=company.location,
    )
