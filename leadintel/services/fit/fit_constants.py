"""Fit scoring constants and the score → rank step function.

No magic numbers inside the fit engine; all increments and thresholds live
here. Industry and city sets are configurable and come from scoring_rules.
"""

from __future__ import annotations

from typing import Literal

FitRank = Literal["S", "A", "B", "C"]

FIT_BASE_SCORE: int = 50
FIT_MAX_SCORE: int = 100

# ── Employee bands (exclusive, first match wins) ────────────────────────
EMPLOYEE_BANDS: tuple[tuple[int, int, str], ...] = (
    (500, 25, "Large enterprise (500+ employees) with sizeable budgets"),
    (100, 15, "Mid-size company with room to grow (100+ employees)"),
    (50, 10, "Small company of meaningful size (50+ employees)"),
)

INDUSTRY_BONUS: int = 15
PRIMARY_CITY_BONUS: int = 5
SECONDARY_CITY_BONUS: int = 3

# ── Enrichment bands (yen) ──────────────────────────────────────────────
REVENUE_BANDS: tuple[tuple[int, int, str], ...] = (
    (10_000_000_000, 15, "Revenue of 10B yen or more"),
    (1_000_000_000, 10, "Revenue of 1B yen or more"),
    (100_000_000, 5, "Revenue of 100M yen or more"),
)

CAPITAL_BANDS: tuple[tuple[int, int, str], ...] = (
    (100_000_000, 10, "Capital of 100M yen or more (stable financial base)"),
    (10_000_000, 5, "Capital of 10M yen or more"),
)

LISTED_BONUS: int = 15
UNLISTED_VALUE: str = "未上場"

GRADE_BONUS: dict[str, int] = {"A": 10, "B": 7, "C": 3}

WEBSITE_BONUS: int = 3
EMAIL_BONUS: int = 2

# ── Rank thresholds ─────────────────────────────────────────────────────
RANK_THRESHOLDS: tuple[tuple[int, FitRank], ...] = (
    (80, "S"),
    (65, "A"),
    (50, "B"),
)


def fit_rank(score: int) -> FitRank:
    """Map a fit score to its tier: >=80 S, >=65 A, >=50 B, else C."""
    for threshold, rank in RANK_THRESHOLDS:
        if score >= threshold:
            return rank
    return "C"
