"""Combined priority — intent + product match → combined score, priority tier, actions.

Pure functions. The priority cascade is evaluated top-down and the first
matching tier wins; qualitative flags (hot, excellent) can lift a company
above what its combined number alone would earn.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any, Literal

PriorityRank = Literal["S", "A", "B", "C"]

INTENT_WEIGHT: float = 0.5
MATCH_WEIGHT: float = 0.5

PRIORITY_S_MIN: int = 80
PRIORITY_A_MIN: int = 60
PRIORITY_B_MIN: int = 40

UNLISTED_VALUE = "未上場"

ACTION_IMMEDIATE = "Reach out immediately: strong buying signals"
ACTION_CLOSING = "Decision stage: focus on closing"
ACTION_PROPOSAL = "Consideration stage: send a detailed proposal"
ACTION_PRODUCT_FIT = "Excellent product fit: lead with core benefits"
ACTION_LISTED = "Listed company: prepare a formal proposal"

HIGHLIGHT_FIELDS: tuple[str, ...] = (
    "revenue",
    "capital",
    "ceo",
    "founded",
    "listing_status",
    "grade",
    "summary",
)


def round_half_up(value: float) -> int:
    """Round .5 away from zero for non-negative scores (round() would round to even)."""
    return int(math.floor(value + 0.5))


def combined_score(intent_score: int, match_score: int | None) -> int:
    """Blend intent and match 50/50 when a product is in scope, else intent alone."""
    if match_score is None:
        return intent_score
    return round_half_up(INTENT_WEIGHT * intent_score + MATCH_WEIGHT * match_score)


def priority_rank(
    combined: int,
    intent_level: str,
    match_level: str | None,
) -> PriorityRank:
    """Ordered cascade; first match wins.

    S: combined >= 80, or hot AND excellent
    A: combined >= 60, or hot, or excellent
    B: combined >= 40, or warm, or good
    C: otherwise
    """
    if combined >= PRIORITY_S_MIN or (intent_level == "hot" and match_level == "excellent"):
        return "S"
    if combined >= PRIORITY_A_MIN or intent_level == "hot" or match_level == "excellent":
        return "A"
    if combined >= PRIORITY_B_MIN or intent_level == "warm" or match_level == "good":
        return "B"
    return "C"


def is_listed(enrichment: Mapping[str, Any] | None) -> bool:
    status = (enrichment or {}).get("listing_status")
    return bool(status) and status != UNLISTED_VALUE


def enrichment_highlights(enrichment: Mapping[str, Any] | None) -> dict[str, Any] | None:
    """Non-empty enrichment fields worth showing next to a ranked lead."""
    if not enrichment:
        return None
    return {key: enrichment[key] for key in HIGHLIGHT_FIELDS if enrichment.get(key)}


def recommended_actions(
    intent_level: str,
    buying_stage: str,
    match_level: str | None,
    enrichment: Mapping[str, Any] | None,
) -> list[str]:
    actions: list[str] = []
    if intent_level == "hot":
        actions.append(ACTION_IMMEDIATE)
    if buying_stage == "decision":
        actions.append(ACTION_CLOSING)
    elif buying_stage == "consideration":
        actions.append(ACTION_PROPOSAL)
    if match_level == "excellent":
        actions.append(ACTION_PRODUCT_FIT)
    if is_listed(enrichment):
        actions.append(ACTION_LISTED)
    return actions
