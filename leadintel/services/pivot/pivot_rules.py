"""Pivot alert rules — call-outcome aggregate → alert drafts.

Pure. Two independent rules; both may fire for the same aggregate.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

APPOINTMENT_RESULT = "アポ獲得"
REJECTION_RESULTS: frozenset[str] = frozenset({"断り", "NG"})

DEFAULT_MIN_APPOINTMENT_RATE: float = 50.0

LOW_RATE_MIN_CALLS: int = 50
HIGH_REJECTION_MIN_CALLS: int = 30
MAX_REJECTION_RATIO: float = 0.70

ALERT_LOW_RATE = "low_rate"
ALERT_HIGH_REJECTION = "high_rejection"

LOW_RATE_SUGGESTIONS: tuple[dict[str, str], ...] = (
    {
        "title": "Review targeting",
        "description": "Re-examine the attributes of the call list",
        "priority": "high",
    },
    {
        "title": "Revise the script",
        "description": "Analyze rejection reasons and rework the talk script",
        "priority": "high",
    },
    {
        "title": "Change calling hours",
        "description": "Shift calling time slots to improve connection rate",
        "priority": "medium",
    },
)

HIGH_REJECTION_SUGGESTIONS: tuple[dict[str, str], ...] = (
    {
        "title": "Structured rejection analysis",
        "description": "Categorize rejection phrases to find the main cause",
        "priority": "high",
    },
    {
        "title": "Review pricing",
        "description": "If price is the main cause, reconsider the pricing plan",
        "priority": "medium",
    },
)


@dataclass
class CallOutcomeStats:
    """Aggregate of a project's call outcomes."""

    total_calls: int = 0
    appointments: int = 0
    rejections: int = 0
    by_result: dict[str, int] = field(default_factory=dict)

    @property
    def appointment_rate(self) -> float:
        """Appointments as a percentage of calls (0 when there are no calls)."""
        return self.appointments / self.total_calls * 100 if self.total_calls else 0.0

    @property
    def rejection_ratio(self) -> float:
        return self.rejections / self.total_calls if self.total_calls else 0.0


@dataclass
class PivotAlertDraft:
    """Alert fields ready to persist."""

    alert_type: str
    severity: str
    current_metrics: dict[str, Any]
    threshold_metrics: dict[str, Any]
    rejection_analysis: dict[str, Any]
    pivot_suggestions: list[dict[str, str]]
    recommended_action: str


def aggregate_call_outcomes(results: Iterable[str]) -> CallOutcomeStats:
    """Count calls, appointments and rejections from result strings."""
    counts = Counter(results)
    return CallOutcomeStats(
        total_calls=sum(counts.values()),
        appointments=counts.get(APPOINTMENT_RESULT, 0),
        rejections=sum(n for result, n in counts.items() if result in REJECTION_RESULTS),
        by_result=dict(counts),
    )


def _rejection_analysis(stats: CallOutcomeStats) -> dict[str, Any]:
    return {
        "rejections": stats.rejections,
        "by_result": {r: n for r, n in sorted(stats.by_result.items()) if r in REJECTION_RESULTS},
    }


def evaluate_pivot_rules(
    stats: CallOutcomeStats,
    min_appointment_rate: float | None = None,
) -> list[PivotAlertDraft]:
    """Apply both pivot rules to an aggregate.

    Args:
        stats: Call-outcome aggregate for one project.
        min_appointment_rate: Project floor in percent; falsy means 50.

    Returns:
        Zero, one or two drafts (low_rate first).
    """
    floor = min_appointment_rate or DEFAULT_MIN_APPOINTMENT_RATE
    drafts: list[PivotAlertDraft] = []

    if stats.total_calls >= LOW_RATE_MIN_CALLS and stats.appointment_rate < floor:
        drafts.append(
            PivotAlertDraft(
                alert_type=ALERT_LOW_RATE,
                severity="critical",
                current_metrics={
                    "appointment_rate": round(stats.appointment_rate, 1),
                    "total_calls": stats.total_calls,
                    "appointments": stats.appointments,
                },
                threshold_metrics={"min_rate": floor},
                rejection_analysis=_rejection_analysis(stats),
                pivot_suggestions=[dict(s) for s in LOW_RATE_SUGGESTIONS],
                recommended_action=(
                    "Appointment rate is below the project's minimum. "
                    "Review targeting or the script."
                ),
            )
        )

    if stats.total_calls >= HIGH_REJECTION_MIN_CALLS and stats.rejection_ratio > MAX_REJECTION_RATIO:
        drafts.append(
            PivotAlertDraft(
                alert_type=ALERT_HIGH_REJECTION,
                severity="warning",
                current_metrics={
                    "rejection_rate": round(stats.rejection_ratio * 100, 1),
                    "rejections": stats.rejections,
                    "total_calls": stats.total_calls,
                },
                threshold_metrics={"max_rejection_rate": round(MAX_REJECTION_RATIO * 100)},
                rejection_analysis=_rejection_analysis(stats),
                pivot_suggestions=[dict(s) for s in HIGH_REJECTION_SUGGESTIONS],
                recommended_action=(
                    "Rejection rate exceeds 70%. Analyze rejection reasons."
                ),
            )
        )

    return drafts
