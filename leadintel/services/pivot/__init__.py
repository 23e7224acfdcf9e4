"""Pivot alert detection — campaign-level conversion thresholds."""

from leadintel.services.pivot.pivot_alert_service import (
    InvalidStatusTransitionError,
    detect_pivot_alerts,
    list_active_pivot_alerts,
    run_pivot_scan,
    update_pivot_alert_status,
)
from leadintel.services.pivot.pivot_rules import (
    CallOutcomeStats,
    aggregate_call_outcomes,
    evaluate_pivot_rules,
)

__all__ = [
    "CallOutcomeStats",
    "InvalidStatusTransitionError",
    "aggregate_call_outcomes",
    "detect_pivot_alerts",
    "evaluate_pivot_rules",
    "list_active_pivot_alerts",
    "run_pivot_scan",
    "update_pivot_alert_status",
]
