"""Engagement accumulation — event-driven per (company, project) score."""

from leadintel.services.engagement.engagement_accumulator import (
    EngagementReferenceError,
    apply_event,
    get_engagement_score,
    list_above_threshold,
    list_engagement_events,
)
from leadintel.services.engagement.engagement_constants import (
    EVENT_POINTS,
    alert_level_for,
    trend_for,
)

__all__ = [
    "EVENT_POINTS",
    "EngagementReferenceError",
    "alert_level_for",
    "apply_event",
    "get_engagement_score",
    "list_above_threshold",
    "list_engagement_events",
    "trend_for",
]
