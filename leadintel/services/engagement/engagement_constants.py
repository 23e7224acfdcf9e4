"""Engagement point table and step functions.

Point values per event type, the channel each event feeds, alert-level
thresholds and the trend rule.
"""

from __future__ import annotations

from typing import Literal

Channel = Literal["call", "document", "web_activity", "social"]
AlertLevel = Literal["none", "low", "medium", "high", "critical"]
Trend = Literal["rising", "stable", "declining"]

# event_type -> (points, channel)
EVENT_POINTS: dict[str, tuple[int, Channel]] = {
    "call_connected": (10, "call"),
    "call_appointment": (30, "call"),
    "document_sent": (5, "document"),
    "document_open": (15, "document"),
    "document_page_view": (5, "document"),
    "document_link_click": (20, "document"),
    "document_download": (25, "document"),
}

CHANNEL_FIELDS: dict[str, str] = {
    "call": "call_score",
    "document": "document_score",
    "web_activity": "web_activity_score",
    "social": "social_score",
}

ALERT_THRESHOLDS: tuple[tuple[int, AlertLevel], ...] = (
    (80, "critical"),
    (60, "high"),
    (40, "medium"),
    (20, "low"),
)

# An event worth at least this many points marks the trend as rising.
RISING_MIN_POINTS: int = 15


def alert_level_for(total_score: int) -> AlertLevel:
    """Alert level for a total: >=80 critical, >=60 high, >=40 medium, >=20 low, else none."""
    for threshold, level in ALERT_THRESHOLDS:
        if total_score >= threshold:
            return level
    return "none"


def trend_for(points: int) -> Trend:
    """Trend after an update reflects only the event just applied."""
    return "rising" if points >= RISING_MIN_POINTS else "stable"
