"""SQLAlchemy models."""

from leadintel.models.call_log import CallLog
from leadintel.models.client import Client
from leadintel.models.company import Company
from leadintel.models.cross_sell_recommendation import CrossSellRecommendation
from leadintel.models.engagement_event import EngagementEvent
from leadintel.models.engagement_score import EngagementScore
from leadintel.models.intent_profile import IntentProfile
from leadintel.models.pivot_alert import PivotAlert
from leadintel.models.product import Product
from leadintel.models.project import Project

__all__ = [
    "CallLog",
    "Client",
    "Company",
    "CrossSellRecommendation",
    "EngagementEvent",
    "EngagementScore",
    "IntentProfile",
    "PivotAlert",
    "Product",
    "Project",
]
