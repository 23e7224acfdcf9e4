"""Intent analysis — external signals → hot/warm/cold and buying stage."""

from leadintel.services.intent.intent_engine import (
    IntentAnalysis,
    analyze_intent,
    classify_news,
    hiring_urgency,
    intent_level,
)
from leadintel.services.intent.intent_writer import analyze_and_store_intent, get_intent_profile

__all__ = [
    "IntentAnalysis",
    "analyze_and_store_intent",
    "analyze_intent",
    "classify_news",
    "get_intent_profile",
    "hiring_urgency",
    "intent_level",
]
