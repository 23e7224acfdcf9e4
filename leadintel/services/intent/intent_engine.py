"""Intent analysis engine — scrape snapshot → intent score, level, buying stage.

Pure function over a (possibly partial) snapshot:

    {
        "hiring": {"is_hiring": bool, "job_count": int, "positions": [...],
                   "last_posted": "YYYY-MM-DD", "source": str},
        "news": {"recent_news": [{"title", "date", "source", "url", "type"}],
                 "funding_info": {"amount", "date", "round"}},
        "social": {...},
    }

Absent categories contribute nothing. Social activity is carried through to
the profile but not scored.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Literal

from leadintel.scoring_rules.loader import get_funding_amount_pattern, get_news_keywords

IntentLevel = Literal["hot", "warm", "cold"]
BuyingStage = Literal["awareness", "consideration", "decision", "unknown"]
Urgency = Literal["high", "medium", "low"]
NewsCategory = Literal["funding", "expansion", "product", "partnership", "other"]

INTENT_BASE_SCORE: int = 30
INTENT_MAX_SCORE: int = 100

# Job-posting count → urgency (first match wins)
HIRING_URGENCY_BANDS: tuple[tuple[int, Urgency], ...] = ((10, "high"), (5, "medium"), (1, "low"))
HIRING_POINTS: dict[str, int] = {"high": 25, "medium": 15, "low": 8}

MAX_NEWS_ITEMS: int = 3
NEWS_POINTS: dict[str, int] = {
    "funding": 20,
    "expansion": 15,
    "product": 12,
    "partnership": 10,
    "other": 10,
}
NEWS_STRENGTH: dict[str, str] = {
    "funding": "high",
    "expansion": "high",
    "product": "medium",
    "partnership": "medium",
    "other": "medium",
}
FUNDING_AMOUNT_BONUS: int = 15

HOT_THRESHOLD: int = 70
WARM_THRESHOLD: int = 45
AWARENESS_MIN_SIGNALS: int = 2

_LEVEL_WORDING: dict[str, str] = {
    "hot": "Strong buying intent.",
    "warm": "Moderate interest.",
    "cold": "Needs follow-up.",
}
NO_INTENT_SUMMARY = "No intent data found. Continued monitoring recommended."


@dataclass
class IntentAnalysis:
    """Intent analyzer output."""

    signals: list[dict[str, Any]]
    score: int
    level: IntentLevel
    buying_stage: BuyingStage
    summary: str
    is_hiring: bool = False
    job_count: int = 0
    hiring_urgency: Urgency | None = None
    has_recent_funding: bool = False
    funding_amount: str | None = None
    social_activity: dict[str, Any] | None = field(default=None)


def hiring_urgency(job_count: int) -> Urgency | None:
    """Urgency tier from job-posting count: >=10 high, >=5 medium, >=1 low."""
    for threshold, urgency in HIRING_URGENCY_BANDS:
        if job_count >= threshold:
            return urgency
    return None


def intent_level(score: int) -> IntentLevel:
    """>=70 hot, >=45 warm, else cold."""
    if score >= HOT_THRESHOLD:
        return "hot"
    if score >= WARM_THRESHOLD:
        return "warm"
    return "cold"


def classify_news(item: Mapping[str, Any]) -> NewsCategory:
    """Classify a news item. A valid explicit ``type`` wins over keyword matching."""
    explicit = item.get("type")
    if isinstance(explicit, str) and explicit in NEWS_POINTS:
        return explicit
    title = str(item.get("title") or "").lower()
    for category, keywords in get_news_keywords():
        if any(keyword.lower() in title for keyword in keywords):
            return category
    return "other"


def most_recent_news(items: list[Mapping[str, Any]], limit: int = MAX_NEWS_ITEMS) -> list[Mapping[str, Any]]:
    """Newest first by ISO date string; undated items after dated ones, input order kept for ties."""
    ordered = sorted(items, key=lambda n: str(n.get("date") or ""), reverse=True)
    return ordered[:limit]


def detect_funding_amount(title: str) -> str | None:
    """Return the first yen amount (e.g. '12億円', '5000万円') found in a title."""
    match = get_funding_amount_pattern().search(title or "")
    return match.group(0).replace(" ", "") if match else None


def _hiring_signal(hiring: Mapping[str, Any], job_count: int, urgency: Urgency) -> dict[str, Any]:
    positions = [p for p in (hiring.get("positions") or []) if p]
    return {
        "type": "hiring",
        "title": f"Hiring ({job_count} open positions)",
        "description": (
            f"Open roles: {', '.join(positions[:3])}"
            if positions
            else "Actively recruiting"
        ),
        "date": hiring.get("last_posted"),
        "strength": urgency,
        "source": hiring.get("source") or "job_board",
    }


def _news_signal(item: Mapping[str, Any], category: NewsCategory) -> dict[str, Any]:
    source = item.get("source")
    signal_type = category if category in ("funding", "expansion") else "news"
    return {
        "type": signal_type,
        "title": str(item.get("title") or "")[:100],
        "description": f"Reported by {source}" if source else "News item",
        "date": item.get("date"),
        "strength": NEWS_STRENGTH[category],
        "source": source or "news",
    }


def analyze_intent(snapshot: Mapping[str, Any] | None) -> IntentAnalysis:
    """Compute intent from a scrape snapshot.

    Args:
        snapshot: Scrape bundle with optional ``hiring``, ``news`` and ``social``.

    Returns:
        IntentAnalysis. Same snapshot always yields the same result.
    """
    snapshot = snapshot or {}
    hiring = snapshot.get("hiring") or {}
    news = snapshot.get("news") or {}
    social = snapshot.get("social") or None

    score = INTENT_BASE_SCORE
    signals: list[dict[str, Any]] = []

    job_count = int(hiring.get("job_count") or 0)
    is_hiring = bool(hiring.get("is_hiring")) or job_count > 0
    urgency: Urgency | None = None
    if is_hiring:
        urgency = hiring_urgency(job_count) or "low"
        score += HIRING_POINTS[urgency]
        signals.append(_hiring_signal(hiring, job_count, urgency))

    recent_news = list(news.get("recent_news") or [])
    funding_info = news.get("funding_info") or None
    funding_news = False
    funding_amount = str(funding_info["amount"]) if funding_info and funding_info.get("amount") else None

    for item in most_recent_news(recent_news):
        category = classify_news(item)
        score += NEWS_POINTS[category]
        signals.append(_news_signal(item, category))
        if category == "funding":
            funding_news = True
            if funding_amount is None:
                funding_amount = detect_funding_amount(str(item.get("title") or ""))

    if funding_amount:
        score += FUNDING_AMOUNT_BONUS

    score = min(score, INTENT_MAX_SCORE)
    level = intent_level(score)

    has_recent_funding = funding_news or bool(funding_info)
    if has_recent_funding or urgency == "high":
        buying_stage: BuyingStage = "consideration"
    elif len(signals) >= AWARENESS_MIN_SIGNALS:
        buying_stage = "awareness"
    else:
        buying_stage = "unknown"

    parts: list[str] = []
    if is_hiring:
        parts.append(f"Hiring ({job_count} openings)")
    if has_recent_funding:
        parts.append(f"Raised funding ({funding_amount})" if funding_amount else "Raised funding")
    if recent_news:
        parts.append(f"{len(recent_news)} recent news items")
    summary = f"{', '.join(parts)}. {_LEVEL_WORDING[level]}" if parts else NO_INTENT_SUMMARY

    return IntentAnalysis(
        signals=signals,
        score=score,
        level=level,
        buying_stage=buying_stage,
        summary=summary,
        is_hiring=is_hiring,
        job_count=job_count,
        hiring_urgency=urgency,
        has_recent_funding=has_recent_funding,
        funding_amount=funding_amount,
        social_activity=dict(social) if social else None,
    )
