"""Scrape snapshot and intent profile schemas."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class HiringSignals(BaseModel):
    is_hiring: bool = False
    job_count: int = Field(0, ge=0)
    positions: list[str] = Field(default_factory=list)
    last_posted: Optional[str] = None
    source: Optional[str] = None


class NewsItem(BaseModel):
    title: str
    date: Optional[str] = None  # ISO 8601 date
    source: Optional[str] = None
    url: Optional[str] = None
    type: Optional[str] = None  # funding | expansion | product | partnership | other


class FundingInfo(BaseModel):
    amount: Optional[str] = None
    date: Optional[str] = None
    round: Optional[str] = None


class NewsSignals(BaseModel):
    recent_news: list[NewsItem] = Field(default_factory=list)
    funding_info: Optional[FundingInfo] = None


class ScrapeSnapshot(BaseModel):
    """Scrape bundle from the enrichment collaborator. Every section is optional."""

    hiring: Optional[HiringSignals] = None
    news: Optional[NewsSignals] = None
    social: Optional[dict[str, Any]] = None


class IntentSignal(BaseModel):
    type: str
    title: str
    description: str
    date: Optional[str] = None
    strength: str
    source: str


class IntentProfileRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    company_id: int
    intent_score: int
    intent_level: str
    buying_stage: str
    signals: list[IntentSignal] = Field(default_factory=list)
    summary: Optional[str] = None
    is_hiring: bool = False
    job_count: int = 0
    hiring_urgency: Optional[str] = None
    has_recent_funding: bool = False
    social_activity: Optional[dict[str, Any]] = None
    analyzed_at: datetime
