"""Engagement event, engagement score and call log schemas."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class EngagementEventCreate(BaseModel):
    """Document/call engagement event. project_id defaults to the company's project."""

    company_id: int
    project_id: Optional[int] = None
    event_type: str = Field(..., min_length=1, max_length=64)
    occurred_at: Optional[datetime] = None


class EngagementScoreRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    company_id: int
    project_id: int
    call_score: int
    document_score: int
    web_activity_score: int
    social_score: int
    total_score: int
    score_trend: str
    alert_level: str
    last_activity_at: Optional[datetime] = None
    calculated_at: datetime


class EngagementEventResponse(BaseModel):
    """applied=False means the event type is unknown and nothing changed."""

    applied: bool
    engagement: Optional[EngagementScoreRead] = None


class CallLogCreate(BaseModel):
    company_id: int
    project_id: Optional[int] = None
    result: str = Field(..., min_length=1, max_length=64)
    duration: int = Field(0, ge=0)
    notes: Optional[str] = None
    called_at: Optional[datetime] = None


class CallLogRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    company_id: int
    project_id: Optional[int] = None
    result: str
    duration: int
    notes: Optional[str] = None
    called_at: datetime


class CallRecordResponse(BaseModel):
    call: CallLogRead
    engagement: Optional[EngagementScoreRead] = None
