"""Company schemas for request/response validation."""

from __future__ import annotations

from datetime import datetime
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class EnrichmentData(BaseModel):
    """Externally sourced company data. Amounts may be ints or free text ('1,200,000,000円')."""

    revenue: Optional[Union[int, str]] = None
    capital: Optional[Union[int, str]] = None
    listing_status: Optional[str] = None
    grade: Optional[str] = Field(None, max_length=8)
    website: Optional[str] = None
    email: Optional[str] = None
    ceo: Optional[str] = None
    founded: Optional[str] = None
    summary: Optional[str] = None


class CompanyCreate(BaseModel):
    """Schema for importing a company. Fit scoring runs on creation."""

    client_id: int
    project_id: Optional[int] = None
    name: str = Field(..., min_length=1, max_length=255)
    industry: Optional[str] = Field(None, max_length=255)
    employees: Optional[int] = Field(None, ge=0)
    location: Optional[str] = Field(None, max_length=255)
    phone: Optional[str] = Field(None, max_length=64)
    website: Optional[str] = Field(None, max_length=2048)
    email: Optional[str] = Field(None, max_length=255)
    notes: Optional[str] = None
    enrichment: Optional[EnrichmentData] = None


class FitScoreRead(BaseModel):
    """Fit scorer output for one company."""

    rank: Optional[str] = None
    score: Optional[int] = None
    reasons: list[str] = Field(default_factory=list)
    scored_at: Optional[datetime] = None


class CompanyRead(BaseModel):
    """Schema for reading a company (response)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    client_id: int
    project_id: Optional[int] = None
    name: str
    industry: Optional[str] = None
    employees: Optional[int] = None
    location: Optional[str] = None
    phone: Optional[str] = None
    website: Optional[str] = None
    email: Optional[str] = None
    enrichment: Optional[dict] = None
    rank: Optional[str] = None
    score: Optional[int] = None
    score_reasons: Optional[list[str]] = None
    scored_at: Optional[datetime] = None
    created_at: datetime
