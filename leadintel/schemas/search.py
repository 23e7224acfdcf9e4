"""Combined lead search schemas for POST /api/companies/search."""

from __future__ import annotations

from typing import Any, Literal, Optional

from pydantic import BaseModel, Field

from leadintel.schemas.company import CompanyRead


class LeadSearchRequest(BaseModel):
    """Filter/sort criteria. Omitted fields do not filter."""

    client_id: Optional[int] = None
    product_id: Optional[int] = None
    intent_levels: Optional[list[Literal["hot", "warm", "cold"]]] = None
    buying_stages: Optional[list[Literal["awareness", "consideration", "decision", "unknown"]]] = None
    min_intent_score: Optional[int] = Field(None, ge=0, le=100)
    min_match_score: Optional[int] = Field(None, ge=0, le=100)
    ranks: Optional[list[Literal["S", "A", "B", "C"]]] = None
    industries: Optional[list[str]] = None
    min_employees: Optional[int] = Field(None, ge=0)
    max_employees: Optional[int] = Field(None, ge=0)
    locations: Optional[list[str]] = None
    has_website: Optional[bool] = None
    sort_by: Literal["intent_score", "match_score", "combined_score", "employees", "created_at"] = (
        "intent_score"
    )
    sort_order: Literal["asc", "desc"] = "desc"
    offset: int = Field(0, ge=0)
    limit: Optional[int] = Field(None, ge=1, le=1000)


class RankedLeadRead(BaseModel):
    company: CompanyRead
    intent_score: int
    intent_level: str
    buying_stage: str
    product_match_score: Optional[int] = None
    product_match_level: Optional[str] = None
    combined_score: int
    priority_rank: str
    highlights: Optional[dict[str, Any]] = None
    recommended_actions: list[str] = Field(default_factory=list)
    intent_summary: Optional[str] = None


class IndustryCount(BaseModel):
    industry: str
    count: int


class LeadSearchSummary(BaseModel):
    total: int
    by_intent_level: dict[str, int]
    by_buying_stage: dict[str, int]
    by_priority_rank: dict[str, int]
    avg_intent_score: int
    avg_match_score: Optional[int] = None
    top_industries: list[IndustryCount] = Field(default_factory=list)


class LeadSearchResponse(BaseModel):
    results: list[RankedLeadRead]
    total: int
    summary: LeadSearchSummary
