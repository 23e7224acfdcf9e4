"""Company API routes: import, fit score, intent analysis and combined lead search."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from leadintel.db.session import get_db
from leadintel.schemas.company import CompanyCreate, CompanyRead
from leadintel.schemas.intent import IntentProfileRead, ScrapeSnapshot
from leadintel.schemas.search import LeadSearchRequest, LeadSearchResponse, RankedLeadRead
from leadintel.services.company import ReferenceNotFoundError, create_company, get_company
from leadintel.services.fit.fit_writer import score_and_store_company
from leadintel.services.intent.intent_writer import analyze_and_store_intent, get_intent_profile
from leadintel.services.ranking.combined_ranker import (
    LeadSearchCriteria,
    ProductNotFoundError,
    RankedLead,
    get_hot_leads,
    search_leads,
)

router = APIRouter()


def _to_ranked_read(lead: RankedLead) -> RankedLeadRead:
    return RankedLeadRead(
        company=CompanyRead.model_validate(lead.company),
        intent_score=lead.intent_score,
        intent_level=lead.intent_level,
        buying_stage=lead.buying_stage,
        product_match_score=lead.product_match_score,
        product_match_level=lead.product_match_level,
        combined_score=lead.combined_score,
        priority_rank=lead.priority_rank,
        highlights=lead.highlights,
        recommended_actions=lead.recommended_actions,
        intent_summary=lead.intent_summary,
    )


@router.post("", response_model=CompanyRead, status_code=201)
def api_create_company(data: CompanyCreate, db: Session = Depends(get_db)) -> CompanyRead:
    """Import a company; it is fit-scored on creation."""
    try:
        company = create_company(db, data)
    except ReferenceNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from None
    return CompanyRead.model_validate(company)


@router.post("/search", response_model=LeadSearchResponse)
def api_search_companies(
    data: LeadSearchRequest,
    db: Session = Depends(get_db),
) -> LeadSearchResponse:
    """Filter, rank and paginate leads by intent and product match."""
    criteria = LeadSearchCriteria(**data.model_dump())
    try:
        result = search_leads(db, criteria)
    except ProductNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from None
    return LeadSearchResponse(
        results=[_to_ranked_read(lead) for lead in result["results"]],
        total=result["total"],
        summary=result["summary"],
    )


@router.get("/hot", response_model=list[RankedLeadRead])
def api_hot_leads(
    client_id: int | None = Query(None),
    limit: int = Query(20, ge=1, le=200),
    db: Session = Depends(get_db),
) -> list[RankedLeadRead]:
    """Hot-intent leads by combined score."""
    return [_to_ranked_read(lead) for lead in get_hot_leads(db, client_id=client_id, limit=limit)]


@router.get("/{company_id}", response_model=CompanyRead)
def api_get_company(company_id: int, db: Session = Depends(get_db)) -> CompanyRead:
    company = get_company(db, company_id)
    if company is None:
        raise HTTPException(status_code=404, detail="Company not found")
    return CompanyRead.model_validate(company)


@router.post("/{company_id}/score", response_model=CompanyRead)
def api_rescore_company(company_id: int, db: Session = Depends(get_db)) -> CompanyRead:
    """Explicitly re-run the fit scorer for one company."""
    company = score_and_store_company(db, company_id)
    if company is None:
        raise HTTPException(status_code=404, detail="Company not found")
    return CompanyRead.model_validate(company)


@router.post("/{company_id}/intent", response_model=IntentProfileRead)
def api_analyze_intent(
    company_id: int,
    snapshot: ScrapeSnapshot,
    db: Session = Depends(get_db),
) -> IntentProfileRead:
    """Analyze a scrape snapshot and replace the company's intent profile."""
    profile = analyze_and_store_intent(db, company_id, snapshot.model_dump(exclude_none=True))
    if profile is None:
        raise HTTPException(status_code=404, detail="Company not found")
    return IntentProfileRead.model_validate(profile)


@router.get("/{company_id}/intent", response_model=IntentProfileRead)
def api_get_intent(company_id: int, db: Session = Depends(get_db)) -> IntentProfileRead:
    profile = get_intent_profile(db, company_id)
    if profile is None:
        raise HTTPException(status_code=404, detail="Intent profile not found")
    return IntentProfileRead.model_validate(profile)
