"""Client and product API routes, including product match listing."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from leadintel.db.session import get_db
from leadintel.schemas.catalog import ClientCreate, ClientRead, ProductCreate, ProductRead
from leadintel.schemas.company import CompanyRead
from leadintel.schemas.product_match import ProductMatchesResponse, ProductMatchRead
from leadintel.services.company import ReferenceNotFoundError, create_client, create_product
from leadintel.services.product_match.match_service import get_product, match_companies_for_product

clients_router = APIRouter()
products_router = APIRouter()


@clients_router.post("", response_model=ClientRead, status_code=201)
def api_create_client(data: ClientCreate, db: Session = Depends(get_db)) -> ClientRead:
    return ClientRead.model_validate(create_client(db, data))


@products_router.post("", response_model=ProductRead, status_code=201)
def api_create_product(data: ProductCreate, db: Session = Depends(get_db)) -> ProductRead:
    try:
        product = create_product(db, data)
    except ReferenceNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from None
    return ProductRead.model_validate(product)


@products_router.get("/{product_id}", response_model=ProductRead)
def api_get_product(product_id: int, db: Session = Depends(get_db)) -> ProductRead:
    product = get_product(db, product_id)
    if product is None:
        raise HTTPException(status_code=404, detail="Product not found")
    return ProductRead.model_validate(product)


@products_router.get("/{product_id}/matches", response_model=ProductMatchesResponse)
def api_product_matches(
    product_id: int,
    min_score: int = Query(0, ge=0, le=100),
    db: Session = Depends(get_db),
) -> ProductMatchesResponse:
    """Score the client's companies against this product, best match first."""
    result = match_companies_for_product(db, product_id, min_score=min_score)
    if result is None:
        raise HTTPException(status_code=404, detail="Product not found")
    return ProductMatchesResponse(
        product_id=product_id,
        matches=[
            ProductMatchRead(
                company=CompanyRead.model_validate(company),
                score=match.score,
                level=match.level,
                reasons=match.reasons,
                recommended_approach=match.recommended_approach,
                talking_points=match.talking_points,
                potential_objections=match.potential_objections,
            )
            for company, match in result["matches"]
        ],
        summary=result["summary"],
    )
