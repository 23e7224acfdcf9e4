"""Project API routes: campaigns, pivot alerts and cross-sell recommendations."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from leadintel.db.session import get_db
from leadintel.schemas.catalog import ProjectCreate, ProjectRead
from leadintel.schemas.cross_sell import CrossSellListResponse, CrossSellRead, CrossSellStatusUpdate
from leadintel.schemas.pivot_alert import (
    PivotAlertListResponse,
    PivotAlertRead,
    PivotAlertStatusUpdate,
)
from leadintel.services.company import ReferenceNotFoundError, create_project, get_project
from leadintel.services.cross_sell.cross_sell_recommender import (
    CrossSellStatusError,
    generate_cross_sell_recommendations,
    list_cross_sell_for_target,
    update_cross_sell_status,
)
from leadintel.services.pivot.pivot_alert_service import (
    InvalidStatusTransitionError,
    detect_pivot_alerts,
    list_active_pivot_alerts,
    update_pivot_alert_status,
)

router = APIRouter()
pivot_alerts_router = APIRouter()
cross_sell_router = APIRouter()


def _require_project(db: Session, project_id: int) -> None:
    if get_project(db, project_id) is None:
        raise HTTPException(status_code=404, detail="Project not found")


@router.post("", response_model=ProjectRead, status_code=201)
def api_create_project(data: ProjectCreate, db: Session = Depends(get_db)) -> ProjectRead:
    try:
        project = create_project(db, data)
    except ReferenceNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from None
    return ProjectRead.model_validate(project)


@router.get("/{project_id}", response_model=ProjectRead)
def api_get_project(project_id: int, db: Session = Depends(get_db)) -> ProjectRead:
    project = get_project(db, project_id)
    if project is None:
        raise HTTPException(status_code=404, detail="Project not found")
    return ProjectRead.model_validate(project)


@router.get("/{project_id}/pivot-alerts", response_model=PivotAlertListResponse)
def api_list_pivot_alerts(project_id: int, db: Session = Depends(get_db)) -> PivotAlertListResponse:
    """Active pivot alerts for a project, newest first."""
    _require_project(db, project_id)
    alerts = [PivotAlertRead.model_validate(a) for a in list_active_pivot_alerts(db, project_id)]
    return PivotAlertListResponse(alerts=alerts, total=len(alerts))


@router.post("/{project_id}/pivot-alerts/check", response_model=PivotAlertListResponse)
def api_check_pivot_alerts(project_id: int, db: Session = Depends(get_db)) -> PivotAlertListResponse:
    """Run the pivot detector for one project; returns the alerts it created."""
    created = detect_pivot_alerts(db, project_id)
    if created is None:
        raise HTTPException(status_code=404, detail="Project not found")
    alerts = [PivotAlertRead.model_validate(a) for a in created]
    return PivotAlertListResponse(alerts=alerts, total=len(alerts))


@router.post("/{project_id}/cross-sell", response_model=CrossSellListResponse)
def api_generate_cross_sell(project_id: int, db: Session = Depends(get_db)) -> CrossSellListResponse:
    """Generate recommendations from this project's rejected leads."""
    created = generate_cross_sell_recommendations(db, project_id)
    if created is None:
        raise HTTPException(status_code=404, detail="Project not found")
    recs = [CrossSellRead.model_validate(r) for r in created]
    return CrossSellListResponse(recommendations=recs, total=len(recs))


@router.get("/{project_id}/cross-sell", response_model=CrossSellListResponse)
def api_list_cross_sell(project_id: int, db: Session = Depends(get_db)) -> CrossSellListResponse:
    """Suggested recommendations that target this project."""
    _require_project(db, project_id)
    recs = [CrossSellRead.model_validate(r) for r in list_cross_sell_for_target(db, project_id)]
    return CrossSellListResponse(recommendations=recs, total=len(recs))


@pivot_alerts_router.patch("/{alert_id}", response_model=PivotAlertRead)
def api_update_pivot_alert(
    alert_id: int,
    data: PivotAlertStatusUpdate,
    db: Session = Depends(get_db),
) -> PivotAlertRead:
    """Acknowledge, resolve or dismiss a pivot alert."""
    try:
        alert = update_pivot_alert_status(db, alert_id, data.status, data.operator_id)
    except InvalidStatusTransitionError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from None
    if alert is None:
        raise HTTPException(status_code=404, detail="Pivot alert not found")
    return PivotAlertRead.model_validate(alert)


@cross_sell_router.patch("/{recommendation_id}", response_model=CrossSellRead)
def api_update_cross_sell(
    recommendation_id: int,
    data: CrossSellStatusUpdate,
    db: Session = Depends(get_db),
) -> CrossSellRead:
    try:
        rec = update_cross_sell_status(db, recommendation_id, data.status)
    except CrossSellStatusError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from None
    if rec is None:
        raise HTTPException(status_code=404, detail="Recommendation not found")
    return CrossSellRead.model_validate(rec)
