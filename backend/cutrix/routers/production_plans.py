from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.orm import Session

from cutrix.database import get_db
from cutrix.engine import SupplyBasis
from cutrix.schemas.planning import ReconciliationResponse, SupplyMatricesResponse
from cutrix.schemas.production_plan import (
    PlanPreviewRequest,
    ProductionPlanCreate,
    ProductionPlanResponse,
    ProductionPlanUpdate,
)
from cutrix.schemas.progress import PlanProgressResponse
from cutrix.services.monitoring_service import MonitoringService
from cutrix.services.production_plan_service import ProductionPlanService


router = APIRouter(prefix="/production-plans", tags=["Production Plans"])


def get_plan_service(db: Session = Depends(get_db)) -> ProductionPlanService:
    return ProductionPlanService(db)


def get_monitoring_service(db: Session = Depends(get_db)) -> MonitoringService:
    return MonitoringService(db)


@router.get("", response_model=List[ProductionPlanResponse])
def list_plans(
    q: Optional[str] = None,
    service: ProductionPlanService = Depends(get_plan_service),
):
    return service.list_plans(query=q)


@router.post("", response_model=ProductionPlanResponse, status_code=201)
def create_plan(body: ProductionPlanCreate, service: ProductionPlanService = Depends(get_plan_service)):
    return service.create_plan(body)


@router.post("/reconciliation/preview", response_model=ReconciliationResponse)
def preview_reconciliation(body: PlanPreviewRequest, service: ProductionPlanService = Depends(get_plan_service)):
    return service.preview_reconciliation(body)


@router.get("/by-order/{order_id}", response_model=ProductionPlanResponse)
def get_plan_by_order(order_id: int, service: ProductionPlanService = Depends(get_plan_service)):
    return service.get_plan_by_order(order_id)


@router.get("/{plan_id}", response_model=ProductionPlanResponse)
def get_plan(plan_id: int, service: ProductionPlanService = Depends(get_plan_service)):
    return service.get_plan(plan_id)


@router.put("/{plan_id}", response_model=ProductionPlanResponse)
def update_plan(
    plan_id: int,
    body: ProductionPlanUpdate,
    service: ProductionPlanService = Depends(get_plan_service),
):
    return service.update_plan(plan_id, body)


@router.delete("/{plan_id}", status_code=204)
def delete_plan(plan_id: int, service: ProductionPlanService = Depends(get_plan_service)):
    service.delete_plan(plan_id)
    return Response(status_code=204)


@router.get("/{plan_id}/supply", response_model=SupplyMatricesResponse)
def get_supply_matrices(plan_id: int, service: ProductionPlanService = Depends(get_plan_service)):
    return service.supply_matrices(plan_id)


@router.get("/{plan_id}/reconciliation", response_model=ReconciliationResponse)
def get_reconciliation(
    plan_id: int,
    basis: SupplyBasis = Query(SupplyBasis.PLANNED),
    service: ProductionPlanService = Depends(get_plan_service),
):
    return service.reconcile_plan(plan_id, basis=basis)


@router.get("/{plan_id}/progress", response_model=PlanProgressResponse)
def get_plan_progress(plan_id: int, service: MonitoringService = Depends(get_monitoring_service)):
    return service.plan_progress(plan_id)
