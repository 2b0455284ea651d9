from typing import List, Optional

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from cutrix.database import get_db
from cutrix.schemas.planning import DemandMatrixResponse
from cutrix.schemas.production_order import ProductionOrderCreate, ProductionOrderResponse
from cutrix.services.production_order_service import ProductionOrderService


router = APIRouter(prefix="/production-orders", tags=["Production Orders"])


def get_order_service(db: Session = Depends(get_db)) -> ProductionOrderService:
    return ProductionOrderService(db)


@router.get("", response_model=List[ProductionOrderResponse])
def list_orders(
    style_number: Optional[str] = None,
    service: ProductionOrderService = Depends(get_order_service),
):
    return service.list_orders(style_number=style_number)


@router.post("", response_model=ProductionOrderResponse, status_code=201)
def create_order(body: ProductionOrderCreate, service: ProductionOrderService = Depends(get_order_service)):
    return service.create_order(body)


@router.get("/unplanned", response_model=List[ProductionOrderResponse])
def list_unplanned_orders(service: ProductionOrderService = Depends(get_order_service)):
    return service.list_unplanned_orders()


@router.get("/{order_id}", response_model=ProductionOrderResponse)
def get_order(order_id: int, service: ProductionOrderService = Depends(get_order_service)):
    return service.get_order(order_id)


@router.delete("/{order_id}", status_code=204)
def delete_order(order_id: int, service: ProductionOrderService = Depends(get_order_service)):
    service.delete_order(order_id)
    return Response(status_code=204)


@router.get("/{order_id}/demand", response_model=DemandMatrixResponse)
def get_demand_matrix(order_id: int, service: ProductionOrderService = Depends(get_order_service)):
    return service.demand_matrix(order_id)
