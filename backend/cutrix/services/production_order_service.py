"""
Production Order Service — Service Layer (SRP / DIP)

Orders are entered once and never edited; the demand matrix is always
derived from the stored items.
"""
import logging
from datetime import datetime
from typing import List, Optional

from sqlalchemy.orm import Session

from cutrix.config import settings
from cutrix.core.exceptions import ConflictException, EntityNotFoundException, ValidationException
from cutrix.engine import compute_demand_matrix, matrix_total
from cutrix.models.production_order import OrderItem, ProductionOrder
from cutrix.repositories.production_order_repository import ProductionOrderRepository
from cutrix.repositories.production_plan_repository import ProductionPlanRepository
from cutrix.schemas.planning import DemandMatrixResponse
from cutrix.schemas.production_order import ProductionOrderCreate
from cutrix.services.style_service import StyleService
from cutrix.utils.events import EntityCreatedEvent, EntityDeletedEvent, get_event_bus

logger = logging.getLogger(__name__)


class ProductionOrderService:

    def __init__(self, db: Session):
        self._db = db
        self._repo = ProductionOrderRepository(db)
        self._plan_repo = ProductionPlanRepository(db)
        self._styles = StyleService(db)
        self._bus = get_event_bus()

    def list_orders(self, style_number: Optional[str] = None) -> List[ProductionOrder]:
        return self._repo.list_filtered(style_number=style_number)

    def list_unplanned_orders(self) -> List[ProductionOrder]:
        return self._repo.list_unplanned()

    def get_order(self, order_id: int) -> ProductionOrder:
        order = self._repo.get_with_items(order_id)
        if not order:
            raise EntityNotFoundException("ProductionOrder", order_id)
        return order

    def _next_order_number(self, style_id: int, style_number: str, now: datetime) -> str:
        # PO-YYYYMMDD-<style>-NN, NN counting this style's orders of the day
        sequence = self._repo.count_for_style_on(style_id, now.date()) + 1
        while True:
            candidate = f"{settings.ORDER_NUMBER_PREFIX}-{now:%Y%m%d}-{style_number}-{sequence:02d}"
            if not self._repo.order_number_exists(candidate):
                return candidate
            sequence += 1

    def create_order(self, data: ProductionOrderCreate) -> ProductionOrder:
        if not data.items:
            raise ValidationException("An order needs at least one item.")
        for item in data.items:
            if item.quantity <= 0:
                raise ValidationException(f"Quantity for {item.color}/{item.size} must be positive.")
            if not item.color.strip() or not item.size.strip():
                raise ValidationException("Every order item needs a color and a size.")

        style = self._styles.get_or_create(data.style_number)
        now = datetime.utcnow()
        order = ProductionOrder(
            order_number=self._next_order_number(style.id, style.style_number, now),
            style_id=style.id,
            created_at=now,
            items=[
                OrderItem(color=item.color.strip(), size=item.size.strip(), quantity=item.quantity)
                for item in data.items
            ],
        )
        result = self._repo.create(order)
        logger.info(
            "order_created",
            extra={"order_id": result.id, "order_number": result.order_number, "item_count": len(data.items)},
        )
        self._bus.publish(EntityCreatedEvent(
            entity_type="production_order", entity_id=result.id, payload={"order_number": result.order_number},
        ))
        return self.get_order(result.id)

    def delete_order(self, order_id: int) -> None:
        order = self.get_order(order_id)
        linked_plan = self._plan_repo.get_by_order_id(order_id)
        if linked_plan:
            raise ConflictException(
                f"Order {order.order_number} is linked to plan '{linked_plan.plan_name}' ({linked_plan.id}).",
                details={"plan_id": linked_plan.id},
            )
        self._repo.delete(order)
        logger.info("order_deleted", extra={"order_id": order_id})
        self._bus.publish(EntityDeletedEvent(entity_type="production_order", entity_id=order_id))

    def demand_matrix(self, order_id: int) -> DemandMatrixResponse:
        order = self.get_order(order_id)
        demand = compute_demand_matrix(order)
        return DemandMatrixResponse(
            order_id=order.id,
            order_number=order.order_number,
            demand=demand,
            total_required=matrix_total(demand),
        )
