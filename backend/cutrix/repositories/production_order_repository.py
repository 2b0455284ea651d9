from datetime import datetime, timedelta, date
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from cutrix.models.production_order import ProductionOrder
from cutrix.models.production_plan import ProductionPlan
from cutrix.models.style import Style
from cutrix.repositories.base import BaseRepository


class ProductionOrderRepository(BaseRepository[ProductionOrder]):
    def __init__(self, db: Session):
        super().__init__(ProductionOrder, db)

    def _with_details(self):
        return self.db.query(ProductionOrder).options(
            selectinload(ProductionOrder.items),
            selectinload(ProductionOrder.style),
        )

    def get_with_items(self, order_id: int) -> Optional[ProductionOrder]:
        return self._with_details().filter(ProductionOrder.id == order_id).first()

    def list_filtered(self, style_number: Optional[str] = None) -> List[ProductionOrder]:
        q = self._with_details()
        if style_number:
            q = q.join(Style, ProductionOrder.style_id == Style.id).filter(
                Style.style_number.ilike(f"%{style_number}%")
            )
        return q.order_by(ProductionOrder.created_at.desc(), ProductionOrder.id.desc()).all()

    def list_unplanned(self) -> List[ProductionOrder]:
        planned_ids = select(ProductionPlan.linked_order_id).where(ProductionPlan.linked_order_id.isnot(None))
        return (
            self._with_details()
            .filter(ProductionOrder.id.notin_(planned_ids))
            .order_by(ProductionOrder.created_at.desc(), ProductionOrder.id.desc())
            .all()
        )

    def count_for_style_on(self, style_id: int, day: date) -> int:
        start = datetime.combine(day, datetime.min.time())
        end = start + timedelta(days=1)
        return (
            self.db.query(ProductionOrder)
            .filter(
                ProductionOrder.style_id == style_id,
                ProductionOrder.created_at >= start,
                ProductionOrder.created_at < end,
            )
            .count()
        )

    def order_number_exists(self, order_number: str) -> bool:
        return (
            self.db.query(ProductionOrder.id)
            .filter(ProductionOrder.order_number == order_number)
            .first()
            is not None
        )
