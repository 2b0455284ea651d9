from typing import List, Optional

from sqlalchemy.orm import Session, selectinload

from cutrix.models.production_plan import CuttingLayout, ProductionPlan
from cutrix.models.style import Style
from cutrix.repositories.base import BaseRepository


class ProductionPlanRepository(BaseRepository[ProductionPlan]):
    def __init__(self, db: Session):
        super().__init__(ProductionPlan, db)

    def _with_details(self):
        return self.db.query(ProductionPlan).options(
            selectinload(ProductionPlan.style),
            selectinload(ProductionPlan.layouts).selectinload(CuttingLayout.ratios),
            selectinload(ProductionPlan.layouts).selectinload(CuttingLayout.tasks),
        )

    def get_with_details(self, plan_id: int) -> Optional[ProductionPlan]:
        return self._with_details().filter(ProductionPlan.id == plan_id).first()

    def list_filtered(self, query: Optional[str] = None) -> List[ProductionPlan]:
        q = self._with_details()
        if query:
            like = f"%{query}%"
            q = q.join(Style, ProductionPlan.style_id == Style.id).filter(
                ProductionPlan.plan_name.ilike(like) | Style.style_number.ilike(like)
            )
        return q.order_by(ProductionPlan.created_at.desc(), ProductionPlan.id.desc()).all()

    def get_by_order_id(self, order_id: int) -> Optional[ProductionPlan]:
        return (
            self._with_details()
            .filter(ProductionPlan.linked_order_id == order_id)
            .order_by(ProductionPlan.id)
            .first()
        )

    def list_by_ids(self, plan_ids: List[int]) -> List[ProductionPlan]:
        if not plan_ids:
            return []
        return self._with_details().filter(ProductionPlan.id.in_(plan_ids)).order_by(ProductionPlan.id).all()
