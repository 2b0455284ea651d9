from typing import List, Optional

from sqlalchemy import update
from sqlalchemy.orm import Session, joinedload

from cutrix.models.production_plan import CuttingLayout
from cutrix.models.production_task import ProductionTask
from cutrix.repositories.base import BaseRepository


class ProductionTaskRepository(BaseRepository[ProductionTask]):
    def __init__(self, db: Session):
        super().__init__(ProductionTask, db)

    def get_with_layout(self, task_id: int) -> Optional[ProductionTask]:
        return (
            self.db.query(ProductionTask)
            .options(joinedload(ProductionTask.layout))
            .filter(ProductionTask.id == task_id)
            .first()
        )

    def list_filtered(
        self,
        style_id: Optional[int] = None,
        plan_id: Optional[int] = None,
        pending_only: bool = False,
    ) -> List[ProductionTask]:
        q = self.db.query(ProductionTask).options(joinedload(ProductionTask.layout))
        if style_id is not None:
            q = q.filter(ProductionTask.style_id == style_id)
        if plan_id is not None:
            q = q.join(CuttingLayout, ProductionTask.layout_id == CuttingLayout.id).filter(
                CuttingLayout.plan_id == plan_id
            )
        if pending_only:
            q = q.filter(ProductionTask.completed_layers < ProductionTask.planned_layers)
        return q.order_by(ProductionTask.id).all()

    def pending_plan_ids(self) -> List[int]:
        rows = (
            self.db.query(CuttingLayout.plan_id)
            .join(ProductionTask, ProductionTask.layout_id == CuttingLayout.id)
            .filter(ProductionTask.completed_layers < ProductionTask.planned_layers)
            .distinct()
            .all()
        )
        return sorted(row[0] for row in rows)

    def increment_completed_layers(self, task_id: int, layers: int, cap_at_planned: bool = False) -> int:
        """
        Adds ``layers`` in a single UPDATE so concurrent appends on one task
        serialise on the row instead of racing a read-modify-write in Python.
        With ``cap_at_planned`` the row is left untouched when the sum would
        pass planned_layers. Does not commit; returns the number of rows touched.
        """
        stmt = update(ProductionTask).where(ProductionTask.id == task_id)
        if cap_at_planned:
            stmt = stmt.where(ProductionTask.completed_layers + layers <= ProductionTask.planned_layers)
        result = self.db.execute(
            stmt
            .values(completed_layers=ProductionTask.completed_layers + layers)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount
