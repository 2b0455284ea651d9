from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from cutrix.models.production_log import ProductionLog
from cutrix.repositories.base import BaseRepository


class ProductionLogRepository(BaseRepository[ProductionLog]):
    def __init__(self, db: Session):
        super().__init__(ProductionLog, db)

    def list_filtered(
        self,
        task_id: Optional[int] = None,
        worker_id: Optional[int] = None,
        process_name: Optional[str] = None,
    ) -> List[ProductionLog]:
        q = self.db.query(ProductionLog)
        if task_id is not None:
            q = q.filter(ProductionLog.task_id == task_id)
        if worker_id is not None:
            q = q.filter(ProductionLog.worker_id == worker_id)
        if process_name is not None:
            q = q.filter(ProductionLog.process_name == process_name)
        return q.order_by(ProductionLog.log_time, ProductionLog.id).all()

    def sum_layers_for_task(self, task_id: int) -> int:
        total = (
            self.db.query(func.coalesce(func.sum(ProductionLog.layers_completed), 0))
            .filter(ProductionLog.task_id == task_id)
            .scalar()
        )
        return int(total or 0)
