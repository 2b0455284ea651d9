from typing import List, Optional

from sqlalchemy.orm import Session

from cutrix.models.worker import Worker
from cutrix.repositories.base import BaseRepository


class WorkerRepository(BaseRepository[Worker]):
    def __init__(self, db: Session):
        super().__init__(Worker, db)

    def get_by_name(self, name: str) -> Optional[Worker]:
        return self.db.query(Worker).filter(Worker.name == name).first()

    def list_filtered(self, worker_group: Optional[str] = None) -> List[Worker]:
        q = self.db.query(Worker)
        if worker_group is not None:
            q = q.filter(Worker.worker_group == worker_group)
        return q.order_by(Worker.id).all()
