from typing import List, Optional

from sqlalchemy.orm import Session

from cutrix.models.plan_progress import PlanProgressSnapshot
from cutrix.repositories.base import BaseRepository


class PlanProgressRepository(BaseRepository[PlanProgressSnapshot]):
    def __init__(self, db: Session):
        super().__init__(PlanProgressSnapshot, db)

    def get_by_id(self, plan_id: int) -> Optional[PlanProgressSnapshot]:
        return self.db.get(PlanProgressSnapshot, plan_id)

    def get_all(self) -> List[PlanProgressSnapshot]:
        return self.db.query(PlanProgressSnapshot).order_by(PlanProgressSnapshot.plan_id).all()

    def upsert(self, plan_id: int, **values) -> PlanProgressSnapshot:
        snapshot = self.get_by_id(plan_id)
        if snapshot is None:
            snapshot = PlanProgressSnapshot(plan_id=plan_id)
            self.db.add(snapshot)
        for key, value in values.items():
            setattr(snapshot, key, value)
        self.db.commit()
        self.db.refresh(snapshot)
        return snapshot
