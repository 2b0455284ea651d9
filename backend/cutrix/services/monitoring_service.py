"""
Monitoring Service — plan progress for the monitoring screen.

Live figures are always computed from the task rows. The snapshot table is a
cache refreshed after each log append; rebuilding it is idempotent.
"""
import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from cutrix.core.exceptions import EntityNotFoundException
from cutrix.engine import roll_plan_progress
from cutrix.models.plan_progress import PlanProgressSnapshot
from cutrix.repositories.plan_progress_repository import PlanProgressRepository
from cutrix.repositories.production_plan_repository import ProductionPlanRepository
from cutrix.schemas.progress import PlanProgressResponse
from cutrix.services.views import plan_progress_view

logger = logging.getLogger(__name__)


class MonitoringService:

    def __init__(self, db: Session):
        self._plan_repo = ProductionPlanRepository(db)
        self._snapshot_repo = PlanProgressRepository(db)

    def plan_progress(self, plan_id: int) -> PlanProgressResponse:
        plan = self._plan_repo.get_with_details(plan_id)
        if not plan:
            raise EntityNotFoundException("ProductionPlan", plan_id)
        return plan_progress_view(plan)

    def refresh_plan_snapshot(self, plan_id: int) -> Optional[PlanProgressSnapshot]:
        plan = self._plan_repo.get_with_details(plan_id)
        if not plan:
            # Deleted between the append and the refresh; nothing to cache.
            return None
        progress = roll_plan_progress(plan)
        snapshot = self._snapshot_repo.upsert(
            plan_id,
            total_planned=progress.total_planned,
            total_completed=progress.total_completed,
            pending_tasks=progress.pending_tasks,
            progress_percent=progress.progress_percent,
        )
        logger.debug("plan_snapshot_refreshed", extra={"plan_id": plan_id, "percent": progress.progress_percent})
        return snapshot

    def list_snapshots(self) -> List[PlanProgressSnapshot]:
        """Cached figures for every plan, filling in plans never refreshed before."""
        cached = {snapshot.plan_id: snapshot for snapshot in self._snapshot_repo.get_all()}
        snapshots = []
        for plan in self._plan_repo.list_filtered():
            snapshot = cached.get(plan.id) or self.refresh_plan_snapshot(plan.id)
            if snapshot is not None:
                snapshots.append(snapshot)
        return sorted(snapshots, key=lambda s: s.plan_id)

    def rebuild_snapshots(self) -> List[PlanProgressSnapshot]:
        rebuilt = []
        for plan in self._plan_repo.list_filtered():
            snapshot = self.refresh_plan_snapshot(plan.id)
            if snapshot is not None:
                rebuilt.append(snapshot)
        return sorted(rebuilt, key=lambda s: s.plan_id)
