"""
Worker Service — Service Layer (SRP / DIP)
"""
from typing import List, Optional

from sqlalchemy.orm import Session

from cutrix.core.exceptions import ConflictException, EntityNotFoundException
from cutrix.engine import roll_worker_task_groups
from cutrix.models.worker import Worker
from cutrix.repositories.production_log_repository import ProductionLogRepository
from cutrix.repositories.production_plan_repository import ProductionPlanRepository
from cutrix.repositories.production_task_repository import ProductionTaskRepository
from cutrix.repositories.worker_repository import WorkerRepository
from cutrix.schemas.progress import WorkerTaskGroupResponse
from cutrix.schemas.worker import WorkerCreate, WorkerUpdate
from cutrix.services.views import worker_task_group_view
from cutrix.utils.events import EntityCreatedEvent, EntityDeletedEvent, EntityUpdatedEvent, get_event_bus


class WorkerService:

    def __init__(self, db: Session):
        self._repo = WorkerRepository(db)
        self._log_repo = ProductionLogRepository(db)
        self._plan_repo = ProductionPlanRepository(db)
        self._task_repo = ProductionTaskRepository(db)
        self._bus = get_event_bus()

    def list_workers(self, worker_group: Optional[str] = None) -> List[Worker]:
        return self._repo.list_filtered(worker_group=worker_group)

    def get_worker(self, worker_id: int) -> Worker:
        worker = self._repo.get_by_id(worker_id)
        if not worker:
            raise EntityNotFoundException("Worker", worker_id)
        return worker

    def create_worker(self, data: WorkerCreate) -> Worker:
        name = data.name.strip()
        if self._repo.get_by_name(name):
            raise ConflictException(f"Worker '{name}' already exists.")
        result = self._repo.create(Worker(**data.model_dump(exclude={"name"}), name=name))
        self._bus.publish(EntityCreatedEvent(entity_type="worker", entity_id=result.id))
        return result

    def update_worker(self, worker_id: int, data: WorkerUpdate) -> Worker:
        worker = self.get_worker(worker_id)
        updates = data.model_dump(exclude_unset=True)
        if "name" in updates and updates["name"] is not None:
            updates["name"] = updates["name"].strip()
            other = self._repo.get_by_name(updates["name"])
            if other and other.id != worker_id:
                raise ConflictException(f"Worker '{updates['name']}' already exists.")
        result = self._repo.update(worker, updates)
        self._bus.publish(EntityUpdatedEvent(entity_type="worker", entity_id=worker_id, new_values=updates))
        return result

    def delete_worker(self, worker_id: int) -> None:
        worker = self.get_worker(worker_id)
        if self._log_repo.list_filtered(worker_id=worker_id):
            raise ConflictException(
                f"Worker '{worker.name}' has production logs; deactivate the worker instead.",
            )
        self._repo.delete(worker)
        self._bus.publish(EntityDeletedEvent(entity_type="worker", entity_id=worker_id))

    def task_groups(self, worker_id: int) -> List[WorkerTaskGroupResponse]:
        self.get_worker(worker_id)
        plans = self._plan_repo.list_by_ids(self._task_repo.pending_plan_ids())
        return [worker_task_group_view(group) for group in roll_worker_task_groups(worker_id, plans)]
