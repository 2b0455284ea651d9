"""
Production Log Service — Service Layer (SRP / DIP)

The log append is the only write path for task completion. The log row and
the task increment commit together; the plan progress refresh that follows
is driven by the event bus and is allowed to fail without undoing either.
"""
import logging
from datetime import datetime
from typing import List, Optional

from sqlalchemy.orm import Session

from cutrix.config import settings
from cutrix.core.exceptions import EntityNotFoundException, ValidationException
from cutrix.engine import roll_task_progress, task_state
from cutrix.models.production_log import ProductionLog
from cutrix.models.production_task import ProductionTask
from cutrix.repositories.production_log_repository import ProductionLogRepository
from cutrix.repositories.production_task_repository import ProductionTaskRepository
from cutrix.repositories.worker_repository import WorkerRepository
from cutrix.schemas.production_log import LogAppendResponse, ProductionLogCreate, ProductionLogResponse
from cutrix.utils.events import ProductionLogAppendedEvent, get_event_bus

logger = logging.getLogger(__name__)


class ProductionLogService:

    def __init__(self, db: Session):
        self._db = db
        self._repo = ProductionLogRepository(db)
        self._task_repo = ProductionTaskRepository(db)
        self._worker_repo = WorkerRepository(db)
        self._bus = get_event_bus()

    def list_logs(
        self,
        task_id: Optional[int] = None,
        worker_id: Optional[int] = None,
        process_name: Optional[str] = None,
    ) -> List[ProductionLog]:
        return self._repo.list_filtered(task_id=task_id, worker_id=worker_id, process_name=process_name)

    def append_log(self, data: ProductionLogCreate) -> ProductionTask:
        """Records ``layers_completed`` against the task and returns the updated task."""
        task, _log = self._append(data)
        return task

    def append_log_with_summary(self, data: ProductionLogCreate) -> LogAppendResponse:
        task, log = self._append(data)
        progress = roll_task_progress(task)
        return LogAppendResponse(
            log=ProductionLogResponse.model_validate(log),
            task_id=task.id,
            planned_layers=task.planned_layers,
            completed_layers=task.completed_layers,
            state=task_state(task).value,
            progress_percent=progress.progress_percent,
        )

    def _append(self, data: ProductionLogCreate):
        if data.layers_completed <= 0:
            raise ValidationException(
                "layers_completed must be a positive number.",
                details={"layers_completed": data.layers_completed},
            )
        task = self._task_repo.get_with_layout(data.task_id)
        if not task:
            raise EntityNotFoundException("ProductionTask", data.task_id)
        if not self._worker_repo.get_by_id(data.worker_id):
            raise EntityNotFoundException("Worker", data.worker_id)

        log = ProductionLog(
            task_id=task.id,
            worker_id=data.worker_id,
            process_name=data.process_name.value,
            layers_completed=data.layers_completed,
            log_time=datetime.utcnow(),
        )
        try:
            self._db.add(log)
            touched = self._task_repo.increment_completed_layers(
                task.id,
                data.layers_completed,
                cap_at_planned=not settings.ALLOW_OVER_COMPLETION,
            )
            if touched == 0:
                raise ValidationException(
                    f"Logging {data.layers_completed} layers would exceed the {task.planned_layers} planned "
                    f"for task {task.id}.",
                    details={"task_id": task.id, "planned_layers": task.planned_layers},
                )
            self._db.commit()
        except Exception:
            self._db.rollback()
            raise

        self._db.refresh(task)
        self._db.refresh(log)
        logger.info(
            "production_log_appended",
            extra={
                "task_id": task.id,
                "log_id": log.id,
                "worker_id": log.worker_id,
                "layers_completed": log.layers_completed,
                "completed_layers": task.completed_layers,
            },
        )
        self._bus.publish(ProductionLogAppendedEvent(
            entity_type="production_task",
            entity_id=task.id,
            task_id=task.id,
            plan_id=task.plan_id,
            worker_id=log.worker_id,
            layers_completed=log.layers_completed,
            completed_layers=task.completed_layers,
        ))
        return task, log
