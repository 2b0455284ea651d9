"""
Task Service — Service Layer (SRP / DIP)
"""
from typing import List, Optional

from sqlalchemy.orm import Session

from cutrix.core.exceptions import EntityNotFoundException
from cutrix.engine import roll_task_progress, task_state
from cutrix.models.production_task import ProductionTask
from cutrix.repositories.production_task_repository import ProductionTaskRepository
from cutrix.schemas.progress import TaskProgressResponse
from cutrix.services.views import progress_fields


class TaskService:

    def __init__(self, db: Session):
        self._repo = ProductionTaskRepository(db)

    def list_tasks(
        self,
        style_id: Optional[int] = None,
        plan_id: Optional[int] = None,
        pending_only: bool = False,
    ) -> List[ProductionTask]:
        return self._repo.list_filtered(style_id=style_id, plan_id=plan_id, pending_only=pending_only)

    def get_task(self, task_id: int) -> ProductionTask:
        task = self._repo.get_with_layout(task_id)
        if not task:
            raise EntityNotFoundException("ProductionTask", task_id)
        return task

    def task_progress(
        self,
        plan_id: Optional[int] = None,
        pending_only: bool = False,
    ) -> List[TaskProgressResponse]:
        return [
            TaskProgressResponse(
                task_id=task.id,
                plan_id=task.plan_id,
                layout_name=task.layout_name,
                color=task.color,
                state=task_state(task).value,
                **progress_fields(roll_task_progress(task)),
            )
            for task in self.list_tasks(plan_id=plan_id, pending_only=pending_only)
        ]
