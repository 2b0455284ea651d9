from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from cutrix.database import get_db
from cutrix.schemas.production_plan import TaskResponse
from cutrix.schemas.progress import TaskProgressResponse
from cutrix.services.task_service import TaskService


router = APIRouter(prefix="/tasks", tags=["Production Tasks"])


def get_task_service(db: Session = Depends(get_db)) -> TaskService:
    return TaskService(db)


@router.get("", response_model=List[TaskResponse])
def list_tasks(
    style_id: Optional[int] = None,
    plan_id: Optional[int] = None,
    pending_only: bool = False,
    service: TaskService = Depends(get_task_service),
):
    return service.list_tasks(style_id=style_id, plan_id=plan_id, pending_only=pending_only)


@router.get("/progress", response_model=List[TaskProgressResponse])
def list_task_progress(
    plan_id: Optional[int] = None,
    pending_only: bool = False,
    service: TaskService = Depends(get_task_service),
):
    return service.task_progress(plan_id=plan_id, pending_only=pending_only)


@router.get("/{task_id}", response_model=TaskResponse)
def get_task(task_id: int, service: TaskService = Depends(get_task_service)):
    return service.get_task(task_id)
