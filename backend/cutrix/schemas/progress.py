from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from cutrix.schemas.production_plan import TaskResponse


class ProgressResponse(BaseModel):
    total_planned: int
    total_completed: int
    task_count: int
    pending_tasks: int
    progress_percent: int
    remaining_layers: int

    class Config:
        from_attributes = True


class TaskProgressResponse(ProgressResponse):
    task_id: int
    plan_id: Optional[int] = None
    layout_name: str
    color: str
    state: str


class LayoutProgressResponse(ProgressResponse):
    layout_id: int
    layout_name: str


class PlanProgressResponse(ProgressResponse):
    plan_id: int
    plan_name: str
    layouts: List[LayoutProgressResponse] = Field(default_factory=list)


class PlanProgressSnapshotResponse(BaseModel):
    plan_id: int
    total_planned: int
    total_completed: int
    pending_tasks: int
    progress_percent: int
    refreshed_at: datetime

    class Config:
        from_attributes = True


class WorkerTaskGroupResponse(BaseModel):
    worker_id: Optional[int] = None
    plan_id: int
    plan_name: str
    style_number: Optional[str] = None
    total_planned: int
    total_completed: int
    progress_percent: int
    tasks: List[TaskResponse] = Field(default_factory=list)

    class Config:
        from_attributes = True
