from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field


class ProcessName(str, Enum):
    LOADING = "loading"
    SPREADING = "spreading"
    CUTTING = "cutting"
    PACKING = "packing"


class ProductionLogCreate(BaseModel):
    task_id: int
    worker_id: int
    process_name: ProcessName
    # Non-positive counts are rejected by the service with a domain error.
    layers_completed: int


class ProductionLogResponse(BaseModel):
    id: int
    task_id: int
    worker_id: int
    process_name: ProcessName
    layers_completed: int
    log_time: datetime

    class Config:
        from_attributes = True


class LogAppendResponse(BaseModel):
    log: ProductionLogResponse
    task_id: int
    planned_layers: int
    completed_layers: int
    state: str
    progress_percent: int = Field(..., ge=0)
