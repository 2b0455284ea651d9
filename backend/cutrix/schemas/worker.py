from typing import Optional

from pydantic import BaseModel, Field


class WorkerBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    notes: Optional[str] = None
    role: str = Field("worker", pattern="^(admin|worker)$")
    is_active: bool = True
    worker_group: Optional[str] = Field(None, max_length=100)


class WorkerCreate(WorkerBase):
    pass


class WorkerUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    notes: Optional[str] = None
    role: Optional[str] = Field(None, pattern="^(admin|worker)$")
    is_active: Optional[bool] = None
    worker_group: Optional[str] = Field(None, max_length=100)


class WorkerResponse(WorkerBase):
    id: int

    class Config:
        from_attributes = True
