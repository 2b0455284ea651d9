from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class RatioCreate(BaseModel):
    size: str = Field(..., min_length=1, max_length=20)
    ratio: int = Field(..., ge=0)


class TaskCreate(BaseModel):
    color: str = Field(..., min_length=1, max_length=50)
    planned_layers: int = Field(..., ge=1)


class LayoutCreate(BaseModel):
    layout_name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    ratios: List[RatioCreate] = Field(default_factory=list)
    tasks: List[TaskCreate] = Field(default_factory=list)


class ProductionPlanCreate(BaseModel):
    plan_name: str = Field(..., min_length=1, max_length=255)
    style_id: int
    linked_order_id: Optional[int] = None
    layouts: List[LayoutCreate] = Field(..., min_length=1)


class ProductionPlanUpdate(BaseModel):
    plan_name: str = Field(..., min_length=1, max_length=255)
    layouts: List[LayoutCreate] = Field(..., min_length=1)


class RatioResponse(BaseModel):
    id: int
    layout_id: int
    size: str
    ratio: int

    class Config:
        from_attributes = True


class TaskResponse(BaseModel):
    id: int
    layout_id: int
    style_id: int
    layout_name: str
    color: str
    planned_layers: int
    completed_layers: int

    class Config:
        from_attributes = True


class LayoutResponse(BaseModel):
    id: int
    plan_id: int
    layout_name: str
    description: Optional[str] = None
    ratios: List[RatioResponse] = Field(default_factory=list)
    tasks: List[TaskResponse] = Field(default_factory=list)

    class Config:
        from_attributes = True


class ProductionPlanResponse(BaseModel):
    id: int
    plan_name: str
    style_id: int
    style_number: Optional[str] = None
    linked_order_id: Optional[int] = None
    created_at: datetime
    layouts: List[LayoutResponse] = Field(default_factory=list)

    class Config:
        from_attributes = True


class PlanPreviewRequest(BaseModel):
    """Unsaved layouts checked against an order while the planner is still editing."""

    order_id: Optional[int] = None
    layouts: List[LayoutCreate] = Field(default_factory=list)
    basis: str = Field("planned", pattern="^(planned|actual)$")
