from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class OrderItemCreate(BaseModel):
    color: str = Field(..., min_length=1, max_length=50)
    size: str = Field(..., min_length=1, max_length=20)
    quantity: int = Field(..., gt=0)


class ProductionOrderCreate(BaseModel):
    style_number: str = Field(..., min_length=1, max_length=100)
    items: List[OrderItemCreate] = Field(..., min_length=1)


class OrderItemResponse(BaseModel):
    id: int
    order_id: int
    color: str
    size: str
    quantity: int

    class Config:
        from_attributes = True


class ProductionOrderResponse(BaseModel):
    id: int
    order_number: str
    style_id: int
    style_number: Optional[str] = None
    created_at: datetime
    items: List[OrderItemResponse] = Field(default_factory=list)

    class Config:
        from_attributes = True
