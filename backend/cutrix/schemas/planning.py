from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from cutrix.engine.reconciler import Verdict

# color -> size -> pieces
MatrixPayload = Dict[str, Dict[str, int]]


class DemandMatrixResponse(BaseModel):
    order_id: int
    order_number: str
    demand: MatrixPayload = Field(default_factory=dict)
    total_required: int


class SupplyMatricesResponse(BaseModel):
    plan_id: int
    planned: MatrixPayload = Field(default_factory=dict)
    actual: MatrixPayload = Field(default_factory=dict)
    total_planned: int
    total_actual: int


class ReconciliationCellResponse(BaseModel):
    color: str
    size: str
    supplied: int
    required: int
    difference: int
    verdict: Verdict

    class Config:
        from_attributes = True


class ReconciliationResponse(BaseModel):
    plan_id: Optional[int] = None
    order_id: Optional[int] = None
    basis: str
    cells: List[ReconciliationCellResponse] = Field(default_factory=list)
    total_required: int
    total_supplied: int
    verdict_counts: Dict[str, int] = Field(default_factory=dict)
    is_fulfilled: bool

    class Config:
        from_attributes = True
