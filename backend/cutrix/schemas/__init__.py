from cutrix.schemas.style import StyleCreate, StyleResponse
from cutrix.schemas.worker import WorkerCreate, WorkerUpdate, WorkerResponse
from cutrix.schemas.production_order import OrderItemCreate, ProductionOrderCreate, ProductionOrderResponse
from cutrix.schemas.production_plan import (
    RatioCreate,
    TaskCreate,
    LayoutCreate,
    ProductionPlanCreate,
    ProductionPlanUpdate,
    ProductionPlanResponse,
    PlanPreviewRequest,
    TaskResponse,
)
from cutrix.schemas.production_log import ProcessName, ProductionLogCreate, ProductionLogResponse, LogAppendResponse
from cutrix.schemas.planning import DemandMatrixResponse, SupplyMatricesResponse, ReconciliationResponse
from cutrix.schemas.progress import (
    ProgressResponse,
    TaskProgressResponse,
    LayoutProgressResponse,
    PlanProgressResponse,
    PlanProgressSnapshotResponse,
    WorkerTaskGroupResponse,
)
