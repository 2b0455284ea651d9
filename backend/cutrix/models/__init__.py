from cutrix.models.style import Style
from cutrix.models.worker import Worker
from cutrix.models.production_order import ProductionOrder, OrderItem
from cutrix.models.production_plan import ProductionPlan, CuttingLayout, LayoutSizeRatio
from cutrix.models.production_task import ProductionTask
from cutrix.models.production_log import ProductionLog
from cutrix.models.plan_progress import PlanProgressSnapshot

__all__ = [
    "Style",
    "Worker",
    "ProductionOrder",
    "OrderItem",
    "ProductionPlan",
    "CuttingLayout",
    "LayoutSizeRatio",
    "ProductionTask",
    "ProductionLog",
    "PlanProgressSnapshot",
]
