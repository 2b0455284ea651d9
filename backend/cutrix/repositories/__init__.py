# Repository Layer — Data Access (Repository Pattern, GoF)
from cutrix.repositories.base import BaseRepository
from cutrix.repositories.style_repository import StyleRepository
from cutrix.repositories.worker_repository import WorkerRepository
from cutrix.repositories.production_order_repository import ProductionOrderRepository
from cutrix.repositories.production_plan_repository import ProductionPlanRepository
from cutrix.repositories.production_task_repository import ProductionTaskRepository
from cutrix.repositories.production_log_repository import ProductionLogRepository
from cutrix.repositories.plan_progress_repository import PlanProgressRepository

__all__ = [
    "BaseRepository",
    "StyleRepository",
    "WorkerRepository",
    "ProductionOrderRepository",
    "ProductionPlanRepository",
    "ProductionTaskRepository",
    "ProductionLogRepository",
    "PlanProgressRepository",
]
