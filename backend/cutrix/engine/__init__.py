"""
Quota-matching and progress-aggregation engine.

Pure functions over plain snapshots (ORM rows, request models, or any object
exposing the same attributes). Nothing here touches the database.
"""
from cutrix.engine.matrix import Matrix, matrix_total
from cutrix.engine.ratio import SupplyBasis, calculate_output, effective_ratios, task_output
from cutrix.engine.demand import compute_demand_matrix, demand_from_items
from cutrix.engine.supply import SupplyMatrices, compute_supply_matrices, supply_from_layouts
from cutrix.engine.reconciler import ReconciliationCell, ReconciliationView, Verdict, reconcile
from cutrix.engine.progress import (
    Progress,
    TaskState,
    WorkerTaskGroup,
    percent_complete,
    roll_layout_progress,
    roll_plan_progress,
    roll_task_progress,
    roll_worker_task_groups,
    task_state,
)

__all__ = [
    "Matrix",
    "matrix_total",
    "SupplyBasis",
    "calculate_output",
    "effective_ratios",
    "task_output",
    "compute_demand_matrix",
    "demand_from_items",
    "SupplyMatrices",
    "compute_supply_matrices",
    "supply_from_layouts",
    "ReconciliationCell",
    "ReconciliationView",
    "Verdict",
    "reconcile",
    "Progress",
    "TaskState",
    "WorkerTaskGroup",
    "percent_complete",
    "roll_layout_progress",
    "roll_plan_progress",
    "roll_task_progress",
    "roll_worker_task_groups",
    "task_state",
]
