"""Response builders that turn engine value objects into API schemas."""
from typing import Optional

from cutrix.engine import (
    Progress,
    ReconciliationView,
    SupplyBasis,
    WorkerTaskGroup,
    roll_layout_progress,
    roll_plan_progress,
)
from cutrix.schemas.planning import ReconciliationCellResponse, ReconciliationResponse
from cutrix.schemas.production_plan import TaskResponse
from cutrix.schemas.progress import LayoutProgressResponse, PlanProgressResponse, WorkerTaskGroupResponse


def progress_fields(progress: Progress) -> dict:
    return {
        "total_planned": progress.total_planned,
        "total_completed": progress.total_completed,
        "task_count": progress.task_count,
        "pending_tasks": progress.pending_tasks,
        "progress_percent": progress.progress_percent,
        "remaining_layers": progress.remaining_layers,
    }


def plan_progress_view(plan) -> PlanProgressResponse:
    return PlanProgressResponse(
        plan_id=plan.id,
        plan_name=plan.plan_name,
        layouts=[
            LayoutProgressResponse(
                layout_id=layout.id,
                layout_name=layout.layout_name,
                **progress_fields(roll_layout_progress(layout)),
            )
            for layout in plan.layouts
        ],
        **progress_fields(roll_plan_progress(plan)),
    )


def reconciliation_response(
    view: ReconciliationView,
    basis: SupplyBasis,
    plan_id: Optional[int] = None,
    order_id: Optional[int] = None,
) -> ReconciliationResponse:
    return ReconciliationResponse(
        plan_id=plan_id,
        order_id=order_id,
        basis=basis.value,
        cells=[
            ReconciliationCellResponse(
                color=cell.color,
                size=cell.size,
                supplied=cell.supplied,
                required=cell.required,
                difference=cell.difference,
                verdict=cell.verdict,
            )
            for cell in view.cells
        ],
        total_required=view.total_required,
        total_supplied=view.total_supplied,
        verdict_counts=view.verdict_counts,
        is_fulfilled=view.is_fulfilled,
    )


def worker_task_group_view(group: WorkerTaskGroup) -> WorkerTaskGroupResponse:
    return WorkerTaskGroupResponse(
        worker_id=group.worker_id,
        plan_id=group.plan_id,
        plan_name=group.plan_name,
        style_number=group.style_number,
        total_planned=group.total_planned,
        total_completed=group.total_completed,
        progress_percent=group.progress_percent,
        tasks=[TaskResponse.model_validate(task) for task in group.tasks],
    )
