"""
Progress roll-up: task -> layout -> plan, plus the worker dashboard groups.

Percentages are integers rounded half-up so the same layer counts always
render the same number. Over-completion (completed > planned) is kept as-is
in the totals; only display code may choose to cap it.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Optional


class TaskState(str, Enum):
    NOT_STARTED = "NOT_STARTED"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETE = "COMPLETE"


@dataclass(frozen=True)
class Progress:
    total_planned: int = 0
    total_completed: int = 0
    task_count: int = 0
    pending_tasks: int = 0

    @property
    def progress_percent(self) -> int:
        return percent_complete(self.total_completed, self.total_planned)

    @property
    def remaining_layers(self) -> int:
        return max(self.total_planned - self.total_completed, 0)


@dataclass(frozen=True)
class WorkerTaskGroup:
    worker_id: Optional[int]
    plan_id: int
    plan_name: str
    style_number: Optional[str]
    total_planned: int
    total_completed: int
    tasks: List = field(default_factory=list)

    @property
    def progress_percent(self) -> int:
        return percent_complete(self.total_completed, self.total_planned)


def percent_complete(completed: int, planned: int) -> int:
    if planned <= 0:
        return 0
    # floor(100 * c / p + 0.5) in integer arithmetic
    return (200 * completed + planned) // (2 * planned)


def _layers(task):
    return task.planned_layers or 0, task.completed_layers or 0


def is_pending(task) -> bool:
    planned, completed = _layers(task)
    return planned > completed


def task_state(task) -> TaskState:
    planned, completed = _layers(task)
    if completed <= 0:
        return TaskState.NOT_STARTED
    if completed < planned:
        return TaskState.IN_PROGRESS
    return TaskState.COMPLETE


def _roll(tasks: Iterable) -> Progress:
    planned_total = 0
    completed_total = 0
    count = 0
    pending = 0
    for task in tasks:
        planned, completed = _layers(task)
        planned_total += planned
        completed_total += completed
        count += 1
        if planned > completed:
            pending += 1
    return Progress(
        total_planned=planned_total,
        total_completed=completed_total,
        task_count=count,
        pending_tasks=pending,
    )


def roll_task_progress(task) -> Progress:
    return _roll([task])


def roll_layout_progress(layout) -> Progress:
    return _roll(layout.tasks or [])


def plan_tasks(plan) -> List:
    return [task for layout in plan.layouts or [] for task in layout.tasks or []]


def roll_plan_progress(plan) -> Progress:
    return _roll(plan_tasks(plan))


def roll_worker_task_groups(worker_id: Optional[int], plans: Iterable) -> List[WorkerTaskGroup]:
    """
    One group per plan that still has unfinished work.

    Totals cover the plan's pending tasks only, while ``tasks`` lists every
    task of the plan so the dashboard can show finished colors alongside.
    Every worker sees every pending task; the data model carries no
    task-to-worker assignment.
    """
    groups = []
    for plan in sorted(plans, key=lambda p: p.id):
        tasks = plan_tasks(plan)
        pending = _roll(task for task in tasks if is_pending(task))
        if pending.task_count == 0:
            continue
        groups.append(
            WorkerTaskGroup(
                worker_id=worker_id,
                plan_id=plan.id,
                plan_name=plan.plan_name,
                style_number=getattr(plan, "style_number", None),
                total_planned=pending.total_planned,
                total_completed=pending.total_completed,
                tasks=tasks,
            )
        )
    return groups
