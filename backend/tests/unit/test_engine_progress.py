from types import SimpleNamespace

from cutrix.engine import (
    TaskState,
    percent_complete,
    roll_layout_progress,
    roll_plan_progress,
    roll_task_progress,
    roll_worker_task_groups,
    task_state,
)


def _task(planned, completed=0, color="red"):
    return SimpleNamespace(color=color, planned_layers=planned, completed_layers=completed)


def _plan(plan_id, *layouts, name=None):
    return SimpleNamespace(
        id=plan_id,
        plan_name=name or f"plan-{plan_id}",
        style_number="ST-1",
        layouts=[SimpleNamespace(tasks=list(tasks)) for tasks in layouts],
    )


class TestTaskProgress:
    def test_percent_rounds_half_up(self):
        assert percent_complete(1, 8) == 13  # 12.5
        assert percent_complete(1, 3) == 33
        assert percent_complete(2, 3) == 67
        assert percent_complete(0, 0) == 0

    def test_over_completion_is_kept(self):
        progress = roll_task_progress(_task(50, 55))
        assert progress.total_completed == 55
        assert progress.progress_percent == 110
        assert progress.pending_tasks == 0
        assert progress.remaining_layers == 0

    def test_states(self):
        assert task_state(_task(50, 0)) == TaskState.NOT_STARTED
        assert task_state(_task(50, 20)) == TaskState.IN_PROGRESS
        assert task_state(_task(50, 50)) == TaskState.COMPLETE
        assert task_state(_task(50, 55)) == TaskState.COMPLETE


class TestPlanProgress:
    def test_plan_totals_equal_sum_of_layouts(self):
        plan = _plan(1, [_task(50, 20), _task(30, 30)], [_task(40, 0)])
        layouts = [roll_layout_progress(layout) for layout in plan.layouts]
        rolled = roll_plan_progress(plan)
        assert rolled.total_planned == sum(p.total_planned for p in layouts) == 120
        assert rolled.total_completed == sum(p.total_completed for p in layouts) == 50
        assert rolled.task_count == 3
        assert rolled.pending_tasks == 2

    def test_empty_plan(self):
        rolled = roll_plan_progress(_plan(1))
        assert rolled.total_planned == 0
        assert rolled.progress_percent == 0


class TestWorkerTaskGroups:
    def test_only_plans_with_pending_work(self):
        done = _plan(1, [_task(10, 10)])
        open_plan = _plan(2, [_task(50, 20), _task(30, 30, color="blue")])
        groups = roll_worker_task_groups(7, [open_plan, done])
        assert [g.plan_id for g in groups] == [2]

        group = groups[0]
        assert group.worker_id == 7
        # totals over the pending task only
        assert group.total_planned == 50
        assert group.total_completed == 20
        assert group.progress_percent == 40
        # but every task of the plan is listed
        assert len(group.tasks) == 2

    def test_groups_ordered_by_plan_id(self):
        plans = [_plan(9, [_task(5)]), _plan(3, [_task(5)]), _plan(5, [_task(5)])]
        assert [g.plan_id for g in roll_worker_task_groups(1, plans)] == [3, 5, 9]
