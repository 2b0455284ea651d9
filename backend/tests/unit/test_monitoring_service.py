from cutrix.engine import TaskState
from cutrix.schemas.production_log import ProcessName, ProductionLogCreate
from cutrix.services.monitoring_service import MonitoringService
from cutrix.services.production_log_service import ProductionLogService
from cutrix.services.task_service import TaskService
from cutrix.utils.events import EventBus, ProductionLogAppendedEvent


def test_plan_progress_per_layout(db, plan, task, worker):
    ProductionLogService(db).append_log(ProductionLogCreate(
        task_id=task.id, worker_id=worker.id, process_name=ProcessName.SPREADING, layers_completed=20,
    ))
    progress = MonitoringService(db).plan_progress(plan.id)
    assert progress.total_planned == 50
    assert progress.total_completed == 20
    assert progress.progress_percent == 40
    assert progress.remaining_layers == 30
    assert [layout.total_completed for layout in progress.layouts] == [20]


def test_list_snapshots_fills_missing(db, plan):
    snapshots = MonitoringService(db).list_snapshots()
    assert [s.plan_id for s in snapshots] == [plan.id]
    assert snapshots[0].pending_tasks == 1
    assert snapshots[0].progress_percent == 0


def test_refresh_for_deleted_plan_is_noop(db):
    assert MonitoringService(db).refresh_plan_snapshot(424242) is None


def test_task_progress_states(db, plan, task, worker):
    service = TaskService(db)
    assert [t.state for t in service.task_progress(plan_id=plan.id)] == [TaskState.NOT_STARTED.value]

    ProductionLogService(db).append_log(ProductionLogCreate(
        task_id=task.id, worker_id=worker.id, process_name=ProcessName.CUTTING, layers_completed=55,
    ))
    rows = service.task_progress(plan_id=plan.id)
    assert rows[0].state == TaskState.COMPLETE.value
    assert rows[0].progress_percent == 110
    assert service.list_tasks(pending_only=True) == []


def test_failing_handler_does_not_propagate():
    bus = EventBus()
    seen = []

    def broken(event):
        raise RuntimeError("boom")

    bus.subscribe(ProductionLogAppendedEvent, broken)
    bus.subscribe(ProductionLogAppendedEvent, seen.append)
    bus.publish(ProductionLogAppendedEvent(entity_type="production_task", entity_id=1, task_id=1, plan_id=1))
    assert len(seen) == 1


def test_snapshot_follows_layout_replacement(db, plan):
    from cutrix.schemas.production_plan import ProductionPlanUpdate
    from cutrix.services.production_plan_service import ProductionPlanService

    monitoring = MonitoringService(db)
    assert [s.total_planned for s in monitoring.list_snapshots()] == [50]

    ProductionPlanService(db).update_plan(plan.id, ProductionPlanUpdate.model_validate({
        "plan_name": plan.plan_name,
        "layouts": [{
            "layout_name": "B",
            "ratios": [{"size": "100", "ratio": 1}],
            "tasks": [{"color": "red", "planned_layers": 80}],
        }],
    }))

    db.expire_all()
    live = monitoring.plan_progress(plan.id)
    snapshot = monitoring.list_snapshots()[0]
    assert live.total_planned == 80
    assert snapshot.total_planned == live.total_planned
    assert snapshot.pending_tasks == live.pending_tasks
    assert snapshot.progress_percent == live.progress_percent
