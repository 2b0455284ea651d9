import pytest

from cutrix.config import settings
from cutrix.core.exceptions import EntityNotFoundException, ValidationException
from cutrix.engine import TaskState, task_state
from cutrix.models.plan_progress import PlanProgressSnapshot
from cutrix.repositories.production_log_repository import ProductionLogRepository
from cutrix.schemas.production_log import ProcessName, ProductionLogCreate
from cutrix.services.production_log_service import ProductionLogService


def _log(task, worker, layers, process=ProcessName.SPREADING):
    return ProductionLogCreate(
        task_id=task.id,
        worker_id=worker.id,
        process_name=process,
        layers_completed=layers,
    )


def test_append_increments_completed_layers(db, task, worker):
    service = ProductionLogService(db)
    before = task.completed_layers

    updated = service.append_log(_log(task, worker, 12))

    assert updated.completed_layers == before + 12
    assert task_state(updated) == TaskState.IN_PROGRESS


def test_over_completion_to_fifty_five(db, task, worker):
    service = ProductionLogService(db)
    service.append_log(_log(task, worker, 20))
    updated = service.append_log(_log(task, worker, 35, ProcessName.CUTTING))

    assert updated.completed_layers == 55
    assert task_state(updated) == TaskState.COMPLETE
    assert ProductionLogRepository(db).sum_layers_for_task(task.id) == 55


def test_state_never_regresses(db, task, worker):
    service = ProductionLogService(db)
    states = []
    for layers in (5, 5, 40, 1):
        states.append(task_state(service.append_log(_log(task, worker, layers))))
    order = [TaskState.NOT_STARTED, TaskState.IN_PROGRESS, TaskState.COMPLETE]
    assert [order.index(s) for s in states] == sorted(order.index(s) for s in states)


@pytest.mark.parametrize("layers", [0, -3])
def test_non_positive_layers_rejected(db, task, worker, layers):
    with pytest.raises(ValidationException):
        ProductionLogService(db).append_log(_log(task, worker, layers))
    db.refresh(task)
    assert task.completed_layers == 0
    assert ProductionLogRepository(db).list_filtered(task_id=task.id) == []


def test_unknown_task_or_worker(db, task, worker):
    service = ProductionLogService(db)
    with pytest.raises(EntityNotFoundException):
        service.append_log(ProductionLogCreate(
            task_id=9999, worker_id=worker.id, process_name=ProcessName.LOADING, layers_completed=1,
        ))
    with pytest.raises(EntityNotFoundException):
        service.append_log(ProductionLogCreate(
            task_id=task.id, worker_id=9999, process_name=ProcessName.LOADING, layers_completed=1,
        ))


def test_over_completion_can_be_disabled(db, task, worker, monkeypatch):
    monkeypatch.setattr(settings, "ALLOW_OVER_COMPLETION", False)
    service = ProductionLogService(db)
    service.append_log(_log(task, worker, 45))

    with pytest.raises(ValidationException):
        service.append_log(_log(task, worker, 10))

    db.refresh(task)
    assert task.completed_layers == 45
    assert len(ProductionLogRepository(db).list_filtered(task_id=task.id)) == 1

    assert service.append_log(_log(task, worker, 5)).completed_layers == 50


def test_append_refreshes_plan_snapshot(db, plan, task, worker):
    ProductionLogService(db).append_log(_log(task, worker, 25))

    db.expire_all()
    snapshot = db.get(PlanProgressSnapshot, plan.id)
    assert snapshot is not None
    assert snapshot.total_completed == 25
    assert snapshot.progress_percent == 50


def test_summary_response(db, task, worker):
    summary = ProductionLogService(db).append_log_with_summary(_log(task, worker, 50))
    assert summary.completed_layers == 50
    assert summary.state == TaskState.COMPLETE.value
    assert summary.progress_percent == 100
    assert summary.log.process_name == ProcessName.SPREADING
