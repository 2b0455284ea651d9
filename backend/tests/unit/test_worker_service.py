import pytest

from cutrix.core.exceptions import ConflictException
from cutrix.schemas.production_log import ProcessName, ProductionLogCreate
from cutrix.schemas.worker import WorkerCreate, WorkerUpdate
from cutrix.services.production_log_service import ProductionLogService
from cutrix.services.worker_service import WorkerService


def test_duplicate_name_conflicts(db, worker):
    with pytest.raises(ConflictException):
        WorkerService(db).create_worker(WorkerCreate(name=worker.name))


def test_update_worker(db, worker):
    updated = WorkerService(db).update_worker(worker.id, WorkerUpdate(is_active=False, notes="night shift"))
    assert updated.is_active is False
    assert updated.notes == "night shift"


def test_worker_with_logs_cannot_be_deleted(db, task, worker):
    ProductionLogService(db).append_log(ProductionLogCreate(
        task_id=task.id, worker_id=worker.id, process_name=ProcessName.PACKING, layers_completed=3,
    ))
    with pytest.raises(ConflictException):
        WorkerService(db).delete_worker(worker.id)


def test_task_groups_drop_finished_plans(db, plan, task, worker):
    service = WorkerService(db)
    groups = service.task_groups(worker.id)
    assert [g.plan_id for g in groups] == [plan.id]
    assert groups[0].total_planned == 50
    assert groups[0].style_number == "ST-1001"

    ProductionLogService(db).append_log(ProductionLogCreate(
        task_id=task.id, worker_id=worker.id, process_name=ProcessName.CUTTING, layers_completed=50,
    ))
    assert service.task_groups(worker.id) == []


def test_worker_group_is_stored_and_filterable(db, worker):
    service = WorkerService(db)
    grouped = service.create_worker(WorkerCreate(name="Wang Fang", worker_group="spreaders"))
    assert grouped.worker_group == "spreaders"
    assert [w.id for w in service.list_workers(worker_group="spreaders")] == [grouped.id]
    assert {w.id for w in service.list_workers()} == {worker.id, grouped.id}
