from typing import List, Optional

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from cutrix.database import get_db
from cutrix.schemas.progress import WorkerTaskGroupResponse
from cutrix.schemas.worker import WorkerCreate, WorkerResponse, WorkerUpdate
from cutrix.services.worker_service import WorkerService


router = APIRouter(prefix="/workers", tags=["Workers"])


def get_worker_service(db: Session = Depends(get_db)) -> WorkerService:
    return WorkerService(db)


@router.get("", response_model=List[WorkerResponse])
def list_workers(
    worker_group: Optional[str] = None,
    service: WorkerService = Depends(get_worker_service),
):
    return service.list_workers(worker_group=worker_group)


@router.post("", response_model=WorkerResponse, status_code=201)
def create_worker(body: WorkerCreate, service: WorkerService = Depends(get_worker_service)):
    return service.create_worker(body)


@router.get("/{worker_id}", response_model=WorkerResponse)
def get_worker(worker_id: int, service: WorkerService = Depends(get_worker_service)):
    return service.get_worker(worker_id)


@router.put("/{worker_id}", response_model=WorkerResponse)
def update_worker(worker_id: int, body: WorkerUpdate, service: WorkerService = Depends(get_worker_service)):
    return service.update_worker(worker_id, body)


@router.delete("/{worker_id}", status_code=204)
def delete_worker(worker_id: int, service: WorkerService = Depends(get_worker_service)):
    service.delete_worker(worker_id)
    return Response(status_code=204)


@router.get("/{worker_id}/task-groups", response_model=List[WorkerTaskGroupResponse])
def get_task_groups(worker_id: int, service: WorkerService = Depends(get_worker_service)):
    return service.task_groups(worker_id)
