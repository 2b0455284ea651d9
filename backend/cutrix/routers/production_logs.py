from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from cutrix.database import get_db
from cutrix.schemas.production_log import (
    LogAppendResponse,
    ProcessName,
    ProductionLogCreate,
    ProductionLogResponse,
)
from cutrix.services.production_log_service import ProductionLogService


router = APIRouter(prefix="/production-logs", tags=["Production Logs"])


def get_log_service(db: Session = Depends(get_db)) -> ProductionLogService:
    return ProductionLogService(db)


@router.get("", response_model=List[ProductionLogResponse])
def list_logs(
    task_id: Optional[int] = None,
    worker_id: Optional[int] = None,
    process_name: Optional[ProcessName] = None,
    service: ProductionLogService = Depends(get_log_service),
):
    return service.list_logs(
        task_id=task_id,
        worker_id=worker_id,
        process_name=process_name.value if process_name else None,
    )


@router.post("", response_model=LogAppendResponse, status_code=201)
def append_log(body: ProductionLogCreate, service: ProductionLogService = Depends(get_log_service)):
    return service.append_log_with_summary(body)
