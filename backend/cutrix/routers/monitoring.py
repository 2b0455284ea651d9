from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from cutrix.database import get_db
from cutrix.schemas.progress import PlanProgressSnapshotResponse
from cutrix.services.monitoring_service import MonitoringService


router = APIRouter(prefix="/monitoring", tags=["Monitoring"])


def get_monitoring_service(db: Session = Depends(get_db)) -> MonitoringService:
    return MonitoringService(db)


@router.get("/plans", response_model=List[PlanProgressSnapshotResponse])
def list_plan_snapshots(service: MonitoringService = Depends(get_monitoring_service)):
    return service.list_snapshots()


@router.post("/plans/rebuild", response_model=List[PlanProgressSnapshotResponse])
def rebuild_plan_snapshots(service: MonitoringService = Depends(get_monitoring_service)):
    return service.rebuild_snapshots()
