from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from cutrix.database import get_db
from cutrix.schemas.style import StyleCreate, StyleResponse
from cutrix.services.style_service import StyleService


router = APIRouter(prefix="/styles", tags=["Styles"])


def get_style_service(db: Session = Depends(get_db)) -> StyleService:
    return StyleService(db)


@router.get("", response_model=List[StyleResponse])
def list_styles(service: StyleService = Depends(get_style_service)):
    return service.list_styles()


@router.post("", response_model=StyleResponse, status_code=201)
def create_style(body: StyleCreate, service: StyleService = Depends(get_style_service)):
    return service.create_style(body)


@router.get("/{style_id}", response_model=StyleResponse)
def get_style(style_id: int, service: StyleService = Depends(get_style_service)):
    return service.get_style(style_id)
