from typing import Any, Dict, Generic, List, Optional, Tuple, Type, TypeVar

from sqlalchemy.orm import Session

from cutrix.database import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    def __init__(self, model: Type[ModelType], db: Session):
        self.model = model
        self.db = db

    def get_by_id(self, entity_id: int) -> Optional[ModelType]:
        return self.db.get(self.model, entity_id)

    def get_all(self) -> List[ModelType]:
        return self.db.query(self.model).order_by(self.model.id).all()

    def list_paginated(self, page: int = 1, page_size: int = 20, **filters: Any) -> Tuple[List[ModelType], int]:
        q = self.db.query(self.model)
        for column, value in filters.items():
            if value is not None:
                q = q.filter(getattr(self.model, column) == value)
        total = q.count()
        items = q.order_by(self.model.id.desc()).offset((page - 1) * page_size).limit(page_size).all()
        return items, total

    def create(self, obj: ModelType) -> ModelType:
        self.db.add(obj)
        self.db.commit()
        self.db.refresh(obj)
        return obj

    def update(self, obj: ModelType, updates: Dict[str, Any]) -> ModelType:
        for key, value in updates.items():
            setattr(obj, key, value)
        self.db.commit()
        self.db.refresh(obj)
        return obj

    def delete(self, obj: ModelType) -> None:
        self.db.delete(obj)
        self.db.commit()
