from typing import Optional

from sqlalchemy.orm import Session

from cutrix.models.style import Style
from cutrix.repositories.base import BaseRepository


class StyleRepository(BaseRepository[Style]):
    def __init__(self, db: Session):
        super().__init__(Style, db)

    def get_by_number(self, style_number: str) -> Optional[Style]:
        return self.db.query(Style).filter(Style.style_number == style_number).first()
