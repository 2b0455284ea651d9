"""
Style Service — Service Layer (SRP / DIP)
"""
from typing import List

from sqlalchemy.orm import Session

from cutrix.core.exceptions import ConflictException, EntityNotFoundException, ValidationException
from cutrix.models.style import Style
from cutrix.repositories.style_repository import StyleRepository
from cutrix.schemas.style import StyleCreate


class StyleService:

    def __init__(self, db: Session):
        self._repo = StyleRepository(db)

    def list_styles(self) -> List[Style]:
        return self._repo.get_all()

    def get_style(self, style_id: int) -> Style:
        style = self._repo.get_by_id(style_id)
        if not style:
            raise EntityNotFoundException("Style", style_id)
        return style

    def create_style(self, data: StyleCreate) -> Style:
        style_number = data.style_number.strip()
        if not style_number:
            raise ValidationException("Style number is required.")
        if self._repo.get_by_number(style_number):
            raise ConflictException(f"Style '{style_number}' already exists.")
        return self._repo.create(Style(style_number=style_number))

    def get_or_create(self, style_number: str) -> Style:
        """Orders may introduce a new style number; it is registered on the fly."""
        style_number = style_number.strip()
        if not style_number:
            raise ValidationException("Style number is required.")
        style = self._repo.get_by_number(style_number)
        if style:
            return style
        return self._repo.create(Style(style_number=style_number))
