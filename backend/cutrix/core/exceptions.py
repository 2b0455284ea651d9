"""
Domain exceptions.

Services raise these; the global handler in ``cutrix.main`` turns them into
structured JSON responses through :func:`to_http_exception`.
"""
from typing import Any, Optional

from fastapi import HTTPException, status


class CutrixException(Exception):
    code = "CUTRIX_ERROR"
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class EntityNotFoundException(CutrixException):
    code = "NOT_FOUND"
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, entity: str, entity_id: Any):
        super().__init__(
            f"{entity} with id {entity_id} not found",
            details={"entity": entity, "id": entity_id},
        )
        self.entity = entity
        self.entity_id = entity_id


class ValidationException(CutrixException):
    code = "VALIDATION_ERROR"
    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY


class ConflictException(CutrixException):
    code = "CONFLICT"
    status_code = status.HTTP_409_CONFLICT


def to_http_exception(exc: CutrixException) -> HTTPException:
    detail = {"code": exc.code, "message": exc.message}
    if exc.details:
        detail["details"] = exc.details
    return HTTPException(status_code=exc.status_code, detail=detail)
