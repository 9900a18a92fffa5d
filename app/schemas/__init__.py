"""Pydantic request/response schemas for the API."""

from app.schemas.document_type import (
    DocumentTypeItem,
    DocumentTypeListResponse,
    ErrorResponse,
)
from app.schemas.health import (
    HealthResponse,
    ReadinessErrorResponse,
    ReadinessResponse,
)

__all__ = [
    "DocumentTypeItem",
    "DocumentTypeListResponse",
    "ErrorResponse",
    "HealthResponse",
    "ReadinessErrorResponse",
    "ReadinessResponse",
]
