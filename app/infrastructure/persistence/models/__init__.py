"""Persistence models: ORM entities and mixins."""

from app.infrastructure.persistence.models.document_type import DocumentType
from app.infrastructure.persistence.models.mixins import (
    CatalogModel,
    TimestampMixin,
    UuidMixin,
)
from app.infrastructure.persistence.models.project import Project

__all__ = [
    "CatalogModel",
    "DocumentType",
    "Project",
    "TimestampMixin",
    "UuidMixin",
]
