"""Persistence repositories: SQLAlchemy implementations of the application ports."""

from app.infrastructure.persistence.repositories.document_type_repo import (
    DocumentTypeRepository,
)
from app.infrastructure.persistence.repositories.project_repo import ProjectRepository

__all__ = [
    "DocumentTypeRepository",
    "ProjectRepository",
]
