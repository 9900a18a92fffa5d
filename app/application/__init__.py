"""Application layer: interfaces, services, use cases.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (repositories, observers).
"""

from app.application.interfaces import (
    IDocumentTypeRepository,
    IListingObserver,
    IProjectAccessEvaluator,
    IProjectRepository,
)
from app.application.services.project_access_evaluator import ProjectAccessEvaluator
from app.application.use_cases.document_types import ListDocumentTypesUseCase

__all__ = [
    "IDocumentTypeRepository",
    "IListingObserver",
    "IProjectAccessEvaluator",
    "IProjectRepository",
    "ListDocumentTypesUseCase",
    "ProjectAccessEvaluator",
]
