"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for caller identity, catalog repositories and the
listing use case. Routes depend only on these dependencies, not on infra directly.
"""

from app.api.v1.dependencies.auth import (
    get_caller_identity,
    has_permission,
    require_document_read,
)
from app.api.v1.dependencies.catalog import (
    CatalogBackend,
    get_access_evaluator,
    get_document_type_repo,
    get_list_document_types_use_case,
    get_listing_observer,
    get_memory_store,
    get_project_repo,
)

__all__ = [
    "CatalogBackend",
    "get_access_evaluator",
    "get_caller_identity",
    "get_document_type_repo",
    "get_list_document_types_use_case",
    "get_listing_observer",
    "get_memory_store",
    "get_project_repo",
    "has_permission",
    "require_document_read",
]
