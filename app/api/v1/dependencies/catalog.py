"""Catalog repositories and listing use case (composition root).

When database_backend is 'postgres', repositories use SQLAlchemy.
When database_backend is 'memory', they read the shared MemoryCatalogStore
held on app.state. Switch backends via DATABASE_BACKEND in config.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator
from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.interfaces.repositories import (
    IDocumentTypeRepository,
    IProjectRepository,
)
from app.application.services.project_access_evaluator import ProjectAccessEvaluator
from app.application.use_cases.document_types import ListDocumentTypesUseCase
from app.core.config import get_settings
from app.infrastructure.memory import (
    InMemoryDocumentTypeRepository,
    InMemoryProjectRepository,
    MemoryCatalogStore,
)
from app.infrastructure.persistence.database import get_db
from app.infrastructure.persistence.repositories import (
    DocumentTypeRepository,
    ProjectRepository,
)
from app.infrastructure.services import LoggingListingObserver


@dataclass
class CatalogBackend:
    """Either a Postgres session or the in-memory store, per DATABASE_BACKEND."""

    db: AsyncSession | None
    memory: MemoryCatalogStore | None


def get_memory_store(request: Request) -> MemoryCatalogStore:
    """Return the app-wide memory store, loading the seed file on first use."""
    store = getattr(request.app.state, "memory_store", None)
    if store is None:
        store = MemoryCatalogStore.from_settings(get_settings())
        request.app.state.memory_store = store
    return store


async def _get_catalog_backend(request: Request) -> AsyncGenerator[CatalogBackend, None]:
    """Yield a read session or the memory store based on config."""
    if get_settings().database_backend == "postgres":
        async for session in get_db():
            yield CatalogBackend(db=session, memory=None)
    else:
        yield CatalogBackend(db=None, memory=get_memory_store(request))


async def get_project_repo(
    backend: Annotated[CatalogBackend, Depends(_get_catalog_backend)],
) -> IProjectRepository:
    """Project repository (Postgres or memory from config)."""
    if backend.db is not None:
        return ProjectRepository(backend.db)
    assert backend.memory is not None
    return InMemoryProjectRepository(backend.memory)


async def get_document_type_repo(
    backend: Annotated[CatalogBackend, Depends(_get_catalog_backend)],
) -> IDocumentTypeRepository:
    """Document type repository (Postgres or memory from config)."""
    if backend.db is not None:
        return DocumentTypeRepository(
            backend.db, use_unaccent=get_settings().db_unaccent
        )
    assert backend.memory is not None
    return InMemoryDocumentTypeRepository(backend.memory)


def get_access_evaluator() -> ProjectAccessEvaluator:
    """Claim-based project access evaluator (composition root)."""
    return ProjectAccessEvaluator()


def get_listing_observer() -> LoggingListingObserver:
    """Log-only listing observer (composition root)."""
    return LoggingListingObserver()


def get_list_document_types_use_case(
    project_repo: Annotated[IProjectRepository, Depends(get_project_repo)],
    document_type_repo: Annotated[
        IDocumentTypeRepository, Depends(get_document_type_repo)
    ],
    access_evaluator: Annotated[ProjectAccessEvaluator, Depends(get_access_evaluator)],
    observer: Annotated[LoggingListingObserver, Depends(get_listing_observer)],
) -> ListDocumentTypesUseCase:
    """List document types use case (composition root)."""
    return ListDocumentTypesUseCase(
        project_repo=project_repo,
        document_type_repo=document_type_repo,
        access_evaluator=access_evaluator,
        observer=observer,
    )
