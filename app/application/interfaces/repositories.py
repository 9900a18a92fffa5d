"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports.
Implementations raise RetrievalException on backend failure; "no row" is
expressed by the return value, never by an exception.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol
from uuid import UUID

if TYPE_CHECKING:
    from app.application.dtos.document_type import (
        DocumentTypeQuery,
        DocumentTypeResult,
    )


# Project repository interface
class IProjectRepository(Protocol):
    """Protocol for resolving a project to its owning organization (DIP)."""

    async def get_org_id(self, project_id: UUID) -> UUID | None:
        """Return the organization id that owns the project, or None if the project does not exist."""


# Document type repository interface
class IDocumentTypeRepository(Protocol):
    """Protocol for the document type catalog (read-only)."""

    async def list_for_project(
        self, query: DocumentTypeQuery
    ) -> tuple[list[DocumentTypeResult], int]:
        """Return (page, total): at most query.limit visible entries ordered by
        display order then name, and the count of all entries matching the filter.
        """
