"""Service interfaces (ports) for the application layer.

Protocols define contracts for application services (DIP).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol
from uuid import UUID

if TYPE_CHECKING:
    from app.domain.identity import CallerIdentity


# Project access evaluator interface
class IProjectAccessEvaluator(Protocol):
    """Protocol for deciding whether a caller may read a project's catalog."""

    def has_access(
        self,
        identity: CallerIdentity | None,
        project_id: UUID,
        organization_id: UUID | None,
    ) -> bool:
        """Return True if the identity carries the project id or the owning organization id."""


# Listing observer: request-scoped log context is passed explicitly, never read from globals
class IListingObserver(Protocol):
    """Protocol for observing document type listing outcomes (logging, metrics)."""

    def project_not_found(
        self,
        project_id: UUID,
        *,
        user_id: str | None = None,
        request_id: str | None = None,
        correlation_id: str | None = None,
    ) -> None:
        """Called when the project does not exist."""

    def access_denied(
        self,
        project_id: UUID,
        *,
        user_id: str | None = None,
        request_id: str | None = None,
        correlation_id: str | None = None,
    ) -> None:
        """Called when the caller is not allowed to read the project's catalog."""

    def listed(
        self,
        project_id: UUID,
        count: int,
        total: int,
        *,
        user_id: str | None = None,
        request_id: str | None = None,
        correlation_id: str | None = None,
    ) -> None:
        """Called after a successful listing with the returned and total counts."""
