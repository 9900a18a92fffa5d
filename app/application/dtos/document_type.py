"""DTOs for document type listing (no dependency on ORM).

ListingRequest is what the transport hands to the use case; DocumentTypeQuery
is the normalized filter handed to the catalog port; ListingResult is the
tagged outcome (exactly one of success, not found, forbidden).
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Literal
from uuid import UUID

from app.domain.identity import CallerIdentity

DEFAULT_LIMIT = 100
MAX_LIMIT = 500


def normalize_limit(limit: int | None) -> int:
    """Return limit clamped to [1, MAX_LIMIT]; None or non-positive becomes DEFAULT_LIMIT."""
    if limit is None or limit <= 0:
        limit = DEFAULT_LIMIT
    return max(1, min(limit, MAX_LIMIT))


def normalize_query(q: str | None) -> str | None:
    """Return the trimmed search term, or None when empty or blank."""
    if q is None:
        return None
    trimmed = q.strip()
    return trimmed or None


@dataclass(frozen=True)
class ListingRequest:
    """One call to list document types for a project.

    request_id and correlation_id are optional log context forwarded to the
    listing observer; they do not affect the outcome.
    """

    project_id: UUID
    identity: CallerIdentity | None
    q: str | None = None
    active_only: bool = True
    limit: int | None = DEFAULT_LIMIT
    request_id: str | None = None
    correlation_id: str | None = None

    def normalized(self) -> ListingRequest:
        """Return a copy with trimmed q (None if blank) and clamped limit."""
        return replace(self, q=normalize_query(self.q), limit=normalize_limit(self.limit))


@dataclass(frozen=True)
class DocumentTypeQuery:
    """Normalized catalog filter shared by the page and the count query."""

    project_id: UUID
    organization_id: UUID
    q: str | None
    active_only: bool
    limit: int


@dataclass(frozen=True)
class DocumentTypeResult:
    """Document type read-model (one catalog entry)."""

    id: UUID
    code: str
    name: str
    is_active: bool
    order: int


@dataclass(frozen=True)
class ListingSuccess:
    """Authorized page of document types plus the uncapped match count."""

    items: list[DocumentTypeResult] = field(default_factory=list)
    total: int = 0


@dataclass(frozen=True)
class ListingNotFound:
    """The project does not exist."""

    message: str = "Project not found."
    error: Literal["not_found"] = "not_found"


@dataclass(frozen=True)
class ListingForbidden:
    """The caller has no matching project or organization claim."""

    message: str = "You don't have access to this project."
    error: Literal["forbidden"] = "forbidden"


ListingResult = ListingSuccess | ListingNotFound | ListingForbidden
