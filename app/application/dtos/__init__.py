"""Application DTOs (no ORM dependency)."""

from app.application.dtos.document_type import (
    DEFAULT_LIMIT,
    MAX_LIMIT,
    DocumentTypeQuery,
    DocumentTypeResult,
    ListingForbidden,
    ListingNotFound,
    ListingRequest,
    ListingResult,
    ListingSuccess,
    normalize_limit,
    normalize_query,
)

__all__ = [
    "DEFAULT_LIMIT",
    "MAX_LIMIT",
    "DocumentTypeQuery",
    "DocumentTypeResult",
    "ListingForbidden",
    "ListingNotFound",
    "ListingRequest",
    "ListingResult",
    "ListingSuccess",
    "normalize_limit",
    "normalize_query",
]
