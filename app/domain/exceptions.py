"""Domain exceptions for the Document Types API.

Defines domain-level exceptions that represent business rule violations and
backend failures. These exceptions are independent of infrastructure concerns.
Presentation layer maps them to HTTP responses in exception handlers.

Not-found and forbidden listings are not exceptions: the listing use case
returns them as tagged results (see app.application.dtos.document_type).
"""

from typing import Any


class DocumentApiException(Exception):
    """Base exception for all Document Types API errors.

    All custom exceptions should inherit from this class to allow
    consistent error handling and logging. Presentation layer maps
    these to HTTP responses using message, error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, resource_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)


class AuthenticationException(DocumentApiException):
    """Raised when authentication fails (e.g. missing, invalid or expired token)."""

    def __init__(self, message: str = "Authentication failed") -> None:
        super().__init__(message, "AUTHENTICATION_ERROR")


class AuthorizationException(DocumentApiException):
    """Raised when the caller lacks the permission required by an endpoint."""

    def __init__(
        self,
        permission: str | None = None,
        message: str = "Permission denied",
    ) -> None:
        """Initialize with optional permission code and message.

        Args:
            permission: Permission code that was required (e.g. 'proj:document:read').
            message: Human-readable message; replaced when permission is given.
        """
        details: dict[str, Any] = {}
        if permission:
            message = f"Permission denied: {permission} required"
            details["permission"] = permission
        super().__init__(message, "PERMISSION_DENIED", details)


class RetrievalException(DocumentApiException):
    """Raised when a backing data source fails (connectivity, corrupt rows).

    Never used for "no rows": an unknown project or an empty catalog page are
    valid outcomes. Presentation maps this to an opaque internal error.
    """

    def __init__(self, source: str, reason: str | None = None) -> None:
        """Initialize with the failing source and an optional internal reason.

        Args:
            source: Logical data source (e.g. 'project', 'document_type').
            reason: Internal description; logged, never returned to clients.
        """
        details: dict[str, Any] = {"source": source}
        if reason:
            details["reason"] = reason
        super().__init__(
            f"Failed to read from {source}",
            "RETRIEVAL_FAILURE",
            details,
        )


class SqlNotConfiguredException(DocumentApiException):
    """Raised when an operation requires Postgres but the backend is not configured."""

    def __init__(self) -> None:
        super().__init__(
            message="This operation requires a SQL database that is not configured.",
            error_code="SERVICE_UNAVAILABLE",
        )
