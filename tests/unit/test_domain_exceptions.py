"""Tests for domain exceptions (error_code, message, details)."""

from app.domain.exceptions import (
    AuthenticationException,
    AuthorizationException,
    DocumentApiException,
    RetrievalException,
    SqlNotConfiguredException,
)


def test_base_exception_default_error_code() -> None:
    """Base DocumentApiException uses class name as error_code when not provided."""
    exc = DocumentApiException("Something failed")
    assert exc.message == "Something failed"
    assert exc.error_code == "DocumentApiException"
    assert exc.details == {}


def test_base_exception_custom_error_code_and_details() -> None:
    exc = DocumentApiException("Oops", error_code="CUSTOM", details={"key": "value"})
    assert exc.error_code == "CUSTOM"
    assert exc.details == {"key": "value"}
    assert str(exc) == "Oops"


def test_authentication_exception() -> None:
    exc = AuthenticationException()
    assert exc.message == "Authentication failed"
    assert exc.error_code == "AUTHENTICATION_ERROR"


def test_authorization_exception_with_permission() -> None:
    exc = AuthorizationException(permission="proj:document:read")
    assert exc.error_code == "PERMISSION_DENIED"
    assert "proj:document:read" in exc.message
    assert exc.details == {"permission": "proj:document:read"}


def test_retrieval_exception_keeps_reason_in_details_only() -> None:
    exc = RetrievalException("document_type", "connection refused")
    assert exc.error_code == "RETRIEVAL_FAILURE"
    assert exc.message == "Failed to read from document_type"
    assert exc.details == {"source": "document_type", "reason": "connection refused"}


def test_sql_not_configured_exception() -> None:
    exc = SqlNotConfiguredException()
    assert exc.error_code == "SERVICE_UNAVAILABLE"
