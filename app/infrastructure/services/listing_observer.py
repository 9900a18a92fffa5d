"""Listing observer: log-only IListingObserver for the document types listing."""

from __future__ import annotations

from uuid import UUID

from app.core.constants import DOCUMENT_TYPES_ENDPOINT
from app.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


class LoggingListingObserver:
    """IListingObserver implementation that writes one log line per outcome.

    Not found and denied are WARNING; successful listings are INFO. Every line
    carries the endpoint label, project, user, request and correlation ids.
    """

    def __init__(self, endpoint: str = DOCUMENT_TYPES_ENDPOINT) -> None:
        self.endpoint = endpoint

    def project_not_found(
        self,
        project_id: UUID,
        *,
        user_id: str | None = None,
        request_id: str | None = None,
        correlation_id: str | None = None,
    ) -> None:
        logger.warning(
            "%s: project %s not found (user=%s request_id=%s correlation_id=%s)",
            self.endpoint,
            project_id,
            user_id,
            request_id,
            correlation_id,
        )

    def access_denied(
        self,
        project_id: UUID,
        *,
        user_id: str | None = None,
        request_id: str | None = None,
        correlation_id: str | None = None,
    ) -> None:
        logger.warning(
            "%s: user %s denied access to project %s (request_id=%s correlation_id=%s)",
            self.endpoint,
            user_id,
            project_id,
            request_id,
            correlation_id,
        )

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
        logger.info(
            "%s: returned %d of %d document types for project %s "
            "(user=%s request_id=%s correlation_id=%s)",
            self.endpoint,
            count,
            total,
            project_id,
            user_id,
            request_id,
            correlation_id,
        )
