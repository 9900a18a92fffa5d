"""List document types use case: resolve project, authorize caller, query and sanitize the catalog."""

from __future__ import annotations

from dataclasses import replace

from app.application.dtos.document_type import (
    DocumentTypeQuery,
    DocumentTypeResult,
    ListingForbidden,
    ListingNotFound,
    ListingRequest,
    ListingResult,
    ListingSuccess,
    normalize_limit,
)
from app.application.interfaces.repositories import (
    IDocumentTypeRepository,
    IProjectRepository,
)
from app.application.interfaces.services import (
    IListingObserver,
    IProjectAccessEvaluator,
)
from app.shared.utils.sanitization import clean_display_text


def _sanitize_item(item: DocumentTypeResult) -> DocumentTypeResult:
    """Clean code and name; id, is_active and order pass through unchanged."""
    return replace(
        item,
        code=clean_display_text(item.code),
        name=clean_display_text(item.name),
    )


class ListDocumentTypesUseCase:
    """Lists the document types a caller may see for a project.

    Steps: normalize request, resolve owning organization (missing -> not
    found), evaluate access (denied -> forbidden), query catalog, sanitize.
    RetrievalException from either repository propagates unchanged.
    """

    def __init__(
        self,
        project_repo: IProjectRepository,
        document_type_repo: IDocumentTypeRepository,
        access_evaluator: IProjectAccessEvaluator,
        observer: IListingObserver | None = None,
    ) -> None:
        self._project_repo = project_repo
        self._document_type_repo = document_type_repo
        self._access_evaluator = access_evaluator
        self._observer = observer

    async def execute(self, request: ListingRequest) -> ListingResult:
        """Return the tagged listing outcome for the request.

        Args:
            request: Raw listing request (search term and limit not yet normalized).

        Returns:
            ListingSuccess, ListingNotFound or ListingForbidden.

        Raises:
            RetrievalException: If the project or catalog store fails.
        """
        request = request.normalized()
        context = {
            "user_id": request.identity.subject if request.identity else None,
            "request_id": request.request_id,
            "correlation_id": request.correlation_id,
        }

        organization_id = await self._project_repo.get_org_id(request.project_id)
        if organization_id is None:
            if self._observer:
                self._observer.project_not_found(request.project_id, **context)
            return ListingNotFound()

        if not self._access_evaluator.has_access(
            request.identity, request.project_id, organization_id
        ):
            if self._observer:
                self._observer.access_denied(request.project_id, **context)
            return ListingForbidden()

        items, total = await self._document_type_repo.list_for_project(
            DocumentTypeQuery(
                project_id=request.project_id,
                organization_id=organization_id,
                q=request.q,
                active_only=request.active_only,
                limit=normalize_limit(request.limit),
            )
        )
        sanitized = [_sanitize_item(item) for item in items]

        if self._observer:
            self._observer.listed(
                request.project_id, len(sanitized), total, **context
            )
        return ListingSuccess(items=sanitized, total=total)
