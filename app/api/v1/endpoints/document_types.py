"""Document types listing API: thin route delegating to ListDocumentTypesUseCase."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse

from app.api.v1.dependencies import (
    get_list_document_types_use_case,
    require_document_read,
)
from app.application.dtos.document_type import (
    DEFAULT_LIMIT,
    ListingRequest,
    ListingSuccess,
)
from app.application.use_cases.document_types import ListDocumentTypesUseCase
from app.core.exception_handlers import error_response
from app.core.limiter import limit_reads
from app.domain.identity import CallerIdentity
from app.schemas.document_type import (
    DocumentTypeItem,
    DocumentTypeListResponse,
    ErrorResponse,
)

router = APIRouter()

_STATUS_BY_ERROR = {"not_found": 404, "forbidden": 403}


@router.get(
    "/{project_id}/document-types",
    response_model=DocumentTypeListResponse,
    responses={
        401: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
@limit_reads
async def list_document_types(
    request: Request,
    project_id: UUID,
    identity: Annotated[CallerIdentity, Depends(require_document_read)],
    use_case: Annotated[
        ListDocumentTypesUseCase, Depends(get_list_document_types_use_case)
    ],
    q: str | None = Query(None, description="Case/accent-insensitive search on code or name"),
    active_only: bool | None = Query(None, description="Default true; exclude inactive types"),
    active_only_legacy: bool | None = Query(None, alias="activeOnly", include_in_schema=False),
    limit: int = Query(DEFAULT_LIMIT, description="Clamped to 1..500; <=0 means 100"),
) -> DocumentTypeListResponse | JSONResponse:
    """List the document types visible to the project, ordered by display order then name.

    activeOnly is accepted as a second spelling of active_only; active_only wins
    when both are sent.
    """
    if active_only is None:
        active_only = True if active_only_legacy is None else active_only_legacy
    result = await use_case.execute(
        ListingRequest(
            project_id=project_id,
            identity=identity,
            q=q,
            active_only=active_only,
            limit=limit,
            request_id=getattr(request.state, "request_id", None),
            correlation_id=getattr(request.state, "correlation_id", None),
        )
    )
    if isinstance(result, ListingSuccess):
        return DocumentTypeListResponse(
            items=[DocumentTypeItem.model_validate(item) for item in result.items],
            total=result.total,
        )
    return error_response(
        request, _STATUS_BY_ERROR[result.error], result.error, result.message
    )
