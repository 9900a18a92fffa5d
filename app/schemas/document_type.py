"""Document type listing API schemas."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class DocumentTypeItem(BaseModel):
    """One document type in the listing (code and name already sanitized)."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    code: str
    name: str
    is_active: bool
    order: int


class DocumentTypeListResponse(BaseModel):
    """Response for GET /projects/{project_id}/document-types."""

    items: list[DocumentTypeItem] = Field(default_factory=list)
    total: int = Field(..., ge=0, description="Matches before the limit was applied")


class ErrorResponse(BaseModel):
    """Error body for 401/403/404/500."""

    error: str = Field(..., description="Machine-readable code, e.g. not_found")
    message: str
    trace_id: str | None = Field(default=None, description="Request id of the failed call")
