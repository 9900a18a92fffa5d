"""Application use cases: one entry point per workflow."""

from app.application.use_cases.document_types import ListDocumentTypesUseCase

__all__ = [
    "ListDocumentTypesUseCase",
]
