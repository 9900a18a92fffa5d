"""In-memory catalog backend (DATABASE_BACKEND=memory and tests)."""

from app.infrastructure.memory.repositories import (
    InMemoryDocumentTypeRepository,
    InMemoryProjectRepository,
    fold_text,
)
from app.infrastructure.memory.store import CatalogRow, MemoryCatalogStore

__all__ = [
    "CatalogRow",
    "InMemoryDocumentTypeRepository",
    "InMemoryProjectRepository",
    "MemoryCatalogStore",
    "fold_text",
]
