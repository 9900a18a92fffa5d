"""In-memory repositories (implement IProjectRepository and IDocumentTypeRepository).

Same semantics as the SQL repositories: the visibility/active/search predicate
(_matches) is applied once per row and feeds both the page and the total.
Search folds case and strips accents (NFKD, combining marks removed) to match
the unaccent + ILIKE behaviour of Postgres.
"""

from __future__ import annotations

import unicodedata
from uuid import UUID

from app.application.dtos.document_type import DocumentTypeQuery, DocumentTypeResult
from app.infrastructure.memory.store import CatalogRow, MemoryCatalogStore

SCOPE_PROJECT = "project"


def fold_text(value: str) -> str:
    """Return value case-folded with accents removed (for substring search)."""
    decomposed = unicodedata.normalize("NFKD", value)
    return "".join(c for c in decomposed if not unicodedata.combining(c)).casefold()


def _display_order(row: CatalogRow) -> int | None:
    return row.order if row.order is not None else row.sort_order


def _sort_key(row: CatalogRow) -> tuple[int, int, str]:
    """Display order ascending with missing order first, then name."""
    order = _display_order(row)
    # unordered rows precede every ordered row, negative orders included
    return (0 if order is None else 1, order or 0, row.name)


def _to_result(row: CatalogRow) -> DocumentTypeResult:
    order = _display_order(row)
    return DocumentTypeResult(
        id=row.id,
        code=row.code,
        name=row.name,
        is_active=row.is_active,
        order=order if order is not None else 0,
    )


class InMemoryProjectRepository:
    """Project lookups backed by MemoryCatalogStore."""

    def __init__(self, store: MemoryCatalogStore) -> None:
        self._store = store

    async def get_org_id(self, project_id: UUID) -> UUID | None:
        return self._store.projects.get(project_id)


class InMemoryDocumentTypeRepository:
    """Document type catalog reads backed by MemoryCatalogStore."""

    def __init__(self, store: MemoryCatalogStore) -> None:
        self._store = store

    @staticmethod
    def _matches(row: CatalogRow, query: DocumentTypeQuery, folded_q: str | None) -> bool:
        if row.scope is not None and row.scope != SCOPE_PROJECT:
            return False
        if row.org_id is not None and row.org_id != query.organization_id:
            return False
        if query.active_only and not row.is_active:
            return False
        if folded_q:
            return folded_q in fold_text(row.code) or folded_q in fold_text(row.name)
        return True

    async def list_for_project(
        self, query: DocumentTypeQuery
    ) -> tuple[list[DocumentTypeResult], int]:
        folded_q = fold_text(query.q) if query.q else None
        matching = [
            row
            for row in self._store.document_types
            if self._matches(row, query, folded_q)
        ]
        matching.sort(key=_sort_key)
        return [_to_result(row) for row in matching[: query.limit]], len(matching)
