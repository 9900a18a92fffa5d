"""DocumentType repository: filtered, ordered, capped catalog reads (implements IDocumentTypeRepository).

The page and the count are two statements built from the same WHERE clause
(_filter_conditions), so the total always describes the page's filter.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import ColumnElement, func, or_, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.document_type import DocumentTypeQuery, DocumentTypeResult
from app.domain.exceptions import RetrievalException
from app.infrastructure.persistence.models.document_type import (
    SCOPE_PROJECT,
    DocumentType,
)
from app.shared.telemetry.tracing import traced

_LIKE_ESCAPE = "\\"


def _escape_like(term: str) -> str:
    """Escape LIKE wildcards so the term matches literally."""
    return (
        term.replace(_LIKE_ESCAPE, _LIKE_ESCAPE * 2)
        .replace("%", _LIKE_ESCAPE + "%")
        .replace("_", _LIKE_ESCAPE + "_")
    )


def _display_order(dt: DocumentType) -> int:
    if dt.order is not None:
        return dt.order
    if dt.sort_order is not None:
        return dt.sort_order
    return 0


def _to_result(dt: DocumentType) -> DocumentTypeResult:
    """Map ORM DocumentType to DocumentTypeResult."""
    return DocumentTypeResult(
        id=dt.id,
        code=dt.code,
        name=dt.name,
        is_active=dt.is_active,
        order=_display_order(dt),
    )


class DocumentTypeRepository:
    """Document type catalog reads for a project's organization."""

    def __init__(self, db: AsyncSession, *, use_unaccent: bool = True) -> None:
        self.db = db
        self.use_unaccent = use_unaccent

    def _matches_term(self, column: Any, pattern: str) -> ColumnElement[bool]:
        if self.use_unaccent:
            return func.unaccent(column).ilike(
                func.unaccent(pattern), escape=_LIKE_ESCAPE
            )
        return column.ilike(pattern, escape=_LIKE_ESCAPE)

    def _filter_conditions(self, query: DocumentTypeQuery) -> list[ColumnElement[bool]]:
        """WHERE clauses shared by the page and the count statement."""
        conditions: list[ColumnElement[bool]] = [
            or_(DocumentType.scope.is_(None), DocumentType.scope == SCOPE_PROJECT),
            or_(
                DocumentType.org_id.is_(None),
                DocumentType.org_id == query.organization_id,
            ),
        ]
        if query.active_only:
            conditions.append(DocumentType.is_active.is_(True))
        if query.q:
            pattern = f"%{_escape_like(query.q)}%"
            conditions.append(
                or_(
                    self._matches_term(DocumentType.code, pattern),
                    self._matches_term(DocumentType.name, pattern),
                )
            )
        return conditions

    @traced("document_type_repo.list_for_project")
    async def list_for_project(
        self, query: DocumentTypeQuery
    ) -> tuple[list[DocumentTypeResult], int]:
        """Return (page, total) for the query. total ignores query.limit."""
        conditions = self._filter_conditions(query)
        # NULLS FIRST: unordered rows precede negative orders too
        display_order = func.coalesce(DocumentType.order, DocumentType.sort_order)
        page_stmt = (
            select(DocumentType)
            .where(*conditions)
            .order_by(display_order.asc().nulls_first(), DocumentType.name.asc())
            .limit(query.limit)
        )
        count_stmt = select(func.count()).select_from(DocumentType).where(*conditions)
        try:
            rows = (await self.db.execute(page_stmt)).scalars().all()
            total = (await self.db.execute(count_stmt)).scalar_one()
        except (SQLAlchemyError, OSError) as e:
            raise RetrievalException("document_type", str(e)) from e
        return [_to_result(dt) for dt in rows], int(total)
