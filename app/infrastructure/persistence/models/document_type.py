"""DocumentType ORM model. Catalog entry, optionally bound to an organization and a scope."""

import uuid

from sqlalchemy import Boolean, Index, Integer, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import CatalogModel

# Scopes visible to project listings (NULL is treated the same as "project").
SCOPE_PROJECT = "project"


class DocumentType(CatalogModel, Base):
    """Document type catalog entry. Table: document_types.

    scope: NULL or 'project' rows are listed for projects; other scopes
    (e.g. 'organization', 'global') are never listed here.
    org_id: NULL for rows shared by every organization.
    order / sort_order: display order; sort_order is the legacy column and is
    used only when order is NULL.
    """

    __tablename__ = "document_types"

    code: Mapped[str] = mapped_column(String(100), nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    order: Mapped[int | None] = mapped_column("order", Integer, nullable=True)
    sort_order: Mapped[int | None] = mapped_column(Integer, nullable=True)
    scope: Mapped[str | None] = mapped_column(String(50), nullable=True)
    org_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, nullable=True)

    __table_args__ = (
        Index("ix_document_types_org_scope", "org_id", "scope"),
    )
