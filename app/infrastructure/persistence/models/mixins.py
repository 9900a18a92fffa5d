"""SQLAlchemy mixins for common model patterns (DRY).

Provides: UuidMixin, TimestampMixin and combined CatalogModel.
"""

import uuid
from datetime import datetime

from sqlalchemy import DateTime, Uuid
from sqlalchemy.orm import Mapped, declared_attr, mapped_column
from sqlalchemy.sql import func


class UuidMixin:
    """Mixin for models using a UUID primary key. Provides id with default uuid4."""

    @declared_attr
    def id(cls) -> Mapped[uuid.UUID]:
        return mapped_column(Uuid, primary_key=True, default=uuid.uuid4)


class TimestampMixin:
    """Mixin for created_at and updated_at (server defaults, timezone-aware)."""

    @declared_attr
    def created_at(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=True), server_default=func.now(), nullable=False
        )

    @declared_attr
    def updated_at(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=True),
            server_default=func.now(),
            onupdate=func.now(),
            nullable=False,
        )


class CatalogModel(UuidMixin, TimestampMixin):
    """Combined mixin: UUID id + created_at/updated_at."""

    __abstract__ = True
