"""Project ORM model. Each project belongs to exactly one organization."""

import uuid

from sqlalchemy import String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import CatalogModel


class Project(CatalogModel, Base):
    """Project entity. Table: projects. org_id is the owning organization."""

    __tablename__ = "projects"

    org_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False, index=True)
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
