"""Project repository: resolves a project to its owning organization (implements IProjectRepository)."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.domain.exceptions import RetrievalException
from app.infrastructure.persistence.models.project import Project
from app.shared.telemetry.tracing import traced


class ProjectRepository:
    """Read-only project lookups."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    @traced("project_repo.get_org_id")
    async def get_org_id(self, project_id: UUID) -> UUID | None:
        """Return org_id for the project, or None if no such project."""
        try:
            result = await self.db.execute(
                select(Project.org_id).where(Project.id == project_id)
            )
        except (SQLAlchemyError, OSError) as e:
            raise RetrievalException("project", str(e)) from e
        return result.scalar_one_or_none()
