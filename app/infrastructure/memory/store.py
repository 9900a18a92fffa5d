"""In-memory catalog data store (memory backend and tests).

Holds projects (project id -> owning organization id) and document type rows
with the same columns as the SQL tables. A single store instance is shared by
the in-memory project and document type repositories.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any
from uuid import UUID, uuid4

from app.core.config import Settings


@dataclass(frozen=True, slots=True)
class CatalogRow:
    """One document type row (mirrors the document_types table)."""

    id: UUID
    code: str
    name: str
    is_active: bool = True
    order: int | None = None
    sort_order: int | None = None
    scope: str | None = None
    org_id: UUID | None = None


def _optional_uuid(value: Any) -> UUID | None:
    return UUID(str(value)) if value not in (None, "") else None


def _optional_int(value: Any) -> int | None:
    return int(value) if value not in (None, "") else None


def _row_from_dict(data: Mapping[str, Any]) -> CatalogRow:
    return CatalogRow(
        id=_optional_uuid(data.get("id")) or uuid4(),
        code=str(data["code"]),
        name=str(data.get("name", data["code"])),
        is_active=bool(data.get("is_active", True)),
        order=_optional_int(data.get("order")),
        sort_order=_optional_int(data.get("sort_order")),
        scope=data.get("scope"),
        org_id=_optional_uuid(data.get("org_id")),
    )


@dataclass(slots=True)
class MemoryCatalogStore:
    """Shared in-memory backing store for the catalog repositories."""

    # keyed by project id, value is the owning organization id
    projects: dict[UUID, UUID] = field(default_factory=dict)

    document_types: list[CatalogRow] = field(default_factory=list)

    def add_project(self, project_id: UUID, org_id: UUID) -> None:
        """Register a project and its owning organization."""
        self.projects[project_id] = org_id

    def add_document_type(self, **values: Any) -> CatalogRow:
        """Append a document type row; id defaults to a new uuid4."""
        values.setdefault("id", uuid4())
        row = CatalogRow(**values)
        self.document_types.append(row)
        return row

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> MemoryCatalogStore:
        """Build a store from {"projects": [{"id", "org_id"}], "document_types": [...]}."""
        store = cls()
        for project in data.get("projects", []):
            store.add_project(UUID(str(project["id"])), UUID(str(project["org_id"])))
        store.document_types.extend(
            _row_from_dict(row) for row in data.get("document_types", [])
        )
        return store

    @classmethod
    def load(cls, path: str | Path) -> MemoryCatalogStore:
        """Build a store from a JSON seed file."""
        with open(path, encoding="utf-8") as f:
            return cls.from_dict(json.load(f))

    @classmethod
    def from_settings(cls, settings: Settings) -> MemoryCatalogStore:
        """Load MEMORY_SEED_PATH when set, else start empty."""
        if settings.memory_seed_path:
            return cls.load(settings.memory_seed_path)
        return cls()
