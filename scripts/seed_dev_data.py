"""Seed dev data from docs/seed-data.json into Postgres.

Loads projects and document types (the same JSON shape the memory backend
reads via MEMORY_SEED_PATH). Rows whose id already exists are skipped.

Usage:
    python -m scripts.seed_dev_data [path/to/seed-data.json]

Default path: docs/seed-data.json (relative to project root).
Requires: DATABASE_URL (Postgres) and `alembic upgrade head`.
"""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

from dotenv import load_dotenv

from app.core.config import get_settings
from app.infrastructure.memory import MemoryCatalogStore
from app.infrastructure.persistence import database as db_mod
from app.infrastructure.persistence.models import DocumentType, Project


def _project_root() -> Path:
    return Path(__file__).resolve().parent.parent


def _load_env() -> None:
    """Load .env from project root so get_settings() sees DATABASE_* when run as script."""
    load_dotenv(_project_root() / ".env", override=True)


async def run(path: Path) -> None:
    """Insert the seed file's projects and document types."""
    if not path.is_file():
        print(f"Seed file not found: {path}", file=sys.stderr)
        sys.exit(1)
    seed = MemoryCatalogStore.load(path)

    get_settings()
    db_mod._ensure_engine()
    if db_mod.AsyncSessionLocal is None:
        print(
            "Postgres not configured: set DATABASE_BACKEND=postgres and DATABASE_URL",
            file=sys.stderr,
        )
        sys.exit(1)

    async with db_mod.AsyncSessionLocal() as session:
        async with session.begin():
            for project_id, org_id in seed.projects.items():
                if await session.get(Project, project_id) is not None:
                    print(f"Project {project_id} already exists, skip")
                    continue
                session.add(Project(id=project_id, org_id=org_id))
                print(f"Project {project_id} (org {org_id})")

            for row in seed.document_types:
                if await session.get(DocumentType, row.id) is not None:
                    print(f"  Document type {row.code} already exists, skip")
                    continue
                session.add(
                    DocumentType(
                        id=row.id,
                        code=row.code,
                        name=row.name,
                        is_active=row.is_active,
                        order=row.order,
                        sort_order=row.sort_order,
                        scope=row.scope,
                        org_id=row.org_id,
                    )
                )
                print(f"  Document type {row.code} -> {row.id}")
    await db_mod.dispose_engine()
    print("Seed completed.")


def main() -> None:
    _load_env()
    path = Path(sys.argv[1]) if len(sys.argv) > 1 else _project_root() / "docs" / "seed-data.json"
    asyncio.run(run(path))


if __name__ == "__main__":
    main()
