"""Pytest configuration and fixtures for the document types API.

HTTP tests run against app.main:app with the catalog repositories bound to an
in-memory store seeded by build_catalog(), whatever DATABASE_BACKEND is.
DB-dependent fixtures need Postgres and skip otherwise.
"""

import os
import uuid
from collections.abc import Callable

# Settings are read when app.main is imported; set test env first.
os.environ.setdefault("DATABASE_BACKEND", "memory")
os.environ.setdefault("SECRET_KEY", "test-secret-key-not-for-production")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.v1.dependencies import get_document_type_repo, get_project_repo
from app.infrastructure.memory import (
    InMemoryDocumentTypeRepository,
    InMemoryProjectRepository,
    MemoryCatalogStore,
)
from app.infrastructure.persistence import database
from app.infrastructure.security.jwt import create_access_token
from app.main import app

ORG_A = uuid.UUID("a3c9e7b1-5d2f-4e8a-b6c4-1f0e9d8c7b6a")
ORG_B = uuid.UUID("c7e5a3b1-9d8f-4c6e-a2b0-3e1f5d7c9a8b")
PROJECT_A = uuid.UUID("6f1d3c1e-2b8a-4d6e-9c1f-0a7b5e4d3c21")
PROJECT_B = uuid.UUID("0b8e2f4a-6c1d-4e3b-8a9f-7d5c3b1a2e4f")
UNKNOWN_PROJECT = uuid.UUID("00000000-0000-4000-8000-000000000000")

READ_PERMISSION = "proj:document:read"


def build_catalog() -> MemoryCatalogStore:
    """Two organizations with one project each and a mixed catalog.

    Visible to PROJECT_A (active only), in listing order:
    DEV (no order), NDA (1), MSA (2), SOW (sort_order 3).
    """
    store = MemoryCatalogStore()
    store.add_project(PROJECT_A, ORG_A)
    store.add_project(PROJECT_B, ORG_B)
    store.add_document_type(code="NDA", name="Non-Disclosure Agreement", order=1, scope="project")
    store.add_document_type(code="MSA", name="Master Services Agreement", order=2, org_id=ORG_A)
    store.add_document_type(code="SOW", name="Statement of Work", sort_order=3, scope="project")
    store.add_document_type(code="PO", name="Purchase Order", order=4, is_active=False)
    store.add_document_type(code="POL", name="Organization Policy", order=0, scope="organization")
    store.add_document_type(code="DEV", name="<b>Devis</b> signé")
    store.add_document_type(code="OTH", name="Other Org Contract", order=6, org_id=ORG_B)
    return store


@pytest.fixture
def catalog() -> MemoryCatalogStore:
    """Fresh seeded in-memory catalog."""
    return build_catalog()


@pytest.fixture
async def client(catalog: MemoryCatalogStore) -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI) with the memory catalog bound."""
    app.dependency_overrides[get_project_repo] = lambda: InMemoryProjectRepository(catalog)
    app.dependency_overrides[get_document_type_repo] = (
        lambda: InMemoryDocumentTypeRepository(catalog)
    )
    transport = ASGITransport(app=app)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def make_token() -> Callable[..., str]:
    """Return a factory for signed bearer tokens (sub defaults to test-user)."""

    def _make(**claims: object) -> str:
        claims.setdefault("sub", "test-user")
        return create_access_token(claims)

    return _make


@pytest.fixture
def auth_headers(make_token: Callable[..., str]) -> Callable[..., dict[str, str]]:
    """Return a factory for Authorization headers; read permission included by default."""

    def _headers(**claims: object) -> dict[str, str]:
        claims.setdefault("permissions", READ_PERMISSION)
        return {"Authorization": f"Bearer {make_token(**claims)}"}

    return _headers


@pytest.fixture
async def db_session() -> AsyncSession:
    """Database session for repository/integration tests. Rolls back after test.

    Requires DATABASE_BACKEND=postgres and DATABASE_URL. Skips (pytest.skip)
    when Postgres is not configured. Use @pytest.mark.requires_db to mark
    tests that need this fixture; run without DB via: pytest -m 'not requires_db'.
    """
    database._ensure_engine()
    if database.AsyncSessionLocal is None:
        pytest.skip(
            "Postgres not configured: set DATABASE_BACKEND=postgres and DATABASE_URL, "
            "then run: alembic upgrade head"
        )
    async with database.AsyncSessionLocal() as session:
        yield session
        await session.rollback()
