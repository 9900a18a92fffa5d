"""Catalog repository integration tests. Require Postgres with migrations applied; session is rolled back after each test."""

import uuid

import pytest

from app.application.dtos.document_type import DocumentTypeQuery
from app.infrastructure.persistence.models import DocumentType, Project
from app.infrastructure.persistence.repositories import (
    DocumentTypeRepository,
    ProjectRepository,
)


async def _seed(db_session) -> tuple[uuid.UUID, uuid.UUID]:
    org_id = uuid.uuid4()
    other_org = uuid.uuid4()
    project = Project(id=uuid.uuid4(), org_id=org_id, name="Repo test project")
    db_session.add(project)
    db_session.add_all(
        [
            DocumentType(code="ZZNDA", name="Zz Non-Disclosure", order=1, scope="project", org_id=org_id),
            DocumentType(code="ZZMSA", name="Zz Master Services", order=2, org_id=org_id),
            DocumentType(code="ZZSOW", name="Zz Statement of Work", sort_order=3, org_id=org_id),
            DocumentType(code="ZZDEV", name="Zz Devis signé", org_id=org_id),
            DocumentType(code="ZZPO", name="Zz Purchase Order", order=4, is_active=False, org_id=org_id),
            DocumentType(code="ZZPOL", name="Zz Policy", order=0, scope="organization", org_id=org_id),
            DocumentType(code="ZZOTH", name="Zz Other", order=1, org_id=other_org),
        ]
    )
    await db_session.flush()
    return project.id, org_id


def _query(project_id, org_id, q="Zz", active_only=True, limit=100) -> DocumentTypeQuery:
    return DocumentTypeQuery(
        project_id=project_id, organization_id=org_id, q=q, active_only=active_only, limit=limit
    )


@pytest.mark.requires_db
async def test_get_org_id(db_session) -> None:
    project_id, org_id = await _seed(db_session)
    repo = ProjectRepository(db_session)
    assert await repo.get_org_id(project_id) == org_id
    assert await repo.get_org_id(uuid.uuid4()) is None


@pytest.mark.requires_db
async def test_list_orders_nulls_first_then_display_order(db_session) -> None:
    project_id, org_id = await _seed(db_session)
    repo = DocumentTypeRepository(db_session)
    items, total = await repo.list_for_project(_query(project_id, org_id))
    assert [i.code for i in items] == ["ZZDEV", "ZZNDA", "ZZMSA", "ZZSOW"]
    assert items[0].order == 0
    assert items[3].order == 3
    assert total == 4


@pytest.mark.requires_db
async def test_limit_caps_page_not_total(db_session) -> None:
    project_id, org_id = await _seed(db_session)
    repo = DocumentTypeRepository(db_session)
    items, total = await repo.list_for_project(_query(project_id, org_id, limit=2))
    assert len(items) == 2
    assert total == 4


@pytest.mark.requires_db
async def test_inactive_included_when_requested(db_session) -> None:
    project_id, org_id = await _seed(db_session)
    repo = DocumentTypeRepository(db_session)
    items, total = await repo.list_for_project(
        _query(project_id, org_id, active_only=False)
    )
    assert "ZZPO" in [i.code for i in items]
    assert total == 5


@pytest.mark.requires_db
async def test_search_case_and_accent_insensitive(db_session) -> None:
    project_id, org_id = await _seed(db_session)
    repo = DocumentTypeRepository(db_session)
    items, _ = await repo.list_for_project(_query(project_id, org_id, q="zznda"))
    assert [i.code for i in items] == ["ZZNDA"]
    items, _ = await repo.list_for_project(_query(project_id, org_id, q="devis signe"))
    assert [i.code for i in items] == ["ZZDEV"]


@pytest.mark.requires_db
async def test_search_wildcards_are_literal(db_session) -> None:
    project_id, org_id = await _seed(db_session)
    repo = DocumentTypeRepository(db_session)
    items, total = await repo.list_for_project(_query(project_id, org_id, q="Zz_"))
    assert items == []
    assert total == 0
