"""Unit tests for ProjectAccessEvaluator and claim token parsing."""

import uuid

import pytest

from app.application.services.project_access_evaluator import (
    ProjectAccessEvaluator,
    collect_identifiers,
    parse_identifier,
    split_claim_value,
)
from app.domain.identity import CallerIdentity

PROJECT = uuid.UUID("6f1d3c1e-2b8a-4d6e-9c1f-0a7b5e4d3c21")
ORG = uuid.UUID("a3c9e7b1-5d2f-4e8a-b6c4-1f0e9d8c7b6a")
OTHER = uuid.UUID("0b8e2f4a-6c1d-4e3b-8a9f-7d5c3b1a2e4f")


@pytest.fixture
def evaluator() -> ProjectAccessEvaluator:
    return ProjectAccessEvaluator()


class TestSplitAndParse:
    def test_split_on_commas_semicolons_and_whitespace(self) -> None:
        assert split_claim_value("a, b;c  d\te") == ["a", "b", "c", "d", "e"]

    def test_split_blank_is_empty(self) -> None:
        assert split_claim_value("  ") == []
        assert split_claim_value("") == []

    def test_parse_valid_uuid(self) -> None:
        assert parse_identifier(str(PROJECT)) == PROJECT

    def test_parse_uppercase_uuid(self) -> None:
        assert parse_identifier(str(PROJECT).upper()) == PROJECT

    def test_parse_garbage_is_none(self) -> None:
        assert parse_identifier("not-a-uuid") is None

    def test_collect_skips_unparsable_tokens(self) -> None:
        identity = CallerIdentity.from_claims({"projects": f"junk,{PROJECT};also-junk"})
        assert collect_identifiers(identity, ("projects",)) == {PROJECT}


class TestHasAccess:
    def test_unauthenticated_is_denied_even_with_matching_claims(
        self, evaluator: ProjectAccessEvaluator
    ) -> None:
        identity = CallerIdentity.from_claims(
            {"project_id": str(PROJECT)}, authenticated=False
        )
        assert evaluator.has_access(identity, PROJECT, ORG) is False

    def test_none_identity_is_denied(self, evaluator: ProjectAccessEvaluator) -> None:
        assert evaluator.has_access(None, PROJECT, ORG) is False

    def test_project_claim_allows_without_organization(
        self, evaluator: ProjectAccessEvaluator
    ) -> None:
        identity = CallerIdentity.from_claims({"project_id": str(PROJECT)})
        assert evaluator.has_access(identity, PROJECT, None) is True

    @pytest.mark.parametrize(
        "claim", ["project_id", "project", "projects", "project_ids", "projectIds"]
    )
    def test_every_project_alias_is_honored(
        self, evaluator: ProjectAccessEvaluator, claim: str
    ) -> None:
        identity = CallerIdentity.from_claims({claim: f"{OTHER} {PROJECT}"})
        assert evaluator.has_access(identity, PROJECT, ORG) is True

    def test_project_claim_in_list(self, evaluator: ProjectAccessEvaluator) -> None:
        identity = CallerIdentity.from_claims({"projects": [str(OTHER), str(PROJECT)]})
        assert evaluator.has_access(identity, PROJECT, ORG) is True

    def test_organization_claim_allows(self, evaluator: ProjectAccessEvaluator) -> None:
        identity = CallerIdentity.from_claims({"org_id": str(ORG)})
        assert evaluator.has_access(identity, PROJECT, ORG) is True

    @pytest.mark.parametrize(
        "claim",
        [
            "org_id",
            "organisation_id",
            "organization_id",
            "org",
            "orgs",
            "org_ids",
            "organization",
            "organization_ids",
        ],
    )
    def test_every_organization_alias_is_honored(
        self, evaluator: ProjectAccessEvaluator, claim: str
    ) -> None:
        identity = CallerIdentity.from_claims({claim: f"{OTHER};{ORG}"})
        assert evaluator.has_access(identity, PROJECT, ORG) is True

    def test_organization_claim_without_known_organization_is_denied(
        self, evaluator: ProjectAccessEvaluator
    ) -> None:
        identity = CallerIdentity.from_claims({"org_id": str(ORG)})
        assert evaluator.has_access(identity, PROJECT, None) is False

    def test_neither_claim_matches_is_denied(
        self, evaluator: ProjectAccessEvaluator
    ) -> None:
        identity = CallerIdentity.from_claims(
            {"project_id": str(OTHER), "org_id": str(OTHER)}
        )
        assert evaluator.has_access(identity, PROJECT, ORG) is False

    def test_claim_names_are_case_sensitive(
        self, evaluator: ProjectAccessEvaluator
    ) -> None:
        identity = CallerIdentity.from_claims({"Project_ID": str(PROJECT)})
        assert evaluator.has_access(identity, PROJECT, ORG) is False

    def test_authenticated_without_claims_is_denied(
        self, evaluator: ProjectAccessEvaluator
    ) -> None:
        assert evaluator.has_access(CallerIdentity(authenticated=True), PROJECT, ORG) is False
