"""Application services: project access evaluation."""

from app.application.services.project_access_evaluator import (
    ORGANIZATION_CLAIM_ALIASES,
    PROJECT_CLAIM_ALIASES,
    ProjectAccessEvaluator,
    collect_identifiers,
    parse_identifier,
    split_claim_value,
)

__all__ = [
    "ORGANIZATION_CLAIM_ALIASES",
    "PROJECT_CLAIM_ALIASES",
    "ProjectAccessEvaluator",
    "collect_identifiers",
    "parse_identifier",
    "split_claim_value",
]
