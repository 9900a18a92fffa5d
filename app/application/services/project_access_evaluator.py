"""Project access evaluator: pure claim-based access decision (implements IProjectAccessEvaluator).

A caller may read a project's catalog when its identity carries the project id
under a project alias, or the owning organization id under an organization
alias. Claim names are matched exactly; claim values may hold several ids
separated by commas, semicolons or whitespace. Tokens that are not UUIDs are
dropped (permissive parse, strict match).
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from uuid import UUID

from app.domain.identity import CallerIdentity

PROJECT_CLAIM_ALIASES: tuple[str, ...] = (
    "project_id",
    "project",
    "projects",
    "project_ids",
    "projectIds",
)

ORGANIZATION_CLAIM_ALIASES: tuple[str, ...] = (
    "org_id",
    "organisation_id",
    "organization_id",
    "org",
    "orgs",
    "org_ids",
    "organization",
    "organization_ids",
)

_TOKEN_SEPARATORS = re.compile(r"[,;\s]+")


def parse_identifier(token: str) -> UUID | None:
    """Return the token as a UUID, or None when it does not parse."""
    try:
        return UUID(token.strip())
    except (ValueError, AttributeError, TypeError):
        return None


def split_claim_value(raw: str) -> list[str]:
    """Split one claim value into non-empty tokens."""
    if not raw or not raw.strip():
        return []
    return [t for t in _TOKEN_SEPARATORS.split(raw) if t]


def collect_identifiers(identity: CallerIdentity, aliases: Iterable[str]) -> set[UUID]:
    """Return every UUID asserted under any of the aliases (unparsable tokens skipped)."""
    ids: set[UUID] = set()
    for raw in identity.values_for(aliases):
        for token in split_claim_value(raw):
            parsed = parse_identifier(token)
            if parsed is not None:
                ids.add(parsed)
    return ids


class ProjectAccessEvaluator:
    """Decides project catalog access from caller claims. Stateless and reentrant."""

    def __init__(
        self,
        project_aliases: tuple[str, ...] = PROJECT_CLAIM_ALIASES,
        organization_aliases: tuple[str, ...] = ORGANIZATION_CLAIM_ALIASES,
    ) -> None:
        self.project_aliases = project_aliases
        self.organization_aliases = organization_aliases

    def has_access(
        self,
        identity: CallerIdentity | None,
        project_id: UUID,
        organization_id: UUID | None,
    ) -> bool:
        """Return True if the identity grants access to the project.

        Order: unauthenticated -> deny; project claim match -> allow; unknown
        organization -> deny; organization claim match -> allow; else deny.
        """
        if identity is None or not identity.authenticated:
            return False

        if project_id in collect_identifiers(identity, self.project_aliases):
            return True

        if organization_id is None:
            return False

        return organization_id in collect_identifiers(
            identity, self.organization_aliases
        )
