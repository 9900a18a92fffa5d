"""Unit tests for listing request normalization (limit clamp, search term)."""

import uuid

import pytest

from app.application.dtos.document_type import (
    DEFAULT_LIMIT,
    MAX_LIMIT,
    ListingRequest,
    normalize_limit,
    normalize_query,
)
from app.domain.identity import CallerIdentity


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (0, DEFAULT_LIMIT),
        (10000, MAX_LIMIT),
        (-5, DEFAULT_LIMIT),
        (37, 37),
        (1, 1),
        (500, 500),
        (501, 500),
        (None, DEFAULT_LIMIT),
    ],
)
def test_normalize_limit(raw: int | None, expected: int) -> None:
    assert normalize_limit(raw) == expected


@pytest.mark.parametrize(
    ("raw", "expected"),
    [(None, None), ("", None), ("   ", None), ("  nda ", "nda"), ("MSA", "MSA")],
)
def test_normalize_query(raw: str | None, expected: str | None) -> None:
    assert normalize_query(raw) == expected


def test_listing_request_normalized_returns_copy() -> None:
    request = ListingRequest(
        project_id=uuid.uuid4(),
        identity=CallerIdentity.anonymous(),
        q="  ",
        limit=0,
    )
    normalized = request.normalized()
    assert normalized.q is None
    assert normalized.limit == DEFAULT_LIMIT
    assert request.limit == 0
    assert normalized.active_only is True
