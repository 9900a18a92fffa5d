"""Unit tests for CallerIdentity claim normalization."""

import pytest

from app.domain.identity import CallerIdentity


def test_anonymous_has_no_claims() -> None:
    identity = CallerIdentity.anonymous()
    assert identity.authenticated is False
    assert identity.values_for(["sub"]) == []
    assert identity.subject is None


def test_scalar_claims_become_single_values() -> None:
    identity = CallerIdentity.from_claims({"sub": "u1", "exp": 1700000000})
    assert identity.claims["sub"] == ("u1",)
    assert identity.claims["exp"] == ("1700000000",)
    assert identity.subject == "u1"


def test_list_claims_keep_scalar_members() -> None:
    identity = CallerIdentity.from_claims({"projects": ["a", 2, {"x": 1}, None]})
    assert identity.claims["projects"] == ("a", "2")


def test_nested_objects_are_dropped() -> None:
    identity = CallerIdentity.from_claims({"profile": {"name": "x"}})
    assert "profile" not in identity.claims


def test_bool_claims_are_lowercased() -> None:
    identity = CallerIdentity.from_claims({"email_verified": True})
    assert identity.claims["email_verified"] == ("true",)


def test_values_for_collects_across_names_in_order() -> None:
    identity = CallerIdentity.from_claims({"org": "b", "org_id": "a"})
    assert identity.values_for(["org_id", "org", "orgs"]) == ["a", "b"]


def test_claims_are_read_only() -> None:
    identity = CallerIdentity.from_claims({"sub": "u1"})
    with pytest.raises(TypeError):
        identity.claims["sub"] = ("u2",)  # type: ignore[index]
