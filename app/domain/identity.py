"""Caller identity value object.

An authenticated (or anonymous) caller and the claims asserted about it.
Built once per request from a verified token payload; immutable afterwards.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

_SCALAR_TYPES = (str, int, float)


def _claim_values(raw: Any) -> tuple[str, ...]:
    """Normalize one claim value to a tuple of strings. Unsupported shapes yield ()."""
    if isinstance(raw, bool):
        return (str(raw).lower(),)
    if isinstance(raw, _SCALAR_TYPES):
        return (str(raw),)
    if isinstance(raw, (list, tuple)):
        return tuple(
            str(v) for v in raw if isinstance(v, _SCALAR_TYPES) and not isinstance(v, bool)
        )
    return ()


@dataclass(frozen=True)
class CallerIdentity:
    """Caller identity: authenticated flag plus claim name -> values.

    Claim names are kept exactly as issued (case-sensitive). Every value is a
    tuple of strings, so single-valued and multi-valued claims read the same way.
    """

    authenticated: bool
    claims: Mapping[str, tuple[str, ...]] = field(
        default_factory=lambda: MappingProxyType({})
    )

    @classmethod
    def anonymous(cls) -> "CallerIdentity":
        """Return an unauthenticated identity with no claims."""
        return cls(authenticated=False)

    @classmethod
    def from_claims(
        cls, payload: Mapping[str, Any], *, authenticated: bool = True
    ) -> "CallerIdentity":
        """Build an identity from a decoded token payload.

        Scalar values become 1-tuples; lists keep their scalar members; nested
        objects are dropped.
        """
        claims: dict[str, tuple[str, ...]] = {}
        for name, raw in payload.items():
            values = _claim_values(raw)
            if values:
                claims[str(name)] = values
        return cls(authenticated=authenticated, claims=MappingProxyType(claims))

    def values_for(self, names: Iterable[str]) -> list[str]:
        """Return every value asserted under any of the given claim names."""
        found: list[str] = []
        for name in names:
            found.extend(self.claims.get(name, ()))
        return found

    @property
    def subject(self) -> str | None:
        """Return the 'sub' claim, or None when absent."""
        values = self.claims.get("sub")
        return values[0] if values else None
