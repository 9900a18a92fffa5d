"""Domain layer: caller identity and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from app.domain.exceptions import (
    AuthenticationException,
    AuthorizationException,
    DocumentApiException,
    RetrievalException,
    SqlNotConfiguredException,
)
from app.domain.identity import CallerIdentity

__all__ = [
    "AuthenticationException",
    "AuthorizationException",
    "CallerIdentity",
    "DocumentApiException",
    "RetrievalException",
    "SqlNotConfiguredException",
]
