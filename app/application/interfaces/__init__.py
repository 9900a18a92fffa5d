"""Application interfaces (ports): repository and service protocols.

Define contracts for infrastructure implementations (DIP).
No runtime imports from app.infrastructure or app.api.
"""

from app.application.interfaces.repositories import (
    IDocumentTypeRepository,
    IProjectRepository,
)
from app.application.interfaces.services import (
    IListingObserver,
    IProjectAccessEvaluator,
)

__all__ = [
    "IDocumentTypeRepository",
    "IListingObserver",
    "IProjectAccessEvaluator",
    "IProjectRepository",
]
