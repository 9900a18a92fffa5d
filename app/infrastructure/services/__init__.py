"""Infrastructure implementations of application service interfaces."""

from app.infrastructure.services.listing_observer import LoggingListingObserver

__all__ = ["LoggingListingObserver"]
