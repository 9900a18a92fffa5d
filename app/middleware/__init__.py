"""HTTP middleware: timeout, request ID, correlation ID, security headers.

Applied in app.main; order matters (last added = outermost).
"""

from app.middleware.request_context import (
    CorrelationIDMiddleware,
    RequestIDMiddleware,
)
from app.middleware.security_headers import SecurityHeadersMiddleware
from app.middleware.timeout import TimeoutMiddleware

__all__ = [
    "CorrelationIDMiddleware",
    "RequestIDMiddleware",
    "SecurityHeadersMiddleware",
    "TimeoutMiddleware",
]
