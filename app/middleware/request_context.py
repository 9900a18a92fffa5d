"""Request and correlation id middleware.

RequestIDMiddleware forwards a safe client X-Request-ID (or mints one) and
CorrelationIDMiddleware forwards X-Correlation-ID (or falls back to the request
id). Both ids land on scope["state"] (request.state) and are echoed on the
response. Raw ASGI (no BaseHTTPMiddleware).
"""

import re
import uuid
from typing import Callable

REQUEST_ID_MAX_LENGTH = 64
# Client ids outside this set are replaced to keep log lines single-line
_SAFE_ID = re.compile(r"^[A-Za-z0-9_-]{1,%d}$" % REQUEST_ID_MAX_LENGTH)


def get_header(scope: dict, name: str) -> str | None:
    """Return first header value for name (case-insensitive)."""
    want = name.lower().encode()
    for k, v in scope.get("headers", []):
        if k.lower() == want:
            return v.decode("utf-8", errors="replace").strip()
    return None


def sanitize_id(raw: str | None) -> str:
    """Return raw when it is a safe id, else a new uuid4 string."""
    if raw and _SAFE_ID.match(raw):
        return raw
    return str(uuid.uuid4())


def _echo_header(send: Callable, header_name: str, value: str) -> Callable:
    """Wrap send so the response start carries header_name: value."""
    header = (header_name.encode(), value.encode())

    async def send_wrapper(message: dict) -> None:
        if message["type"] == "http.response.start":
            message["headers"] = [*message.get("headers", []), header]
        await send(message)

    return send_wrapper


def RequestIDMiddleware(app: Callable, header_name: str = "X-Request-ID") -> Callable:
    """Set request.state.request_id and echo it on the response. Raw ASGI."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        request_id = sanitize_id(get_header(scope, header_name))
        scope.setdefault("state", {})["request_id"] = request_id
        await app(scope, receive, _echo_header(send, header_name, request_id))

    return asgi_app


def CorrelationIDMiddleware(
    app: Callable, header_name: str = "X-Correlation-ID"
) -> Callable:
    """Set request.state.correlation_id (client value, else request id). Raw ASGI."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        state = scope.setdefault("state", {})
        raw = get_header(scope, header_name)
        correlation_id = sanitize_id(raw or state.get("request_id"))
        state["correlation_id"] = correlation_id
        await app(scope, receive, _echo_header(send, header_name, correlation_id))

    return asgi_app
