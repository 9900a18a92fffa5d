"""Request timeout middleware.

Bounds each HTTP request with asyncio.wait_for; the handler task is cancelled
at its next await and the client gets 504 (unless the response already started).
Raw ASGI (no BaseHTTPMiddleware).
"""

import asyncio
import json
import logging
from typing import Callable

logger = logging.getLogger(__name__)


def TimeoutMiddleware(app: Callable, timeout_seconds: int) -> Callable:
    """Cancel the request after timeout_seconds and answer 504. Raw ASGI."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        started = False

        async def send_wrapper(message: dict) -> None:
            nonlocal started
            if message["type"] == "http.response.start":
                started = True
            await send(message)

        try:
            await asyncio.wait_for(
                app(scope, receive, send_wrapper), timeout=float(timeout_seconds)
            )
        except asyncio.TimeoutError:
            logger.warning(
                "Request timed out after %ss: %s %s",
                timeout_seconds,
                scope.get("method", ""),
                scope.get("path", ""),
            )
            if started:
                return
            body = json.dumps(
                {
                    "error": "gateway_timeout",
                    "message": f"Request timed out after {timeout_seconds} seconds",
                    "trace_id": scope.get("state", {}).get("request_id"),
                }
            ).encode()
            await send(
                {
                    "type": "http.response.start",
                    "status": 504,
                    "headers": [(b"content-type", b"application/json")],
                }
            )
            await send({"type": "http.response.body", "body": body})

    return asgi_app
