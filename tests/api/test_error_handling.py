"""Error mapping: retrieval failures are opaque 500s with a trace id."""

import json
from collections.abc import Callable
from unittest.mock import AsyncMock, patch

from httpx import AsyncClient

from app.api.v1.dependencies import get_project_repo
from app.core.exception_handlers import _generic_exception_handler
from app.domain.exceptions import RetrievalException
from app.main import app
from tests.conftest import PROJECT_A


async def test_retrieval_failure_is_opaque_500(
    client: AsyncClient, auth_headers: Callable[..., dict[str, str]]
) -> None:
    failing = AsyncMock()
    failing.get_org_id = AsyncMock(
        side_effect=RetrievalException("project", "password authentication failed")
    )
    app.dependency_overrides[get_project_repo] = lambda: failing

    response = await client.get(
        f"/api/v1/projects/{PROJECT_A}/document-types",
        headers={**auth_headers(project_id=str(PROJECT_A)), "X-Request-ID": "req-500"},
    )

    assert response.status_code == 500
    body = response.json()
    assert body["error"] == "internal_error"
    assert body["trace_id"] == "req-500"
    assert "password" not in response.text


async def test_500_response_does_not_include_traceback_when_debug_false() -> None:
    """With debug=False, generic exception handler returns a safe message (no traceback)."""

    class FakeRequest:
        class state:
            request_id = "r1"

    with patch("app.core.exception_handlers.get_settings") as m_get_settings:
        m_get_settings.return_value.debug = False
        response = _generic_exception_handler(FakeRequest(), ValueError("sensitive"))
    body = json.loads(response.body.decode())
    assert body["error"] == "internal_error"
    assert "sensitive" not in body["message"]
    assert body["trace_id"] == "r1"


async def test_response_echoes_request_and_correlation_ids(client: AsyncClient) -> None:
    response = await client.get(
        "/api/v1/health",
        headers={"X-Request-ID": "abc-123", "X-Correlation-ID": "flow-9"},
    )
    assert response.headers["x-request-id"] == "abc-123"
    assert response.headers["x-correlation-id"] == "flow-9"


async def test_unsafe_request_id_is_replaced(client: AsyncClient) -> None:
    response = await client.get("/api/v1/health", headers={"X-Request-ID": "bad id!"})
    assert response.headers["x-request-id"] != "bad id!"
    assert response.headers["x-correlation-id"] == response.headers["x-request-id"]


async def test_security_headers_present(client: AsyncClient) -> None:
    response = await client.get("/api/v1/health")
    assert response.headers["x-content-type-options"] == "nosniff"
    assert response.headers["cache-control"] == "no-store"
