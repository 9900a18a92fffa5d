"""Span decorator for catalog reads.

Spans carry the identifiers of the read (project, organization, limit) and the
size of what came back; search terms and claim values are never recorded.
"""

from collections.abc import Awaitable, Callable
from functools import wraps
from typing import Any, TypeVar
from uuid import UUID

from opentelemetry import trace
from opentelemetry.trace import Span, Status, StatusCode

T = TypeVar("T")

_QUERY_ATTRS = ("project_id", "organization_id", "active_only", "limit")


def _annotate_args(span: Span, args: tuple[Any, ...]) -> None:
    for arg in args:
        if isinstance(arg, UUID):
            span.set_attribute("catalog.project_id", str(arg))
            continue
        for name in _QUERY_ATTRS:
            value = getattr(arg, name, None)
            if value is not None:
                span.set_attribute(
                    f"catalog.{name}",
                    value if isinstance(value, (bool, int)) else str(value),
                )


def _annotate_result(span: Span, result: Any) -> None:
    # list_for_project returns (items, total); get_org_id returns UUID | None
    if isinstance(result, tuple) and len(result) == 2:
        items, total = result
        span.set_attribute("catalog.count", len(items))
        span.set_attribute("catalog.total", int(total))
    else:
        span.set_attribute("catalog.found", result is not None)


def traced(span_name: str) -> Callable[[Callable[..., Awaitable[T]]], Callable[..., Awaitable[T]]]:
    """Run the decorated async method inside a span named span_name.

    Exceptions mark the span as failed and propagate unchanged; cancellation
    passes through untouched.
    """

    def decorator(func: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
        tracer = trace.get_tracer(func.__module__)

        @wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> T:
            with tracer.start_as_current_span(
                span_name, record_exception=False, set_status_on_exception=False
            ) as span:
                _annotate_args(span, args[1:] + tuple(kwargs.values()))
                try:
                    result = await func(*args, **kwargs)
                except Exception as e:
                    span.set_status(Status(StatusCode.ERROR, type(e).__name__))
                    span.record_exception(e)
                    raise
                _annotate_result(span, result)
                return result

        return wrapper

    return decorator
