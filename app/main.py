"""FastAPI application entry point.

Wiring only: lifespan, exception handlers, middleware, routers.
No business logic here. See app.core.lifespan and app.core.exception_handlers.

Settings are loaded inside create_app() so that tests can set env (and optionally
clear get_settings cache) before importing or calling create_app().
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from app.api.v1 import api_router
from app.core.config import Settings, get_settings
from app.core.exception_handlers import register_exception_handlers
from app.core.lifespan import create_lifespan
from app.core.limiter import limiter
from app.middleware import (
    CorrelationIDMiddleware,
    RequestIDMiddleware,
    SecurityHeadersMiddleware,
    TimeoutMiddleware,
)


def _setup_telemetry(app: FastAPI, settings: Settings) -> None:
    """Install the tracer provider and instrument FastAPI (before the app starts)."""
    from app.shared.telemetry.telemetry import TelemetryConfig, set_telemetry

    telemetry = TelemetryConfig(
        service_name=settings.app_name,
        service_version=settings.app_version,
        enabled=True,
        environment=settings.telemetry_environment,
    )
    telemetry.setup_telemetry(
        exporter_type=settings.telemetry_exporter,
        otlp_endpoint=settings.telemetry_otlp_endpoint,
        sample_rate=settings.telemetry_sample_rate,
    )
    set_telemetry(telemetry)
    telemetry.instrument_fastapi(app)


def create_app() -> FastAPI:
    """Build and return the FastAPI application. Settings are resolved here (deferred from import)."""
    settings = get_settings()
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=create_lifespan,
    )

    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    register_exception_handlers(app)

    # Last added = outermost: timeout -> request ID -> correlation ID -> security -> CORS.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["*"],
    )
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(
        CorrelationIDMiddleware,
        header_name=settings.correlation_id_header,
    )
    app.add_middleware(RequestIDMiddleware, header_name=settings.request_id_header)
    app.add_middleware(TimeoutMiddleware, timeout_seconds=settings.request_timeout_seconds)

    app.include_router(api_router, prefix="/api/v1")

    if settings.telemetry_enabled:
        _setup_telemetry(app, settings)

    return app


app = create_app()
