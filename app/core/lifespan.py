"""Application lifespan: startup and shutdown.

Single place for startup/shutdown wiring (logging, memory catalog store,
telemetry flush, DB engine dispose). No business logic here.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from app.core.config import get_settings
from app.shared.telemetry.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup: logging, memory store (memory backend only, unless already set).
    Shutdown: telemetry flush, SQL engine dispose.
    """
    settings = get_settings()

    # ---- Startup ----
    setup_logging()

    if settings.database_backend == "memory" and getattr(app.state, "memory_store", None) is None:
        from app.infrastructure.memory import MemoryCatalogStore

        app.state.memory_store = MemoryCatalogStore.from_settings(settings)
        logger.info(
            "Memory catalog ready: %d projects, %d document types (seed=%s)",
            len(app.state.memory_store.projects),
            len(app.state.memory_store.document_types),
            settings.memory_seed_path or "none",
        )

    yield

    # ---- Shutdown ----
    from app.shared.telemetry.telemetry import get_telemetry, set_telemetry

    telemetry_instance = get_telemetry()
    if telemetry_instance is not None:
        telemetry_instance.shutdown()
        set_telemetry(None)

    from app.infrastructure.persistence import database

    if database.engine is not None:
        await database.dispose_engine()
        logger.info("Database engine disposed")
