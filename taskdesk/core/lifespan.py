"""Application lifespan: startup and shutdown.

Single place for startup/shutdown wiring (logging, schema creation, DB
engine dispose). No business logic here.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from taskdesk.core.config import get_settings
from taskdesk.infrastructure.persistence.database import dispose_engine, init_models
from taskdesk.shared.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit dispose the SQL engine."""
    settings = get_settings()
    setup_logging()

    if settings.database_auto_create:
        await init_models()
        logger.info("Database tables ensured")

    logger.info("%s %s started", settings.app_name, settings.app_version)

    yield

    await dispose_engine()
