"""
Application lifecycle management.

Prepares storage on startup and releases it on shutdown.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from loguru import logger

from webinar_scheduler.di import get_infrastructure_factory


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Args:
        app: FastAPI application instance
    """
    logger.info("Starting webinar scheduler...")
    logger.info(f"Application version: {app.version}")

    factory = get_infrastructure_factory()
    await factory.startup()

    yield

    logger.info("Shutting down webinar scheduler...")
    await factory.shutdown()
