"""
Routes registration for the FastAPI application.

Centralizes all router registrations for clean application setup.
"""

from fastapi import FastAPI

from webinar_scheduler.api.v1.health.router import router as health_router
from webinar_scheduler.api.v1.webinars.router import router as webinars_router


def register_routes(app: FastAPI) -> None:
    """
    Register all application routers.

    Args:
        app: FastAPI application instance
    """
    # Health check endpoints (no prefix, public)
    app.include_router(health_router)

    app.include_router(webinars_router)
