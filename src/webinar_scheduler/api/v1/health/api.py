"""Liveness endpoint."""

from fastapi import APIRouter

from webinar_scheduler import __version__
from webinar_scheduler.api.v1.health.models import HealthResponse
from webinar_scheduler.di import SettingsDep

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: SettingsDep) -> HealthResponse:
    """
    Report service status, version and the configured storage provider.

    Does not touch the database.
    """
    return HealthResponse(
        status="ok",
        version=__version__,
        storage=settings.infrastructure_provider,
        message="Service is healthy",
    )
