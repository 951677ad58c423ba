"""Health response models."""

from pydantic import BaseModel, Field

from webinar_scheduler.config import InfrastructureProvider


class HealthResponse(BaseModel):
    """Liveness report of the webinar scheduler."""

    status: str = Field(default="ok", description="Service status")
    version: str = Field(..., description="webinar-scheduler version")
    storage: InfrastructureProvider = Field(
        ..., description="Webinar storage provider in use"
    )
    message: str | None = Field(None, description="Optional status message")
