"""Webinar Response Models."""

from pydantic import BaseModel, Field


class OrganizeWebinarResponse(BaseModel):
    """Identifier of the organized webinar."""

    id: str = Field(..., description="Webinar identifier")


class ChangeSeatsResponse(BaseModel):
    """Acknowledgment of a seat change."""

    message: str = Field(default="Seats updated", description="Status message")
