"""Webinar Request Models."""

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class OrganizeWebinarRequest(BaseModel):
    """
    Request to organize a webinar.

    Attributes:
        title: Display title
        seats: Seat capacity
        start_date: Start timestamp (ISO 8601, JSON key ``startDate``)
        end_date: End timestamp (ISO 8601, JSON key ``endDate``)
    """

    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(..., description="Webinar title")
    seats: int = Field(..., description="Seat capacity")
    start_date: datetime = Field(..., alias="startDate", description="Start timestamp")
    end_date: datetime = Field(..., alias="endDate", description="End timestamp")

    @field_validator("start_date", "end_date")
    @classmethod
    def assume_utc(cls, v: datetime) -> datetime:
        """Treat timestamps without an offset as UTC."""
        if v.tzinfo is None:
            return v.replace(tzinfo=UTC)
        return v


class ChangeSeatsRequest(BaseModel):
    """
    Request to change the seat capacity of a webinar.

    Attributes:
        seats: New seat count; numeric strings such as "30" are accepted
    """

    seats: int = Field(..., description="New seat capacity")
