"""Application use cases for webinar scheduling."""

from webinar_scheduler.use_cases.change_seats import (
    MAX_SEATS,
    ChangeSeats,
    ChangeSeatsCommand,
)
from webinar_scheduler.use_cases.organize_webinar import (
    MIN_LEAD_DAYS,
    OrganizeWebinarCommand,
    OrganizeWebinarResult,
    OrganizeWebinars,
)

__all__ = [
    "MAX_SEATS",
    "MIN_LEAD_DAYS",
    "ChangeSeats",
    "ChangeSeatsCommand",
    "OrganizeWebinarCommand",
    "OrganizeWebinarResult",
    "OrganizeWebinars",
]
