from webinar_scheduler.domain.errors import (
    DomainError,
    ErrorCode,
    InvalidInputError,
    ReduceSeatsNotAllowedError,
    TooManySeatsError,
    WebinarAlreadyExistsError,
    WebinarConcurrentUpdateError,
    WebinarNotFoundError,
    WebinarNotOrganizerError,
    WebinarTooSoonError,
)
from webinar_scheduler.domain.models import User, Webinar, WebinarProps

__all__ = [
    "User",
    "Webinar",
    "WebinarProps",
    "DomainError",
    "ErrorCode",
    "InvalidInputError",
    "ReduceSeatsNotAllowedError",
    "TooManySeatsError",
    "WebinarAlreadyExistsError",
    "WebinarConcurrentUpdateError",
    "WebinarNotFoundError",
    "WebinarNotOrganizerError",
    "WebinarTooSoonError",
]
