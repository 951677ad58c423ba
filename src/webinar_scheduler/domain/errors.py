"""Domain error codes for the webinars module."""

from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    WEBINAR_NOT_FOUND = "WEBINAR_NOT_FOUND"
    WEBINAR_NOT_ORGANIZER = "WEBINAR_NOT_ORGANIZER"
    WEBINAR_REDUCE_SEATS = "WEBINAR_REDUCE_SEATS"
    WEBINAR_TOO_MANY_SEATS = "WEBINAR_TOO_MANY_SEATS"
    WEBINAR_TOO_SOON = "WEBINAR_TOO_SOON"
    WEBINAR_ALREADY_EXISTS = "WEBINAR_ALREADY_EXISTS"
    WEBINAR_CONCURRENT_UPDATE = "WEBINAR_CONCURRENT_UPDATE"
    INVALID_INPUT = "INVALID_INPUT"


class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    def __init__(self, code: ErrorCode, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class WebinarNotFoundError(DomainError):
    """Raised when a webinar does not exist."""

    def __init__(self, webinar_id: str) -> None:
        super().__init__(
            code=ErrorCode.WEBINAR_NOT_FOUND,
            message="Webinar not found",
        )
        self.webinar_id = webinar_id


class WebinarNotOrganizerError(DomainError):
    """Raised when a user acts on a webinar they do not organize."""

    def __init__(self, webinar_id: str, user_id: str) -> None:
        super().__init__(
            code=ErrorCode.WEBINAR_NOT_ORGANIZER,
            message="User is not allowed to update this webinar",
        )
        self.webinar_id = webinar_id
        self.user_id = user_id


class ReduceSeatsNotAllowedError(DomainError):
    """Raised when the requested seat count does not increase capacity."""

    def __init__(self, current_seats: int, requested_seats: int) -> None:
        super().__init__(
            code=ErrorCode.WEBINAR_REDUCE_SEATS,
            message="You cannot reduce the number of seats",
        )
        self.current_seats = current_seats
        self.requested_seats = requested_seats


class TooManySeatsError(DomainError):
    """Raised when the requested seat count exceeds the webinar ceiling."""

    def __init__(self, requested_seats: int, max_seats: int) -> None:
        super().__init__(
            code=ErrorCode.WEBINAR_TOO_MANY_SEATS,
            message=f"Webinar must have at most {max_seats} seats",
        )
        self.requested_seats = requested_seats
        self.max_seats = max_seats


class WebinarTooSoonError(DomainError):
    """Raised when a webinar starts without enough notice."""

    def __init__(self, min_lead_days: int) -> None:
        super().__init__(
            code=ErrorCode.WEBINAR_TOO_SOON,
            message=f"Webinar must be scheduled at least {min_lead_days} days in advance",
        )
        self.min_lead_days = min_lead_days


class WebinarAlreadyExistsError(DomainError):
    """Raised by repositories when creating a webinar whose id is taken."""

    def __init__(self, webinar_id: str) -> None:
        super().__init__(
            code=ErrorCode.WEBINAR_ALREADY_EXISTS,
            message="Webinar already exists",
        )
        self.webinar_id = webinar_id


class WebinarConcurrentUpdateError(DomainError):
    """Raised by repositories when the stored webinar changed since it was loaded."""

    def __init__(self, webinar_id: str, expected_version: int) -> None:
        super().__init__(
            code=ErrorCode.WEBINAR_CONCURRENT_UPDATE,
            message="Webinar was modified by another request, please retry",
        )
        self.webinar_id = webinar_id
        self.expected_version = expected_version


class InvalidInputError(DomainError):
    """Raised when a command is malformed."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.INVALID_INPUT, message=message)
