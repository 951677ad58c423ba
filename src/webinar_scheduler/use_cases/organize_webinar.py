"""
Organize Webinars Use Case
==========================

Schedules a new webinar for the acting user.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta

from loguru import logger

from webinar_scheduler.domain.errors import InvalidInputError, WebinarTooSoonError
from webinar_scheduler.domain.models.webinar import MAX_TITLE_LENGTH, Webinar
from webinar_scheduler.domain.ports.date_generator import DateGenerator
from webinar_scheduler.domain.ports.id_generator import IdGenerator
from webinar_scheduler.domain.repositories.webinar_repository import WebinarRepository
from webinar_scheduler.use_cases.change_seats import MAX_SEATS

MIN_LEAD_DAYS = 3


@dataclass(frozen=True)
class OrganizeWebinarCommand:
    """Request to schedule a webinar."""

    user_id: str
    title: str
    seats: int
    start_date: datetime
    end_date: datetime


@dataclass(frozen=True)
class OrganizeWebinarResult:
    """Identifier of the newly organized webinar."""

    id: str


class OrganizeWebinars:
    """
    Use case for organizing a webinar.

    An identifier is only allocated once every check has passed.
    """

    def __init__(
        self,
        webinar_repository: WebinarRepository,
        id_generator: IdGenerator,
        date_generator: DateGenerator,
    ):
        """
        Initialize use case with its ports.

        Args:
            webinar_repository: Repository for webinar persistence
            id_generator: Source of new webinar identifiers
            date_generator: Source of the current time
        """
        self._repository = webinar_repository
        self._id_generator = id_generator
        self._date_generator = date_generator

    async def execute(self, command: OrganizeWebinarCommand) -> OrganizeWebinarResult:
        """
        Execute the organize webinar use case.

        Args:
            command: Organizer id, title, seats and schedule

        Returns:
            Result holding the new webinar id

        Raises:
            InvalidInputError: If the title is blank or too long, seats are
                outside 1..MAX_SEATS, a date has no timezone, or start >= end
            WebinarTooSoonError: If the webinar starts in less than
                MIN_LEAD_DAYS days
        """
        self._validate(command)

        now = self._date_generator.now()
        if command.start_date - now < timedelta(days=MIN_LEAD_DAYS):
            logger.warning(
                f"Organize webinar rejected: start {command.start_date.isoformat()} "
                f"is less than {MIN_LEAD_DAYS} days after {now.isoformat()}"
            )
            raise WebinarTooSoonError(MIN_LEAD_DAYS)

        webinar = Webinar(
            id=self._id_generator.generate(),
            organizer_id=command.user_id,
            title=command.title,
            start_date=command.start_date,
            end_date=command.end_date,
            seats=command.seats,
        )
        await self._repository.create(webinar)

        logger.info(f"Webinar {webinar.id} organized by user {command.user_id}")

        return OrganizeWebinarResult(id=webinar.id)

    @staticmethod
    def _validate(command: OrganizeWebinarCommand) -> None:
        problem = None
        if not command.title or not command.title.strip():
            problem = "Webinar title is required"
        elif len(command.title) > MAX_TITLE_LENGTH:
            problem = f"Webinar title must be at most {MAX_TITLE_LENGTH} characters"
        elif command.seats < 1:
            problem = "Webinar must have at least one seat"
        elif command.seats > MAX_SEATS:
            problem = f"Webinar must have at most {MAX_SEATS} seats"
        elif _is_naive(command.start_date) or _is_naive(command.end_date):
            problem = "Webinar dates must include a timezone"
        elif command.start_date >= command.end_date:
            problem = "Webinar must start before it ends"

        if problem is not None:
            logger.warning(f"Organize webinar rejected: {problem}")
            raise InvalidInputError(problem)


def _is_naive(value: datetime) -> bool:
    return value.utcoffset() is None
