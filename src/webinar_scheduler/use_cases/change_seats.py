"""
Change Seats Use Case
=====================

Raises the seat capacity of a webinar owned by the acting user.
"""

from dataclasses import dataclass

from loguru import logger

from webinar_scheduler.domain.errors import (
    ReduceSeatsNotAllowedError,
    TooManySeatsError,
    WebinarNotFoundError,
    WebinarNotOrganizerError,
)
from webinar_scheduler.domain.models.user import User
from webinar_scheduler.domain.repositories.webinar_repository import WebinarRepository

MAX_SEATS = 1000


@dataclass(frozen=True)
class ChangeSeatsCommand:
    """Request to change the seat count of a webinar."""

    user: User
    webinar_id: str
    seats: int


class ChangeSeats:
    """
    Use case for changing the number of seats of a webinar.

    Checks run in a fixed order (existence, ownership, increase, ceiling) and
    the first failing one aborts before anything is written.
    """

    def __init__(self, webinar_repository: WebinarRepository):
        """
        Initialize use case with repository.

        Args:
            webinar_repository: Repository for webinar persistence
        """
        self._repository = webinar_repository

    async def execute(self, command: ChangeSeatsCommand) -> None:
        """
        Execute the change seats use case.

        Args:
            command: Acting user, webinar id and requested seat count

        Raises:
            WebinarNotFoundError: If the webinar does not exist
            WebinarNotOrganizerError: If the user does not organize the webinar
            ReduceSeatsNotAllowedError: If seats would not increase
            TooManySeatsError: If seats exceed MAX_SEATS
            WebinarConcurrentUpdateError: If the webinar was changed by another
                request between load and write
        """
        webinar = await self._repository.find_by_id(command.webinar_id)
        if webinar is None:
            logger.warning(f"Change seats rejected: webinar {command.webinar_id} not found")
            raise WebinarNotFoundError(command.webinar_id)

        if not webinar.is_organized_by(command.user.id):
            logger.warning(
                f"Change seats rejected: user {command.user.id} "
                f"does not organize webinar {webinar.id}"
            )
            raise WebinarNotOrganizerError(webinar.id, command.user.id)

        if command.seats <= webinar.seats:
            logger.warning(
                f"Change seats rejected: {command.seats} <= current {webinar.seats} "
                f"for webinar {webinar.id}"
            )
            raise ReduceSeatsNotAllowedError(webinar.seats, command.seats)

        if command.seats > MAX_SEATS:
            logger.warning(
                f"Change seats rejected: {command.seats} > {MAX_SEATS} "
                f"for webinar {webinar.id}"
            )
            raise TooManySeatsError(command.seats, MAX_SEATS)

        previous_seats = webinar.seats
        webinar.update(seats=command.seats)
        await self._repository.update(webinar)

        logger.info(
            f"Webinar {webinar.id} seats changed from {previous_seats} to {command.seats}"
        )
