"""
Webinar Repository Interface
============================

Abstract interface for webinar persistence.
Implementations live in the infrastructure layer.
"""

from abc import ABC, abstractmethod

from webinar_scheduler.domain.models.webinar import Webinar


class WebinarRepository(ABC):
    """
    Abstract repository for webinar aggregates.

    Implementations must return exactly the stored field values: no coercion
    of seats, strings or timestamps.
    """

    @abstractmethod
    async def create(self, webinar: Webinar) -> None:
        """
        Persist a new webinar.

        Args:
            webinar: Webinar aggregate to store

        Raises:
            WebinarAlreadyExistsError: If a webinar with the same id exists
        """
        pass

    @abstractmethod
    async def find_by_id(self, webinar_id: str) -> Webinar | None:
        """
        Find a webinar by its id.

        Args:
            webinar_id: Webinar identifier

        Returns:
            Webinar if found, None otherwise
        """
        pass

    @abstractmethod
    async def update(self, webinar: Webinar) -> None:
        """
        Overwrite the stored state of a previously loaded webinar.

        The write only succeeds if the stored webinar is still at
        ``webinar.version``; the stored version is then incremented.

        Args:
            webinar: Webinar aggregate with updated state

        Raises:
            WebinarNotFoundError: If no webinar with this id is stored
            WebinarConcurrentUpdateError: If the stored webinar changed since
                it was loaded
        """
        pass
