"""
In-memory webinar repository implementation.

Stores immutable WebinarProps snapshots keyed by id. Loaded aggregates are
fresh objects, so changes only become visible to other readers through
update(), which rejects snapshots that are no longer current.
"""

from collections.abc import Iterable
from dataclasses import replace

from loguru import logger

from webinar_scheduler.domain.errors import (
    WebinarAlreadyExistsError,
    WebinarConcurrentUpdateError,
    WebinarNotFoundError,
)
from webinar_scheduler.domain.models.webinar import Webinar, WebinarProps
from webinar_scheduler.domain.repositories.webinar_repository import WebinarRepository


class InMemoryWebinarRepository(WebinarRepository):
    """
    Process-local webinar storage for tests and local development.

    Contents are lost when the process exits.
    """

    def __init__(self, webinars: Iterable[Webinar] = ()):
        """
        Initialize in-memory repository.

        Args:
            webinars: Webinars to seed the store with
        """
        self._store: dict[str, WebinarProps] = {
            webinar.id: webinar.props for webinar in webinars
        }

        logger.info(
            f"Initialized InMemoryWebinarRepository with {len(self._store)} webinars"
        )

    async def create(self, webinar: Webinar) -> None:
        """Store a new webinar."""
        if webinar.id in self._store:
            raise WebinarAlreadyExistsError(webinar.id)

        self._store[webinar.id] = webinar.props
        logger.debug(f"Created webinar {webinar.id}")

    async def find_by_id(self, webinar_id: str) -> Webinar | None:
        """Load a webinar by id."""
        return self.find_by_id_sync(webinar_id)

    async def update(self, webinar: Webinar) -> None:
        """
        Replace the stored snapshot of a webinar.

        The snapshot must still be at the version the webinar was loaded at.

        Raises:
            WebinarNotFoundError: If the webinar was never stored
            WebinarConcurrentUpdateError: If another update was stored first
        """
        stored = self._store.get(webinar.id)
        if stored is None:
            raise WebinarNotFoundError(webinar.id)
        if stored.version != webinar.version:
            raise WebinarConcurrentUpdateError(webinar.id, webinar.version)

        self._store[webinar.id] = replace(webinar.props, version=stored.version + 1)
        logger.debug(f"Updated webinar {webinar.id} to version {stored.version + 1}")

    def find_by_id_sync(self, webinar_id: str) -> Webinar | None:
        """Synchronous lookup, used by tests to inspect stored state."""
        props = self._store.get(webinar_id)
        if props is None:
            return None
        return Webinar(props)

    def __len__(self) -> int:
        return len(self._store)
