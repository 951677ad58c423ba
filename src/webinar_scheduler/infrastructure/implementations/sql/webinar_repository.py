"""
Relational webinar repository implementation.

Each operation runs in its own session and transaction. Updates are
optimistic: the row is only written if its ``version`` still matches the one
the webinar was loaded at, so a concurrent writer cannot be silently
overwritten.
"""

from datetime import UTC, datetime

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from webinar_scheduler.core.logging import logger
from webinar_scheduler.domain.errors import (
    WebinarAlreadyExistsError,
    WebinarConcurrentUpdateError,
    WebinarNotFoundError,
)
from webinar_scheduler.domain.models.webinar import Webinar
from webinar_scheduler.domain.repositories.webinar_repository import WebinarRepository
from webinar_scheduler.infrastructure.implementations.sql.models import WebinarRecord


def _to_utc(value: datetime) -> datetime:
    """Normalize a timestamp to aware UTC; naive values are taken as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def _webinar_to_record(webinar: Webinar) -> WebinarRecord:
    return WebinarRecord(
        id=webinar.id,
        organizer_id=webinar.organizer_id,
        title=webinar.title,
        start_date=_to_utc(webinar.start_date),
        end_date=_to_utc(webinar.end_date),
        seats=webinar.seats,
        version=webinar.version,
    )


def _record_to_webinar(record: WebinarRecord) -> Webinar:
    # SQLite drops tzinfo on the way back
    return Webinar(
        id=record.id,
        organizer_id=record.organizer_id,
        title=record.title,
        start_date=_to_utc(record.start_date),
        end_date=_to_utc(record.end_date),
        seats=record.seats,
        version=record.version,
    )


class SqlWebinarRepository(WebinarRepository):
    """Webinar storage backed by a relational database through SQLAlchemy."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        """
        Initialize SQL repository.

        Args:
            session_factory: Factory producing sessions bound to the engine
        """
        self._session_factory = session_factory

    async def create(self, webinar: Webinar) -> None:
        """Insert a new webinar row."""
        try:
            async with self._session_factory.begin() as session:
                session.add(_webinar_to_record(webinar))
        except IntegrityError as e:
            raise WebinarAlreadyExistsError(webinar.id) from e

        logger.debug(f"Inserted webinar {webinar.id}")

    async def find_by_id(self, webinar_id: str) -> Webinar | None:
        """Select a webinar row by primary key."""
        async with self._session_factory() as session:
            result = await session.execute(
                select(WebinarRecord).where(WebinarRecord.id == webinar_id)
            )
            record = result.scalar_one_or_none()

        if record is None:
            return None
        return _record_to_webinar(record)

    async def update(self, webinar: Webinar) -> None:
        """
        Overwrite the mutable columns of a webinar row at the loaded version.

        Raises:
            WebinarNotFoundError: If the row does not exist
            WebinarConcurrentUpdateError: If the row version moved since load
        """
        async with self._session_factory.begin() as session:
            result = await session.execute(
                update(WebinarRecord)
                .where(
                    WebinarRecord.id == webinar.id,
                    WebinarRecord.version == webinar.version,
                )
                .values(
                    title=webinar.title,
                    start_date=_to_utc(webinar.start_date),
                    end_date=_to_utc(webinar.end_date),
                    seats=webinar.seats,
                    version=webinar.version + 1,
                )
            )
            if result.rowcount == 0:
                current = await session.scalar(
                    select(WebinarRecord.version).where(WebinarRecord.id == webinar.id)
                )
                if current is None:
                    raise WebinarNotFoundError(webinar.id)
                logger.warning(
                    f"Stale update of webinar {webinar.id}: "
                    f"loaded v{webinar.version}, stored v{current}"
                )
                raise WebinarConcurrentUpdateError(webinar.id, webinar.version)

        logger.debug(f"Updated webinar {webinar.id} to version {webinar.version + 1}")
