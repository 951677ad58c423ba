"""SQLAlchemy ORM models for webinar persistence."""

from datetime import datetime

from sqlalchemy import DateTime, Index, Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from webinar_scheduler.domain.models.webinar import MAX_TITLE_LENGTH


class Base(DeclarativeBase):
    """Shared declarative base for all ORM models."""

    pass


class WebinarRecord(Base):
    """
    Persisted webinar row.

    Maps from webinar_scheduler.domain.models.Webinar. Timestamps are stored
    in UTC. ``version`` is incremented by every update and guards against
    lost updates.
    """

    __tablename__ = "webinars"

    id: Mapped[str] = mapped_column(String(128), primary_key=True)
    organizer_id: Mapped[str] = mapped_column(String(128), nullable=False)
    title: Mapped[str] = mapped_column(String(MAX_TITLE_LENGTH), nullable=False)
    start_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    end_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    seats: Mapped[int] = mapped_column(Integer, nullable=False)
    version: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    __table_args__ = (Index("ix_webinars_organizer_id", "organizer_id"),)

    def __repr__(self) -> str:
        return f"<WebinarRecord {self.id} seats={self.seats} v{self.version}>"
