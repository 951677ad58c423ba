"""Clock implementations."""

from datetime import UTC, datetime

from webinar_scheduler.domain.ports.date_generator import DateGenerator


class RealDateGenerator(DateGenerator):
    """Wall clock in UTC."""

    def now(self) -> datetime:
        return datetime.now(UTC)


class FixedDateGenerator(DateGenerator):
    """Clock pinned to a single instant, for tests."""

    def __init__(self, instant: datetime):
        self._instant = instant

    def now(self) -> datetime:
        return self._instant
