"""Repository ports."""

from webinar_scheduler.domain.repositories.webinar_repository import WebinarRepository

__all__ = ["WebinarRepository"]
