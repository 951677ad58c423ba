"""Domain models."""

from webinar_scheduler.domain.models.user import User
from webinar_scheduler.domain.models.webinar import Webinar, WebinarProps

__all__ = ["User", "Webinar", "WebinarProps"]
