"""Identity and time ports consumed by the use cases."""

from webinar_scheduler.domain.ports.date_generator import DateGenerator
from webinar_scheduler.domain.ports.id_generator import IdGenerator

__all__ = ["DateGenerator", "IdGenerator"]
