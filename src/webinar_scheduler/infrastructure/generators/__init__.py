"""Identity and time port implementations."""

from webinar_scheduler.infrastructure.generators.date_generators import (
    FixedDateGenerator,
    RealDateGenerator,
)
from webinar_scheduler.infrastructure.generators.id_generators import (
    FixedIdGenerator,
    UuidIdGenerator,
)

__all__ = [
    "FixedDateGenerator",
    "FixedIdGenerator",
    "RealDateGenerator",
    "UuidIdGenerator",
]
