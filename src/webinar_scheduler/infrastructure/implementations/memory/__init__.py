"""In-memory infrastructure implementations for tests and local runs."""

from webinar_scheduler.infrastructure.implementations.memory.webinar_repository import (
    InMemoryWebinarRepository,
)

__all__ = ["InMemoryWebinarRepository"]
