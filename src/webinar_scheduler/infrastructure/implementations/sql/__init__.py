"""Relational (SQLAlchemy async) infrastructure implementations."""

from webinar_scheduler.infrastructure.implementations.sql.connection import (
    create_all,
    create_engine,
    create_session_factory,
    dispose,
)
from webinar_scheduler.infrastructure.implementations.sql.webinar_repository import (
    SqlWebinarRepository,
)

__all__ = [
    "SqlWebinarRepository",
    "create_all",
    "create_engine",
    "create_session_factory",
    "dispose",
]
