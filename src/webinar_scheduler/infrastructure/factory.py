"""
Infrastructure factory for provider selection.

Selects the webinar repository implementation based on configuration:
- memory: process-local storage for tests and development
- sql: relational database through SQLAlchemy async

Usage:
    from webinar_scheduler.infrastructure import InfrastructureFactory
    from webinar_scheduler.config import get_settings

    # Option 1: From settings
    factory = InfrastructureFactory.from_settings(get_settings())

    # Option 2: Manual configuration
    factory = InfrastructureFactory(provider="sql", database_url="sqlite+aiosqlite:///./w.db")

    repository = factory.get_webinar_repository()
"""

from typing import TYPE_CHECKING

from loguru import logger

from webinar_scheduler.domain.ports import DateGenerator, IdGenerator
from webinar_scheduler.domain.repositories import WebinarRepository
from webinar_scheduler.infrastructure.generators import (
    RealDateGenerator,
    UuidIdGenerator,
)

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncEngine

    from webinar_scheduler.config import InfrastructureProvider, Settings

DEFAULT_DATABASE_URL = "sqlite+aiosqlite:///./webinars.db"


class InfrastructureFactory:
    """
    Factory for creating infrastructure instances.

    The repository is built once and reused, so a memory store survives across
    requests and a SQL engine is shared by the whole process.
    """

    def __init__(self, provider: "InfrastructureProvider | None" = None, **config):
        """
        Initialize infrastructure factory.

        Args:
            provider: Storage provider ("memory", "sql"). Defaults to "memory".
            **config: Provider-specific options (database_url, database_echo,
                initialize_database)
        """
        if provider is None:
            provider = "memory"

        self.provider = provider
        self.config = config
        self._engine: "AsyncEngine | None" = None
        self._webinar_repository: WebinarRepository | None = None

        logger.info(f"Initialized InfrastructureFactory with provider: {provider}")

    @classmethod
    def from_settings(cls, settings: "Settings") -> "InfrastructureFactory":
        """
        Create factory from Settings object.

        Args:
            settings: Application settings from config.py

        Returns:
            InfrastructureFactory configured from settings
        """
        config = {
            "database_url": settings.database_url,
            "database_echo": settings.database_echo,
            "initialize_database": settings.initialize_database,
        }

        return cls(provider=settings.infrastructure_provider, **config)

    def get_webinar_repository(self) -> WebinarRepository:
        """
        Get webinar repository for configured provider.

        Returns:
            WebinarRepository implementation

        Raises:
            ValueError: If provider is not supported
        """
        if self._webinar_repository is not None:
            return self._webinar_repository

        if self.provider == "memory":
            from webinar_scheduler.infrastructure.implementations.memory import (
                InMemoryWebinarRepository,
            )

            self._webinar_repository = InMemoryWebinarRepository()

        elif self.provider == "sql":
            from webinar_scheduler.infrastructure.implementations.sql import (
                SqlWebinarRepository,
                create_session_factory,
            )

            self._webinar_repository = SqlWebinarRepository(
                create_session_factory(self._get_engine())
            )

        else:
            raise ValueError(f"Unsupported provider: {self.provider}")

        return self._webinar_repository

    def get_id_generator(self) -> IdGenerator:
        """Get the identifier generator used for new webinars."""
        return UuidIdGenerator()

    def get_date_generator(self) -> DateGenerator:
        """Get the clock used by the use cases."""
        return RealDateGenerator()

    async def startup(self) -> None:
        """Prepare storage (create tables for the sql provider if enabled)."""
        if self.provider != "sql":
            return

        from webinar_scheduler.infrastructure.implementations.sql import create_all

        if self.config.get("initialize_database", True):
            await create_all(self._get_engine())

    async def shutdown(self) -> None:
        """Release storage resources."""
        if self._engine is None:
            return

        from webinar_scheduler.infrastructure.implementations.sql import dispose

        await dispose(self._engine)
        self._engine = None
        self._webinar_repository = None

    def _get_engine(self) -> "AsyncEngine":
        if self._engine is None:
            from webinar_scheduler.infrastructure.implementations.sql import (
                create_engine,
            )

            self._engine = create_engine(
                self.config.get("database_url", DEFAULT_DATABASE_URL),
                echo=self.config.get("database_echo", False),
            )
        return self._engine
