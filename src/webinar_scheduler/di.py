"""
Dependency injection container for the webinar scheduler.

Centralizes wiring using FastAPI's Depends with typing.Annotated. Tests swap
any provider through ``app.dependency_overrides``.
"""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends, Header

from webinar_scheduler.config import Settings, get_settings
from webinar_scheduler.domain.models.user import User
from webinar_scheduler.domain.ports import DateGenerator, IdGenerator
from webinar_scheduler.domain.repositories import WebinarRepository
from webinar_scheduler.infrastructure import InfrastructureFactory
from webinar_scheduler.use_cases import ChangeSeats, OrganizeWebinars

# ============================================================================
# Settings Dependencies
# ============================================================================

SettingsDep = Annotated[Settings, Depends(get_settings)]
"""Injected Settings instance (cached via lru_cache)."""


# ============================================================================
# Infrastructure Dependencies
# ============================================================================


@lru_cache
def get_infrastructure_factory() -> InfrastructureFactory:
    """
    Get the process-wide infrastructure factory.

    Cached so the repository (and SQL engine) is shared by all requests.
    To rebuild it after a settings change:
        get_infrastructure_factory.cache_clear()
    """
    return InfrastructureFactory.from_settings(get_settings())


InfrastructureFactoryDep = Annotated[
    InfrastructureFactory, Depends(get_infrastructure_factory)
]
"""Injected InfrastructureFactory instance."""


def get_webinar_repository(factory: InfrastructureFactoryDep) -> WebinarRepository:
    """Get the webinar repository for the configured provider."""
    return factory.get_webinar_repository()


def get_id_generator(factory: InfrastructureFactoryDep) -> IdGenerator:
    """Get the identifier generator."""
    return factory.get_id_generator()


def get_date_generator(factory: InfrastructureFactoryDep) -> DateGenerator:
    """Get the clock."""
    return factory.get_date_generator()


WebinarRepositoryDep = Annotated[WebinarRepository, Depends(get_webinar_repository)]
IdGeneratorDep = Annotated[IdGenerator, Depends(get_id_generator)]
DateGeneratorDep = Annotated[DateGenerator, Depends(get_date_generator)]


# ============================================================================
# Acting User Dependencies
# ============================================================================


def get_current_user(
    settings: SettingsDep,
    x_user_id: Annotated[str | None, Header()] = None,
    x_user_email: Annotated[str | None, Header()] = None,
) -> User:
    """
    Resolve the acting user.

    Authentication happens upstream, which forwards the identity in the
    X-User-Id / X-User-Email headers. Without them the configured default
    user is used.

    Args:
        settings: Application settings (injected)
        x_user_id: User id header
        x_user_email: User email header

    Returns:
        Acting user
    """
    return User(
        id=x_user_id or settings.default_user_id,
        email=x_user_email or settings.default_user_email,
    )


CurrentUserDep = Annotated[User, Depends(get_current_user)]
"""Injected acting user."""


# ============================================================================
# Use Case Dependencies
# ============================================================================


def get_change_seats_use_case(repository: WebinarRepositoryDep) -> ChangeSeats:
    """Build the ChangeSeats use case."""
    return ChangeSeats(repository)


def get_organize_webinars_use_case(
    repository: WebinarRepositoryDep,
    id_generator: IdGeneratorDep,
    date_generator: DateGeneratorDep,
) -> OrganizeWebinars:
    """Build the OrganizeWebinars use case."""
    return OrganizeWebinars(repository, id_generator, date_generator)


ChangeSeatsDep = Annotated[ChangeSeats, Depends(get_change_seats_use_case)]
OrganizeWebinarsDep = Annotated[
    OrganizeWebinars, Depends(get_organize_webinars_use_case)
]
