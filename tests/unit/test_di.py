"""Tests for dependency injection providers."""

from webinar_scheduler.config import get_settings
from webinar_scheduler.di import (
    get_change_seats_use_case,
    get_current_user,
    get_date_generator,
    get_id_generator,
    get_infrastructure_factory,
    get_organize_webinars_use_case,
    get_webinar_repository,
)
from webinar_scheduler.domain.repositories import WebinarRepository
from webinar_scheduler.infrastructure import InfrastructureFactory
from webinar_scheduler.use_cases import ChangeSeats, OrganizeWebinars


def test_get_infrastructure_factory_is_cached():
    factory = get_infrastructure_factory()

    assert isinstance(factory, InfrastructureFactory)
    assert factory is get_infrastructure_factory()
    assert factory.provider == "memory"


def test_use_case_providers():
    factory = get_infrastructure_factory()
    repository = get_webinar_repository(factory)

    assert isinstance(repository, WebinarRepository)
    assert isinstance(get_change_seats_use_case(repository), ChangeSeats)
    assert isinstance(
        get_organize_webinars_use_case(
            repository, get_id_generator(factory), get_date_generator(factory)
        ),
        OrganizeWebinars,
    )


def test_current_user_from_headers():
    user = get_current_user(get_settings(), x_user_id="alice", x_user_email="a@x.io")

    assert user.id == "alice"
    assert user.email == "a@x.io"


def test_current_user_defaults():
    user = get_current_user(get_settings())

    assert user.id == "test-user"
    assert user.email == "test@test.com"
