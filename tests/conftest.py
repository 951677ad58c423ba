"""Global pytest configuration and fixtures for all tests."""

import os
from datetime import UTC, datetime

import pytest

from webinar_scheduler.config import get_settings
from webinar_scheduler.di import get_infrastructure_factory
from webinar_scheduler.domain.models import User, Webinar
from webinar_scheduler.infrastructure.generators import (
    FixedDateGenerator,
    FixedIdGenerator,
)
from webinar_scheduler.infrastructure.implementations.memory import (
    InMemoryWebinarRepository,
)


@pytest.fixture(scope="session", autouse=True)
def set_test_env_vars():
    """
    Set environment variables for testing.

    Forces the in-memory provider and the default acting user so tests never
    touch a real database unless they ask for one.
    """
    original_env = {}

    test_env_vars = {
        "INFRASTRUCTURE_PROVIDER": "memory",
        "ENABLE_DOCS": "false",
        "DEFAULT_USER_ID": "test-user",
        "DEFAULT_USER_EMAIL": "test@test.com",
        "LOG_LEVEL": "WARNING",
    }

    for key, value in test_env_vars.items():
        original_env[key] = os.environ.get(key)
        os.environ[key] = value

    get_settings.cache_clear()
    get_infrastructure_factory.cache_clear()

    yield

    for key, original_value in original_env.items():
        if original_value is None:
            os.environ.pop(key, None)
        else:
            os.environ[key] = original_value

    get_settings.cache_clear()
    get_infrastructure_factory.cache_clear()


@pytest.fixture
def alice() -> User:
    return User(id="alice", email="alice@gmail.com", password="azerty")


@pytest.fixture
def bob() -> User:
    return User(id="bob", email="bob@gmail.com", password="azerty")


@pytest.fixture
def sample_webinar(alice) -> Webinar:
    """Webinar organized by alice with 100 seats."""
    return Webinar(
        id="webinar-123",
        organizer_id=alice.id,
        title="Sample Webinar",
        start_date=datetime(2024, 7, 1, 10, 0, tzinfo=UTC),
        end_date=datetime(2024, 7, 1, 12, 0, tzinfo=UTC),
        seats=100,
    )


@pytest.fixture
def repository(sample_webinar) -> InMemoryWebinarRepository:
    return InMemoryWebinarRepository([sample_webinar])


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 1, 1, 0, 0, tzinfo=UTC)


@pytest.fixture
def date_generator(fixed_now) -> FixedDateGenerator:
    return FixedDateGenerator(fixed_now)


@pytest.fixture
def id_generator() -> FixedIdGenerator:
    return FixedIdGenerator()
