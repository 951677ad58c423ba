"""Tests for the in-memory webinar repository."""

import pytest

from webinar_scheduler.domain.errors import (
    WebinarAlreadyExistsError,
    WebinarConcurrentUpdateError,
    WebinarNotFoundError,
)
from webinar_scheduler.domain.models import Webinar
from webinar_scheduler.infrastructure.implementations.memory import (
    InMemoryWebinarRepository,
)


@pytest.mark.asyncio
async def test_create_and_find(sample_webinar):
    repository = InMemoryWebinarRepository()

    await repository.create(sample_webinar)
    found = await repository.find_by_id("webinar-123")

    assert found == sample_webinar


@pytest.mark.asyncio
async def test_find_missing_returns_none(repository):
    assert await repository.find_by_id("missing") is None


@pytest.mark.asyncio
async def test_create_duplicate_raises(repository, sample_webinar):
    with pytest.raises(WebinarAlreadyExistsError):
        await repository.create(sample_webinar)


@pytest.mark.asyncio
async def test_update_persists_changes(repository):
    webinar = await repository.find_by_id("webinar-123")
    webinar.update(seats=30)

    await repository.update(webinar)

    assert repository.find_by_id_sync("webinar-123").seats == 30


@pytest.mark.asyncio
async def test_unsaved_changes_are_not_visible(repository):
    """Mutating a loaded webinar does not affect the store until update()."""
    webinar = await repository.find_by_id("webinar-123")
    webinar.update(seats=30)

    other = await repository.find_by_id("webinar-123")

    assert other.seats == 100


@pytest.mark.asyncio
async def test_update_missing_raises(sample_webinar):
    repository = InMemoryWebinarRepository()

    with pytest.raises(WebinarNotFoundError):
        await repository.update(sample_webinar)


def test_seeded_webinars_are_snapshots(sample_webinar):
    """Seeding stores a snapshot, not the live object."""
    repository = InMemoryWebinarRepository([sample_webinar])
    sample_webinar.update(seats=999)

    assert repository.find_by_id_sync("webinar-123").seats == 100
    assert len(repository) == 1
    assert isinstance(repository.find_by_id_sync("webinar-123"), Webinar)


@pytest.mark.asyncio
async def test_update_bumps_version(repository):
    webinar = await repository.find_by_id("webinar-123")
    webinar.update(seats=30)

    await repository.update(webinar)

    assert repository.find_by_id_sync("webinar-123").version == 1


@pytest.mark.asyncio
async def test_stale_update_is_rejected(repository):
    """A webinar loaded before another update cannot overwrite it."""
    first = await repository.find_by_id("webinar-123")
    second = await repository.find_by_id("webinar-123")

    first.update(seats=500)
    await repository.update(first)

    second.update(seats=150)
    with pytest.raises(WebinarConcurrentUpdateError):
        await repository.update(second)

    assert repository.find_by_id_sync("webinar-123").seats == 500
