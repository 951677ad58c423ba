"""Tests for the OrganizeWebinars use case."""

from datetime import UTC, datetime, timedelta
from unittest.mock import AsyncMock, MagicMock

import pytest

from webinar_scheduler.domain.errors import (
    InvalidInputError,
    WebinarAlreadyExistsError,
    WebinarTooSoonError,
)
from webinar_scheduler.domain.models.webinar import MAX_TITLE_LENGTH
from webinar_scheduler.domain.ports import IdGenerator
from webinar_scheduler.domain.repositories import WebinarRepository
from webinar_scheduler.infrastructure.generators import RealDateGenerator
from webinar_scheduler.infrastructure.implementations.memory import (
    InMemoryWebinarRepository,
)
from webinar_scheduler.use_cases import (
    MAX_SEATS,
    OrganizeWebinarCommand,
    OrganizeWebinarResult,
    OrganizeWebinars,
)


@pytest.fixture
def empty_repository():
    return InMemoryWebinarRepository()


@pytest.fixture
def use_case(empty_repository, id_generator, date_generator):
    return OrganizeWebinars(empty_repository, id_generator, date_generator)


def make_command(**overrides) -> OrganizeWebinarCommand:
    fields = {
        "user_id": "u1",
        "title": "E2E Webinar",
        "seats": 10,
        "start_date": datetime(2024, 1, 10, 10, 0, tzinfo=UTC),
        "end_date": datetime(2024, 1, 10, 11, 0, tzinfo=UTC),
    }
    fields.update(overrides)
    return OrganizeWebinarCommand(**fields)


@pytest.mark.asyncio
async def test_organize_webinar_returns_id(use_case):
    """A valid command returns the allocated id."""
    result = await use_case.execute(make_command())

    assert result == OrganizeWebinarResult(id="id-1")


@pytest.mark.asyncio
async def test_organize_webinar_persists_fields(use_case, empty_repository):
    """The stored webinar matches the command."""
    command = make_command()

    result = await use_case.execute(command)

    webinar = empty_repository.find_by_id_sync(result.id)
    assert webinar is not None
    assert webinar.organizer_id == "u1"
    assert webinar.title == "E2E Webinar"
    assert webinar.seats == 10
    assert webinar.start_date == command.start_date
    assert webinar.end_date == command.end_date


@pytest.mark.asyncio
async def test_organize_webinar_too_soon(use_case, empty_repository, id_generator):
    """A webinar starting in less than 3 days is rejected."""
    command = make_command(
        start_date=datetime(2024, 1, 2, 0, 0, tzinfo=UTC),
        end_date=datetime(2024, 1, 2, 1, 0, tzinfo=UTC),
    )

    with pytest.raises(WebinarTooSoonError):
        await use_case.execute(command)

    assert len(empty_repository) == 0
    assert id_generator.generated == []


@pytest.mark.asyncio
async def test_organize_webinar_exactly_three_days_ahead(use_case, fixed_now):
    """The minimum lead time itself is accepted."""
    start = fixed_now + timedelta(days=3)
    command = make_command(start_date=start, end_date=start + timedelta(hours=1))

    result = await use_case.execute(command)

    assert result.id == "id-1"


@pytest.mark.asyncio
async def test_organize_webinar_just_under_three_days(use_case, fixed_now):
    """One second short of the lead time is too soon."""
    start = fixed_now + timedelta(days=3) - timedelta(seconds=1)
    command = make_command(start_date=start, end_date=start + timedelta(hours=1))

    with pytest.raises(WebinarTooSoonError):
        await use_case.execute(command)


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "overrides",
    [
        {"title": ""},
        {"title": "   "},
        {"seats": 0},
        {"seats": -5},
        {"seats": 1001},
        {"seats": 2**70},
        {"title": "x" * 256},
        {"start_date": datetime(2024, 1, 10, 10, 0)},
        {"end_date": datetime(2024, 1, 10, 11, 0)},
        {"end_date": datetime(2024, 1, 10, 10, 0, tzinfo=UTC)},
        {"end_date": datetime(2024, 1, 9, 10, 0, tzinfo=UTC)},
    ],
)
async def test_organize_webinar_invalid_input(
    use_case, empty_repository, id_generator, overrides
):
    """Malformed commands raise InvalidInputError without allocating an id."""
    with pytest.raises(InvalidInputError):
        await use_case.execute(make_command(**overrides))

    assert len(empty_repository) == 0
    assert id_generator.generated == []


@pytest.mark.asyncio
async def test_failed_validation_never_touches_ports(date_generator):
    """No id is generated and nothing is created when validation fails."""
    repository = AsyncMock(spec=WebinarRepository)
    id_generator = MagicMock(spec=IdGenerator)
    use_case = OrganizeWebinars(repository, id_generator, date_generator)

    with pytest.raises(WebinarTooSoonError):
        await use_case.execute(
            make_command(
                start_date=datetime(2024, 1, 2, tzinfo=UTC),
                end_date=datetime(2024, 1, 2, 1, tzinfo=UTC),
            )
        )

    id_generator.generate.assert_not_called()
    repository.create.assert_not_called()


@pytest.mark.asyncio
async def test_repository_errors_propagate(use_case, empty_repository, date_generator):
    """A conflict raised by the repository reaches the caller unchanged."""
    await use_case.execute(make_command())

    duplicate = OrganizeWebinars(
        empty_repository,
        id_generator=MagicMock(spec=IdGenerator, **{"generate.return_value": "id-1"}),
        date_generator=date_generator,
    )

    with pytest.raises(WebinarAlreadyExistsError):
        await duplicate.execute(make_command(title="Another"))


@pytest.mark.asyncio
async def test_organize_several_webinars_gets_distinct_ids(use_case, empty_repository):
    """Each webinar receives the next id of the generator."""
    first = await use_case.execute(make_command())
    second = await use_case.execute(make_command(title="Second"))

    assert (first.id, second.id) == ("id-1", "id-2")
    assert len(empty_repository) == 2


@pytest.mark.asyncio
async def test_organize_webinar_upper_bounds_are_accepted(use_case, empty_repository):
    """The seat ceiling and the longest storable title are both valid."""
    result = await use_case.execute(
        make_command(seats=MAX_SEATS, title="x" * MAX_TITLE_LENGTH)
    )

    webinar = empty_repository.find_by_id_sync(result.id)
    assert webinar.seats == MAX_SEATS
    assert len(webinar.title) == MAX_TITLE_LENGTH


@pytest.mark.asyncio
async def test_naive_dates_rejected_with_real_clock(empty_repository, id_generator):
    """Timestamps without an offset cannot be compared with the clock."""
    use_case = OrganizeWebinars(empty_repository, id_generator, RealDateGenerator())

    with pytest.raises(InvalidInputError, match="timezone"):
        await use_case.execute(
            make_command(
                start_date=datetime(2100, 1, 10, 10, 0),
                end_date=datetime(2100, 1, 10, 11, 0),
            )
        )

    assert len(empty_repository) == 0
