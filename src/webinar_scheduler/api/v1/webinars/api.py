"""
Webinar API endpoints.

Builds commands from requests and hands them to the use cases. Domain errors
propagate to the exception handlers, which map them to status codes.
"""

from fastapi import APIRouter, status
from loguru import logger

from webinar_scheduler.api.v1.webinars.request import (
    ChangeSeatsRequest,
    OrganizeWebinarRequest,
)
from webinar_scheduler.api.v1.webinars.response import (
    ChangeSeatsResponse,
    OrganizeWebinarResponse,
)
from webinar_scheduler.di import ChangeSeatsDep, CurrentUserDep, OrganizeWebinarsDep
from webinar_scheduler.use_cases import ChangeSeatsCommand, OrganizeWebinarCommand

router = APIRouter()


@router.post(
    "",
    response_model=OrganizeWebinarResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Organize a webinar",
    description="""
    Schedule a new webinar owned by the acting user.

    The webinar must start at least 3 days from now, have a non-empty title,
    at least one seat, and start before it ends.
    """,
)
async def organize_webinar(
    request: OrganizeWebinarRequest,
    user: CurrentUserDep,
    use_case: OrganizeWebinarsDep,
) -> OrganizeWebinarResponse:
    """
    Organize a webinar.

    Args:
        request: Title, seats and schedule
        user: Acting user (injected)
        use_case: OrganizeWebinars use case (injected)

    Returns:
        Identifier of the new webinar
    """
    logger.info(f"Organize webinar requested by {user.id}")

    result = await use_case.execute(
        OrganizeWebinarCommand(
            user_id=user.id,
            title=request.title,
            seats=request.seats,
            start_date=request.start_date,
            end_date=request.end_date,
        )
    )
    return OrganizeWebinarResponse(id=result.id)


@router.post(
    "/{webinar_id}/seats",
    response_model=ChangeSeatsResponse,
    status_code=status.HTTP_200_OK,
    summary="Change the seats of a webinar",
    description="""
    Increase the seat capacity of a webinar organized by the acting user.

    Seats can only grow, up to a maximum of 1000.
    """,
)
async def change_seats(
    webinar_id: str,
    request: ChangeSeatsRequest,
    user: CurrentUserDep,
    use_case: ChangeSeatsDep,
) -> ChangeSeatsResponse:
    """
    Change the seat capacity of a webinar.

    Args:
        webinar_id: Webinar identifier
        request: Requested seat count
        user: Acting user (injected)
        use_case: ChangeSeats use case (injected)

    Returns:
        Acknowledgment message
    """
    await use_case.execute(
        ChangeSeatsCommand(user=user, webinar_id=webinar_id, seats=request.seats)
    )
    return ChangeSeatsResponse(message="Seats updated")
