"""Global exception handlers for standardized error responses.

Implements RFC 7807 Problem Details for HTTP APIs and maps domain errors to
status codes.
"""

from fastapi import HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from webinar_scheduler.core.logging import logger
from webinar_scheduler.domain.errors import DomainError, ErrorCode
from webinar_scheduler.models.errors import ProblemDetail, ValidationErrorDetail

DOMAIN_ERROR_STATUS: dict[ErrorCode, int] = {
    ErrorCode.WEBINAR_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.WEBINAR_NOT_ORGANIZER: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.WEBINAR_REDUCE_SEATS: status.HTTP_400_BAD_REQUEST,
    ErrorCode.WEBINAR_TOO_MANY_SEATS: status.HTTP_400_BAD_REQUEST,
    ErrorCode.WEBINAR_TOO_SOON: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_INPUT: status.HTTP_400_BAD_REQUEST,
    ErrorCode.WEBINAR_ALREADY_EXISTS: status.HTTP_409_CONFLICT,
    ErrorCode.WEBINAR_CONCURRENT_UPDATE: status.HTTP_409_CONFLICT,
}


async def domain_error_handler(  # noqa: ASYNC100
    request: Request, exc: DomainError
) -> JSONResponse:
    """Handle domain errors raised by the use cases.

    Args:
        request: The FastAPI request object.
        exc: The DomainError that was raised.

    Returns:
        JSONResponse with ProblemDetail body carrying the domain error code.
    """
    status_code = DOMAIN_ERROR_STATUS.get(
        exc.code, status.HTTP_500_INTERNAL_SERVER_ERROR
    )

    logger.bind(path=str(request.url.path), method=request.method).warning(
        f"Domain error: {exc.code.value} -> {status_code}"
    )

    problem_detail = ProblemDetail(
        title="Webinar Error",
        status=status_code,
        detail=exc.message,
        instance=str(request.url.path),
        code=exc.code.value,
    )

    return JSONResponse(
        status_code=status_code,
        content=problem_detail.model_dump(exclude_none=True),
    )


async def http_exception_handler(  # noqa: ASYNC100
    request: Request, exc: HTTPException
) -> JSONResponse:
    """Handle HTTPException with RFC 7807 ProblemDetail response.

    Args:
        request: The FastAPI request object.
        exc: The HTTPException that was raised.

    Returns:
        JSONResponse with ProblemDetail body.
    """
    logger.bind(path=str(request.url.path), method=request.method).error(
        f"HTTPException: {exc.status_code} - {exc.detail}"
    )

    problem_detail = ProblemDetail(
        title="An error occurred",
        status=exc.status_code,
        detail=str(exc.detail),
        instance=str(request.url.path),
    )

    return JSONResponse(
        status_code=exc.status_code,
        content=problem_detail.model_dump(exclude_none=True),
    )


async def general_exception_handler(  # noqa: ASYNC100
    request: Request, exc: Exception
) -> JSONResponse:
    """Handle unexpected exceptions with 500 Internal Server Error.

    Args:
        request: The FastAPI request object.
        exc: The exception that was raised.

    Returns:
        JSONResponse with ProblemDetail body.
    """
    logger.bind(path=str(request.url.path), method=request.method).exception(
        f"Unexpected error: {type(exc).__name__}"
    )

    problem_detail = ProblemDetail(
        title="Internal Server Error",
        status=500,
        detail="An unexpected error occurred. Please try again later.",
        instance=str(request.url.path),
    )

    return JSONResponse(
        status_code=500,
        content=problem_detail.model_dump(exclude_none=True),
    )


async def validation_exception_handler(  # noqa: ASYNC100
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle request validation errors with field-level information.

    Args:
        request: The FastAPI request object.
        exc: The RequestValidationError from Pydantic validation.

    Returns:
        JSONResponse with ProblemDetail body including validation errors.
    """
    logger.bind(path=str(request.url.path), method=request.method).warning(
        f"Validation error: {len(exc.errors())} errors"
    )

    errors = [
        ValidationErrorDetail(
            type=error["type"],
            loc=tuple(str(loc) for loc in error["loc"]),
            msg=error["msg"],
            input=error.get("input"),
            ctx=(
                {k: str(v) for k, v in error.get("ctx", {}).items()}
                if error.get("ctx")
                else None
            ),
            url=error.get("url"),
        )
        for error in exc.errors()
    ]

    problem_detail = ProblemDetail(
        title="Validation Error",
        status=422,
        detail=f"One or more validation errors occurred ({len(errors)} errors).",
        instance=str(request.url.path),
        errors=errors,
    )

    return JSONResponse(
        status_code=422,
        content=problem_detail.model_dump(mode="json", exclude_none=True),
    )
