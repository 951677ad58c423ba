"""
FastAPI application factory.

Creates and configures the FastAPI application with all middleware,
routers, and exception handlers.
"""

from fastapi import FastAPI, HTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from webinar_scheduler import __version__
from webinar_scheduler.config import get_settings
from webinar_scheduler.core.logging import logger
from webinar_scheduler.domain.errors import DomainError
from webinar_scheduler.exception_handlers import (
    domain_error_handler,
    general_exception_handler,
    http_exception_handler,
    validation_exception_handler,
)
from webinar_scheduler.lifespan import lifespan
from webinar_scheduler.middleware import TraceIDMiddleware
from webinar_scheduler.routes import register_routes


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    settings = get_settings()

    # Docs URLs must be set before creating the FastAPI instance
    docs_url = "/docs" if settings.enable_docs else None
    redoc_url = "/redoc" if settings.enable_docs else None
    openapi_url = "/openapi.json" if settings.enable_docs else None

    app = FastAPI(
        title=settings.project_name,
        description=settings.project_description,
        version=__version__,
        lifespan=lifespan,
        docs_url=docs_url,
        redoc_url=redoc_url,
        openapi_url=openapi_url,
    )

    # Exception handlers (RFC 7807 Problem Details)
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    app.add_middleware(TraceIDMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_allowed_origins(),
        allow_credentials=True,
        allow_methods=settings.get_cors_allowed_methods(),
        allow_headers=settings.get_cors_allowed_headers(),
    )

    register_routes(app)

    logger.info(f"FastAPI application created (v{__version__})")
    logger.info(f"Storage provider: {settings.infrastructure_provider}")

    return app
