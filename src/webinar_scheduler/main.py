"""
Main FastAPI application entry point.

Creates the FastAPI application using the application factory.
"""

from webinar_scheduler.application import create_app
from webinar_scheduler.config import get_settings
from webinar_scheduler.core.logging import intercept_standard_logging

# Intercept logs from uvicorn and other libraries
intercept_standard_logging()

app = create_app()


def run() -> None:
    """Run the application with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "webinar_scheduler.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="info" if settings.debug else "warning",
    )


if __name__ == "__main__":
    run()
