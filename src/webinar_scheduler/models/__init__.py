"""
Models package.

Contains shared Pydantic models used across the API. Endpoint-specific
request/response models live next to their endpoints.
"""

from webinar_scheduler.models.errors import ProblemDetail, ValidationErrorDetail

__all__ = [
    "ProblemDetail",
    "ValidationErrorDetail",
]
