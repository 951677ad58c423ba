"""
API v1 endpoints.

Route prefix constants for consistent API versioning.
"""

API_V1_PREFIX: str = ""

WEBINARS_PREFIX: str = f"{API_V1_PREFIX}/webinars"

__all__ = [
    "API_V1_PREFIX",
    "WEBINARS_PREFIX",
]
