"""Health route registration."""

from fastapi import APIRouter

from webinar_scheduler.api.v1.health import api

# Served at the root, outside the /webinars prefix
router = APIRouter()
router.include_router(api.router, tags=["Health"])
