"""Webinar API Routes - Route registration only."""

from fastapi import APIRouter

from webinar_scheduler.api.v1 import WEBINARS_PREFIX
from webinar_scheduler.api.v1.webinars import api

router = APIRouter()
router.include_router(api.router, prefix=WEBINARS_PREFIX, tags=["webinars"])
