"""
Request tracing middleware.

Every request gets a trace id that is attached to its log lines and echoed in
the X-Trace-ID response header. A gateway that already assigned one (the same
hop that forwards X-User-Id) can pass it in X-Trace-ID to keep a single id
across services.
"""

import uuid
from collections.abc import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from webinar_scheduler.core.logging import logger
from webinar_scheduler.core.trace_context import trace_id_context

TRACE_ID_HEADER = "X-Trace-ID"
MAX_TRACE_ID_LENGTH = 128


class TraceIDMiddleware(BaseHTTPMiddleware):
    """Bind a trace id to the request context and the response."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        incoming = request.headers.get(TRACE_ID_HEADER, "").strip()
        if incoming and len(incoming) <= MAX_TRACE_ID_LENGTH:
            trace_id = incoming
        else:
            trace_id = str(uuid.uuid4())
        trace_id_context.set(trace_id)

        logger.info(f"{request.method} {request.url.path} started")

        try:
            response = await call_next(request)
            response.headers[TRACE_ID_HEADER] = trace_id

            logger.info(
                f"{request.method} {request.url.path} -> {response.status_code}"
            )

            return response

        except Exception:
            logger.exception(f"{request.method} {request.url.path} failed")
            raise

        finally:
            trace_id_context.set(None)


__all__ = ["TRACE_ID_HEADER", "TraceIDMiddleware"]
