"""Per-request trace id shared by the middleware and the log filter."""

import contextvars

trace_id_context: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "trace_id", default=None
)
