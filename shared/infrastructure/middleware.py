"""Request-scoped logging context."""

from __future__ import annotations

import time

import structlog
from django.conf import settings  # type: ignore

logger = structlog.get_logger(__name__)


class RequestContextMiddleware:
    """Binds method, path and caller id to every log line of a request."""

    def __init__(self, get_response):
        self.get_response = get_response
        self.header = getattr(settings, "SHAREIT_USER_HEADER", "X-Sharer-User-Id")

    def __call__(self, request):
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            method=request.method,
            path=request.path,
            caller_id=request.headers.get(self.header),
        )
        started = time.monotonic()
        response = self.get_response(request)
        logger.info(
            "request.finished",
            status=response.status_code,
            duration_ms=round((time.monotonic() - started) * 1000, 2),
        )
        return response
