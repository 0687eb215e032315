"""
Domain Errors

Typed failures raised by services at the point a rule is violated. They
propagate unmodified to the API boundary where
``shared.infrastructure.exception_handler`` renders each kind with a fixed
HTTP status and the ``{"error": "..."}`` envelope.
"""

from __future__ import annotations


class ShareItError(Exception):
    """Base class for every expected domain failure."""

    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class NotFoundError(ShareItError):
    """Referenced user, item, request or booking does not exist."""

    status_code = 404
    default_message = "Not found"


class AccessDeniedError(NotFoundError):
    """
    The object exists but the caller may not see or use it.

    Rendered exactly like ``NotFoundError`` so callers cannot probe for
    existence; kept as its own class so logs can tell the two apart.
    """


class ValidationError(ShareItError):
    """Malformed or logically invalid input."""

    status_code = 400
    default_message = "Validation failed"


class ForbiddenError(ShareItError):
    """Known caller performing an action reserved to someone else."""

    status_code = 403
    default_message = "Forbidden"


class ConflictError(ShareItError):
    """Request clashes with existing state (duplicate e-mail, taken period)."""

    status_code = 409
    default_message = "Conflict"
