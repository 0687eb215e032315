"""Caller identity carried in a request header."""

from __future__ import annotations

from django.conf import settings  # type: ignore

from shared.domain.errors import ValidationError


def get_caller_id(request) -> int:
    """Return the numeric user id the gateway (or client) put in the header."""

    header = settings.SHAREIT_USER_HEADER
    raw = request.headers.get(header)
    if raw is None or not raw.strip():
        raise ValidationError(f"Missing required header {header}")
    try:
        return int(raw)
    except ValueError:
        raise ValidationError(f"Header {header} must be an integer") from None
