"""DRF exception handler rendering every failure as ``{"error": "..."}``."""

from __future__ import annotations

import logging

from django.http import Http404  # type: ignore
from rest_framework import exceptions, status  # type: ignore
from rest_framework.response import Response  # type: ignore

from shared.domain.errors import AccessDeniedError, ShareItError

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"


def error_response(message: str, status_code: int) -> Response:
    return Response({"error": message}, status=status_code)


def api_exception_handler(exc, context):  # type: ignore
    """Map domain, DRF and unexpected exceptions to a fixed status and envelope."""

    view = context.get("view") if context else None
    view_name = view.__class__.__name__ if view is not None else "-"

    if isinstance(exc, AccessDeniedError):
        logger.info("Access denied in %s: %s", view_name, exc.message)
        return error_response(exc.message, exc.status_code)

    if isinstance(exc, ShareItError):
        logger.info("%s in %s: %s", exc.__class__.__name__, view_name, exc.message)
        return error_response(exc.message, exc.status_code)

    if isinstance(exc, Http404):
        return error_response("Not found", status.HTTP_404_NOT_FOUND)

    if isinstance(exc, exceptions.ValidationError):
        message = first_error_message(exc.detail) or "Validation failed"
        logger.info("Request validation failed in %s: %s", view_name, message)
        return error_response(message, status.HTTP_400_BAD_REQUEST)

    if isinstance(exc, exceptions.APIException):
        message = first_error_message(exc.detail) or exc.default_detail
        return error_response(str(message), exc.status_code)

    logger.exception("Unhandled error in %s", view_name)
    return error_response(INTERNAL_ERROR_MESSAGE, status.HTTP_500_INTERNAL_SERVER_ERROR)


def first_error_message(detail, field: str | None = None) -> str | None:
    """Flatten DRF error details into one line, prefixed by the first field name."""

    if isinstance(detail, dict):
        for key, value in detail.items():
            name = None if key == "non_field_errors" else key
            message = first_error_message(value, name)
            if message:
                return message
        return None
    if isinstance(detail, (list, tuple)):
        for value in detail:
            message = first_error_message(value, field)
            if message:
                return message
        return None
    if detail is None:
        return None
    return f"{field}: {detail}" if field else str(detail)
