"""Tests for the API error envelope."""

from __future__ import annotations

import pytest
from django.http import Http404
from rest_framework import exceptions

from shared.domain.errors import (
    AccessDeniedError,
    ConflictError,
    ForbiddenError,
    NotFoundError,
    ValidationError,
)
from shared.infrastructure.exception_handler import api_exception_handler, first_error_message


@pytest.mark.parametrize(
    "exc, status_code, message",
    [
        (NotFoundError("User not found"), 404, "User not found"),
        (AccessDeniedError("Booking not found"), 404, "Booking not found"),
        (ValidationError("Start date cannot be in the past"), 400, "Start date cannot be in the past"),
        (ForbiddenError("Only owner can approve booking"), 403, "Only owner can approve booking"),
        (ConflictError("Email already exists"), 409, "Email already exists"),
        (Http404(), 404, "Not found"),
    ],
)
def test_domain_errors_render_envelope(exc, status_code, message):
    response = api_exception_handler(exc, {})

    assert response.status_code == status_code
    assert response.data == {"error": message}


def test_drf_validation_error_reports_first_field():
    exc = exceptions.ValidationError({"email": ["Enter a valid email address."]})

    response = api_exception_handler(exc, {})

    assert response.status_code == 400
    assert response.data == {"error": "email: Enter a valid email address."}


def test_unexpected_error_is_internal():
    response = api_exception_handler(RuntimeError("boom"), {})

    assert response.status_code == 500
    assert response.data == {"error": "Internal server error"}


def test_first_error_message_skips_non_field_key():
    detail = {"non_field_errors": ["Dates overlap"], "end": ["must be after start"]}

    assert first_error_message(detail) == "Dates overlap"
    assert first_error_message({}) is None
