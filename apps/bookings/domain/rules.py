"""Temporal rules a booking period must satisfy when it is requested."""

from __future__ import annotations

from datetime import datetime

from shared.domain.errors import ValidationError
from shared.domain.value_objects import TimeWindow

DATES_REQUIRED = "Start and end dates are required"
START_AFTER_END = "Start date cannot be after end date"
START_EQUALS_END = "Start and end dates cannot be equal"
START_IN_PAST = "Start date cannot be in the past"


def validate_period(start: datetime | None, end: datetime | None, now: datetime) -> TimeWindow:
    """Return the period as a window, or raise ``ValidationError``.

    Checks run in a fixed order so that a request breaking several rules
    always reports the same one.
    """
    if start is None or end is None:
        raise ValidationError(DATES_REQUIRED)
    if start > end:
        raise ValidationError(START_AFTER_END)
    if start == end:
        raise ValidationError(START_EQUALS_END)
    if start < now:
        raise ValidationError(START_IN_PAST)
    return TimeWindow(start, end)
