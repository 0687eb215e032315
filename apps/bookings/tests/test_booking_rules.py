"""Tests for state tokens and period rules."""

from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from apps.bookings.domain.rules import validate_period
from apps.bookings.domain.states import BookingState
from apps.bookings.models import Booking
from shared.domain.errors import ValidationError
from shared.domain.value_objects import TimeWindow

NOW = datetime(2030, 1, 1, 9, 0, 0)


@pytest.mark.parametrize(
    "token, expected",
    [
        ("ALL", BookingState.ALL),
        ("current", BookingState.CURRENT),
        ("Past", BookingState.PAST),
        (" future ", BookingState.FUTURE),
        ("WAITING", BookingState.WAITING),
        ("rejected", BookingState.REJECTED),
        ("BOGUS", BookingState.ALL),
        ("APPROVED", BookingState.ALL),
        ("", BookingState.ALL),
        (None, BookingState.ALL),
    ],
)
def test_parse_state_token(token, expected):
    assert BookingState.parse(token) is expected


def test_valid_period_becomes_window():
    start = NOW + timedelta(hours=1)
    end = NOW + timedelta(hours=2)

    assert validate_period(start, end, NOW) == TimeWindow(start, end)


def test_period_starting_now_is_accepted():
    assert validate_period(NOW, NOW + timedelta(hours=1), NOW).start == NOW


def test_ordering_is_checked_before_past_start():
    with pytest.raises(ValidationError, match="Start date cannot be after end date"):
        validate_period(NOW - timedelta(hours=1), NOW - timedelta(hours=2), NOW)


def test_adjacent_windows_do_not_overlap():
    first = TimeWindow(NOW, NOW + timedelta(hours=2))
    second = TimeWindow(NOW + timedelta(hours=2), NOW + timedelta(hours=4))

    assert not first.overlaps_with(second)
    assert first.overlaps_with(TimeWindow(NOW + timedelta(hours=1), NOW + timedelta(hours=3)))


@pytest.mark.parametrize(
    "state, start_hours, end_hours, expected",
    [
        (BookingState.CURRENT, -1, 1, True),
        (BookingState.CURRENT, 0, 1, False),
        (BookingState.PAST, -2, -1, True),
        (BookingState.PAST, -2, 0, False),
        (BookingState.FUTURE, 1, 2, True),
        (BookingState.FUTURE, 0, 2, False),
        (BookingState.ALL, -2, -1, True),
    ],
)
def test_time_states_match_window_position(state, start_hours, end_hours, expected):
    booking = Booking(
        start=NOW + timedelta(hours=start_hours),
        end=NOW + timedelta(hours=end_hours),
        status=Booking.Status.APPROVED,
    )

    assert state.matches(booking, NOW) is expected
