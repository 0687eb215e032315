"""
Booking State Filters

The closed set of state tokens accepted by the list endpoints. Every
member carries one predicate, expressed twice: as a ``Q`` object for the
ORM store and as a plain check for the in-memory store.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING

from django.db.models import Q  # type: ignore

if TYPE_CHECKING:  # pragma: no cover - type checking only
    from apps.bookings.models import Booking


class BookingState(str, Enum):
    ALL = "ALL"
    CURRENT = "CURRENT"
    PAST = "PAST"
    FUTURE = "FUTURE"
    WAITING = "WAITING"
    REJECTED = "REJECTED"

    @classmethod
    def parse(cls, token: str | None) -> "BookingState":
        """Case-insensitive lookup; unknown or missing tokens mean ``ALL``."""
        if not token:
            return cls.ALL
        try:
            return cls(token.strip().upper())
        except ValueError:
            return cls.ALL

    def as_q(self, now: datetime) -> Q:
        from apps.bookings.models import Booking

        if self is BookingState.CURRENT:
            return Q(start__lt=now, end__gt=now)
        if self is BookingState.PAST:
            return Q(end__lt=now)
        if self is BookingState.FUTURE:
            return Q(start__gt=now)
        if self is BookingState.WAITING:
            return Q(status=Booking.Status.WAITING)
        if self is BookingState.REJECTED:
            return Q(status=Booking.Status.REJECTED)
        return Q()

    def matches(self, booking: "Booking", now: datetime) -> bool:
        from apps.bookings.models import Booking

        if self is BookingState.CURRENT:
            return booking.window.is_current(now)
        if self is BookingState.PAST:
            return booking.window.is_past(now)
        if self is BookingState.FUTURE:
            return booking.window.is_future(now)
        if self is BookingState.WAITING:
            return booking.status == Booking.Status.WAITING
        if self is BookingState.REJECTED:
            return booking.status == Booking.Status.REJECTED
        return True
