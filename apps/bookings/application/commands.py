"""
Booking Commands

Inputs of the two write use cases of the booking engine. Views build
them from validated request data; ``BookingService`` executes them.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class CreateBookingCommand:
    """Request ``item_id`` for ``[start, end)`` on behalf of ``user_id``."""
    user_id: int
    item_id: int
    start: Optional[datetime]
    end: Optional[datetime]


@dataclass(frozen=True)
class DecideBookingCommand:
    """Owner's one-shot decision on a WAITING booking."""
    booking_id: int
    user_id: int
    approved: bool
