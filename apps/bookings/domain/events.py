"""
Booking Domain Events

Events that represent things that have happened in the booking domain.
These are published after successful transaction commits.
"""

from dataclasses import dataclass
from datetime import datetime

from shared.domain.base import DomainEvent


@dataclass
class BookingCreated(DomainEvent):
    """
    Event: A booking request was stored in WAITING status

    The item's owner now has a decision to make.
    """
    booking_id: int
    item_id: int
    booker_id: int
    owner_id: int
    start: datetime
    end: datetime


@dataclass
class BookingDecided(DomainEvent):
    """
    Event: The owner approved or rejected a booking (WAITING -> APPROVED | REJECTED)
    """
    booking_id: int
    item_id: int
    booker_id: int
    owner_id: int
    status: str
