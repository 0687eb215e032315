"""Domain services for booking workflows."""

from __future__ import annotations

from datetime import datetime
from typing import Callable, List, Optional, Protocol
import logging

from django.conf import settings  # type: ignore
from django.utils import timezone  # type: ignore

from apps.items.models import Item
from apps.users.models import User
from shared.domain.errors import (
    AccessDeniedError,
    ConflictError,
    ForbiddenError,
    NotFoundError,
    ValidationError,
)
from shared.infrastructure.pagination import PageRequest

from .application.commands import CreateBookingCommand, DecideBookingCommand
from .domain.events import BookingCreated, BookingDecided
from .domain.rules import validate_period
from .domain.states import BookingState
from .models import Booking
from .repository import BookingRepository, DjangoBookingRepository

logger = logging.getLogger(__name__)

ITEM_NOT_AVAILABLE = "Item is not available for booking"
OWN_ITEM = "Owner cannot book their own item"
BOOKING_NOT_FOUND = "Booking not found"
ONLY_OWNER_DECIDES = "Only owner can approve booking"
ALREADY_PROCESSED = "Booking is already processed"
PERIOD_TAKEN = "Item is already booked for the requested period"

OVERLAP_PERMISSIVE = "permissive"
OVERLAP_STRICT = "strict"


class UserLookup(Protocol):
    def get(self, user_id: int) -> User: ...


class ItemLookup(Protocol):
    def get(self, item_id: int) -> Item: ...


class BookingService:
    """
    Booking engine

    Creates bookings, applies the owner's decision and answers
    role-scoped queries. Every rule violation is raised as a
    ``shared.domain.errors`` exception at the point it is detected.

    Overlap policy:
    - "permissive": overlapping requests are accepted; the owner
      reconciles them when deciding
    - "strict": creation fails with ``ConflictError`` when an APPROVED
      booking of the item intersects the requested period
    """

    def __init__(
        self,
        users: UserLookup,
        items: ItemLookup,
        bookings: BookingRepository,
        *,
        clock: Optional[Callable[[], datetime]] = None,
        overlap_policy: Optional[str] = None,
    ):
        self.users = users
        self.items = items
        self.bookings = bookings
        self._clock = clock or timezone.now
        self._overlap_policy = overlap_policy

    @property
    def overlap_policy(self) -> str:
        if self._overlap_policy:
            return self._overlap_policy
        return getattr(settings, "SHAREIT_BOOKING_OVERLAP_POLICY", OVERLAP_PERMISSIVE)

    def now(self) -> datetime:
        return self._clock()

    # ----- commands -----

    def create_booking(self, command: CreateBookingCommand) -> Booking:
        booker = self.users.get(command.user_id)
        item = self.items.get(command.item_id)

        if not item.available:
            raise ValidationError(ITEM_NOT_AVAILABLE)

        if item.owner_id == booker.pk:
            raise AccessDeniedError(OWN_ITEM)

        window = validate_period(command.start, command.end, self.now())

        with self.bookings.unit_of_work() as uow:
            if self.overlap_policy == OVERLAP_STRICT:
                self.bookings.lock_item(item.pk)
                if self.bookings.has_approved_overlap(item.pk, window):
                    raise ConflictError(PERIOD_TAKEN)

            booking = self.bookings.add(
                Booking(
                    item=item,
                    booker=booker,
                    start=window.start,
                    end=window.end,
                    status=Booking.Status.WAITING,
                )
            )
            uow.collect(
                BookingCreated(
                    booking_id=booking.pk,
                    item_id=item.pk,
                    booker_id=booker.pk,
                    owner_id=item.owner_id,
                    start=booking.start,
                    end=booking.end,
                )
            )

        logger.info("Booking %s created for item %s by user %s", booking.pk, item.pk, booker.pk)
        return booking

    def decide(self, command: DecideBookingCommand) -> Booking:
        booking = self.bookings.get(command.booking_id)
        if booking is None:
            raise NotFoundError(BOOKING_NOT_FOUND)

        owner_id = booking.item.owner_id
        if owner_id != command.user_id:
            raise ForbiddenError(ONLY_OWNER_DECIDES)

        if not booking.is_waiting:
            raise ValidationError(ALREADY_PROCESSED)

        status = Booking.Status.APPROVED if command.approved else Booking.Status.REJECTED

        with self.bookings.unit_of_work() as uow:
            # A concurrent decision may have landed since the read above.
            if not self.bookings.transition(booking.pk, status):
                raise ValidationError(ALREADY_PROCESSED)
            booking.status = status
            uow.collect(
                BookingDecided(
                    booking_id=booking.pk,
                    item_id=booking.item_id,
                    booker_id=booking.booker_id,
                    owner_id=owner_id,
                    status=str(status),
                )
            )

        logger.info("Booking %s %s by owner %s", booking.pk, status.lower(), owner_id)
        return booking

    # ----- queries -----

    def get_booking(self, booking_id: int, user_id: int) -> Booking:
        booking = self.bookings.get(booking_id)
        if booking is None:
            raise NotFoundError(BOOKING_NOT_FOUND)
        if user_id not in (booking.booker_id, booking.item.owner_id):
            raise AccessDeniedError(BOOKING_NOT_FOUND)
        return booking

    def list_for_booker(
        self, user_id: int, state: Optional[str] = None, offset: int = 0, size: int = 10
    ) -> List[Booking]:
        self.users.get(user_id)
        page = PageRequest(offset=offset, size=size)
        return self.bookings.find_for_booker(user_id, BookingState.parse(state), self.now(), page)

    def list_for_owner(
        self, user_id: int, state: Optional[str] = None, offset: int = 0, size: int = 10
    ) -> List[Booking]:
        self.users.get(user_id)
        page = PageRequest(offset=offset, size=size)
        return self.bookings.find_for_owner(user_id, BookingState.parse(state), self.now(), page)

    def last_and_next(self, item_id: int):
        """Short references shown to an item's owner: (last, next), either may be ``None``."""
        now = self.now()
        return (
            self.bookings.find_last_approved(item_id, now),
            self.bookings.find_next_approved(item_id, now),
        )

    def can_comment(self, item_id: int, user_id: int) -> bool:
        return self.bookings.has_finished_approved(item_id, user_id, self.now())


def get_booking_service() -> BookingService:
    """Engine wired to the Django ORM store."""

    from apps.items.services import ItemCatalog
    from apps.users.services import UserDirectory

    return BookingService(UserDirectory(), ItemCatalog(), DjangoBookingRepository())
