"""
Booking Store

Persistence contract of the booking engine and its two implementations:

- DjangoBookingRepository: the relational store behind the HTTP API
- InMemoryBookingRepository: dictionaries guarded by one lock, used by
  engine tests and anywhere a database is not wanted

The in-memory variant works on unsaved model instances with ids assigned
by ``InMemoryStore``; nothing in it touches a database connection.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import defaultdict
from datetime import datetime
from itertools import count
from typing import Dict, Iterator, List, Optional
import logging
import threading

from django.db import transaction  # type: ignore
from django.db.utils import NotSupportedError  # type: ignore

from apps.items.models import Item
from apps.users.models import User
from shared.application.uow import AbstractUnitOfWork, DjangoUnitOfWork, InMemoryUnitOfWork
from shared.domain.errors import NotFoundError
from shared.domain.value_objects import TimeWindow
from shared.infrastructure.pagination import PageRequest

from .domain.states import BookingState
from .models import Booking

logger = logging.getLogger(__name__)


class BookingRepository(ABC):
    """What the booking engine needs from storage."""

    @abstractmethod
    def unit_of_work(self) -> AbstractUnitOfWork:
        """Scope for one write operation."""

    @abstractmethod
    def add(self, booking: Booking) -> Booking:
        """Persist a new booking and return it with its id assigned."""

    @abstractmethod
    def get(self, booking_id: int) -> Optional[Booking]:
        """Booking with its item and booker, or ``None``."""

    @abstractmethod
    def transition(self, booking_id: int, status: str) -> bool:
        """
        Move a WAITING booking to ``status`` in one conditional step

        Returns ``False`` when the booking was no longer WAITING, so two
        concurrent decisions cannot both succeed.
        """

    @abstractmethod
    def find_for_booker(
        self, booker_id: int, state: BookingState, now: datetime, page: PageRequest
    ) -> List[Booking]:
        """Page of the booker's bookings matching ``state``, latest start first."""

    @abstractmethod
    def find_for_owner(
        self, owner_id: int, state: BookingState, now: datetime, page: PageRequest
    ) -> List[Booking]:
        """Same as ``find_for_booker`` but over bookings of items owned by ``owner_id``."""

    @abstractmethod
    def find_last_approved(self, item_id: int, now: datetime) -> Optional[Booking]:
        """APPROVED booking of the item that ended most recently before ``now``."""

    @abstractmethod
    def find_next_approved(self, item_id: int, now: datetime) -> Optional[Booking]:
        """APPROVED booking of the item not yet ended, earliest start first."""

    @abstractmethod
    def has_finished_approved(self, item_id: int, booker_id: int, now: datetime) -> bool:
        """Whether the user has an APPROVED booking of the item that already ended."""

    @abstractmethod
    def has_approved_overlap(self, item_id: int, window: TimeWindow) -> bool:
        """Whether an APPROVED booking of the item intersects ``window``."""

    def lock_item(self, item_id: int) -> None:
        """Serialize writers competing for the same item until the unit of work ends."""


# ===== Django ORM =====

def _lock_queryset_if_possible(queryset):
    """Apply select_for_update when inside transaction.atomic()."""

    if not transaction.get_connection(queryset.db).in_atomic_block:
        return queryset

    try:
        return queryset.select_for_update()
    except NotSupportedError:
        return queryset


class DjangoBookingRepository(BookingRepository):

    def __init__(self, using: Optional[str] = None):
        self._using = using

    def _queryset(self):
        return Booking.objects.using(self._using).select_related("item", "item__owner", "booker")

    def unit_of_work(self) -> DjangoUnitOfWork:
        return DjangoUnitOfWork(using=self._using)

    def add(self, booking: Booking) -> Booking:
        booking.save(using=self._using, force_insert=True)
        return booking

    def get(self, booking_id: int) -> Optional[Booking]:
        return self._queryset().filter(pk=booking_id).first()

    def transition(self, booking_id: int, status: str) -> bool:
        updated = (
            Booking.objects.using(self._using)
            .filter(pk=booking_id, status=Booking.Status.WAITING)
            .update(status=status)
        )
        return updated == 1

    def _page(self, queryset, state: BookingState, now: datetime, page: PageRequest) -> List[Booking]:
        queryset = queryset.filter(state.as_q(now)).order_by("-start", "-id")
        return list(page.apply(queryset))

    def find_for_booker(self, booker_id, state, now, page):
        return self._page(self._queryset().filter(booker_id=booker_id), state, now, page)

    def find_for_owner(self, owner_id, state, now, page):
        return self._page(self._queryset().filter(item__owner_id=owner_id), state, now, page)

    def _approved_for_item(self, item_id: int):
        return self._queryset().filter(item_id=item_id, status=Booking.Status.APPROVED)

    def find_last_approved(self, item_id, now):
        return self._approved_for_item(item_id).filter(end__lt=now).order_by("-end", "-id").first()

    def find_next_approved(self, item_id, now):
        return self._approved_for_item(item_id).filter(end__gt=now).order_by("start", "id").first()

    def has_finished_approved(self, item_id, booker_id, now):
        return self._approved_for_item(item_id).filter(booker_id=booker_id, end__lt=now).exists()

    def has_approved_overlap(self, item_id, window):
        # Overlap formula: start1 < end2 AND end1 > start2
        return self._approved_for_item(item_id).filter(
            start__lt=window.end,
            end__gt=window.start,
        ).exists()

    def lock_item(self, item_id: int) -> None:
        queryset = _lock_queryset_if_possible(Item.objects.using(self._using).filter(pk=item_id))
        list(queryset.values_list("pk", flat=True))


# ===== In-memory =====

class InMemoryStore:
    """
    Users, items and bookings held in process memory

    One reentrant lock guards all three collections. Units of work hold it
    for a whole operation, so check-then-write sequences do not interleave.
    """

    def __init__(self):
        self.lock = threading.RLock()
        self.users: Dict[int, User] = {}
        self.items: Dict[int, Item] = {}
        self.bookings: Dict[int, Booking] = {}
        self._sequences: Dict[str, Iterator[int]] = defaultdict(lambda: count(1))

    def next_id(self, collection: str) -> int:
        with self.lock:
            return next(self._sequences[collection])

    def add_user(self, name: str, email: str) -> User:
        with self.lock:
            user = User(id=self.next_id("users"), name=name, email=email)
            self.users[user.pk] = user
            return user

    def add_item(self, owner: User, name: str, description: str = "", available: bool = True) -> Item:
        with self.lock:
            item = Item(
                id=self.next_id("items"),
                owner=owner,
                name=name,
                description=description,
                available=available,
            )
            self.items[item.pk] = item
            return item


class InMemoryUserDirectory:

    def __init__(self, store: InMemoryStore):
        self._store = store

    def get(self, user_id: int) -> User:
        from apps.users.services import USER_NOT_FOUND

        with self._store.lock:
            user = self._store.users.get(user_id)
        if user is None:
            raise NotFoundError(USER_NOT_FOUND)
        return user


class InMemoryItemCatalog:

    def __init__(self, store: InMemoryStore):
        self._store = store

    def get(self, item_id: int) -> Item:
        from apps.items.services import ITEM_NOT_FOUND

        with self._store.lock:
            item = self._store.items.get(item_id)
        if item is None:
            raise NotFoundError(ITEM_NOT_FOUND)
        return item


class InMemoryBookingRepository(BookingRepository):

    def __init__(self, store: Optional[InMemoryStore] = None):
        self.store = store or InMemoryStore()

    def unit_of_work(self) -> InMemoryUnitOfWork:
        return InMemoryUnitOfWork(lock=self.store.lock)

    def add(self, booking: Booking) -> Booking:
        with self.store.lock:
            booking.id = self.store.next_id("bookings")
            self.store.bookings[booking.pk] = booking
        return booking

    def get(self, booking_id: int) -> Optional[Booking]:
        with self.store.lock:
            return self.store.bookings.get(booking_id)

    def transition(self, booking_id: int, status: str) -> bool:
        with self.store.lock:
            booking = self.store.bookings.get(booking_id)
            if booking is None or booking.status != Booking.Status.WAITING:
                return False
            booking.status = status
            return True

    def _select(self, predicate) -> List[Booking]:
        with self.store.lock:
            return [booking for booking in self.store.bookings.values() if predicate(booking)]

    @staticmethod
    def _page(rows: List[Booking], page: PageRequest) -> List[Booking]:
        rows.sort(key=lambda booking: (booking.start, booking.pk), reverse=True)
        return list(page.apply(rows))

    def find_for_booker(self, booker_id, state, now, page):
        rows = self._select(lambda b: b.booker_id == booker_id and state.matches(b, now))
        return self._page(rows, page)

    def find_for_owner(self, owner_id, state, now, page):
        rows = self._select(lambda b: b.item.owner_id == owner_id and state.matches(b, now))
        return self._page(rows, page)

    def _approved_for_item(self, item_id: int, predicate) -> List[Booking]:
        return self._select(
            lambda b: b.item_id == item_id and b.status == Booking.Status.APPROVED and predicate(b)
        )

    def find_last_approved(self, item_id, now):
        rows = self._approved_for_item(item_id, lambda b: b.end < now)
        return max(rows, key=lambda b: (b.end, b.pk), default=None)

    def find_next_approved(self, item_id, now):
        rows = self._approved_for_item(item_id, lambda b: b.end > now)
        return min(rows, key=lambda b: (b.start, b.pk), default=None)

    def has_finished_approved(self, item_id, booker_id, now):
        return bool(self._approved_for_item(item_id, lambda b: b.booker_id == booker_id and b.end < now))

    def has_approved_overlap(self, item_id, window):
        return bool(self._approved_for_item(item_id, lambda b: b.window.overlaps_with(window)))
