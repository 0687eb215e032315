"""
Unit of Work Pattern

Manages write transactions and ensures that domain events
are published only after a successful commit.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
import logging
import threading

from django.db import transaction

from shared.domain.base import DomainEvent

logger = logging.getLogger(__name__)


class AbstractUnitOfWork(ABC):
    """Abstract Unit of Work pattern"""

    def __init__(self):
        self._events: List[DomainEvent] = []

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None:
            self.commit()
        else:
            self.rollback()

    @abstractmethod
    def commit(self):
        """Commit the transaction"""
        pass

    def rollback(self):
        """Rollback changes and discard events"""
        if self._events:
            logger.warning("Rolling back transaction, discarding %d events", len(self._events))
        self._events.clear()

    def collect(self, event: DomainEvent):
        """Queue an event for publication after commit"""
        self._events.append(event)

    def _drain_events(self) -> List[DomainEvent]:
        events = self._events.copy()
        self._events.clear()
        return events

    @staticmethod
    def _publish_events(events: List[DomainEvent]):
        """
        Publish collected events to message bus

        Called after successful transaction commit.
        """
        from shared.application.message_bus import message_bus

        logger.debug("Publishing %d domain events after commit", len(events))
        message_bus.publish_events(events)


class DjangoUnitOfWork(AbstractUnitOfWork):
    """
    Django implementation of Unit of Work

    Usage:
        with DjangoUnitOfWork() as uow:
            booking = Booking.objects.create(...)
            uow.collect(BookingCreated(...))
        # Events are published after commit
    """

    def __init__(self, using: Optional[str] = None):
        super().__init__()
        self._using = using
        self._transaction = None

    def __enter__(self):
        """Start database transaction"""
        self._transaction = transaction.atomic(using=self._using)
        self._transaction.__enter__()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Complete or rollback transaction"""
        try:
            super().__exit__(exc_type, exc_val, exc_tb)
        finally:
            if self._transaction:
                self._transaction.__exit__(exc_type, exc_val, exc_tb)

    def commit(self):
        """
        Schedule event publishing

        Events are published using Django's transaction.on_commit()
        to ensure they're only sent after database commit succeeds.
        """
        events = self._drain_events()
        if events:
            transaction.on_commit(lambda: self._publish_events(events), using=self._using)


class InMemoryUnitOfWork(AbstractUnitOfWork):
    """
    Unit of Work for the in-memory stores

    There is no isolation to speak of; the optional lock serializes whole
    operations so read-check-write sequences cannot interleave.
    """

    def __init__(self, lock: Optional[threading.RLock] = None):
        super().__init__()
        self._lock = lock

    def __enter__(self):
        if self._lock is not None:
            self._lock.acquire()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        try:
            super().__exit__(exc_type, exc_val, exc_tb)
        finally:
            if self._lock is not None:
                self._lock.release()

    def commit(self):
        events = self._drain_events()
        if events:
            self._publish_events(events)
