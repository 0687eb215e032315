"""Event handlers of the booking domain.

They record the lifecycle in the structured log; delivery of
notifications to users is not part of this service.
"""

from __future__ import annotations

import structlog

from shared.application.message_bus import MessageBus

from .domain.events import BookingCreated, BookingDecided

logger = structlog.get_logger(__name__)


def log_booking_created(event: BookingCreated) -> None:
    logger.info("booking.created", **event.to_dict())


def log_booking_decided(event: BookingDecided) -> None:
    logger.info("booking.decided", **event.to_dict())


def register_handlers(bus: MessageBus) -> None:
    bus.register_event_handler(BookingCreated, log_booking_created)
    bus.register_event_handler(BookingDecided, log_booking_decided)
