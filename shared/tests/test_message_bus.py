"""Tests for event dispatch and unit of work publication."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from unittest import mock

import pytest

from shared.application.message_bus import MessageBus
from shared.application.uow import InMemoryUnitOfWork
from shared.domain.base import DomainEvent


@dataclass
class ItemListed(DomainEvent):
    item_id: int


def test_every_handler_runs_even_if_one_fails():
    bus = MessageBus()
    failing = mock.Mock(side_effect=RuntimeError("down"), __name__="failing")
    healthy = mock.Mock(__name__="healthy")
    bus.register_event_handler(ItemListed, failing)
    bus.register_event_handler(ItemListed, healthy)

    bus.publish_events([ItemListed(item_id=3)])

    failing.assert_called_once()
    healthy.assert_called_once()
    assert healthy.call_args.args[0].item_id == 3


def test_duplicate_registration_is_ignored():
    bus = MessageBus()
    handler = mock.Mock(__name__="handler")
    bus.register_event_handler(ItemListed, handler)
    bus.register_event_handler(ItemListed, handler)

    bus.publish_events([ItemListed(item_id=1)])

    assert handler.call_count == 1


def test_event_to_dict():
    payload = ItemListed(item_id=5).to_dict()

    assert payload["event_type"] == "ItemListed"
    assert payload["item_id"] == 5
    assert "event_id" in payload and "occurred_at" in payload


def test_unit_of_work_publishes_only_on_success():
    with mock.patch("shared.application.message_bus.message_bus") as bus:
        with InMemoryUnitOfWork() as uow:
            uow.collect(ItemListed(item_id=1))
        bus.publish_events.assert_called_once()

        bus.reset_mock()
        with pytest.raises(ValueError):
            with InMemoryUnitOfWork() as uow:
                uow.collect(ItemListed(item_id=2))
                raise ValueError("rolled back")
        bus.publish_events.assert_not_called()


def test_unit_of_work_holds_lock():
    lock = threading.RLock()

    with InMemoryUnitOfWork(lock=lock):
        acquired_elsewhere = []
        worker = threading.Thread(target=lambda: acquired_elsewhere.append(lock.acquire(blocking=False)))
        worker.start()
        worker.join()

    assert acquired_elsewhere == [False]
    assert lock.acquire(blocking=False)
    lock.release()
