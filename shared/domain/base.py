"""
Base Domain Classes

- ValueObject: Immutable objects compared by value
- DomainEvent: Events that represent something that happened

Aggregates in ShareIt are Django models, so events are created by the
services that mutate them and handed to the unit of work explicitly.
"""

from abc import ABC
from dataclasses import dataclass, field, fields
from datetime import datetime
from uuid import UUID, uuid4


@dataclass(frozen=True)
class ValueObject(ABC):
    """
    Base class for value objects

    Value objects are immutable and have no identity.
    Two value objects are equal if all their attributes are equal.
    """
    pass


@dataclass
class DomainEvent:
    """
    Base class for domain events

    Domain events represent something that happened in the domain.
    They are published only after the transaction that produced them commits.
    Identity and timestamp are excluded from ``__init__`` so subclasses can
    declare required payload fields.
    """
    event_id: UUID = field(default_factory=uuid4, init=False)
    occurred_at: datetime = field(default_factory=datetime.now, init=False)

    def to_dict(self) -> dict:
        """Convert event to dictionary for serialization"""
        payload = {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if f.name not in ('event_id', 'occurred_at')
        }
        return {
            'event_id': str(self.event_id),
            'event_type': self.__class__.__name__,
            'occurred_at': self.occurred_at.isoformat(),
            **{
                key: value.isoformat() if isinstance(value, datetime) else value
                for key, value in payload.items()
            },
        }
