"""
Common Value Objects

- TimeWindow: a booking period from start (inclusive) to end (exclusive)
"""

from dataclasses import dataclass
from datetime import datetime

from shared.domain.base import ValueObject


@dataclass(frozen=True)
class TimeWindow(ValueObject):
    """
    Time window value object

    Represents a period from ``start`` (inclusive) to ``end`` (exclusive).
    Construction does not validate ordering; booking rules report ordering
    problems with their own messages, see ``apps.bookings.domain.rules``.
    """
    start: datetime
    end: datetime

    def overlaps_with(self, other: 'TimeWindow') -> bool:
        """
        Check if this window overlaps with another

        Adjacent windows do not overlap: [10:00, 12:00) and [12:00, 14:00).
        """
        if not isinstance(other, TimeWindow):
            raise TypeError("Can only check overlap with another TimeWindow")

        # Overlap formula: start1 < end2 AND end1 > start2
        return self.start < other.end and self.end > other.start

    def is_current(self, moment: datetime) -> bool:
        """Strictly started and not yet finished at ``moment``."""
        return self.start < moment < self.end

    def is_past(self, moment: datetime) -> bool:
        return self.end < moment

    def is_future(self, moment: datetime) -> bool:
        return self.start > moment

    def __str__(self):
        return f"{self.start.isoformat()} - {self.end.isoformat()}"

    def __repr__(self):
        return f"TimeWindow({self.start!r}, {self.end!r})"
