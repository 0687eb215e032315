"""Offset/limit pagination shared by every list endpoint."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Sequence, Tuple, TypeVar

from django.conf import settings  # type: ignore

from shared.domain.errors import ValidationError

T = TypeVar("T")


@dataclass(frozen=True)
class PageRequest:
    """``from``/``size`` turned into a page index and page size.

    The page index is ``offset // size``: an offset that is not a multiple of
    the size lands on the page containing it, not at the offset itself.
    """

    offset: int = 0
    size: int = 10

    def __post_init__(self) -> None:
        if self.offset < 0:
            raise ValidationError("Parameter 'from' must not be negative")
        if self.size <= 0:
            raise ValidationError("Parameter 'size' must be positive")

    @property
    def page(self) -> int:
        return self.offset // self.size

    @property
    def start(self) -> int:
        return self.page * self.size

    @property
    def stop(self) -> int:
        return self.start + self.size

    def apply(self, rows: Sequence[T]) -> Sequence[T]:
        """Slice a queryset or a list down to this page."""
        return rows[self.start:self.stop]

    @classmethod
    def from_query(cls, params: Mapping[str, str]) -> "PageRequest":
        offset, size = page_params(params)
        return cls(offset=offset, size=size)


def page_params(params: Mapping[str, str]) -> Tuple[int, int]:
    """Read raw ``from`` and ``size`` integers without range checks."""

    default_size = getattr(settings, "SHAREIT_DEFAULT_PAGE_SIZE", 10)
    return _parse_int(params, "from", 0), _parse_int(params, "size", default_size)


def _parse_int(params: Mapping[str, str], name: str, default: int) -> int:
    raw = params.get(name)
    if raw in (None, ""):
        return default
    try:
        return int(raw)
    except (TypeError, ValueError):
        raise ValidationError(f"Parameter '{name}' must be an integer") from None
