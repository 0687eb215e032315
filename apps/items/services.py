"""Domain services for the item catalog."""

from __future__ import annotations

from typing import Iterable, List, Optional
import logging

from django.db import transaction  # type: ignore

from apps.users.services import get_user
from shared.domain.errors import AccessDeniedError, NotFoundError, ValidationError
from shared.infrastructure.pagination import PageRequest

from .filters import ItemSearchFilterSet
from .models import Comment, Item

logger = logging.getLogger(__name__)

ITEM_NOT_FOUND = "Item not found"
ONLY_OWNER_UPDATES = "Only owner can update item"
NAME_REQUIRED = "Item name cannot be empty"
DESCRIPTION_REQUIRED = "Item description cannot be empty"
AVAILABLE_REQUIRED = "Item available status cannot be null"
COMMENT_NOT_ALLOWED = "User must have approved booking for this item to leave a comment"
COMMENT_TEXT_REQUIRED = "Comment text cannot be empty"


class ItemCatalog:
    """Resolves item ids to ``Item`` rows with their owner."""

    def get(self, item_id: int) -> Item:
        item = Item.objects.select_related("owner").filter(pk=item_id).first()
        if item is None:
            raise NotFoundError(ITEM_NOT_FOUND)
        return item


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def _booking_service():
    # Local import to prevent circular dependency
    from apps.bookings.services import get_booking_service

    return get_booking_service()


def _annotate(items: Iterable[Item], viewer_id: int, with_comments: bool = True) -> List[Item]:
    """Attach ``last_booking``, ``next_booking`` and ``comment_list`` to each item.

    Booking references are filled in only for items the viewer owns.
    """
    items = list(items)
    engine = _booking_service() if any(item.owner_id == viewer_id for item in items) else None
    for item in items:
        item.last_booking = None
        item.next_booking = None
        if engine is not None and item.owner_id == viewer_id:
            item.last_booking, item.next_booking = engine.last_and_next(item.pk)
        if with_comments:
            item.comment_list = list(item.comments.select_related("author").order_by("created", "id"))
    return items


@transaction.atomic
def create_item(
    owner_id: int,
    *,
    name: Optional[str],
    description: Optional[str],
    available: Optional[bool],
    request_id: Optional[int] = None,
) -> Item:
    if _is_blank(name):
        raise ValidationError(NAME_REQUIRED)
    if _is_blank(description):
        raise ValidationError(DESCRIPTION_REQUIRED)
    if available is None:
        raise ValidationError(AVAILABLE_REQUIRED)
    owner = get_user(owner_id)

    item_request = None
    if request_id is not None:
        from apps.item_requests.services import find_request

        item_request = find_request(request_id)

    item = Item.objects.create(
        owner=owner,
        name=name,
        description=description,
        available=available,
        request=item_request,
    )
    logger.info("User %s listed item %s", owner_id, item.pk)
    return item


@transaction.atomic
def update_item(
    item_id: int,
    owner_id: int,
    *,
    name: Optional[str] = None,
    description: Optional[str] = None,
    available: Optional[bool] = None,
) -> Item:
    """Apply the supplied fields only; ``None`` means "leave as is"."""

    item = Item.objects.select_for_update().filter(pk=item_id).first()
    if item is None:
        raise NotFoundError(ITEM_NOT_FOUND)
    if item.owner_id != owner_id:
        raise AccessDeniedError(ONLY_OWNER_UPDATES)

    if name is not None:
        if not name.strip():
            raise ValidationError(NAME_REQUIRED)
        item.name = name
    if description is not None:
        if not description.strip():
            raise ValidationError(DESCRIPTION_REQUIRED)
        item.description = description
    if available is not None:
        item.available = available

    item.save(update_fields=["name", "description", "available"])
    logger.info("Owner %s updated item %s", owner_id, item.pk)
    return item


def get_item(item_id: int, viewer_id: int) -> Item:
    get_user(viewer_id)
    item = ItemCatalog().get(item_id)
    return _annotate([item], viewer_id)[0]


def list_owner_items(owner_id: int, page: PageRequest) -> List[Item]:
    get_user(owner_id)
    queryset = Item.objects.filter(owner_id=owner_id).order_by("id")
    return _annotate(page.apply(queryset), owner_id)


def search_items(text: Optional[str], page: PageRequest) -> List[Item]:
    if _is_blank(text):
        return []
    base = Item.objects.filter(available=True).order_by("id")
    queryset = ItemSearchFilterSet({"text": text.strip()}, queryset=base).qs
    return list(page.apply(queryset))


@transaction.atomic
def add_comment(item_id: int, author_id: int, text: Optional[str]) -> Comment:
    item = ItemCatalog().get(item_id)
    author = get_user(author_id)

    if not _booking_service().can_comment(item.pk, author.pk):
        raise ValidationError(COMMENT_NOT_ALLOWED)
    if _is_blank(text):
        raise ValidationError(COMMENT_TEXT_REQUIRED)

    comment = Comment.objects.create(item=item, author=author, text=text)
    logger.info("User %s commented on item %s", author_id, item_id)
    return comment
