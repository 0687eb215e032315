"""Domain services for item requests."""

from __future__ import annotations

import logging

from django.db import transaction  # type: ignore

from apps.users.services import get_user
from shared.domain.errors import NotFoundError, ValidationError
from shared.infrastructure.pagination import PageRequest

from .models import ItemRequest

logger = logging.getLogger(__name__)


def _with_items(queryset):
    return queryset.select_related("requestor").prefetch_related("items")


@transaction.atomic
def create_request(user_id: int, description: str | None) -> ItemRequest:
    requestor = get_user(user_id)
    if description is None or not description.strip():
        raise ValidationError("Description cannot be empty")
    item_request = ItemRequest.objects.create(description=description, requestor=requestor)
    logger.info("User %s published item request %s", user_id, item_request.pk)
    return item_request


def list_own_requests(user_id: int) -> list[ItemRequest]:
    """All of the user's requests, newest first, with the items answering them."""

    get_user(user_id)
    return list(_with_items(ItemRequest.objects.filter(requestor_id=user_id)).order_by("-created", "-id"))


def list_other_requests(user_id: int, page: PageRequest) -> list[ItemRequest]:
    get_user(user_id)
    queryset = _with_items(ItemRequest.objects.exclude(requestor_id=user_id)).order_by("-created", "-id")
    return list(page.apply(queryset))


def get_request(request_id: int, user_id: int) -> ItemRequest:
    get_user(user_id)
    item_request = _with_items(ItemRequest.objects.filter(pk=request_id)).first()
    if item_request is None:
        raise NotFoundError(f"Item request not found with id: {request_id}")
    return item_request


def find_request(request_id: int) -> ItemRequest:
    """Resolve the request an item answers."""

    item_request = ItemRequest.objects.filter(pk=request_id).first()
    if item_request is None:
        raise NotFoundError(f"Item request not found with id: {request_id}")
    return item_request
