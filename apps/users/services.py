"""Domain services for the user directory."""

from __future__ import annotations

import logging

from django.db import IntegrityError, transaction  # type: ignore

from shared.domain.errors import ConflictError, NotFoundError

from .models import User

logger = logging.getLogger(__name__)

USER_NOT_FOUND = "User not found"
EMAIL_TAKEN = "Email already exists"


class UserDirectory:
    """Resolves user ids to ``User`` rows."""

    def get(self, user_id: int) -> User:
        user = User.objects.filter(pk=user_id).first()
        if user is None:
            raise NotFoundError(USER_NOT_FOUND)
        return user


def get_user(user_id: int) -> User:
    return UserDirectory().get(user_id)


def list_users() -> list[User]:
    return list(User.objects.order_by("id"))


def create_user(*, name: str, email: str) -> User:
    if User.objects.filter(email=email).exists():
        raise ConflictError(EMAIL_TAKEN)
    try:
        with transaction.atomic():
            user = User.objects.create(name=name, email=email)
    except IntegrityError:
        # Lost a race with a concurrent registration of the same address.
        raise ConflictError(EMAIL_TAKEN) from None
    logger.info("Created user %s", user.pk)
    return user


def update_user(user_id: int, *, name: str | None = None, email: str | None = None) -> User:
    """Change only the fields that were supplied."""

    user = get_user(user_id)
    if email is not None and email != user.email:
        if User.objects.filter(email=email).exclude(pk=user.pk).exists():
            raise ConflictError(EMAIL_TAKEN)
        user.email = email
    if name is not None:
        user.name = name
    try:
        with transaction.atomic():
            user.save(update_fields=["name", "email"])
    except IntegrityError:
        raise ConflictError(EMAIL_TAKEN) from None
    logger.info("Updated user %s", user.pk)
    return user


@transaction.atomic
def delete_user(user_id: int) -> None:
    user = get_user(user_id)
    user.delete()
    logger.info("Deleted user %s", user_id)
