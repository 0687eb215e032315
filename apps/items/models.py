"""Item catalog models for ShareIt."""

from __future__ import annotations

from django.db import models  # type: ignore
from django.utils import timezone  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class Item(models.Model):
    """Something an owner is willing to lend."""

    name = models.CharField(_("Name"), max_length=255)
    description = models.TextField(_("Description"))
    available = models.BooleanField(
        _("Available"),
        default=True,
        help_text=_("Unavailable items cannot be booked."),
    )
    owner = models.ForeignKey(
        "users.User",
        on_delete=models.CASCADE,
        related_name="items",
    )
    request = models.ForeignKey(
        "item_requests.ItemRequest",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="items",
        help_text=_("Request this item was listed in answer to."),
    )

    class Meta:
        verbose_name = _("Item")
        verbose_name_plural = _("Items")
        ordering = ["id"]
        indexes = [
            models.Index(fields=["owner", "id"], name="item_owner_idx"),
            models.Index(fields=["available"], name="item_available_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.name} (#{self.pk})"


class Comment(models.Model):
    """Feedback left by a user who has finished a booking of the item."""

    text = models.TextField(_("Text"))
    item = models.ForeignKey(Item, on_delete=models.CASCADE, related_name="comments")
    author = models.ForeignKey(
        "users.User",
        on_delete=models.CASCADE,
        related_name="comments",
    )
    created = models.DateTimeField(default=timezone.now)

    class Meta:
        verbose_name = _("Comment")
        verbose_name_plural = _("Comments")
        ordering = ["created", "id"]

    def __str__(self) -> str:
        return f"Comment #{self.pk} on item {self.item_id}"
