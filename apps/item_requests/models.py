"""Item request models for ShareIt."""

from __future__ import annotations

from django.db import models  # type: ignore
from django.utils import timezone  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class ItemRequest(models.Model):
    """A wanted item described in free text."""

    description = models.TextField(_("Description"))
    requestor = models.ForeignKey(
        "users.User",
        on_delete=models.CASCADE,
        related_name="item_requests",
    )
    created = models.DateTimeField(default=timezone.now)

    class Meta:
        verbose_name = _("Item request")
        verbose_name_plural = _("Item requests")
        ordering = ["-created", "-id"]
        indexes = [
            models.Index(fields=["requestor", "created"], name="item_request_requestor_idx"),
        ]

    def __str__(self) -> str:
        return f"Request #{self.pk} by {self.requestor_id}"
