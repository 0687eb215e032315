"""Admin registration for bookings."""

from __future__ import annotations

from django.contrib import admin

from .models import Booking


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "item",
        "booker",
        "status",
        "start",
        "end",
    )
    list_filter = ("status", "start", "end")
    search_fields = ("item__name", "booker__email")
    readonly_fields = ("item", "booker", "start", "end")
