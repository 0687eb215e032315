"""Serializers for the booking domain."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from .models import Booking


class BookingRequestSerializer(serializers.Serializer):
    """Incoming ``{itemId, start, end}``.

    Dates may be missing here; the engine reports that with its own message.
    """

    itemId = serializers.IntegerField()
    start = serializers.DateTimeField(required=False, allow_null=True)
    end = serializers.DateTimeField(required=False, allow_null=True)


class _PartySerializer(serializers.Serializer):
    id = serializers.IntegerField()
    name = serializers.CharField()


class BookingSerializer(serializers.ModelSerializer):
    """Booking view with booker and item summaries."""

    booker = _PartySerializer(read_only=True)
    item = _PartySerializer(read_only=True)

    class Meta:
        model = Booking
        fields = ["id", "start", "end", "status", "booker", "item"]
        read_only_fields = fields


class BookingShortSerializer(serializers.Serializer):
    """``{id, bookerId}`` reference used to annotate items."""

    id = serializers.IntegerField()
    bookerId = serializers.IntegerField(source="booker_id")
