"""Serializers for the item catalog."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from apps.bookings.serializers import BookingShortSerializer

from .models import Comment, Item


class ItemWriteSerializer(serializers.Serializer):
    """Create/update input.

    Blank or missing values are let through; ``services`` decides which
    of them are errors, since creation and partial update differ.
    """

    name = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    description = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    available = serializers.BooleanField(required=False, allow_null=True)
    requestId = serializers.IntegerField(required=False, allow_null=True)


class CommentCreateSerializer(serializers.Serializer):
    text = serializers.CharField(required=False, allow_blank=True, allow_null=True, trim_whitespace=False)


class CommentSerializer(serializers.ModelSerializer):
    authorName = serializers.ReadOnlyField(source="author.name")

    class Meta:
        model = Comment
        fields = ["id", "text", "authorName", "created"]
        read_only_fields = fields


class ItemSerializer(serializers.ModelSerializer):
    """Item view.

    ``lastBooking``, ``nextBooking`` and ``comments`` come from attributes
    set by ``services``; an item that was not annotated renders them as null.
    """

    requestId = serializers.ReadOnlyField(source="request_id")
    lastBooking = serializers.SerializerMethodField()
    nextBooking = serializers.SerializerMethodField()
    comments = serializers.SerializerMethodField()

    class Meta:
        model = Item
        fields = [
            "id",
            "name",
            "description",
            "available",
            "requestId",
            "lastBooking",
            "nextBooking",
            "comments",
        ]
        read_only_fields = fields

    def _short(self, booking):  # type: ignore
        return BookingShortSerializer(booking).data if booking is not None else None

    def get_lastBooking(self, obj: Item):  # type: ignore
        return self._short(getattr(obj, "last_booking", None))

    def get_nextBooking(self, obj: Item):  # type: ignore
        return self._short(getattr(obj, "next_booking", None))

    def get_comments(self, obj: Item):  # type: ignore
        comments = getattr(obj, "comment_list", None)
        if comments is None:
            return None
        return CommentSerializer(comments, many=True).data
