"""Input checks the gateway runs before forwarding anything."""

from __future__ import annotations

from django.http import QueryDict  # type: ignore
from rest_framework import serializers  # type: ignore


class UserInputSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255)
    email = serializers.EmailField(max_length=512)


class ItemInputSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255)
    description = serializers.CharField()
    available = serializers.BooleanField()
    requestId = serializers.IntegerField(required=False, allow_null=True, min_value=1)


class ItemUpdateSerializer(serializers.Serializer):
    """Partial update: every field optional, none blank."""

    name = serializers.CharField(max_length=255, required=False)
    description = serializers.CharField(required=False)
    available = serializers.BooleanField(required=False)


class CommentInputSerializer(serializers.Serializer):
    text = serializers.CharField()


class ItemRequestInputSerializer(serializers.Serializer):
    description = serializers.CharField()


class BookingInputSerializer(serializers.Serializer):
    """Only the item reference is checked here.

    Period rules belong to the core service, whose messages are relayed as is.
    """

    itemId = serializers.IntegerField()


def validated_body(serializer_class, data, *, partial: bool = False):  # type: ignore
    """Validate and return the payload as a plain dict, ready to forward as JSON."""
    serializer = serializer_class(data=data, partial=partial)
    serializer.is_valid(raise_exception=True)
    if isinstance(data, QueryDict):
        return data.dict()
    return data
