"""Serializers for item requests."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from .models import ItemRequest


class ItemRequestCreateSerializer(serializers.Serializer):
    """Blank descriptions pass through here and are rejected by the service."""

    description = serializers.CharField(required=False, allow_blank=True, allow_null=True)


class RequestAnswerSerializer(serializers.Serializer):
    """An item created in answer to a request."""

    id = serializers.IntegerField()
    name = serializers.CharField()
    ownerId = serializers.IntegerField(source="owner_id")


class ItemRequestSerializer(serializers.ModelSerializer):
    items = RequestAnswerSerializer(many=True, read_only=True)

    class Meta:
        model = ItemRequest
        fields = ["id", "description", "created", "items"]
        read_only_fields = fields
