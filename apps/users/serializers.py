"""Serializers for user-related API endpoints."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from .models import User


class UserSerializer(serializers.ModelSerializer):
    """User view and input.

    E-mail uniqueness is enforced by ``services`` so that a duplicate is
    reported as a conflict rather than as a validation failure.
    """

    class Meta:
        model = User
        fields = ["id", "name", "email"]
        read_only_fields = ["id"]
        extra_kwargs = {
            "email": {"validators": []},
        }
