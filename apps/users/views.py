"""User API views."""

from __future__ import annotations

from rest_framework import status, viewsets  # type: ignore
from rest_framework.response import Response  # type: ignore

from . import services
from .serializers import UserSerializer


class UserViewSet(viewsets.ViewSet):
    """CRUD over the user directory.

    These endpoints do not require the caller header; users are created
    before they can act as anyone.
    """

    lookup_value_regex = r"\d+"
    http_method_names = ["get", "post", "patch", "delete", "head", "options"]

    def list(self, request):  # type: ignore
        return Response(UserSerializer(services.list_users(), many=True).data)

    def create(self, request):  # type: ignore
        serializer = UserSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = services.create_user(**serializer.validated_data)
        return Response(UserSerializer(user).data, status=status.HTTP_200_OK)

    def retrieve(self, request, pk=None):  # type: ignore
        return Response(UserSerializer(services.get_user(int(pk))).data)

    def partial_update(self, request, pk=None):  # type: ignore
        serializer = UserSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        user = services.update_user(int(pk), **serializer.validated_data)
        return Response(UserSerializer(user).data)

    def destroy(self, request, pk=None):  # type: ignore
        services.delete_user(int(pk))
        return Response(status=status.HTTP_200_OK)
