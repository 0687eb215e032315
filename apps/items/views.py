"""Item catalog API views."""

from __future__ import annotations

from rest_framework import viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.response import Response  # type: ignore

from shared.infrastructure.identity import get_caller_id
from shared.infrastructure.pagination import PageRequest

from . import services
from .serializers import (
    CommentCreateSerializer,
    CommentSerializer,
    ItemSerializer,
    ItemWriteSerializer,
)


class ItemViewSet(viewsets.ViewSet):
    """Items, owner listings, search and comments."""

    lookup_value_regex = r"\d+"
    http_method_names = ["get", "post", "patch", "head", "options"]

    def create(self, request):  # type: ignore
        owner_id = get_caller_id(request)
        serializer = ItemWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        item = services.create_item(
            owner_id,
            name=data.get("name"),
            description=data.get("description"),
            available=data.get("available"),
            request_id=data.get("requestId"),
        )
        return Response(ItemSerializer(item).data)

    def partial_update(self, request, pk=None):  # type: ignore
        owner_id = get_caller_id(request)
        serializer = ItemWriteSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        item = services.update_item(
            int(pk),
            owner_id,
            name=data.get("name"),
            description=data.get("description"),
            available=data.get("available"),
        )
        return Response(ItemSerializer(item).data)

    def retrieve(self, request, pk=None):  # type: ignore
        viewer_id = get_caller_id(request)
        item = services.get_item(int(pk), viewer_id)
        return Response(ItemSerializer(item).data)

    def list(self, request):  # type: ignore
        owner_id = get_caller_id(request)
        page = PageRequest.from_query(request.query_params)
        items = services.list_owner_items(owner_id, page)
        return Response(ItemSerializer(items, many=True).data)

    @action(detail=False, methods=["get"])
    def search(self, request):  # type: ignore
        page = PageRequest.from_query(request.query_params)
        items = services.search_items(request.query_params.get("text"), page)
        return Response(ItemSerializer(items, many=True).data)

    @action(detail=True, methods=["post"])
    def comment(self, request, pk=None):  # type: ignore
        author_id = get_caller_id(request)
        serializer = CommentCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        comment = services.add_comment(int(pk), author_id, serializer.validated_data.get("text"))
        return Response(CommentSerializer(comment).data)
