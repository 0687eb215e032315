"""API views for item requests."""

from __future__ import annotations

from rest_framework import viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.response import Response  # type: ignore

from shared.infrastructure.identity import get_caller_id
from shared.infrastructure.pagination import PageRequest

from . import services
from .serializers import ItemRequestCreateSerializer, ItemRequestSerializer


class ItemRequestViewSet(viewsets.ViewSet):
    lookup_value_regex = r"\d+"
    http_method_names = ["get", "post", "head", "options"]

    def create(self, request):  # type: ignore
        caller_id = get_caller_id(request)
        serializer = ItemRequestCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        item_request = services.create_request(caller_id, serializer.validated_data.get("description"))
        return Response(ItemRequestSerializer(item_request).data)

    def list(self, request):  # type: ignore
        caller_id = get_caller_id(request)
        requests = services.list_own_requests(caller_id)
        return Response(ItemRequestSerializer(requests, many=True).data)

    @action(detail=False, methods=["get"], url_path="all")
    def others(self, request):  # type: ignore
        """Requests published by everyone except the caller."""
        caller_id = get_caller_id(request)
        page = PageRequest.from_query(request.query_params)
        requests = services.list_other_requests(caller_id, page)
        return Response(ItemRequestSerializer(requests, many=True).data)

    def retrieve(self, request, pk=None):  # type: ignore
        caller_id = get_caller_id(request)
        item_request = services.get_request(int(pk), caller_id)
        return Response(ItemRequestSerializer(item_request).data)
