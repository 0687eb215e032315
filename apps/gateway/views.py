"""Proxy views of the gateway.

Each view validates what it can locally, then forwards the call to the
same path on the core service and relays the answer byte for byte.
"""

from __future__ import annotations

from django.conf import settings  # type: ignore
from django.http import HttpResponse  # type: ignore
from rest_framework import status  # type: ignore
from rest_framework.views import APIView  # type: ignore

from shared.domain.errors import ValidationError
from shared.infrastructure.exception_handler import INTERNAL_ERROR_MESSAGE, error_response
from shared.infrastructure.identity import get_caller_id
from shared.infrastructure.pagination import PageRequest

from .client import GatewayTransportError, get_client
from .validation import (
    BookingInputSerializer,
    CommentInputSerializer,
    ItemInputSerializer,
    ItemRequestInputSerializer,
    ItemUpdateSerializer,
    UserInputSerializer,
    validated_body,
)


def relay(upstream) -> HttpResponse:  # type: ignore
    return HttpResponse(
        upstream.content,
        status=upstream.status_code,
        content_type=upstream.headers.get("Content-Type", "application/json"),
    )


def _page_params(request) -> dict:  # type: ignore
    page = PageRequest.from_query(request.query_params)
    return {"from": page.offset, "size": page.size}


class ProxyView(APIView):
    """Base class: forwards to the core service client."""

    def forward(self, method: str, path: str, **kwargs):  # type: ignore
        try:
            upstream = get_client().forward(method, path, **kwargs)
        except GatewayTransportError:
            return error_response(INTERNAL_ERROR_MESSAGE, status.HTTP_500_INTERNAL_SERVER_ERROR)
        return relay(upstream)


# ===== Users =====

class UserListProxy(ProxyView):

    def get(self, request):  # type: ignore
        return self.forward("GET", "/users")

    def post(self, request):  # type: ignore
        body = validated_body(UserInputSerializer, request.data)
        return self.forward("POST", "/users", json=body)


class UserDetailProxy(ProxyView):

    def get(self, request, user_id: int):  # type: ignore
        return self.forward("GET", f"/users/{user_id}")

    def patch(self, request, user_id: int):  # type: ignore
        body = validated_body(UserInputSerializer, request.data, partial=True)
        return self.forward("PATCH", f"/users/{user_id}", json=body)

    def delete(self, request, user_id: int):  # type: ignore
        return self.forward("DELETE", f"/users/{user_id}")


# ===== Items =====

class ItemListProxy(ProxyView):

    def get(self, request):  # type: ignore
        user_id = get_caller_id(request)
        return self.forward("GET", "/items", user_id=user_id, params=_page_params(request))

    def post(self, request):  # type: ignore
        user_id = get_caller_id(request)
        body = validated_body(ItemInputSerializer, request.data)
        return self.forward("POST", "/items", user_id=user_id, json=body)


class ItemSearchProxy(ProxyView):
    """Search does not need a caller; the header is passed on when present."""

    def get(self, request):  # type: ignore
        params = {"text": request.query_params.get("text", ""), **_page_params(request)}
        user_id = get_caller_id(request) if request.headers.get(settings.SHAREIT_USER_HEADER) else None
        return self.forward("GET", "/items/search", user_id=user_id, params=params)


class ItemDetailProxy(ProxyView):

    def get(self, request, item_id: int):  # type: ignore
        user_id = get_caller_id(request)
        return self.forward("GET", f"/items/{item_id}", user_id=user_id)

    def patch(self, request, item_id: int):  # type: ignore
        user_id = get_caller_id(request)
        body = validated_body(ItemUpdateSerializer, request.data, partial=True)
        return self.forward("PATCH", f"/items/{item_id}", user_id=user_id, json=body)


class ItemCommentProxy(ProxyView):

    def post(self, request, item_id: int):  # type: ignore
        user_id = get_caller_id(request)
        body = validated_body(CommentInputSerializer, request.data)
        return self.forward("POST", f"/items/{item_id}/comment", user_id=user_id, json=body)


# ===== Item requests =====

class ItemRequestListProxy(ProxyView):

    def get(self, request):  # type: ignore
        user_id = get_caller_id(request)
        return self.forward("GET", "/requests", user_id=user_id)

    def post(self, request):  # type: ignore
        user_id = get_caller_id(request)
        body = validated_body(ItemRequestInputSerializer, request.data)
        return self.forward("POST", "/requests", user_id=user_id, json=body)


class ItemRequestAllProxy(ProxyView):

    def get(self, request):  # type: ignore
        user_id = get_caller_id(request)
        return self.forward("GET", "/requests/all", user_id=user_id, params=_page_params(request))


class ItemRequestDetailProxy(ProxyView):

    def get(self, request, request_id: int):  # type: ignore
        user_id = get_caller_id(request)
        return self.forward("GET", f"/requests/{request_id}", user_id=user_id)


# ===== Bookings =====

def _booking_list_params(request) -> dict:  # type: ignore
    return {"state": request.query_params.get("state", "ALL"), **_page_params(request)}


class BookingListProxy(ProxyView):

    def get(self, request):  # type: ignore
        user_id = get_caller_id(request)
        return self.forward("GET", "/bookings", user_id=user_id, params=_booking_list_params(request))

    def post(self, request):  # type: ignore
        user_id = get_caller_id(request)
        body = validated_body(BookingInputSerializer, request.data)
        return self.forward("POST", "/bookings", user_id=user_id, json=body)


class BookingOwnerProxy(ProxyView):

    def get(self, request):  # type: ignore
        user_id = get_caller_id(request)
        return self.forward(
            "GET", "/bookings/owner", user_id=user_id, params=_booking_list_params(request)
        )


class BookingDetailProxy(ProxyView):

    def get(self, request, booking_id: int):  # type: ignore
        user_id = get_caller_id(request)
        return self.forward("GET", f"/bookings/{booking_id}", user_id=user_id)

    def patch(self, request, booking_id: int):  # type: ignore
        user_id = get_caller_id(request)
        approved = request.query_params.get("approved")
        if approved is None:
            raise ValidationError("Parameter 'approved' is required")
        return self.forward(
            "PATCH", f"/bookings/{booking_id}", user_id=user_id, params={"approved": approved}
        )
