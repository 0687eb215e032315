"""API views for the booking domain."""

from __future__ import annotations

from rest_framework import viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.response import Response  # type: ignore

from shared.domain.errors import ValidationError
from shared.infrastructure.identity import get_caller_id
from shared.infrastructure.pagination import page_params

from .application.commands import CreateBookingCommand, DecideBookingCommand
from .serializers import BookingRequestSerializer, BookingSerializer
from .services import get_booking_service


def _parse_approved(raw) -> bool:  # type: ignore
    """Case-insensitive ``true`` or ``false``; anything else is rejected."""
    value = (raw or "").strip().lower()
    if value == "true":
        return True
    if value == "false":
        return False
    raise ValidationError("Parameter 'approved' must be true or false")


class BookingViewSet(viewsets.ViewSet):
    """Create, decide on and list bookings on behalf of the caller header."""

    lookup_value_regex = r"\d+"
    http_method_names = ["get", "post", "patch", "head", "options"]

    def create(self, request):  # type: ignore
        user_id = get_caller_id(request)
        serializer = BookingRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        booking = get_booking_service().create_booking(
            CreateBookingCommand(
                user_id=user_id,
                item_id=data["itemId"],
                start=data.get("start"),
                end=data.get("end"),
            )
        )
        return Response(BookingSerializer(booking).data)

    def partial_update(self, request, pk=None):  # type: ignore
        """Owner approves (``approved=true``) or rejects a waiting booking."""
        user_id = get_caller_id(request)
        approved = _parse_approved(request.query_params.get("approved"))
        booking = get_booking_service().decide(
            DecideBookingCommand(booking_id=int(pk), user_id=user_id, approved=approved)
        )
        return Response(BookingSerializer(booking).data)

    def retrieve(self, request, pk=None):  # type: ignore
        user_id = get_caller_id(request)
        booking = get_booking_service().get_booking(int(pk), user_id)
        return Response(BookingSerializer(booking).data)

    def list(self, request):  # type: ignore
        user_id = get_caller_id(request)
        offset, size = page_params(request.query_params)
        bookings = get_booking_service().list_for_booker(
            user_id, request.query_params.get("state"), offset=offset, size=size
        )
        return Response(BookingSerializer(bookings, many=True).data)

    @action(detail=False, methods=["get"])
    def owner(self, request):  # type: ignore
        """Bookings of items the caller owns."""
        user_id = get_caller_id(request)
        offset, size = page_params(request.query_params)
        bookings = get_booking_service().list_for_owner(
            user_id, request.query_params.get("state"), offset=offset, size=size
        )
        return Response(BookingSerializer(bookings, many=True).data)
