"""URL routing of the gateway: the core service's paths, one proxy each."""

from __future__ import annotations

from django.urls import path  # type: ignore

from . import views

app_name = "gateway"

urlpatterns = [
    path("users", views.UserListProxy.as_view(), name="users"),
    path("users/<int:user_id>", views.UserDetailProxy.as_view(), name="user-detail"),
    path("items", views.ItemListProxy.as_view(), name="items"),
    path("items/search", views.ItemSearchProxy.as_view(), name="item-search"),
    path("items/<int:item_id>", views.ItemDetailProxy.as_view(), name="item-detail"),
    path("items/<int:item_id>/comment", views.ItemCommentProxy.as_view(), name="item-comment"),
    path("requests", views.ItemRequestListProxy.as_view(), name="requests"),
    path("requests/all", views.ItemRequestAllProxy.as_view(), name="requests-all"),
    path("requests/<int:request_id>", views.ItemRequestDetailProxy.as_view(), name="request-detail"),
    path("bookings", views.BookingListProxy.as_view(), name="bookings"),
    path("bookings/owner", views.BookingOwnerProxy.as_view(), name="bookings-owner"),
    path("bookings/<int:booking_id>", views.BookingDetailProxy.as_view(), name="booking-detail"),
]
