"""URL routing for item requests."""

from __future__ import annotations

from django.urls import include, path  # type: ignore
from rest_framework.routers import DefaultRouter  # type: ignore

from .views import ItemRequestViewSet

router = DefaultRouter(trailing_slash=False)
router.include_root_view = False
router.register(r"requests", ItemRequestViewSet, basename="item-request")

urlpatterns = [
    path("", include(router.urls)),
]
