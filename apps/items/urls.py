"""URL routing for the item catalog."""

from __future__ import annotations

from django.urls import include, path  # type: ignore
from rest_framework.routers import DefaultRouter  # type: ignore

from .views import ItemViewSet

router = DefaultRouter(trailing_slash=False)
router.include_root_view = False
router.register(r"items", ItemViewSet, basename="item")

urlpatterns = [
    path("", include(router.urls)),
]
