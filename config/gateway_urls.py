"""URL configuration for the ShareIt edge gateway."""
from django.urls import include, path  # type: ignore

urlpatterns = [
    path('', include('apps.gateway.urls')),
]
