"""URL configuration for the ShareIt core service.

Resource paths are served at the root without trailing slashes
(``/users``, ``/items``, ``/requests``, ``/bookings``) so the gateway can
forward them unchanged.
"""
from django.contrib import admin  # type: ignore
from django.urls import path, include  # type: ignore
from drf_spectacular.views import SpectacularAPIView  # type: ignore

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
    # Application URLs
    path('', include('apps.users.urls')),
    path('', include('apps.items.urls')),
    path('', include('apps.item_requests.urls')),
    path('', include('apps.bookings.urls')),
]
