"""FilterSet definitions for item search."""

from __future__ import annotations

import django_filters  # type: ignore
from django.db.models import Q  # type: ignore

from .models import Item


class ItemSearchFilterSet(django_filters.FilterSet):
    """Case-insensitive substring search over name and description.

    Blank text leaves the queryset untouched; callers that want "nothing
    for blank text" must check before filtering.
    """

    text = django_filters.CharFilter(method="filter_text")

    class Meta:
        model = Item
        fields: list[str] = []

    def filter_text(self, queryset, name, value):  # type: ignore
        return queryset.filter(Q(name__icontains=value) | Q(description__icontains=value))
