"""Admin registration for the item catalog."""

from __future__ import annotations

from django.contrib import admin

from .models import Comment, Item


class CommentInline(admin.TabularInline):
    model = Comment
    extra = 0
    readonly_fields = ("author", "created")


@admin.register(Item)
class ItemAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "owner", "available", "request")
    list_filter = ("available",)
    search_fields = ("name", "description", "owner__email")
    inlines = [CommentInline]


@admin.register(Comment)
class CommentAdmin(admin.ModelAdmin):
    list_display = ("id", "item", "author", "created")
    search_fields = ("text", "author__email")
