"""Bookings app package.

This app encapsulates the booking lifecycle: a user requests an item
for a period, the item's owner approves or rejects the request once, and
both parties list their bookings filtered by a state token. Persistence
sits behind ``apps.bookings.repository`` so the engine runs unchanged
against the Django ORM or an in-memory store.
"""
