"""Integration tests for item catalog endpoints."""

from __future__ import annotations

from datetime import timedelta

from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APITestCase

from apps.bookings.models import Booking
from apps.item_requests.models import ItemRequest
from apps.items.models import Comment, Item
from apps.users.models import User


class ItemAPITestCase(APITestCase):

    def setUp(self) -> None:
        self.owner = User.objects.create(name="Owner", email="owner@example.com")
        self.renter = User.objects.create(name="Renter", email="renter@example.com")
        self.list_url = reverse("item-list")

    def _as(self, user) -> dict[str, str]:
        return {"HTTP_X_SHARER_USER_ID": str(user.pk)}

    def _item(self, name: str = "Drill", description: str = "Cordless drill", available: bool = True, owner=None):
        return Item.objects.create(
            owner=owner or self.owner, name=name, description=description, available=available
        )

    def _detail(self, item_id: int) -> str:
        return reverse("item-detail", args=[item_id])


class CreateItemAPITests(ItemAPITestCase):

    def test_create_item(self) -> None:
        payload = {"name": "Drill", "description": "Cordless drill", "available": True}

        response = self.client.post(self.list_url, payload, format="json", **self._as(self.owner))

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["name"], "Drill")
        self.assertTrue(response.data["available"])
        self.assertIsNone(response.data["requestId"])
        self.assertEqual(Item.objects.get(pk=response.data["id"]).owner, self.owner)

    def test_required_fields(self) -> None:
        cases = [
            ({"description": "d", "available": True}, "Item name cannot be empty"),
            ({"name": "  ", "description": "d", "available": True}, "Item name cannot be empty"),
            ({"name": "n", "available": True}, "Item description cannot be empty"),
            ({"name": "n", "description": "d"}, "Item available status cannot be null"),
        ]
        for payload, message in cases:
            with self.subTest(message=message, payload=payload):
                response = self.client.post(self.list_url, payload, format="json", **self._as(self.owner))
                self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
                self.assertEqual(response.data, {"error": message})
        self.assertFalse(Item.objects.exists())

    def test_unknown_owner(self) -> None:
        payload = {"name": "Drill", "description": "d", "available": True}

        response = self.client.post(self.list_url, payload, format="json", HTTP_X_SHARER_USER_ID="999")

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_missing_header(self) -> None:
        response = self.client.post(self.list_url, {"name": "Drill"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_item_answers_request(self) -> None:
        item_request = ItemRequest.objects.create(description="Need a ladder", requestor=self.renter)
        payload = {"name": "Ladder", "description": "3m", "available": True, "requestId": item_request.pk}

        response = self.client.post(self.list_url, payload, format="json", **self._as(self.owner))

        self.assertEqual(response.data["requestId"], item_request.pk)
        self.assertEqual(list(item_request.items.values_list("name", flat=True)), ["Ladder"])

    def test_unknown_request(self) -> None:
        payload = {"name": "Ladder", "description": "3m", "available": True, "requestId": 999}

        response = self.client.post(self.list_url, payload, format="json", **self._as(self.owner))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data["error"], "Item request not found with id: 999")


class UpdateItemAPITests(ItemAPITestCase):

    def test_partial_update(self) -> None:
        item = self._item()

        response = self.client.patch(self._detail(item.pk), {"available": False}, format="json", **self._as(self.owner))

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        item.refresh_from_db()
        self.assertFalse(item.available)
        self.assertEqual(item.name, "Drill")
        self.assertEqual(item.description, "Cordless drill")

    def test_blank_name_rejected(self) -> None:
        item = self._item()

        response = self.client.patch(self._detail(item.pk), {"name": ""}, format="json", **self._as(self.owner))

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        item.refresh_from_db()
        self.assertEqual(item.name, "Drill")

    def test_only_owner_updates(self) -> None:
        item = self._item()

        response = self.client.patch(self._detail(item.pk), {"name": "Mine"}, format="json", **self._as(self.renter))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data, {"error": "Only owner can update item"})

    def test_unknown_item(self) -> None:
        response = self.client.patch(self._detail(999), {"name": "x"}, format="json", **self._as(self.owner))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data, {"error": "Item not found"})


class ReadItemAPITests(ItemAPITestCase):

    def setUp(self) -> None:
        super().setUp()
        self.item = self._item()
        now = timezone.now()
        self.last = Booking.objects.create(
            item=self.item, booker=self.renter,
            start=now - timedelta(days=3), end=now - timedelta(days=2),
            status=Booking.Status.APPROVED,
        )
        self.next = Booking.objects.create(
            item=self.item, booker=self.renter,
            start=now + timedelta(days=2), end=now + timedelta(days=3),
            status=Booking.Status.APPROVED,
        )
        Booking.objects.create(
            item=self.item, booker=self.renter,
            start=now + timedelta(days=1), end=now + timedelta(days=2),
            status=Booking.Status.REJECTED,
        )

    def test_owner_sees_booking_references(self) -> None:
        response = self.client.get(self._detail(self.item.pk), **self._as(self.owner))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["lastBooking"], {"id": self.last.pk, "bookerId": self.renter.pk})
        self.assertEqual(response.data["nextBooking"], {"id": self.next.pk, "bookerId": self.renter.pk})
        self.assertEqual(response.data["comments"], [])

    def test_other_viewer_sees_no_booking_references(self) -> None:
        response = self.client.get(self._detail(self.item.pk), **self._as(self.renter))

        self.assertIsNone(response.data["lastBooking"])
        self.assertIsNone(response.data["nextBooking"])

    def test_unknown_viewer_and_item(self) -> None:
        self.assertEqual(
            self.client.get(self._detail(self.item.pk), HTTP_X_SHARER_USER_ID="999").status_code,
            status.HTTP_404_NOT_FOUND,
        )
        self.assertEqual(
            self.client.get(self._detail(999), **self._as(self.owner)).status_code,
            status.HTTP_404_NOT_FOUND,
        )

    def test_owner_listing(self) -> None:
        second = self._item(name="Saw")
        self._item(name="Foreign", owner=self.renter)

        response = self.client.get(self.list_url, **self._as(self.owner))

        self.assertEqual([row["id"] for row in response.data], [self.item.pk, second.pk])
        self.assertEqual(response.data[0]["nextBooking"]["id"], self.next.pk)
        self.assertIsNone(response.data[1]["lastBooking"])

    def test_owner_listing_pagination(self) -> None:
        second = self._item(name="Saw")

        response = self.client.get(self.list_url, {"from": 1, "size": 1}, **self._as(self.owner))

        self.assertEqual([row["id"] for row in response.data], [second.pk])


class SearchItemAPITests(ItemAPITestCase):

    def setUp(self) -> None:
        super().setUp()
        self.url = reverse("item-search")
        self.drill = self._item(name="Power DRILL", description="Heavy")
        self.bits = self._item(name="Bits", description="Set for a drill")
        self._item(name="Old drill", description="Broken", available=False)
        self._item(name="Hammer", description="Steel")

    def test_matches_name_or_description_case_insensitively(self) -> None:
        response = self.client.get(self.url, {"text": "dRiLl"})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([row["id"] for row in response.data], [self.drill.pk, self.bits.pk])

    def test_blank_text_returns_empty_list(self) -> None:
        for params in ({}, {"text": ""}, {"text": "   "}):
            with self.subTest(params=params):
                response = self.client.get(self.url, params, **self._as(self.owner))
                self.assertEqual(response.status_code, status.HTTP_200_OK)
                self.assertEqual(response.data, [])

    def test_search_paginates(self) -> None:
        response = self.client.get(self.url, {"text": "drill", "from": 1, "size": 1})

        self.assertEqual([row["id"] for row in response.data], [self.bits.pk])


class CommentAPITests(ItemAPITestCase):

    def setUp(self) -> None:
        super().setUp()
        self.item = self._item()
        self.url = reverse("item-comment", args=[self.item.pk])

    def _finished_booking(self, status_value=Booking.Status.APPROVED) -> Booking:
        now = timezone.now()
        return Booking.objects.create(
            item=self.item, booker=self.renter,
            start=now - timedelta(days=2), end=now - timedelta(days=1),
            status=status_value,
        )

    def test_comment_after_finished_approved_booking(self) -> None:
        self._finished_booking()

        response = self.client.post(self.url, {"text": "Great drill"}, format="json", **self._as(self.renter))

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["text"], "Great drill")
        self.assertEqual(response.data["authorName"], "Renter")

        detail = self.client.get(self._detail(self.item.pk), **self._as(self.owner))
        self.assertEqual([c["text"] for c in detail.data["comments"]], ["Great drill"])

    def test_comment_requires_finished_approved_booking(self) -> None:
        now = timezone.now()
        Booking.objects.create(
            item=self.item, booker=self.renter,
            start=now - timedelta(days=1), end=now + timedelta(days=1),
            status=Booking.Status.APPROVED,
        )
        self._finished_booking(Booking.Status.REJECTED)

        for user in (self.renter, self.owner):
            with self.subTest(user=user.name):
                response = self.client.post(self.url, {"text": "Nice"}, format="json", **self._as(user))
                self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
                self.assertEqual(
                    response.data["error"],
                    "User must have approved booking for this item to leave a comment",
                )
        self.assertFalse(Comment.objects.exists())

    def test_blank_comment(self) -> None:
        self._finished_booking()

        response = self.client.post(self.url, {"text": "  "}, format="json", **self._as(self.renter))

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"], "Comment text cannot be empty")

    def test_unknown_item(self) -> None:
        url = reverse("item-comment", args=[999])

        response = self.client.post(url, {"text": "x"}, format="json", **self._as(self.renter))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
