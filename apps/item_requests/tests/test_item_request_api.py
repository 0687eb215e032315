"""Integration tests for item request endpoints."""

from __future__ import annotations

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.item_requests.models import ItemRequest
from apps.items.models import Item
from apps.users.models import User


class ItemRequestAPITests(APITestCase):

    def setUp(self) -> None:
        self.requestor = User.objects.create(name="Requestor", email="req@example.com")
        self.owner = User.objects.create(name="Owner", email="owner@example.com")
        self.list_url = reverse("item-request-list")
        self.all_url = reverse("item-request-others")

    def _as(self, user) -> dict[str, str]:
        return {"HTTP_X_SHARER_USER_ID": str(user.pk)}

    def _request(self, description: str, user=None) -> ItemRequest:
        return ItemRequest.objects.create(description=description, requestor=user or self.requestor)

    def test_create_request(self) -> None:
        response = self.client.post(
            self.list_url, {"description": "Need a tent"}, format="json", **self._as(self.requestor)
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["description"], "Need a tent")
        self.assertEqual(response.data["items"], [])
        self.assertIsNotNone(response.data["created"])
        self.assertEqual(ItemRequest.objects.get().requestor, self.requestor)

    def test_blank_description(self) -> None:
        for payload in ({}, {"description": ""}, {"description": "   "}):
            with self.subTest(payload=payload):
                response = self.client.post(self.list_url, payload, format="json", **self._as(self.requestor))
                self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
                self.assertEqual(response.data, {"error": "Description cannot be empty"})

    def test_unknown_user(self) -> None:
        response = self.client.post(
            self.list_url, {"description": "Need a tent"}, format="json", HTTP_X_SHARER_USER_ID="999"
        )

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertFalse(ItemRequest.objects.exists())

    def test_own_requests_newest_first_with_answers(self) -> None:
        older = self._request("Need a tent")
        newer = self._request("Need a kayak")
        self._request("Someone else's", user=self.owner)
        answer = Item.objects.create(
            owner=self.owner, name="Tent", description="2 person", available=True, request=older
        )

        response = self.client.get(self.list_url, **self._as(self.requestor))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([row["id"] for row in response.data], [newer.pk, older.pk])
        self.assertEqual(
            response.data[1]["items"],
            [{"id": answer.pk, "name": "Tent", "ownerId": self.owner.pk}],
        )

    def test_all_excludes_callers_requests_and_paginates(self) -> None:
        self._request("Mine")
        first = self._request("First", user=self.owner)
        second = self._request("Second", user=self.owner)

        response = self.client.get(self.all_url, **self._as(self.requestor))
        self.assertEqual([row["id"] for row in response.data], [second.pk, first.pk])

        page = self.client.get(self.all_url, {"from": 1, "size": 1}, **self._as(self.requestor))
        self.assertEqual([row["id"] for row in page.data], [first.pk])

    def test_all_rejects_invalid_paging(self) -> None:
        response = self.client.get(self.all_url, {"size": 0}, **self._as(self.requestor))

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_any_user_can_read_a_request(self) -> None:
        item_request = self._request("Need a tent")

        response = self.client.get(
            reverse("item-request-detail", args=[item_request.pk]), **self._as(self.owner)
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["description"], "Need a tent")

    def test_unknown_request(self) -> None:
        response = self.client.get(reverse("item-request-detail", args=[42]), **self._as(self.owner))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data, {"error": "Item request not found with id: 42"})
