import pytest
from django.test import TestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from marketplace.models import Store
from marketplace.tests.factories import SellerFactory, StoreFactory, UserFactory

pytestmark = pytest.mark.integration


class StoreViewIntegrationTest(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.seller = SellerFactory()
        self.client.force_authenticate(user=self.seller.user)

        self.create_url = reverse("marketplace:store-create")
        self.mine_url = reverse("marketplace:store-mine")

    def _activation_url(self, store):
        return reverse("marketplace:store-activation", kwargs={"store_id": store.id})

    def test_create_store(self):
        response = self.client.post(
            self.create_url,
            {"store_name": "Linen House", "logo_image": "https://cdn.example.com/logo.png"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertTrue(response.data["slug"].startswith("linen-house-"))
        self.assertFalse(response.data["is_active"])
        self.assertEqual(Store.objects.filter(seller=self.seller).count(), 1)

    def test_create_store_invalid(self):
        response = self.client.post(self.create_url, {"store_name": "ab"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("store_name", response.data["field_errors"])

    def test_buyer_cannot_create_store(self):
        self.client.force_authenticate(user=UserFactory())

        response = self.client.post(self.create_url, {"store_name": "Linen House"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(response.data["error"], "seller_account_required")

    def test_my_stores(self):
        own = StoreFactory(seller=self.seller)
        StoreFactory()

        response = self.client.get(self.mine_url)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([item["id"] for item in response.data], [str(own.id)])

    def test_toggle_activation(self):
        store = StoreFactory(seller=self.seller, is_active=False)

        response = self.client.patch(self._activation_url(store), {"is_active": True}, format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertTrue(response.data["is_active"])

    def test_toggle_activation_of_foreign_store_is_forbidden(self):
        store = StoreFactory(is_active=True)

        response = self.client.patch(self._activation_url(store), {"is_active": False}, format="json")

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        store.refresh_from_db()
        self.assertTrue(store.is_active)

    def test_toggle_activation_requires_flag(self):
        store = StoreFactory(seller=self.seller)

        response = self.client.patch(self._activation_url(store), {}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_anonymous_user_is_rejected(self):
        self.client.force_authenticate(user=None)

        response = self.client.get(self.mine_url)

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
