import uuid

from django.test import TestCase

from marketplace.models import Store
from marketplace.services import ErrorCodes
from marketplace.stores.domain.services import StoreService
from marketplace.tests.factories import SellerFactory, StoreFactory, UserFactory


class StoreServiceTest(TestCase):
    def setUp(self):
        self.service = StoreService()
        self.seller = SellerFactory()
        self.user = self.seller.user

    def test_create_store_success(self):
        result = self.service.create_store(
            self.user,
            {"store_name": "Linen House", "store_description": "Shirts and more", "is_active": True},
        )

        self.assertTrue(result.ok, result.to_dict())
        store = result.value
        self.assertEqual(store.seller, self.seller)
        self.assertTrue(store.slug.startswith("linen-house-"))
        self.assertTrue(store.is_active)
        self.assertEqual(store.logo_image, "")

    def test_new_store_is_inactive_by_default(self):
        result = self.service.create_store(self.user, {"store_name": "Quiet Shop"})

        self.assertFalse(result.value.is_active)

    def test_create_store_requires_seller_account(self):
        result = self.service.create_store(UserFactory(), {"store_name": "Linen House"})

        self.assertEqual(result.error, ErrorCodes.SELLER_ACCOUNT_REQUIRED)
        self.assertEqual(Store.objects.count(), 0)

    def test_create_store_validates_input(self):
        result = self.service.create_store(
            self.user,
            {"store_name": "ab", "store_description": "x" * 251, "logo_image": "not a url"},
        )

        self.assertEqual(result.error, ErrorCodes.VALIDATION_FAILED)
        self.assertEqual(set(result.field_errors), {"store_name", "store_description", "logo_image"})
        self.assertEqual(Store.objects.count(), 0)

    def test_list_seller_stores_only_returns_own_stores(self):
        own = StoreFactory(seller=self.seller)
        StoreFactory()

        result = self.service.list_seller_stores(self.user)

        self.assertEqual(result.value, [own])

    def test_list_seller_stores_for_buyer_is_empty(self):
        StoreFactory()

        self.assertEqual(self.service.list_seller_stores(UserFactory()).value, [])

    def test_set_store_active_toggles_state(self):
        store = StoreFactory(seller=self.seller, is_active=False)

        result = self.service.set_store_active(str(store.id), self.user, True)

        self.assertTrue(result.ok)
        store.refresh_from_db()
        self.assertTrue(store.is_active)

        self.service.set_store_active(str(store.id), self.user, False)
        store.refresh_from_db()
        self.assertFalse(store.is_active)

    def test_set_store_active_requires_owner(self):
        store = StoreFactory(is_active=False)

        result = self.service.set_store_active(str(store.id), self.user, True)

        self.assertEqual(result.error, ErrorCodes.NOT_STORE_OWNER)
        store.refresh_from_db()
        self.assertFalse(store.is_active)

    def test_set_store_active_unknown_store(self):
        for store_id in (str(uuid.uuid4()), "not-a-uuid"):
            result = self.service.set_store_active(store_id, self.user, True)
            self.assertEqual(result.error, ErrorCodes.STORE_NOT_FOUND)
