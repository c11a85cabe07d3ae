from django.test import TestCase

from authentication.domain.services import SellerService
from authentication.models import Seller
from marketplace.tests.factories import AdminFactory, SellerFactory, UserFactory


class SellerServiceTest(TestCase):
    def setUp(self):
        self.service = SellerService()
        self.data = {"business_name": "Linen House", "phone_number": "3519120000", "agreed_to_terms": True}

    def test_register_seller_promotes_buyer(self):
        user = UserFactory()

        result = self.service.register_seller(user, self.data)

        self.assertTrue(result.success)
        self.assertEqual(result.data["role"], "seller")
        user.refresh_from_db()
        self.assertEqual(user.role, "seller")
        seller = Seller.objects.get(user=user)
        self.assertEqual(result.data["seller_id"], str(seller.id))
        self.assertTrue(seller.agreed_to_terms)

    def test_admin_keeps_admin_role(self):
        admin = AdminFactory()

        result = self.service.register_seller(admin, self.data)

        self.assertTrue(result.success)
        admin.refresh_from_db()
        self.assertEqual(admin.role, "admin")

    def test_existing_seller_is_rejected(self):
        seller = SellerFactory()

        result = self.service.register_seller(seller.user, self.data)

        self.assertFalse(result.success)
        self.assertEqual(result.error, "already_seller")
        self.assertEqual(Seller.objects.count(), 1)

    def test_phone_number_must_be_unique(self):
        SellerFactory(phone_number=self.data["phone_number"])
        user = UserFactory()

        result = self.service.register_seller(user, self.data)

        self.assertEqual(result.error, "phone_number_taken")
        self.assertIn("phone_number", result.errors)
        user.refresh_from_db()
        self.assertEqual(user.role, "buyer")

    def test_registration_log_masks_phone_number(self):
        user = UserFactory()

        with self.assertLogs("authentication.domain.services.seller_service", level="INFO") as logs:
            self.service.register_seller(user, self.data)

        output = "\n".join(logs.output)
        self.assertNotIn(self.data["phone_number"], output)
        self.assertIn("'phone_number': '***'", output)
        self.assertIn("Linen House", output)
