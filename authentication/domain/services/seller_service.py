"""
SellerService - Seller Account Business Logic.

Turns a buyer account into a seller account: creates the Seller record and
promotes the user's role in a single transaction.
"""

import logging
from typing import Any, Dict

from django.db import IntegrityError, transaction

from authentication.infra.observability.metrics import seller_registrations_total
from authentication.models import Seller
from utils.logging_utils import sanitize_payload
from utils.rbac import ROLE_SELLER

from .results import Result


logger = logging.getLogger(__name__)

REGISTRATION_LOG_KEYS = ("business_name", "phone_number", "agreed_to_terms")


class SellerService:
    """
    Seller account service encapsulating seller registration business logic.
    """

    def register_seller(self, user, seller_data: Dict[str, Any]) -> Result:
        """
        Register a seller account for an authenticated user.

        Business Logic:
        1. Reject users that already hold a seller account
        2. Reject phone numbers already registered to another seller
        3. Create the Seller row and promote the user role atomically

        Args:
            user: CustomUser instance (already authenticated)
            seller_data: Validated dict with:
                - business_name: str
                - phone_number: str (digits only)
                - agreed_to_terms: bool

        Returns:
            Result with success status and seller_id
        """
        logger.info(
            f"Seller registration for user {user.id}: "
            f"{sanitize_payload(seller_data, REGISTRATION_LOG_KEYS, masked_keys=('phone_number',))}"
        )

        if Seller.objects.filter(user=user).exists():
            seller_registrations_total.labels(status="rejected").inc()
            return Result(success=False, message="You already have a seller account.", error="already_seller")

        if Seller.objects.filter(phone_number=seller_data["phone_number"]).exists():
            seller_registrations_total.labels(status="rejected").inc()
            return Result(
                success=False,
                message="This phone number is already registered.",
                error="phone_number_taken",
                errors={"phone_number": ["This phone number is already registered."]},
            )

        try:
            with transaction.atomic():
                seller = Seller.objects.create(
                    user=user,
                    business_name=seller_data["business_name"],
                    phone_number=seller_data["phone_number"],
                    agreed_to_terms=seller_data["agreed_to_terms"],
                )
                # Admins keep their role; they can already sell
                if not user.is_admin():
                    user.role = ROLE_SELLER
                    user.save(update_fields=["role"])
        except IntegrityError as e:
            logger.warning(f"Seller registration conflict for user {user.id}: {e}")
            seller_registrations_total.labels(status="failed").inc()
            return Result(success=False, message="Seller account could not be created.", error="conflict")

        seller_registrations_total.labels(status="success").inc()
        logger.info(f"Seller account {seller.id} created for user {user.id}")

        return Result(
            success=True,
            message="Seller account created successfully!",
            data={"seller_id": str(seller.id), "role": user.role},
        )
