"""
StoreService - Seller storefronts

Sellers open stores, list them on their dashboard and switch them on or
off. Products can only be added to an active store the seller owns.
"""

from typing import Any, Dict, List

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import DatabaseError

from authentication.models import Seller
from marketplace.infra.observability.metrics import active_stores, stores_created_total
from marketplace.services.base import BaseService, ErrorCodes, ServiceResult, service_err, service_ok
from marketplace.stores.api.serializers import StoreCreateSerializer
from marketplace.stores.domain.models import Store
from utils.identifiers import unique_slug
from utils.logging_utils import sanitize_payload

STORE_LOG_KEYS = ("store_name", "is_active")


class StoreService(BaseService):
    """
    Service for seller store management.

    Responsibilities:
    - Create stores for users with a seller account
    - List the stores of the current seller
    - Activate / deactivate a store (owner only)
    """

    @BaseService.log_performance
    def create_store(self, user, data: Dict[str, Any]) -> ServiceResult[Store]:
        """
        Create a store owned by the user's seller account.

        Args:
            user: Acting user
            data: store_name, store_description, logo_image, cover_image, is_active

        Returns:
            ServiceResult with the created Store
        """
        result = self._create_store(user, data)
        stores_created_total.labels(outcome="success" if result.ok else result.error).inc()
        return result

    def _create_store(self, user, data) -> ServiceResult[Store]:
        seller = Seller.objects.filter(user_id=getattr(user, "id", None)).first()
        if seller is None:
            return service_err(ErrorCodes.SELLER_ACCOUNT_REQUIRED, "Create a seller account before opening a store")

        serializer = StoreCreateSerializer(data=data)
        if not serializer.is_valid():
            return service_err(ErrorCodes.VALIDATION_FAILED, "Invalid store data", field_errors=serializer.errors)

        values = serializer.validated_data
        self.logger.info(f"Creating store for seller {seller.id}: {sanitize_payload(values, STORE_LOG_KEYS)}")

        try:
            store = Store.objects.create(
                seller=seller,
                slug=unique_slug(values["store_name"]),
                **values,
            )
        except DatabaseError as e:
            self.logger.error(f"Error creating store for seller {seller.id}: {e}", exc_info=True)
            return service_err(ErrorCodes.TRANSACTION_FAILED, "Store could not be saved", retryable=True)

        if store.is_active:
            self._refresh_active_gauge()
        return service_ok(store)

    @BaseService.log_performance
    def list_seller_stores(self, user) -> ServiceResult[List[Store]]:
        """
        List the stores owned by the user's seller account, newest first.

        Users without a seller account simply have no stores.
        """
        stores = list(Store.objects.filter(seller__user_id=getattr(user, "id", None)).order_by("-created_at"))
        return service_ok(stores)

    @BaseService.log_performance
    def set_store_active(self, store_id: str, user, is_active: bool) -> ServiceResult[Store]:
        """
        Activate or deactivate a store.

        Args:
            store_id: Store UUID
            user: Acting user, must own the store
            is_active: New state

        Returns:
            ServiceResult with the updated Store
        """
        try:
            store = Store.objects.select_related("seller").get(id=store_id)
        except (Store.DoesNotExist, DjangoValidationError):
            return service_err(ErrorCodes.STORE_NOT_FOUND, f"Store {store_id} does not exist")

        if store.seller.user_id != getattr(user, "id", None):
            return service_err(ErrorCodes.NOT_STORE_OWNER, "You do not own this store")

        if store.is_active != is_active:
            store.is_active = is_active
            store.save(update_fields=["is_active", "updated_at"])
            self._refresh_active_gauge()
            self.logger.info(f"Store {store.id} {'activated' if is_active else 'deactivated'} by user {user.id}")

        return service_ok(store)

    def _refresh_active_gauge(self):
        active_stores.set(Store.objects.filter(is_active=True).count())
