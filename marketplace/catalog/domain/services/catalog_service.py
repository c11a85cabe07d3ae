"""
CatalogService - Product creation & browsing

Creates products from nested submissions (product, variants, categories,
tags) and serves the buyer-facing product listing.

Creation runs validate -> authorize store -> write; the write is one atomic
transaction handled by ProductWriter.
"""

import logging
import time
from typing import Any, Dict, Optional

from django.contrib.auth import get_user_model
from django.core.exceptions import ValidationError as DjangoValidationError
from django.core.paginator import Paginator

from authentication.infra.observability.tracing import add_span_attributes, tracer
from marketplace.catalog.domain.exceptions import (
    PersistenceContractError,
    ProductValidationError,
    TransactionFailure,
)
from marketplace.catalog.domain.models.catalog import Product
from marketplace.catalog.domain.services.product_validator import ValidatedBundle, validate_submission
from marketplace.catalog.domain.services.product_writer import ProductWriter
from marketplace.infra.observability.metrics import (
    product_creation_duration,
    product_variants_per_submission,
    products_created_total,
)
from marketplace.services.base import BaseService, ErrorCodes, ServiceResult, service_err, service_ok
from marketplace.stores.domain.models import Store
from utils.logging_utils import sanitize_payload
from utils.rbac import is_seller

User = get_user_model()
logger = logging.getLogger(__name__)

SUBMISSION_LOG_KEYS = ("name", "status", "store_id", "variants", "categories", "tags")


class CatalogService(BaseService):
    """
    Service for product catalog operations.

    Responsibilities:
    - Create products with their variants, categories and tags (seller only)
    - List active products of active stores with filtering and pagination
    - Get product details

    All operations return ServiceResult.
    """

    def __init__(self, writer: Optional[ProductWriter] = None):
        """
        Initialize CatalogService.

        Args:
            writer: ProductWriter used for the creation transaction
        """
        super().__init__()
        self.writer = writer or ProductWriter()

    @BaseService.log_performance
    def create_product(self, data: Dict[str, Any], user: User) -> ServiceResult[Product]:
        """
        Create a product from a nested submission.

        Args:
            data: Submission with name, description, status, store_id,
                  variants, categories and optional tags
            user: Acting user, must be a seller who owns the target store

        Returns:
            ServiceResult with the created Product, or an error carrying
            field_errors keyed by record set on validation failure

        Example:
            >>> result = catalog_service.create_product(
            ...     data={
            ...         "name": "Linen Shirt",
            ...         "description": "Breathable summer shirt",
            ...         "status": "draft",
            ...         "store_id": str(store.id),
            ...         "variants": [{"name": "Red M", "color": "#DC143C", "size": "m",
            ...                       "price": "19.99", "quantity": 5}],
            ...         "categories": [{"name": "Shirts"}],
            ...         "tags": [],
            ...     },
            ...     user=seller_user,
            ... )
        """
        started = time.monotonic()
        with tracer.start_as_current_span("catalog_create_product") as span:
            add_span_attributes(span, user_id=getattr(user, "id", ""))
            self.logger.info(f"Product submission received: {sanitize_payload(data, SUBMISSION_LOG_KEYS)}")

            result = self._create_product(data, user, span)

            outcome = "success" if result.ok else result.error
            products_created_total.labels(outcome=outcome).inc()
            product_creation_duration.observe(time.monotonic() - started)
            add_span_attributes(span, outcome=outcome)
            return result

    def _create_product(self, data, user, span) -> ServiceResult[Product]:
        if not is_seller(user):
            return service_err(ErrorCodes.PERMISSION_DENIED, "Only sellers can create products")

        try:
            bundle = validate_submission(data)
        except ProductValidationError as e:
            add_span_attributes(span, failed_record_sets=",".join(e.record_sets))
            return service_err(ErrorCodes.VALIDATION_FAILED, str(e), field_errors=e.errors)

        store_check = self._authorize_store(bundle, user)
        if not store_check.ok:
            return store_check

        try:
            product = self.writer.write(bundle)
        except ProductValidationError as e:
            self.logger.error(f"Product rejected after id assignment: {e.errors}")
            return service_err(ErrorCodes.VALIDATION_FAILED, str(e), field_errors=e.errors)
        except PersistenceContractError as e:
            self.logger.error(f"Persistence contract violated: {e}")
            span.record_exception(e)
            return service_err(e.code, str(e))
        except TransactionFailure as e:
            self.logger.error(f"Product transaction rolled back: {e}")
            span.record_exception(e)
            return service_err(e.code, "Product could not be saved, nothing was stored", retryable=True)
        except Exception as e:
            self.logger.error(f"Error creating product: {e}", exc_info=True)
            span.record_exception(e)
            return service_err(ErrorCodes.INTERNAL_ERROR, str(e))

        product_variants_per_submission.observe(len(bundle.variants))
        add_span_attributes(span, product_id=product.id)
        self.logger.info(f"Created product: {product.name} (id={product.id}) in store {bundle.product.store_id}")
        return service_ok(product)

    def _authorize_store(self, bundle: ValidatedBundle, user) -> ServiceResult[Store]:
        store_id = bundle.product.store_id
        try:
            store = Store.objects.select_related("seller").get(id=store_id)
        except Store.DoesNotExist:
            return service_err(ErrorCodes.STORE_NOT_FOUND, f"Store {store_id} does not exist")

        if store.seller.user_id != user.id:
            self.logger.warning(f"User {user.id} tried to add a product to store {store_id} they do not own")
            return service_err(ErrorCodes.NOT_STORE_OWNER, "You do not own this store")

        if not store.is_active:
            return service_err(ErrorCodes.STORE_INACTIVE, f"Store {store.store_name} is not active")

        return service_ok(store)

    @BaseService.log_performance
    def list_products(
        self,
        filters: Optional[Dict[str, Any]] = None,
        page: int = 1,
        page_size: int = 20,
    ) -> ServiceResult[Dict[str, Any]]:
        """
        List active products of active stores with filtering and pagination.

        Args:
            filters: Optional filters (store, category)
            page: Page number (1-indexed)
            page_size: Items per page

        Returns:
            ServiceResult with paginated product list
        """
        with tracer.start_as_current_span("catalog_list_products") as span:
            filters = filters or {}
            span.set_attribute("filters.count", len(filters))
            span.set_attribute("page", page)

            try:
                queryset = (
                    Product.objects.filter(status="active", store__is_active=True)
                    .select_related("store")
                    .prefetch_related("variants", "categories", "tags")
                )

                if filters.get("store"):
                    queryset = queryset.filter(store__id=filters["store"])

                if filters.get("category"):
                    queryset = queryset.filter(categories__slug=filters["category"]).distinct()
                    span.set_attribute("filter.category", filters["category"])

                paginator = Paginator(queryset.order_by("-created_at"), page_size)
                page_obj = paginator.get_page(page)

                result_data = {
                    "results": list(page_obj.object_list),
                    "count": paginator.count,
                    "page": page_obj.number,
                    "page_size": page_size,
                    "num_pages": paginator.num_pages,
                    "has_next": page_obj.has_next(),
                    "has_previous": page_obj.has_previous(),
                }

                span.set_attribute("result.count", paginator.count)
                self.logger.info(f"Listed products: count={paginator.count}, page={page_obj.number}/{paginator.num_pages}")
                return service_ok(result_data)

            except DjangoValidationError as e:
                return service_err(ErrorCodes.VALIDATION_FAILED, "; ".join(e.messages))
            except Exception as e:
                self.logger.error(f"Error listing products: {e}", exc_info=True)
                span.record_exception(e)
                return service_err(ErrorCodes.INTERNAL_ERROR, str(e))

    @BaseService.log_performance
    def get_product(self, product_id: str) -> ServiceResult[Product]:
        """
        Get product details by ID.

        Only active products of active stores are visible.

        Args:
            product_id: Product UUID

        Returns:
            ServiceResult with Product instance
        """
        try:
            product = (
                Product.objects.select_related("store")
                .prefetch_related("variants", "categories", "tags")
                .get(id=product_id, status="active", store__is_active=True)
            )
            return service_ok(product)
        except (Product.DoesNotExist, DjangoValidationError):
            return service_err(ErrorCodes.PRODUCT_NOT_FOUND, f"Product {product_id} not found or inactive")
        except Exception as e:
            self.logger.error(f"Error getting product {product_id}: {e}", exc_info=True)
            return service_err(ErrorCodes.INTERNAL_ERROR, str(e))
