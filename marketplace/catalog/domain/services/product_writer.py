"""
ProductWriter - transactional persistence of a validated product bundle.

Writes the product row, its variants, categories, tags and the join rows
linking them inside one atomic transaction. Either every row commits or
none does.
"""

import logging
from typing import List, Optional, Sequence

from django.conf import settings
from django.db import DatabaseError

from marketplace.catalog.domain.exceptions import PersistenceContractError, TransactionFailure
from marketplace.catalog.domain.models.catalog import Product, ProductCategory, ProductTag, ProductVariant
from marketplace.catalog.domain.models.category import Category, Tag
from marketplace.catalog.domain.services.product_validator import (
    CategoryDraft,
    ProductCore,
    TagDraft,
    ValidatedBundle,
    VariantRecord,
    stamp_variants,
)
from utils.transaction_utils import TransactionError, atomic_with_timeout

logger = logging.getLogger(__name__)


class ProductWriter:
    """
    Persists a ``ValidatedBundle`` as one product with all its related rows.

    Args:
        timeout: Transaction budget in seconds; defaults to
                 ``settings.PRODUCT_CREATION_TIMEOUT_SECONDS``
        using: Database alias
    """

    def __init__(self, timeout: Optional[float] = None, using: str = "default"):
        if timeout is None:
            timeout = getattr(settings, "PRODUCT_CREATION_TIMEOUT_SECONDS", 10)
        self.timeout = timeout
        self.using = using

    def write(self, bundle: ValidatedBundle) -> Product:
        """
        Write the bundle atomically.

        Returns:
            The committed Product

        Raises:
            ProductValidationError: if variants fail the second validation pass
            PersistenceContractError: if the product insert yields no identifier
            TransactionFailure: if any write fails or the time budget runs out
        """
        try:
            with atomic_with_timeout(self.timeout, using=self.using):
                product = self._insert_product(bundle.product)
                records = stamp_variants(bundle.variants, product.pk)
                self._insert_variants(records)
                self._link_categories(product, bundle.categories)
                self._link_tags(product, bundle.tags)
        except TransactionError as e:
            raise TransactionFailure(str(e)) from e
        except DatabaseError as e:
            raise TransactionFailure(f"Product write failed: {e}") from e

        logger.info(
            f"Product {product.pk} written: variants={len(bundle.variants)}, "
            f"categories={len(bundle.categories)}, tags={len(bundle.tags)}"
        )
        return product

    def _insert_product(self, core: ProductCore) -> Product:
        product = Product.objects.using(self.using).create(
            store_id=core.store_id,
            name=core.name,
            description=core.description,
            status=core.status,
        )
        if product.pk is None:
            raise PersistenceContractError("Product insert did not return an identifier")
        return product

    def _insert_variants(self, records: List[VariantRecord]) -> None:
        if not records:
            return
        ProductVariant.objects.using(self.using).bulk_create(
            [
                ProductVariant(
                    product_id=record.product_id,
                    sku=record.sku,
                    name=record.name,
                    color=record.color,
                    size=record.size,
                    price=record.price,
                    quantity=record.quantity,
                )
                for record in records
            ]
        )

    def _link_categories(self, product: Product, drafts: Sequence[CategoryDraft]) -> None:
        categories = Category.objects.using(self.using).bulk_create(
            [Category(name=draft.name, slug=draft.slug) for draft in drafts]
        )
        ProductCategory.objects.using(self.using).bulk_create(
            [ProductCategory(product=product, category=category) for category in categories]
        )

    def _link_tags(self, product: Product, drafts: Sequence[TagDraft]) -> None:
        if not drafts:
            return
        tags = []
        for draft in _dedupe_tags(drafts):
            tag, _ = Tag.objects.using(self.using).get_or_create(
                name=draft.name, defaults={"description": draft.description}
            )
            tags.append(tag)
        ProductTag.objects.using(self.using).bulk_create([ProductTag(product=product, tag=tag) for tag in tags])


def _dedupe_tags(drafts) -> List[TagDraft]:
    # Tag names are unique, so a repeated name in one submission maps to one tag
    seen = {}
    for draft in drafts:
        seen.setdefault(draft.name, draft)
    return list(seen.values())
