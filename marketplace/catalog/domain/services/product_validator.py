"""
Product submission validator.

Turns a raw product submission into storage-ready, schema-checked records
before any database work happens. Validation runs in two phases:

1. ``validate_submission`` checks everything that does not depend on
   generated keys and returns a ``ValidatedBundle`` of drafts.
2. ``stamp_variants`` runs once the product id is known and turns each
   ``VariantDraft`` into a ``VariantRecord``.

Nothing in this module touches the database; the schemas are plain DRF
serializers without model-backed (unique) validators.
"""

import logging
import uuid
from collections.abc import Mapping
from dataclasses import asdict, dataclass
from decimal import Decimal
from typing import Any, Dict, List, Optional, Sequence, Tuple

from rest_framework import serializers

from marketplace.catalog.domain.exceptions import ProductValidationError
from utils.identifiers import unique_slug, variant_sku

logger = logging.getLogger(__name__)


PRODUCT_STATUSES = ["draft", "active", "archive"]

AVAILABLE_COLORS = [
    ("#000000", "Classic Black"),
    ("#FFFFFF", "Snow White"),
    ("#228B22", "Forest Green"),
    ("#DC143C", "Crimson Red"),
]

AVAILABLE_SIZES = ["xs", "s", "m", "l", "xl", "xxl"]

SLUG_PATTERN = r"^[a-z0-9]+(?:-[a-z0-9]+)*$"


# ===== Record types =====


@dataclass(frozen=True)
class ProductCore:
    name: str
    description: str
    status: str
    store_id: uuid.UUID


@dataclass(frozen=True)
class VariantDraft:
    name: str
    color: str
    size: str
    price: Decimal
    quantity: int
    sku: str


@dataclass(frozen=True)
class VariantRecord:
    product_id: uuid.UUID
    name: str
    color: str
    size: str
    price: Decimal
    quantity: int
    sku: str


@dataclass(frozen=True)
class CategoryDraft:
    name: str
    slug: str


@dataclass(frozen=True)
class TagDraft:
    name: str
    description: str


@dataclass(frozen=True)
class ValidatedBundle:
    product: ProductCore
    variants: Tuple[VariantDraft, ...]
    categories: Tuple[CategoryDraft, ...]
    tags: Tuple[TagDraft, ...] = ()


# ===== Schemas =====


class ProductCoreSchema(serializers.Serializer):
    name = serializers.CharField(min_length=3, max_length=15)
    description = serializers.CharField(min_length=10, max_length=300)
    status = serializers.ChoiceField(choices=PRODUCT_STATUSES)
    store_id = serializers.UUIDField()


class VariantDraftSchema(serializers.Serializer):
    name = serializers.CharField(min_length=3, max_length=15)
    color = serializers.ChoiceField(choices=AVAILABLE_COLORS)
    size = serializers.ChoiceField(choices=AVAILABLE_SIZES)
    price = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=Decimal("0"))
    quantity = serializers.IntegerField(min_value=0)
    sku = serializers.RegexField(SLUG_PATTERN, max_length=120)


class VariantRecordSchema(VariantDraftSchema):
    product_id = serializers.UUIDField()


class CategoryDraftSchema(serializers.Serializer):
    name = serializers.CharField(min_length=3, max_length=10)
    slug = serializers.RegexField(SLUG_PATTERN, max_length=120)


class TagDraftSchema(serializers.Serializer):
    name = serializers.CharField(min_length=3, max_length=10)
    description = serializers.CharField(min_length=3, max_length=300)


# ===== Derivation =====


def derive_product_fields(data: Mapping) -> Dict[str, Any]:
    """Project the product-level fields of a submission, unchanged."""
    return {key: data.get(key) for key in ("name", "description", "status", "store_id")}


def derive_variants(variants: Any) -> Any:
    """Attach a generated SKU to every variant entry."""
    if not isinstance(variants, (list, tuple)):
        return variants
    derived = []
    for item in variants:
        if isinstance(item, Mapping):
            sku = variant_sku(item.get("name", ""), item.get("size", ""), item.get("color", ""))
            derived.append({**item, "sku": sku})
        else:
            derived.append(item)
    return derived


def derive_categories(categories: Any) -> Any:
    """Attach a generated slug to every category entry."""
    if not isinstance(categories, (list, tuple)):
        return categories
    return [{**item, "slug": unique_slug(item.get("name", ""))} if isinstance(item, Mapping) else item
            for item in categories]


# ===== Validation =====


def _check(serializer: serializers.BaseSerializer, record_set: str, errors: Dict[str, Any]):
    if serializer.is_valid():
        return serializer.validated_data
    errors[record_set] = serializer.errors
    return None


def validate_all(
    product_data: Any, variants: Any, categories: Any
) -> Tuple[ProductCore, List[VariantDraft], List[CategoryDraft]]:
    """
    Validate the product, variant and category record sets.

    Every set is checked even if an earlier one failed, so the error names
    all failing sets at once.

    Raises:
        ProductValidationError: if any of the three sets is invalid
    """
    errors: Dict[str, Any] = {}

    product = _check(ProductCoreSchema(data=product_data), "product", errors)
    variant_rows = _check(VariantDraftSchema(data=variants, many=True), "variants", errors)
    category_rows = _check(CategoryDraftSchema(data=categories, many=True, allow_empty=False), "categories", errors)

    if errors:
        raise ProductValidationError(errors)

    return (
        ProductCore(**product),
        [VariantDraft(**row) for row in variant_rows],
        [CategoryDraft(**row) for row in category_rows],
    )


def validate_tags(tags: Optional[Sequence]) -> List[TagDraft]:
    """
    Validate the optional tag list.

    A missing or empty list is valid and yields no tags.

    Raises:
        ProductValidationError: if a non-empty tag list is invalid
    """
    if not tags:
        return []

    errors: Dict[str, Any] = {}
    rows = _check(TagDraftSchema(data=tags, many=True), "tags", errors)
    if errors:
        raise ProductValidationError(errors)
    return [TagDraft(**row) for row in rows]


def validate_submission(data: Any) -> ValidatedBundle:
    """
    Derive identifiers for and validate a whole product submission.

    Args:
        data: Mapping with name, description, status, store_id, variants,
              categories and optional tags

    Returns:
        ValidatedBundle ready for the product writer

    Raises:
        ProductValidationError: naming every failing record set
    """
    if not isinstance(data, Mapping):
        raise ProductValidationError({"submission": ["Expected an object."]})

    errors: Dict[str, Any] = {}
    product = variants = categories = None
    tags: List[TagDraft] = []

    try:
        product, variants, categories = validate_all(
            derive_product_fields(data),
            derive_variants(data.get("variants")),
            derive_categories(data.get("categories")),
        )
    except ProductValidationError as e:
        errors.update(e.errors)

    try:
        tags = validate_tags(data.get("tags"))
    except ProductValidationError as e:
        errors.update(e.errors)

    if errors:
        logger.info(f"Product submission rejected, invalid record sets: {sorted(errors)}")
        raise ProductValidationError(errors)

    return ValidatedBundle(
        product=product,
        variants=tuple(variants),
        categories=tuple(categories),
        tags=tuple(tags),
    )


def stamp_variants(drafts: Sequence[VariantDraft], product_id: Any) -> List[VariantRecord]:
    """
    Second validation pass: attach the generated product id to every variant.

    Raises:
        ProductValidationError: with record set "variants" if a stamped record is invalid
    """
    payload = [{**asdict(draft), "product_id": product_id} for draft in drafts]

    errors: Dict[str, Any] = {}
    rows = _check(VariantRecordSchema(data=payload, many=True), "variants", errors)
    if errors:
        raise ProductValidationError(errors, message="Variant records invalid after product id assignment")
    return [VariantRecord(**row) for row in rows]
