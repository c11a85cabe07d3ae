from .catalog_service import CatalogService
from .product_validator import (
    CategoryDraft,
    ProductCore,
    TagDraft,
    ValidatedBundle,
    VariantDraft,
    VariantRecord,
    stamp_variants,
    validate_all,
    validate_submission,
    validate_tags,
)
from .product_writer import ProductWriter


__all__ = [
    "CatalogService",
    "ProductWriter",
    "CategoryDraft",
    "ProductCore",
    "TagDraft",
    "ValidatedBundle",
    "VariantDraft",
    "VariantRecord",
    "stamp_variants",
    "validate_all",
    "validate_submission",
    "validate_tags",
]
