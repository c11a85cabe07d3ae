from .metrics import (
    active_stores,
    product_creation_duration,
    product_variants_per_submission,
    products_created_total,
    stores_created_total,
)

__all__ = [
    "active_stores",
    "product_creation_duration",
    "product_variants_per_submission",
    "products_created_total",
    "stores_created_total",
]
