from marketplace.catalog.domain.models import (
    Category,
    Product,
    ProductCategory,
    ProductTag,
    ProductVariant,
    Tag,
)
from marketplace.stores.domain.models import Store


__all__ = [
    "Store",
    "Product",
    "ProductVariant",
    "ProductCategory",
    "ProductTag",
    "Category",
    "Tag",
]
