from .catalog import Product, ProductCategory, ProductTag, ProductVariant
from .category import Category, Tag


__all__ = [
    "Product",
    "ProductVariant",
    "ProductCategory",
    "ProductTag",
    "Category",
    "Tag",
]
