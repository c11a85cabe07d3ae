from .category_serializers import MinimalCategorySerializer, TagSerializer
from .product_serializers import ProductDetailSerializer, ProductListSerializer, ProductVariantSerializer


__all__ = [
    "MinimalCategorySerializer",
    "TagSerializer",
    "ProductDetailSerializer",
    "ProductListSerializer",
    "ProductVariantSerializer",
]
