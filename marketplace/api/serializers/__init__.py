# Marketplace API Serializers

# Import response serializers for API documentation
from .response_serializers import (
    CategoryRequestSerializer,
    ErrorResponseSerializer,
    ProductCreateRequestSerializer,
    ProductListResponseSerializer,
    StoreActivationRequestSerializer,
    TagRequestSerializer,
    VariantRequestSerializer,
)


__all__ = [
    # Response serializers for documentation
    "ErrorResponseSerializer",
    "ProductListResponseSerializer",
    "ProductCreateRequestSerializer",
    "VariantRequestSerializer",
    "CategoryRequestSerializer",
    "TagRequestSerializer",
    "StoreActivationRequestSerializer",
]
