"""
Response Serializers for Marketplace API Documentation

These serializers define the structure of API requests and responses for OpenAPI schema generation.
They are NOT used for data validation, only for documentation in Swagger/ReDoc.
"""

from rest_framework import serializers

# ===== Common Response Serializers =====


class ErrorResponseSerializer(serializers.Serializer):
    """Standard error response"""

    error = serializers.CharField(help_text="Error code identifier")
    message = serializers.CharField(help_text="Human-readable error message")
    retryable = serializers.BooleanField(help_text="Whether the same request may succeed later")
    field_errors = serializers.DictField(
        help_text="Field errors keyed by record set (product, variants, categories, tags)", required=False
    )


# ===== Product Request/Response Serializers =====


class VariantRequestSerializer(serializers.Serializer):
    name = serializers.CharField(help_text="Variant name, 3-15 characters")
    color = serializers.CharField(help_text="One of #000000, #FFFFFF, #228B22, #DC143C")
    size = serializers.CharField(help_text="One of xs, s, m, l, xl, xxl")
    price = serializers.DecimalField(max_digits=10, decimal_places=2, help_text="Non-negative price")
    quantity = serializers.IntegerField(help_text="Units in stock, non-negative")


class CategoryRequestSerializer(serializers.Serializer):
    name = serializers.CharField(help_text="Category name, 3-10 characters")


class TagRequestSerializer(serializers.Serializer):
    name = serializers.CharField(help_text="Tag name, 3-10 characters")
    description = serializers.CharField(help_text="Tag description, 3-300 characters")


class ProductCreateRequestSerializer(serializers.Serializer):
    """Request body for creating a product"""

    name = serializers.CharField(help_text="Product name, 3-15 characters")
    description = serializers.CharField(help_text="Product description, 10-300 characters")
    status = serializers.ChoiceField(choices=["draft", "active", "archive"], help_text="Publication status")
    store_id = serializers.UUIDField(help_text="Store the product is listed under")
    variants = VariantRequestSerializer(many=True, help_text="Purchasable variants, may be empty")
    categories = CategoryRequestSerializer(many=True, help_text="At least one category")
    tags = TagRequestSerializer(many=True, required=False, help_text="Optional tags")


class ProductListResponseSerializer(serializers.Serializer):
    """Paginated product list response"""

    count = serializers.IntegerField(help_text="Total number of products")
    page = serializers.IntegerField(help_text="Current page number")
    page_size = serializers.IntegerField(help_text="Items per page")
    num_pages = serializers.IntegerField(help_text="Total number of pages")
    has_next = serializers.BooleanField(help_text="Whether there is a next page")
    has_previous = serializers.BooleanField(help_text="Whether there is a previous page")
    results = serializers.ListField(
        child=serializers.DictField(), help_text="List of products (see ProductListSerializer schema)"
    )


# ===== Store Request Serializers =====


class StoreActivationRequestSerializer(serializers.Serializer):
    is_active = serializers.BooleanField(help_text="Whether the store accepts new products")
