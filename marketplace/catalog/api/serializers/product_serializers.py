from rest_framework import serializers

from marketplace.catalog.domain.models.catalog import Product, ProductVariant

from .category_serializers import MinimalCategorySerializer, TagSerializer


class ProductVariantSerializer(serializers.ModelSerializer):
    class Meta:
        model = ProductVariant
        fields = ["id", "sku", "name", "color", "size", "price", "quantity"]
        read_only_fields = fields


class ProductListSerializer(serializers.ModelSerializer):
    """Minimal product serializer for listings - just the essentials for product cards"""

    store_name = serializers.CharField(source="store.store_name", read_only=True)
    min_price = serializers.SerializerMethodField()
    is_in_stock = serializers.SerializerMethodField()

    class Meta:
        model = Product
        fields = ["id", "name", "status", "store", "store_name", "min_price", "is_in_stock", "created_at"]
        read_only_fields = fields

    def get_min_price(self, obj):
        prices = [variant.price for variant in obj.variants.all()]
        return str(min(prices)) if prices else None

    def get_is_in_stock(self, obj):
        return any(variant.quantity > 0 for variant in obj.variants.all())


class ProductDetailSerializer(serializers.ModelSerializer):
    """Full product with variants, categories and tags"""

    store_name = serializers.CharField(source="store.store_name", read_only=True)
    variants = ProductVariantSerializer(many=True, read_only=True)
    categories = MinimalCategorySerializer(many=True, read_only=True)
    tags = TagSerializer(many=True, read_only=True)

    class Meta:
        model = Product
        fields = [
            "id",
            "name",
            "description",
            "status",
            "store",
            "store_name",
            "variants",
            "categories",
            "tags",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields
