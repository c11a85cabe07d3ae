from rest_framework import serializers

from marketplace.stores.domain.models import Store


class StoreCreateSerializer(serializers.Serializer):
    """Input for opening a new store"""

    store_name = serializers.CharField(min_length=3, max_length=100)
    store_description = serializers.CharField(max_length=250, required=False, allow_blank=True, default="")
    logo_image = serializers.URLField(required=False, allow_blank=True, default="")
    cover_image = serializers.URLField(required=False, allow_blank=True, default="")
    is_active = serializers.BooleanField(required=False, default=False)


class StoreSerializer(serializers.ModelSerializer):
    seller_business_name = serializers.CharField(source="seller.business_name", read_only=True)

    class Meta:
        model = Store
        fields = [
            "id",
            "store_name",
            "store_description",
            "slug",
            "logo_image",
            "cover_image",
            "is_active",
            "seller_business_name",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields
