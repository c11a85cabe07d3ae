from rest_framework import serializers

from authentication.models import Seller


class SellerRegistrationSerializer(serializers.Serializer):
    """Input for turning the current user into a seller"""

    business_name = serializers.CharField(min_length=3, max_length=100)
    phone_number = serializers.RegexField(
        r"^\d{7,15}$", error_messages={"invalid": "Phone number must contain 7 to 15 digits."}
    )
    agreed_to_terms = serializers.BooleanField()

    def validate_agreed_to_terms(self, value):
        if not value:
            raise serializers.ValidationError("You must agree to the terms to sell on the marketplace.")
        return value


class SellerSerializer(serializers.ModelSerializer):
    user_email = serializers.EmailField(source="user.email", read_only=True)

    class Meta:
        model = Seller
        fields = [
            "id",
            "user_email",
            "business_name",
            "phone_number",
            "is_verified",
            "agreed_to_terms",
            "created_at",
        ]
        read_only_fields = fields
