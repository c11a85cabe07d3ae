"""
Response Serializers for Authentication API Documentation

These serializers define the structure of API responses for OpenAPI schema generation.
They are NOT used for data validation, only for documentation in Swagger/ReDoc.
"""

from rest_framework import serializers


class ErrorResponseSerializer(serializers.Serializer):
    """Standard error response"""

    error = serializers.CharField(help_text="Error code identifier")
    message = serializers.CharField(help_text="Human-readable error message")
    field_errors = serializers.DictField(help_text="Field-level validation errors", required=False)


class SellerRegistrationResponseSerializer(serializers.Serializer):
    """Seller account created"""

    message = serializers.CharField(help_text="Success message")
    seller_id = serializers.UUIDField(help_text="Created seller account ID")
    role = serializers.CharField(help_text="User role after registration")
