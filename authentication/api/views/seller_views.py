from drf_spectacular.utils import OpenApiExample, OpenApiResponse, extend_schema
from rest_framework import permissions, status
from rest_framework.response import Response
from rest_framework.views import APIView

from authentication.api.serializers import SellerRegistrationSerializer, SellerSerializer
from authentication.api.serializers.response_serializers import (
    ErrorResponseSerializer,
    SellerRegistrationResponseSerializer,
)
from authentication.models import Seller
from infrastructure.container import container


class SellerAccountCreateView(APIView):
    """POST only - Register a seller account for the current user"""

    permission_classes = [permissions.IsAuthenticated]
    http_method_names = ["post"]

    @extend_schema(
        operation_id="seller_account_create",
        summary="Create seller account",
        description="""
        Turn the authenticated buyer account into a seller account.

        **Requirements:**
        - User must be authenticated
        - User cannot already have a seller account
        - Phone number must be unique across sellers
        - Terms must be accepted
        """,
        request=SellerRegistrationSerializer,
        responses={
            201: OpenApiResponse(
                response=SellerRegistrationResponseSerializer,
                description="Seller account created",
                examples=[
                    OpenApiExample(
                        "Successful Registration",
                        value={
                            "message": "Seller account created successfully!",
                            "seller_id": "5b0c7b1e-5b8e-4a59-9b55-1f1c4a4f0d6e",
                            "role": "seller",
                        },
                    )
                ],
            ),
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Validation error"),
            409: OpenApiResponse(response=ErrorResponseSerializer, description="Already a seller or phone taken"),
        },
        tags=["Sellers"],
    )
    def post(self, request):
        serializer = SellerRegistrationSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(
                {"error": "validation_failed", "message": "Invalid seller data.", "field_errors": serializer.errors},
                status=status.HTTP_400_BAD_REQUEST,
            )

        result = container.seller_service().register_seller(request.user, serializer.validated_data)

        if result.success:
            return Response({"message": result.message, **result.data}, status=status.HTTP_201_CREATED)

        body = {"error": result.error, "message": result.message}
        if result.errors:
            body["field_errors"] = result.errors
        return Response(body, status=status.HTTP_409_CONFLICT)


class SellerAccountDetailView(APIView):
    """GET only - Current user's seller account"""

    permission_classes = [permissions.IsAuthenticated]
    http_method_names = ["get"]

    @extend_schema(
        operation_id="seller_account_detail",
        summary="Get my seller account",
        responses={
            200: SellerSerializer,
            404: OpenApiResponse(response=ErrorResponseSerializer, description="No seller account"),
        },
        tags=["Sellers"],
    )
    def get(self, request):
        seller = Seller.objects.select_related("user").filter(user=request.user).first()
        if seller is None:
            return Response(
                {"error": "seller_not_found", "message": "You do not have a seller account."},
                status=status.HTTP_404_NOT_FOUND,
            )
        return Response(SellerSerializer(seller).data)
