from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import permissions, status
from rest_framework.response import Response
from rest_framework.views import APIView

from infrastructure.container import container
from marketplace.api.serializers import ErrorResponseSerializer, StoreActivationRequestSerializer
from marketplace.api.views.responses import service_error_response
from marketplace.stores.api.serializers import StoreCreateSerializer, StoreSerializer


class StoreCreateView(APIView):
    """POST only - Open a new store for the current seller"""

    permission_classes = [permissions.IsAuthenticated]
    http_method_names = ["post"]

    @extend_schema(
        operation_id="store_create",
        summary="Create store",
        description="""
        Open a store under the authenticated user's seller account.

        **Requirements:**
        - User must have a seller account
        - Store name 3-100 characters, description up to 250
        - Logo and cover must be URLs or left blank
        """,
        request=StoreCreateSerializer,
        responses={
            201: StoreSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Validation error"),
            403: OpenApiResponse(response=ErrorResponseSerializer, description="No seller account"),
        },
        tags=["Marketplace - Stores"],
    )
    def post(self, request):
        result = container.store_service().create_store(request.user, request.data)
        if not result.ok:
            return service_error_response(result)
        return Response(StoreSerializer(result.value).data, status=status.HTTP_201_CREATED)


class MyStoresView(APIView):
    """GET only - Stores of the current seller (dashboard)"""

    permission_classes = [permissions.IsAuthenticated]
    http_method_names = ["get"]

    @extend_schema(
        operation_id="store_list_mine",
        summary="List my stores",
        responses={200: StoreSerializer(many=True)},
        tags=["Marketplace - Stores"],
    )
    def get(self, request):
        result = container.store_service().list_seller_stores(request.user)
        if not result.ok:
            return service_error_response(result)
        return Response(StoreSerializer(result.value, many=True).data)


class StoreActivationView(APIView):
    """PATCH only - Activate or deactivate a store"""

    permission_classes = [permissions.IsAuthenticated]
    http_method_names = ["patch"]

    @extend_schema(
        operation_id="store_set_activation",
        summary="Activate or deactivate store",
        request=StoreActivationRequestSerializer,
        responses={
            200: StoreSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Validation error"),
            403: OpenApiResponse(response=ErrorResponseSerializer, description="Not the store owner"),
            404: OpenApiResponse(response=ErrorResponseSerializer, description="Store not found"),
        },
        tags=["Marketplace - Stores"],
    )
    def patch(self, request, store_id):
        serializer = StoreActivationRequestSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(
                {"error": "validation_failed", "message": "Invalid activation data.", "field_errors": serializer.errors},
                status=status.HTTP_400_BAD_REQUEST,
            )

        result = container.store_service().set_store_active(
            str(store_id), request.user, serializer.validated_data["is_active"]
        )
        if not result.ok:
            return service_error_response(result)
        return Response(StoreSerializer(result.value).data)
