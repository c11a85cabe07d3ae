import logging

from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema, inline_serializer
from rest_framework import serializers, status, viewsets
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from infrastructure.container import container
from marketplace.api.serializers import ErrorResponseSerializer, ProductCreateRequestSerializer
from marketplace.api.views.responses import service_error_response
from marketplace.catalog.api.serializers import ProductDetailSerializer, ProductListSerializer
from marketplace.catalog.domain.services import CatalogService
from marketplace.permissions import IsSellerOrReadOnly, IsSellerUser

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100


def _positive_int(value, default, maximum=None):
    try:
        number = int(value)
    except (TypeError, ValueError):
        return default
    if number < 1:
        return default
    return min(number, maximum) if maximum else number


class ProductViewSet(viewsets.ViewSet):
    """
    Products: buyer browsing plus seller product creation, through the service layer.
    """

    permission_classes = [IsSellerOrReadOnly]

    def get_service(self) -> CatalogService:
        return container.catalog_service()

    def get_permissions(self):
        if self.action == "create":
            return [IsAuthenticated(), IsSellerUser()]
        return super().get_permissions()

    @extend_schema(
        operation_id="products_list",
        summary="List products with filters",
        description="List active products of active stores.",
        parameters=[
            OpenApiParameter(name="category", type=str, description="Filter by category slug"),
            OpenApiParameter(name="store", type=str, description="Filter by store ID"),
            OpenApiParameter(name="page", type=int, description="Page number (default: 1)"),
            OpenApiParameter(name="page_size", type=int, description="Items per page (default: 20, max: 100)"),
        ],
        responses={
            200: OpenApiResponse(
                response=inline_serializer(
                    name="ProductListPaginatedResponse",
                    fields={
                        "count": serializers.IntegerField(),
                        "page": serializers.IntegerField(),
                        "num_pages": serializers.IntegerField(),
                        "results": ProductListSerializer(many=True),
                    },
                ),
                description="Products retrieved successfully",
            ),
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Invalid filter"),
            500: OpenApiResponse(response=ErrorResponseSerializer, description="Internal server error"),
        },
        tags=["Marketplace - Products"],
    )
    def list(self, request):
        service = self.get_service()
        filters = {}
        if request.query_params.get("category"):
            filters["category"] = request.query_params.get("category")
        if request.query_params.get("store"):
            filters["store"] = request.query_params.get("store")

        page = _positive_int(request.query_params.get("page"), 1)
        page_size = _positive_int(request.query_params.get("page_size"), DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE)

        result = service.list_products(filters, page, page_size)

        if not result.ok:
            return service_error_response(result)

        serializer = ProductListSerializer(result.value["results"], many=True)

        response_data = {
            "count": result.value["count"],
            "results": serializer.data,
            "page": result.value["page"],
            "num_pages": result.value["num_pages"],
        }
        return Response(response_data)

    @extend_schema(
        operation_id="products_retrieve",
        summary="Get product details",
        responses={
            200: ProductDetailSerializer,
            404: OpenApiResponse(response=ErrorResponseSerializer, description="Product not found"),
            500: OpenApiResponse(response=ErrorResponseSerializer, description="Internal server error"),
        },
        tags=["Marketplace - Products"],
    )
    def retrieve(self, request, pk=None):
        result = self.get_service().get_product(pk)

        if not result.ok:
            return service_error_response(result)

        return Response(ProductDetailSerializer(result.value).data)

    @extend_schema(
        operation_id="products_create",
        summary="Create a new product (Seller only)",
        description=(
            "Create a product with its variants, categories and tags in one request. "
            "Either everything is stored or nothing is."
        ),
        request=ProductCreateRequestSerializer,
        responses={
            201: OpenApiResponse(response=ProductDetailSerializer, description="Product created successfully"),
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Invalid data"),
            403: OpenApiResponse(response=ErrorResponseSerializer, description="Not a seller or not the store owner"),
            404: OpenApiResponse(response=ErrorResponseSerializer, description="Store not found"),
            409: OpenApiResponse(response=ErrorResponseSerializer, description="Store inactive"),
            503: OpenApiResponse(response=ErrorResponseSerializer, description="Transaction failed, safe to retry"),
        },
        tags=["Marketplace - Products"],
    )
    def create(self, request):
        result = self.get_service().create_product(request.data, request.user)

        if not result.ok:
            return service_error_response(result)

        product = result.value
        logger.info(f"Product {product.id} created via API by user {request.user.id}")
        return Response(ProductDetailSerializer(product).data, status=status.HTTP_201_CREATED)
