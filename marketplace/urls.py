from django.urls import include, path
from rest_framework.routers import DefaultRouter

from .api.views import prometheus_metrics
from .catalog.api.views import ProductViewSet
from .stores.api.views import MyStoresView, StoreActivationView, StoreCreateView

# Create the main router
router = DefaultRouter()
router.register(r"products", ProductViewSet, basename="product")

app_name = "marketplace"

urlpatterns = [
    # Main API routes
    path("", include(router.urls)),
    # Seller store management
    path("stores/", StoreCreateView.as_view(), name="store-create"),
    path("stores/mine/", MyStoresView.as_view(), name="store-mine"),
    path("stores/<uuid:store_id>/activation/", StoreActivationView.as_view(), name="store-activation"),
    # Prometheus metrics endpoint
    path("metrics/", prometheus_metrics.marketplace_prometheus_metrics, name="marketplace-metrics"),
]
