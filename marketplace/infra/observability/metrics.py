from prometheus_client import Counter, Gauge, Histogram


# Product Metrics
products_created_total = Counter("marketplace_products_created_total", "Product creation attempts", ["outcome"])
product_creation_duration = Histogram(
    "marketplace_product_creation_seconds",
    "Product creation time, validation through commit",
    buckets=[0.05, 0.1, 0.25, 0.5, 1, 2.5, 5, 10, float("inf")],
)
product_variants_per_submission = Histogram(
    "marketplace_product_variants_per_submission",
    "Variants in each accepted product submission",
    buckets=[0, 1, 2, 5, 10, 25, 50, float("inf")],
)

# Store Metrics
stores_created_total = Counter("marketplace_stores_created_total", "Store creation attempts", ["outcome"])
active_stores = Gauge("marketplace_active_stores", "Stores currently accepting products")
