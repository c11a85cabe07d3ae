"""
Prometheus Metrics

Defines Prometheus metrics for seller account monitoring.
Metrics are exposed through the marketplace metrics endpoint.
"""

from prometheus_client import Counter

# ===== Seller Metrics =====

seller_registrations_total = Counter(
    "auth_seller_registrations_total", "Total seller account registration attempts", ["status"]
)
"""
Seller account registrations.
Labels: status (success/rejected/failed)

Example:
    seller_registrations_total.labels(status='success').inc()
"""
