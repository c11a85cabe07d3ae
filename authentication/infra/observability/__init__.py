"""
Observability Infrastructure

OpenTelemetry tracing and Prometheus metrics shared by the storefront apps.
"""

from .metrics import seller_registrations_total
from .tracing import get_tracer, setup_tracing, tracer

__all__ = [
    "setup_tracing",
    "get_tracer",
    "tracer",
    "seller_registrations_total",
]
