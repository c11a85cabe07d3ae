"""
Marketplace Service Layer

Shared building blocks for the marketplace domain services: the
ServiceResult pattern, BaseService and the common error codes.

Domain services live with their domain:
- CatalogService: marketplace.catalog.domain.services
- StoreService: marketplace.stores.domain.services

Usage:
    from marketplace.services import ErrorCodes, service_ok, service_err

    result = container.catalog_service().list_products(filters={})

    if result.ok:
        products = result.value
    else:
        error = result.error
"""

from .base import BaseService, ErrorCodes, ServiceResult, service_err, service_ok

__all__ = [
    # Base classes
    "BaseService",
    "ServiceResult",
    # Helper functions
    "service_ok",
    "service_err",
    # Error codes
    "ErrorCodes",
]
