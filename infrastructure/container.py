"""
Dependency Injection Container
================================

Simple service locator pattern for managing service dependencies.
Views ask the container for services instead of constructing them, so
tests can swap implementations in one place.

Usage:
    from infrastructure.container import container

    # In your view
    result = container.catalog_service().create_product(data, request.user)
    stores = container.store_service().list_seller_stores(request.user)
"""

import logging
from typing import Optional

logger = logging.getLogger(__name__)


class ServiceContainer:
    """
    Service container for domain services.

    Implements lazy initialization and caching of service instances.
    Singleton pattern.
    """

    _instance: Optional["ServiceContainer"] = None
    _initialized: bool = False

    def __new__(cls):
        """Ensure only one instance exists (singleton pattern)."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """Initialize container (only once)."""
        if not self._initialized:
            self._catalog_service = None
            self._store_service = None
            self._seller_service = None

            self._initialized = True
            logger.info("Service container initialized")

    def catalog_service(self):
        """Get CatalogService instance."""
        if self._catalog_service is None:
            from marketplace.catalog.domain.services import CatalogService, ProductWriter

            self._catalog_service = CatalogService(writer=ProductWriter())
            logger.debug("Created CatalogService")
        return self._catalog_service

    def store_service(self):
        """Get StoreService instance."""
        if self._store_service is None:
            from marketplace.stores.domain.services import StoreService

            self._store_service = StoreService()
            logger.debug("Created StoreService")
        return self._store_service

    def seller_service(self):
        """Get SellerService instance."""
        if self._seller_service is None:
            from authentication.domain.services import SellerService

            self._seller_service = SellerService()
            logger.debug("Created SellerService")
        return self._seller_service

    def reset(self):
        """
        Reset all cached service instances.

        Useful for testing or when settings change between tests.
        """
        self._catalog_service = None
        self._store_service = None
        self._seller_service = None
        logger.info("Service container reset")


# Global singleton instance
container = ServiceContainer()
