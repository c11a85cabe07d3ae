"""
Base classes and utilities for the service layer.

This module provides the ServiceResult pattern (inspired by Rust's Result type)
and BaseService class for all marketplace services.
"""

import logging
import time
from dataclasses import dataclass
from functools import wraps
from typing import Any, Callable, Dict, Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass
class ServiceResult(Generic[T]):
    """
    A result type that encapsulates success or failure from service operations.

    Inspired by Rust's Result<T, E> type, this provides a clean way to handle
    service operation outcomes without exceptions for expected failures.

    Attributes:
        ok: True if operation succeeded, False otherwise
        value: The success value (present if ok=True)
        error: Error code (present if ok=False)
        error_detail: Human-readable error message (present if ok=False)
        field_errors: Field-level errors keyed by record set (validation failures only)
        retryable: True when the same request may succeed if sent again later

    Examples:
        >>> result = service_ok(product)
        >>> if result.ok:
        ...     return Response({"product": result.value}, 200)
        >>> else:
        ...     return Response(result.to_dict(), 400)

        >>> result = service_err("store_not_found", "Store 123 does not exist")
        >>> print(result.error)  # "store_not_found"
        >>> print(result.error_detail)  # "Store 123 does not exist"
    """

    ok: bool
    value: Optional[T] = None
    error: Optional[str] = None
    error_detail: Optional[str] = None
    field_errors: Optional[Dict[str, Any]] = None
    retryable: bool = False

    def to_dict(self) -> dict:
        """
        Convert to dictionary for JSON serialization.

        Returns:
            Dictionary with 'success' and either 'data' or 'error'
        """
        if self.ok:
            return {"success": True, "data": self.value}
        error = {"code": self.error, "message": self.error_detail, "retryable": self.retryable}
        if self.field_errors:
            error["field_errors"] = self.field_errors
        return {"success": False, "error": error}


def service_ok(value: T) -> ServiceResult[T]:
    """
    Create a successful ServiceResult.

    Args:
        value: The success value

    Returns:
        ServiceResult with ok=True and the value
    """
    return ServiceResult(ok=True, value=value)


def service_err(
    error: str,
    error_detail: str = "",
    field_errors: Optional[Dict[str, Any]] = None,
    retryable: bool = False,
) -> ServiceResult:
    """
    Create a failed ServiceResult.

    Args:
        error: Error code (e.g., "store_not_found", "validation_failed")
        error_detail: Human-readable error message
        field_errors: Optional field-level errors
        retryable: Whether the caller may retry the same request later

    Returns:
        ServiceResult with ok=False and error information

    Example:
        >>> return service_err("store_not_found", f"Store {store_id} does not exist")
    """
    return ServiceResult(
        ok=False,
        error=error,
        error_detail=error_detail or error,
        field_errors=field_errors,
        retryable=retryable,
    )


class BaseService:
    """
    Base class for all services providing common functionality.

    Provides:
    - Logging with class name
    - Performance timing decorator

    Usage:
        class StoreService(BaseService):
            @BaseService.log_performance
            def list_seller_stores(self, user):
                self.logger.info(f"Listing stores for {user.id}")
                # ... implementation
    """

    def __init__(self):
        """Initialize base service with logger."""
        self.logger = logging.getLogger(self.__class__.__module__ + "." + self.__class__.__name__)

    @staticmethod
    def log_performance(func: Callable) -> Callable:
        """
        Decorator to log performance of service methods.

        Logs execution time and any errors that occur.

        Args:
            func: The service method to wrap

        Returns:
            Wrapped function with performance logging
        """

        @wraps(func)
        def wrapper(self, *args, **kwargs):
            start_time = time.time()
            method_name = f"{self.__class__.__name__}.{func.__name__}"

            try:
                self.logger.debug(f"{method_name} started")
                result = func(self, *args, **kwargs)
                elapsed_time = (time.time() - start_time) * 1000  # Convert to ms

                # Log based on result type
                if isinstance(result, ServiceResult):
                    if result.ok:
                        self.logger.info(f"{method_name} completed successfully in {elapsed_time:.2f}ms")
                    else:
                        self.logger.warning(
                            f"{method_name} failed with error '{result.error}' in {elapsed_time:.2f}ms"
                        )
                else:
                    self.logger.info(f"{method_name} completed in {elapsed_time:.2f}ms")

                return result

            except Exception as e:
                elapsed_time = (time.time() - start_time) * 1000
                self.logger.error(
                    f"{method_name} raised exception after {elapsed_time:.2f}ms: {str(e)}",
                    exc_info=True,
                )
                raise

        return wrapper


# Common error codes for marketplace services
class ErrorCodes:
    """Standard error codes used across marketplace services."""

    # Product errors
    PRODUCT_NOT_FOUND = "product_not_found"

    # Store errors
    STORE_NOT_FOUND = "store_not_found"
    STORE_INACTIVE = "store_inactive"
    SELLER_ACCOUNT_REQUIRED = "seller_account_required"

    # Permission errors
    PERMISSION_DENIED = "permission_denied"
    NOT_STORE_OWNER = "not_store_owner"

    # Validation errors
    VALIDATION_FAILED = "validation_failed"

    # Persistence errors
    PERSISTENCE_CONTRACT_VIOLATION = "persistence_contract_violation"
    TRANSACTION_FAILED = "transaction_failed"

    # Internal errors
    INTERNAL_ERROR = "internal_error"
