from typing import Any, Dict, Optional

from marketplace.services.base import ErrorCodes


class ProductCreationError(Exception):
    """Base class for product creation failures."""

    code = ErrorCodes.INTERNAL_ERROR
    retryable = False


class ProductValidationError(ProductCreationError):
    """Raised when one or more record sets of a submission fail their schema.

    ``errors`` maps each failing record set ("product", "variants",
    "categories", "tags") to the serializer's field errors.
    """

    code = ErrorCodes.VALIDATION_FAILED

    def __init__(self, errors: Dict[str, Any], message: Optional[str] = None):
        self.errors = errors
        super().__init__(message or f"Validation failed for: {', '.join(self.record_sets)}")

    @property
    def record_sets(self):
        return sorted(self.errors)


class PersistenceContractError(ProductCreationError):
    """Raised when the datastore does not hand back a generated identifier."""

    code = ErrorCodes.PERSISTENCE_CONTRACT_VIOLATION


class TransactionFailure(ProductCreationError):
    """Raised when a write inside the product transaction fails; nothing was committed."""

    code = ErrorCodes.TRANSACTION_FAILED
    retryable = True
