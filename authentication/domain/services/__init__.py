"""
Business logic services for authentication.

Services encapsulate business rules and coordinate between
infrastructure and domain models.
"""

from .results import Result
from .seller_service import SellerService


__all__ = [
    "SellerService",
    "Result",
]
