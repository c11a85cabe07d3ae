from .seller_serializers import SellerRegistrationSerializer, SellerSerializer


__all__ = [
    "SellerRegistrationSerializer",
    "SellerSerializer",
]
