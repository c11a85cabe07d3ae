from authentication.domain.models.seller import Seller
from authentication.domain.models.user import CustomUser


__all__ = [
    "CustomUser",
    "Seller",
]
