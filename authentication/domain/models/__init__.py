from .seller import Seller
from .user import CustomUser

__all__ = [
    "CustomUser",
    "Seller",
]
