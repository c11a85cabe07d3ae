from .seller_views import SellerAccountCreateView, SellerAccountDetailView


__all__ = [
    "SellerAccountCreateView",
    "SellerAccountDetailView",
]
