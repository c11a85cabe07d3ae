from .store_views import MyStoresView, StoreActivationView, StoreCreateView


__all__ = ["MyStoresView", "StoreActivationView", "StoreCreateView"]
