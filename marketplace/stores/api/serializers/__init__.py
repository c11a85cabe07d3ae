from .store_serializers import StoreCreateSerializer, StoreSerializer


__all__ = ["StoreCreateSerializer", "StoreSerializer"]
