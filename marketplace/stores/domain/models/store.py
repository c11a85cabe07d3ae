import uuid

from django.db import models

from authentication.models import Seller


class Store(models.Model):
    """A seller's storefront; products are always listed under a store"""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    seller = models.ForeignKey(Seller, on_delete=models.CASCADE, related_name="stores")

    # Storefront details
    store_name = models.CharField(max_length=100)
    store_description = models.CharField(max_length=250, blank=True)
    slug = models.SlugField(max_length=120, unique=True)
    logo_image = models.URLField(blank=True)
    cover_image = models.URLField(blank=True)

    # Lets the seller temporarily deactivate their store
    is_active = models.BooleanField(default=False)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        app_label = "marketplace"
        indexes = [
            models.Index(fields=["seller", "is_active"], name="store_seller_active_idx"),
        ]

    def __str__(self):
        return self.store_name
