import uuid

from django.core.validators import MinValueValidator
from django.db import models

from marketplace.stores.domain.models import Store

from .category import Category, Tag


class Product(models.Model):
    STATUS_CHOICES = [
        ("draft", "Draft"),
        ("active", "Active"),
        ("archive", "Archive"),
    ]

    # Basic Information
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    store = models.ForeignKey(Store, on_delete=models.CASCADE, related_name="products")
    name = models.CharField(max_length=200)
    description = models.TextField(blank=True)

    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default="draft")

    categories = models.ManyToManyField(Category, through="ProductCategory", related_name="products", blank=True)
    tags = models.ManyToManyField(Tag, through="ProductTag", related_name="products", blank=True)

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        app_label = "marketplace"
        indexes = [
            models.Index(fields=["store", "status"], name="product_store_status_idx"),
            models.Index(fields=["status", "-created_at"], name="product_status_created_idx"),  # Buyer listings
        ]

    def __str__(self):
        return self.name


class ProductVariant(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    product = models.ForeignKey(Product, on_delete=models.CASCADE, related_name="variants")
    sku = models.CharField(max_length=120, unique=True)

    # Variant descriptive attributes
    name = models.CharField(max_length=100)
    color = models.CharField(max_length=7)
    size = models.CharField(max_length=5)
    price = models.DecimalField(max_digits=10, decimal_places=2, validators=[MinValueValidator(0)])
    quantity = models.PositiveIntegerField(default=0)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["created_at"]
        app_label = "marketplace"

    def __str__(self):
        return f"{self.product.name} - {self.name} ({self.sku})"


class ProductCategory(models.Model):
    product = models.ForeignKey(Product, on_delete=models.CASCADE, related_name="category_links")
    category = models.ForeignKey(Category, on_delete=models.CASCADE, related_name="product_links")

    class Meta:
        app_label = "marketplace"
        # A product is never linked to the same category twice
        constraints = [
            models.UniqueConstraint(fields=["product", "category"], name="unique_product_category"),
        ]


class ProductTag(models.Model):
    product = models.ForeignKey(Product, on_delete=models.CASCADE, related_name="tag_links")
    tag = models.ForeignKey(Tag, on_delete=models.CASCADE, related_name="product_links")

    class Meta:
        app_label = "marketplace"
        constraints = [
            models.UniqueConstraint(fields=["product", "tag"], name="unique_product_tag"),
        ]
