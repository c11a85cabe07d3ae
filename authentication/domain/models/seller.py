import uuid

from django.conf import settings
from django.core.validators import RegexValidator
from django.db import models


phone_number_validator = RegexValidator(r"^\d{7,15}$", "Phone number must contain 7 to 15 digits.")


class Seller(models.Model):
    """Seller account attached to a user; owns stores"""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.OneToOneField(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="seller_account")

    # Business info
    business_name = models.CharField(max_length=100)
    phone_number = models.CharField(max_length=15, unique=True, validators=[phone_number_validator])

    # The ID for the seller's account on a payment platform like Stripe
    stripe_account_id = models.CharField(max_length=255, blank=True, null=True, unique=True)

    # Verification
    is_verified = models.BooleanField(default=False)
    agreed_to_terms = models.BooleanField(default=False)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        app_label = "authentication"
        ordering = ["-created_at"]

    def __str__(self):
        return f"{self.business_name} ({self.user.email})"
