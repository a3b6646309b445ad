# catalog/models/product.py

from decimal import Decimal

from django.core.exceptions import ValidationError
from django.core.validators import MinValueValidator
from django.db import models
from django.utils import timezone

# PositiveIntegerField range that is safe on every supported backend
MAX_STOCK = 2147483647
# BigAutoField upper bound
MAX_PRODUCT_ID = 2**63 - 1


class Product(models.Model):
    """
    Represents a sellable storefront product.

    STOCK MODEL (IMPORTANT):
    - stock is the exact quantity on hand and is ADMIN-ONLY data
    - the public catalog only ever sees in_stock (stock > 0)

    PRICING:
    - price_excl_tax is the single source of truth for checkout totals
    - client-submitted prices are never read

    LIFECYCLE:
    - created by admins, stock updated by admins, never deleted
    - updated_at is refreshed by every mutation (creation included)
    """

    id = models.BigAutoField(primary_key=True)

    title = models.CharField(max_length=255)
    category = models.CharField(max_length=120, blank=True, default="", db_index=True)

    price_excl_tax = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.00"))],
        help_text="Unit price excluding tax, in major currency units.",
    )

    stock = models.PositiveIntegerField(default=0)

    image = models.CharField(max_length=500, blank=True, default="")

    updated_at = models.DateTimeField(default=timezone.now, db_index=True)

    class Meta:
        ordering = ["-updated_at", "-id"]

    def __str__(self):
        return f"{self.title} (#{self.pk})"

    def clean(self):
        if not (self.title or "").strip():
            raise ValidationError("title is required")

        if self.price_excl_tax is None or Decimal(self.price_excl_tax) < 0:
            raise ValidationError("price_excl_tax must be non-negative")

    @property
    def in_stock(self) -> bool:
        return int(self.stock or 0) > 0
