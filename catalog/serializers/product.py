# catalog/serializers/product.py

"""
PRODUCT SERIALIZERS

Purpose:
- Public shape (no stock, only in_stock) for the storefront catalog.
- Admin shape (raw stock) for admin endpoints.
- Request contracts for admin writes.

Notes:
- Write serializers validate request shape only; catalog invariants are
  enforced again in catalog.services.catalog_store.
"""

from rest_framework import serializers

from catalog.models import MAX_STOCK, Product


class PublicProductSerializer(serializers.Serializer):
    """
    Renders catalog.services.visibility.to_public_view() output.

    GUARANTEES:
    - No stock field exists on this serializer
    """

    id = serializers.IntegerField()
    title = serializers.CharField()
    category = serializers.CharField()
    price_excl_tax = serializers.DecimalField(max_digits=12, decimal_places=2)
    image = serializers.CharField()
    in_stock = serializers.BooleanField()
    updated_at = serializers.DateTimeField()


class AdminProductSerializer(serializers.ModelSerializer):
    in_stock = serializers.BooleanField(read_only=True)

    class Meta:
        model = Product
        fields = [
            "id",
            "title",
            "category",
            "price_excl_tax",
            "stock",
            "in_stock",
            "image",
            "updated_at",
        ]
        read_only_fields = fields


class ProductCreateSerializer(serializers.Serializer):
    title = serializers.CharField(max_length=255)
    category = serializers.CharField(
        max_length=120, required=False, allow_blank=True, default=""
    )
    price_excl_tax = serializers.DecimalField(
        max_digits=12, decimal_places=2, min_value=0
    )
    stock = serializers.IntegerField(
        required=False, allow_null=True, min_value=0, max_value=MAX_STOCK
    )
    image = serializers.CharField(
        max_length=500, required=False, allow_blank=True, allow_null=True
    )

    def validate_title(self, value):
        value = (value or "").strip()
        if not value:
            raise serializers.ValidationError("title is required")
        return value


class StockUpdateSerializer(serializers.Serializer):
    id = serializers.IntegerField(min_value=1)
    stock = serializers.IntegerField(min_value=0, max_value=MAX_STOCK)
