# checkout/serializers.py

"""
CHECKOUT SERIALIZERS

Transport layer only:
- A cart line carries product_id + quantity. There is deliberately no price
  field; any extra keys the client sends are dropped by validation.
"""

from __future__ import annotations

from rest_framework import serializers


class CartItemSerializer(serializers.Serializer):
    product_id = serializers.IntegerField()
    quantity = serializers.IntegerField(required=False, allow_null=True, min_value=0)


class PaymentIntentRequestSerializer(serializers.Serializer):
    items = CartItemSerializer(many=True, allow_empty=True)


class PaymentIntentResponseSerializer(serializers.Serializer):
    client_secret = serializers.CharField()
    amount = serializers.DecimalField(max_digits=14, decimal_places=2)
    amount_minor = serializers.IntegerField()
    currency = serializers.CharField()
