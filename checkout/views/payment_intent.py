# checkout/views/payment_intent.py
"""
PUBLIC CHECKOUT (STOREFRONT)

POST /api/create-payment-intent/   {"items": [{"product_id": 1, "quantity": 2}, ...]}

Flow:
1) validate cart shape (no price field exists on the contract)
2) total from server-held catalog prices (compute_total)
3) major -> minor units (round half up)
4) request a Stripe PaymentIntent, return its client_secret

Nothing is persisted: no order rows, no stock deduction.

Security hardening:
- Throttle (public_write) because it calls a paid upstream API
"""

from __future__ import annotations

import logging

from django.conf import settings
from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.throttling import AnonRateThrottle
from rest_framework.views import APIView

from catalog.services.exceptions import CatalogStorageError
from checkout.serializers import (
    PaymentIntentRequestSerializer,
    PaymentIntentResponseSerializer,
)
from checkout.services.exceptions import (
    CheckoutValidationError,
    PaymentNotConfiguredError,
    PaymentProviderError,
)
from checkout.services.stripe import create_payment_intent
from checkout.services.total_calculator import compute_total, to_minor_units

logger = logging.getLogger(__name__)


class PublicWriteThrottle(AnonRateThrottle):
    scope = "public_write"


class CreatePaymentIntentView(APIView):
    authentication_classes = []
    permission_classes = [AllowAny]
    throttle_classes = [PublicWriteThrottle]

    @extend_schema(
        tags=["Public"],
        request=PaymentIntentRequestSerializer,
        responses={
            200: PaymentIntentResponseSerializer,
            400: OpenApiResponse(description="Validation error / zero total"),
            429: OpenApiResponse(description="Rate limited"),
            500: OpenApiResponse(description="Payments not configured"),
            502: OpenApiResponse(description="Payment provider error"),
            503: OpenApiResponse(description="Catalog storage unavailable"),
        },
        description="Compute the cart total from catalog prices and request a Stripe payment intent.",
    )
    def post(self, request):
        s = PaymentIntentRequestSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        items = s.validated_data.get("items") or []

        try:
            total = compute_total(items)
        except CheckoutValidationError as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)
        except CatalogStorageError:
            return Response(
                {"detail": "Storage unavailable"},
                status=status.HTTP_503_SERVICE_UNAVAILABLE,
            )

        amount_minor = to_minor_units(total)
        if amount_minor <= 0:
            return Response(
                {"detail": "Cart total must be greater than zero"},
                status=status.HTTP_400_BAD_REQUEST,
            )

        currency = settings.STORE_CURRENCY

        try:
            intent = create_payment_intent(
                amount_minor=amount_minor,
                currency=currency,
                metadata={"integration_check": "accept_a_payment"},
            )
        except PaymentNotConfiguredError as exc:
            logger.error("Checkout attempted without payment configuration")
            return Response(
                {"detail": str(exc)}, status=status.HTTP_500_INTERNAL_SERVER_ERROR
            )
        except PaymentProviderError as exc:
            logger.error(
                "Payment provider failure",
                extra={"amount_minor": amount_minor, "error": str(exc)},
            )
            return Response({"detail": str(exc)}, status=status.HTTP_502_BAD_GATEWAY)

        return Response(
            PaymentIntentResponseSerializer(
                {
                    "client_secret": intent["client_secret"],
                    "amount": total,
                    "amount_minor": amount_minor,
                    "currency": currency,
                }
            ).data
        )
