# checkout/tests/test_payment_intent.py

"""
CHECKOUT TESTS

Run with:
    python manage.py test checkout -v 2

The Stripe call is patched at the view boundary; the Stripe client itself is
covered in test_stripe_client.py.
"""

from __future__ import annotations

from unittest.mock import patch

from django.core.cache import cache
from django.test import TestCase, override_settings
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from catalog.services import create_product
from checkout.services.exceptions import PaymentProviderError

CREATE_INTENT = "checkout.views.payment_intent.create_payment_intent"


@override_settings(STORE_CURRENCY="try", PAYMENTS={"STRIPE": {"SECRET_KEY": "sk_test_x"}})
class CreatePaymentIntentApiTests(TestCase):
    def setUp(self):
        cache.clear()
        self.client = APIClient()
        self.url = reverse("checkout:create-payment-intent")
        self.p1 = create_product(title="Watch", price_excl_tax="100", stock=2)
        self.p2 = create_product(title="Charm", price_excl_tax="12.345", stock=1)

    @patch(CREATE_INTENT)
    def test_total_sent_in_minor_units(self, create_intent):
        create_intent.return_value = {"id": "pi_1", "client_secret": "pi_1_secret"}

        res = self.client.post(
            self.url,
            {"items": [{"product_id": self.p1.id, "quantity": 3}]},
            format="json",
        )

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(
            res.json(),
            {
                "client_secret": "pi_1_secret",
                "amount": "300.00",
                "amount_minor": 30000,
                "currency": "try",
            },
        )
        create_intent.assert_called_once_with(
            amount_minor=30000,
            currency="try",
            metadata={"integration_check": "accept_a_payment"},
        )

    @patch(CREATE_INTENT)
    def test_client_price_cannot_lower_total(self, create_intent):
        create_intent.return_value = {"id": "pi_2", "client_secret": "pi_2_secret"}

        self.client.post(
            self.url,
            {"items": [{"product_id": self.p1.id, "quantity": 1, "price": "0.01"}]},
            format="json",
        )

        self.assertEqual(create_intent.call_args.kwargs["amount_minor"], 10000)

    @patch(CREATE_INTENT)
    def test_unknown_products_skipped_and_quantity_defaults(self, create_intent):
        create_intent.return_value = {"id": "pi_3", "client_secret": "pi_3_secret"}

        res = self.client.post(
            self.url,
            {
                "items": [
                    {"product_id": self.p2.id},
                    {"product_id": 99, "quantity": 4},
                ]
            },
            format="json",
        )

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        # stored price is 12.35 (2 decimal places)
        self.assertEqual(create_intent.call_args.kwargs["amount_minor"], 1235)

    @patch(CREATE_INTENT)
    def test_out_of_range_product_id_is_skipped(self, create_intent):
        create_intent.return_value = {"id": "pi_4", "client_secret": "pi_4_secret"}

        res = self.client.post(
            self.url,
            {"items": [{"product_id": 10**20}, {"product_id": self.p1.id}]},
            format="json",
        )

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(create_intent.call_args.kwargs["amount_minor"], 10000)

    @patch(CREATE_INTENT)
    def test_zero_total_is_rejected_before_payment(self, create_intent):
        res = self.client.post(
            self.url, {"items": [{"product_id": 99, "quantity": 1}]}, format="json"
        )

        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        create_intent.assert_not_called()

    @patch(CREATE_INTENT)
    def test_negative_quantity_rejected(self, create_intent):
        res = self.client.post(
            self.url,
            {"items": [{"product_id": self.p1.id, "quantity": -2}]},
            format="json",
        )

        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        create_intent.assert_not_called()

    @patch(CREATE_INTENT)
    def test_upstream_failure_is_bad_gateway(self, create_intent):
        create_intent.side_effect = PaymentProviderError(
            "Stripe HTTPError: 402 Your card was declined."
        )

        res = self.client.post(
            self.url,
            {"items": [{"product_id": self.p1.id, "quantity": 1}]},
            format="json",
        )

        self.assertEqual(res.status_code, status.HTTP_502_BAD_GATEWAY)
        self.assertIn("declined", res.json()["detail"])

    @override_settings(PAYMENTS={"STRIPE": {"SECRET_KEY": ""}})
    def test_missing_secret_is_server_error(self):
        res = self.client.post(
            self.url,
            {"items": [{"product_id": self.p1.id, "quantity": 1}]},
            format="json",
        )

        self.assertEqual(res.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertIn("Stripe not configured", res.json()["detail"])

    def test_items_are_required(self):
        res = self.client.post(self.url, {}, format="json")
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
