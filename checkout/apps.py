# checkout/apps.py

"""
CHECKOUT APP CONFIG

Public checkout:
- cart total from server-held catalog prices
- Stripe payment intent request
"""

from django.apps import AppConfig


class CheckoutConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "checkout"
    verbose_name = "Checkout"
