# checkout/services/exceptions.py

"""
CHECKOUT SERVICE ERRORS
"""


class CheckoutServiceError(Exception):
    """Base exception for all checkout failures."""


class CheckoutValidationError(CheckoutServiceError):
    """Raised when a cart line cannot be priced (e.g. negative quantity)."""


class PaymentNotConfiguredError(CheckoutServiceError):
    """Raised when the payment provider secret is missing."""


class PaymentProviderError(CheckoutServiceError):
    """Raised when the payment provider rejects the request or cannot be reached."""
