from .payment_intent import CreatePaymentIntentView

__all__ = [
    "CreatePaymentIntentView",
]
