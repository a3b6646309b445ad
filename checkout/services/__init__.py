from .stripe import create_payment_intent
from .total_calculator import compute_total, to_minor_units

__all__ = [
    "compute_total",
    "create_payment_intent",
    "to_minor_units",
]
