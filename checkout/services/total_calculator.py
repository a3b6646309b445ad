# checkout/services/total_calculator.py

"""
CHECKOUT TOTAL CALCULATOR

Trust boundary (IMPORTANT):
- Only product_id and quantity are read from a cart line.
- Unit prices always come from the catalog (get_prices), never from the client.

Rules:
- quantity defaults to 1 when absent or falsy; negative quantity is rejected
- unknown product ids contribute 0 (line skipped)
- duplicate product lines are priced independently (no merging)
- empty cart -> 0
- VAT is NOT applied here (STORE_VAT_PERCENT is display-only for now)
"""

from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal
from typing import Callable, Iterable, Mapping

from catalog.services import get_prices
from checkout.services.exceptions import CheckoutValidationError

logger = logging.getLogger(__name__)

ZERO = Decimal("0")


def _to_quantity(value) -> int:
    if not value:
        return 1

    if isinstance(value, bool):
        raise CheckoutValidationError("quantity must be a whole integer")

    if isinstance(value, float) and not value.is_integer():
        raise CheckoutValidationError("quantity must be a whole integer")

    try:
        qty = int(value)
    except (TypeError, ValueError):
        raise CheckoutValidationError("quantity must be a whole integer")

    if qty < 0:
        raise CheckoutValidationError("quantity cannot be negative")

    return qty


def _line_product_id(line: Mapping) -> int | None:
    value = line.get("product_id")
    if isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def compute_total(
    items: Iterable[Mapping],
    *,
    price_lookup: Callable[[Iterable], Mapping] = get_prices,
) -> Decimal:
    """
    Sum of price(product_id) * quantity over the cart, in major units.

    price_lookup is resolved once per call (one catalog read per checkout).
    """
    lines = list(items or [])
    if not lines:
        return ZERO

    quantities = [_to_quantity(line.get("quantity")) for line in lines]

    product_ids = {pid for pid in map(_line_product_id, lines) if pid is not None}
    prices = price_lookup(product_ids)

    total = ZERO
    skipped = 0
    for line, qty in zip(lines, quantities):
        pid = _line_product_id(line)
        price = prices.get(pid) if pid is not None else None
        if price is None:
            skipped += 1
            continue
        total += Decimal(price) * qty

    if skipped:
        logger.info("Checkout skipped unknown products", extra={"skipped_lines": skipped})

    return total


def to_minor_units(amount) -> int:
    """
    Major-unit amount -> integer minor units (x100, round half up).
    """
    major = Decimal(str(amount))
    return int((major * Decimal("100")).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
