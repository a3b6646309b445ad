# catalog/services/catalog_store.py

"""
CATALOG STORE SERVICE

Purpose:
- The only code path that reads or writes Product rows.
- Views, Django admin and checkout all go through these functions.

Rules:
- list_all() is ordered by updated_at DESC (most recently touched first)
- create_product(): stock defaults to 0, image defaults to ""
- set_stock(): stock must be a whole integer in 0..MAX_STOCK, unknown id -> ProductNotFoundError
- updated_at strictly increases on every mutation of the same product
- get_prices() returns only ids that exist (missing or out-of-range ids are simply absent)
- every call is its own atomic unit; database failures surface as CatalogStorageError
"""

from __future__ import annotations

import logging
from datetime import timedelta
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Iterable

from django.db import DatabaseError, transaction
from django.utils import timezone

from catalog.models import MAX_PRODUCT_ID, MAX_STOCK, Product
from catalog.services.exceptions import (
    CatalogStorageError,
    CatalogValidationError,
    ProductNotFoundError,
)

logger = logging.getLogger(__name__)

TWOPLACES = Decimal("0.01")
MAX_PRICE = Decimal("9999999999.99")


def _to_price(value) -> Decimal:
    if value is None or value == "" or isinstance(value, bool):
        raise CatalogValidationError("price_excl_tax is required")

    try:
        price = Decimal(str(value).strip())
    except (InvalidOperation, ValueError, TypeError):
        raise CatalogValidationError("price_excl_tax must be a valid decimal")

    if not price.is_finite():
        raise CatalogValidationError("price_excl_tax must be a valid decimal")

    if price < 0:
        raise CatalogValidationError("price_excl_tax must be non-negative")

    price = price.quantize(TWOPLACES, rounding=ROUND_HALF_UP)
    if price > MAX_PRICE:
        raise CatalogValidationError("price_excl_tax is too large")

    return price


def _to_stock(value) -> int:
    if isinstance(value, bool):
        # guardrail: bool is an int subclass in Python
        raise CatalogValidationError("stock must be a whole integer")

    if isinstance(value, int):
        stock = value
    elif isinstance(value, float) and value.is_integer():
        stock = int(value)
    elif isinstance(value, (str, Decimal)):
        try:
            parsed = Decimal(str(value).strip())
        except (InvalidOperation, ValueError):
            raise CatalogValidationError("stock must be a whole integer")
        if not parsed.is_finite() or parsed != parsed.to_integral_value():
            raise CatalogValidationError("stock must be a whole integer")
        stock = int(parsed)
    else:
        raise CatalogValidationError("stock must be a whole integer")

    if stock < 0:
        raise CatalogValidationError(f"stock cannot be negative (got {stock})")

    if stock > MAX_STOCK:
        raise CatalogValidationError(f"stock cannot exceed {MAX_STOCK}")

    return stock


def _to_product_id(value) -> int | None:
    # None for anything that cannot be a stored primary key
    if isinstance(value, bool):
        return None
    try:
        pk = int(value)
    except (TypeError, ValueError, OverflowError):
        return None
    if pk < 1 or pk > MAX_PRODUCT_ID:
        return None
    return pk


def list_all() -> list[Product]:
    """
    Current catalog snapshot, most recently touched first.
    """
    try:
        return list(Product.objects.order_by("-updated_at", "-id"))
    except DatabaseError as exc:
        logger.exception("Catalog listing failed")
        raise CatalogStorageError("Catalog storage unavailable") from exc


def create_product(
    *,
    title,
    category="",
    price_excl_tax,
    stock=None,
    image=None,
) -> Product:
    """
    Insert a new product and return it (the store assigns the id).
    """
    title = str(title or "").strip()
    if not title:
        raise CatalogValidationError("title is required")

    price = _to_price(price_excl_tax)
    qty = _to_stock(stock) if stock else 0

    try:
        with transaction.atomic():
            product = Product.objects.create(
                title=title,
                category=str(category or "").strip(),
                price_excl_tax=price,
                stock=qty,
                image=str(image or ""),
                updated_at=timezone.now(),
            )
    except DatabaseError as exc:
        logger.exception("Product creation failed", extra={"title": title})
        raise CatalogStorageError("Catalog storage unavailable") from exc

    logger.info(
        "Product created",
        extra={"product_id": product.id, "stock": product.stock},
    )
    return product


def set_stock(*, product_id, stock) -> Product:
    """
    Overwrite a product's stock and refresh updated_at.

    Concurrent calls on the same id are last-writer-wins; the row lock only
    keeps updated_at strictly increasing.
    """
    pk = _to_product_id(product_id)
    if pk is None:
        raise ProductNotFoundError(f"Product {product_id!r} does not exist")

    qty = _to_stock(stock)

    try:
        with transaction.atomic():
            # lock row for the updated_at bump
            product = Product.objects.select_for_update().filter(pk=pk).first()
            if product is None:
                raise ProductNotFoundError(f"Product {pk} does not exist")

            now = timezone.now()
            previous = product.updated_at
            if previous is not None and now <= previous:
                now = previous + timedelta(microseconds=1)

            product.stock = qty
            product.updated_at = now
            product.save(update_fields=["stock", "updated_at"])
    except DatabaseError as exc:
        logger.exception("Stock update failed", extra={"product_id": pk})
        raise CatalogStorageError("Catalog storage unavailable") from exc

    logger.info("Stock updated", extra={"product_id": pk, "stock": qty})
    return product


def get_prices(product_ids: Iterable) -> dict[int, Decimal]:
    """
    Authoritative unit prices (excl. tax) for the ids that exist.
    """
    ids = {pk for pk in (_to_product_id(v) for v in product_ids) if pk is not None}
    if not ids:
        return {}

    try:
        rows = Product.objects.filter(id__in=ids).values_list("id", "price_excl_tax")
        return {pk: price for pk, price in rows}
    except DatabaseError as exc:
        logger.exception("Price lookup failed")
        raise CatalogStorageError("Catalog storage unavailable") from exc
