# catalog/services/visibility.py

"""
VISIBILITY PROJECTOR

Public callers never see exact inventory:
- stock is dropped
- in_stock = stock > 0 is derived instead

Pure function: no DB access, no side effects.
"""

from __future__ import annotations

PUBLIC_FIELDS = (
    "id",
    "title",
    "category",
    "price_excl_tax",
    "image",
    "in_stock",
    "updated_at",
)


def to_public_view(product) -> dict:
    return {
        "id": product.id,
        "title": product.title,
        "category": product.category,
        "price_excl_tax": product.price_excl_tax,
        "image": product.image,
        "in_stock": int(product.stock or 0) > 0,
        "updated_at": product.updated_at,
    }
