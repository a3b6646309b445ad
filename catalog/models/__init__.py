"""
Catalog models export surface.
"""

from .product import MAX_PRODUCT_ID, MAX_STOCK, Product

__all__ = [
    "MAX_PRODUCT_ID",
    "MAX_STOCK",
    "Product",
]
