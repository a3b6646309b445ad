"""
Catalog views package exports.
"""

from .admin_products import AdminProductListCreateView, AdminStockUpdateView
from .public import PublicCatalogView

__all__ = [
    "AdminProductListCreateView",
    "AdminStockUpdateView",
    "PublicCatalogView",
]
