from .catalog_store import create_product, get_prices, list_all, set_stock
from .visibility import to_public_view

__all__ = [
    "create_product",
    "get_prices",
    "list_all",
    "set_stock",
    "to_public_view",
]
