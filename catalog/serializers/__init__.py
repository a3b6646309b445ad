from .product import (
    AdminProductSerializer,
    ProductCreateSerializer,
    PublicProductSerializer,
    StockUpdateSerializer,
)

__all__ = [
    "AdminProductSerializer",
    "ProductCreateSerializer",
    "PublicProductSerializer",
    "StockUpdateSerializer",
]
