# catalog/urls.py

"""
CATALOG URLS

Mounted at /api/ (backend/urls.py):
- GET  /api/products/               public catalog
- GET  /api/admin/products/         admin listing (raw stock)
- POST /api/admin/products/         add product
- POST /api/admin/update-stock/     update stock
"""

from django.urls import path

from catalog.views import (
    AdminProductListCreateView,
    AdminStockUpdateView,
    PublicCatalogView,
)

app_name = "catalog"

urlpatterns = [
    path("products/", PublicCatalogView.as_view(), name="public-products"),
    path(
        "admin/products/",
        AdminProductListCreateView.as_view(),
        name="admin-products",
    ),
    path(
        "admin/update-stock/",
        AdminStockUpdateView.as_view(),
        name="admin-update-stock",
    ),
]
