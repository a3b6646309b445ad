# catalog/views/admin_products.py

"""
ADMIN CATALOG ENDPOINTS

Purpose:
- Admin product listing with raw stock (filterable)
- Add product
- Update stock

Key rule alignment:
- Every endpoint is gated by IsStoreAdmin; an unauthorized call is refused
  before any service runs (no state change, no partial write).
- Writes go through catalog.services.catalog_store only.
"""

from __future__ import annotations

import logging

from django.db import DatabaseError
from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import generics, status
from rest_framework.response import Response
from rest_framework.views import APIView

from catalog.filters import AdminProductFilter
from catalog.models import Product
from catalog.serializers import (
    AdminProductSerializer,
    ProductCreateSerializer,
    StockUpdateSerializer,
)
from catalog.services import create_product, set_stock
from catalog.services.exceptions import (
    CatalogStorageError,
    CatalogValidationError,
    ProductNotFoundError,
)
from users.permissions import IsStoreAdmin

logger = logging.getLogger(__name__)


def _storage_unavailable() -> Response:
    return Response(
        {"detail": "Storage unavailable"},
        status=status.HTTP_503_SERVICE_UNAVAILABLE,
    )


class AdminProductListCreateView(generics.ListCreateAPIView):
    """
    GET  /api/admin/products/?category=<text>&in_stock=true|false
    POST /api/admin/products/
    """

    permission_classes = [IsStoreAdmin]
    filterset_class = AdminProductFilter
    queryset = Product.objects.order_by("-updated_at", "-id")

    def get_serializer_class(self):
        if getattr(self.request, "method", None) == "POST":
            return ProductCreateSerializer
        return AdminProductSerializer

    @extend_schema(
        tags=["Admin"],
        responses={
            200: AdminProductSerializer(many=True),
            401: OpenApiResponse(description="Unauthorized"),
            503: OpenApiResponse(description="Catalog storage unavailable"),
        },
        description="Admin product listing including exact stock.",
    )
    def get(self, request, *args, **kwargs):
        try:
            return self.list(request, *args, **kwargs)
        except DatabaseError:
            logger.exception("Admin product listing failed")
            return _storage_unavailable()

    @extend_schema(
        tags=["Admin"],
        request=ProductCreateSerializer,
        responses={
            201: AdminProductSerializer,
            400: OpenApiResponse(description="Validation error"),
            401: OpenApiResponse(description="Unauthorized"),
            503: OpenApiResponse(description="Catalog storage unavailable"),
        },
        description="Add a product. stock defaults to 0, image to empty string.",
    )
    def post(self, request, *args, **kwargs):
        return self.create(request, *args, **kwargs)

    def create(self, request, *args, **kwargs):
        s = self.get_serializer(data=request.data)
        s.is_valid(raise_exception=True)
        data = s.validated_data

        try:
            product = create_product(
                title=data["title"],
                category=data.get("category", ""),
                price_excl_tax=data["price_excl_tax"],
                stock=data.get("stock"),
                image=data.get("image"),
            )
        except CatalogValidationError as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)
        except CatalogStorageError:
            return _storage_unavailable()

        return Response(
            AdminProductSerializer(product).data, status=status.HTTP_201_CREATED
        )


class AdminStockUpdateView(APIView):
    """
    POST /api/admin/update-stock/   {"id": <int>, "stock": <int>}
    """

    permission_classes = [IsStoreAdmin]

    @extend_schema(
        tags=["Admin"],
        request=StockUpdateSerializer,
        responses={
            200: OpenApiResponse(description="{ok: true, product: {...}}"),
            400: OpenApiResponse(description="Validation error"),
            401: OpenApiResponse(description="Unauthorized"),
            404: OpenApiResponse(description="Product not found"),
            503: OpenApiResponse(description="Catalog storage unavailable"),
        },
        description="Overwrite a product's stock quantity.",
    )
    def post(self, request):
        s = StockUpdateSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        data = s.validated_data

        try:
            product = set_stock(product_id=data["id"], stock=data["stock"])
        except ProductNotFoundError as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_404_NOT_FOUND)
        except CatalogValidationError as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)
        except CatalogStorageError:
            return _storage_unavailable()

        return Response({"ok": True, "product": AdminProductSerializer(product).data})
