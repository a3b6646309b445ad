# catalog/views/public.py
"""
PUBLIC CATALOG (STOREFRONT)

GET /api/products/

Rules:
- AllowAny (public)
- Backend is source of truth for product data
- Does NOT expose exact stock (in_stock boolean only)
- Fresh read per request, most recently updated first

Security hardening:
- Throttle to reduce scraping/abuse
"""

from __future__ import annotations

from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.throttling import AnonRateThrottle
from rest_framework.views import APIView

from catalog.serializers import PublicProductSerializer
from catalog.services import list_all, to_public_view
from catalog.services.exceptions import CatalogStorageError


class PublicCatalogThrottle(AnonRateThrottle):
    scope = "public_catalog"


class PublicCatalogView(APIView):
    """
    GET /api/products/
    """

    authentication_classes = []
    permission_classes = [AllowAny]
    throttle_classes = [PublicCatalogThrottle]

    @extend_schema(
        tags=["Public"],
        responses={
            200: PublicProductSerializer(many=True),
            503: OpenApiResponse(description="Catalog storage unavailable"),
        },
        description="Public product listing. Exact stock is never exposed.",
    )
    def get(self, request):
        try:
            products = list_all()
        except CatalogStorageError:
            return Response(
                {"detail": "Storage unavailable"},
                status=status.HTTP_503_SERVICE_UNAVAILABLE,
            )

        rows = [to_public_view(p) for p in products]
        return Response(PublicProductSerializer(rows, many=True).data)
