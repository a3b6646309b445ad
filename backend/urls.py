"""
PROJECT URLS

All API routes live under /api/

Storefront surface:
- /api/products/                  public catalog (AllowAny, stock hidden)
- /api/admin/...                  admin login + catalog mutations (IsStoreAdmin)
- /api/create-payment-intent/     checkout total + Stripe authorization (AllowAny)

Operational:
- /api/health/ checks DB connectivity
- /api/docs/ Swagger UI
"""

from __future__ import annotations

import logging

from django.conf import settings
from django.contrib import admin
from django.db import connections
from django.db.utils import OperationalError
from django.urls import include, path
from django.views.generic import RedirectView
from drf_spectacular.utils import extend_schema
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

logger = logging.getLogger(__name__)


# ------------------ API ROOT (PUBLIC) ------------------
@extend_schema(
    responses={
        200: {
            "type": "object",
            "properties": {
                "message": {"type": "string"},
                "endpoints": {"type": "object"},
                "docs": {"type": "object"},
            },
        }
    },
)
@api_view(["GET"])
@permission_classes([AllowAny])
def api_root(request):
    return Response(
        {
            "message": "Storefront Backend API is running",
            "endpoints": {
                "products": "/api/products/",
                "admin_login": "/api/admin/login/",
                "admin_products": "/api/admin/products/",
                "admin_update_stock": "/api/admin/update-stock/",
                "create_payment_intent": "/api/create-payment-intent/",
            },
            "docs": {
                "swagger": "/api/docs/",
                "schema": "/api/schema/",
            },
        }
    )


# ------------------ HEALTH CHECK (PUBLIC) ------------------
@extend_schema(
    responses={
        200: {
            "type": "object",
            "properties": {
                "status": {"type": "string"},
                "db": {"type": "string"},
            },
        },
        503: {
            "type": "object",
            "properties": {
                "status": {"type": "string"},
                "db": {"type": "string"},
            },
        },
    },
)
@api_view(["GET"])
@permission_classes([AllowAny])
def health_check(request):
    """
    Confirms the app is responding and the catalog database answers a query.
    """
    try:
        conn = connections["default"]
        with conn.cursor() as cursor:
            cursor.execute("SELECT 1;")
            cursor.fetchone()
        return Response({"status": "ok", "db": "ok"})
    except OperationalError:
        logger.exception("Health check: database unreachable")
        return Response({"status": "degraded", "db": "down"}, status=503)


# ------------------ ADMIN PATH (HARDENED) ------------------
# Django admin UI; keep trailing slash when overriding.
ADMIN_PATH = getattr(settings, "ADMIN_PATH", "django-admin/")
if not ADMIN_PATH.endswith("/"):
    ADMIN_PATH = f"{ADMIN_PATH}/"


# ------------------ API ROUTES (ALL UNDER /api/) ------------------
api_urlpatterns = [
    path("", api_root, name="api-root"),
    path("health/", health_check, name="health-check"),
    # OpenAPI / Swagger
    path("schema/", SpectacularAPIView.as_view(), name="schema"),
    path("docs/", SpectacularSwaggerView.as_view(url_name="schema"), name="swagger-ui"),
    # Admin credential
    path("admin/", include("users.urls")),
    # Catalog (public + admin)
    path("", include("catalog.urls")),
    # Checkout
    path("", include("checkout.urls")),
]

urlpatterns = [
    path(ADMIN_PATH, admin.site.urls),
    path("", RedirectView.as_view(url="/api/docs/", permanent=False), name="root"),
    path("api/", include(api_urlpatterns)),
]
