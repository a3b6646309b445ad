"""
PATH: backend/settings/prod.py

PRODUCTION SETTINGS (storefront deployment)

Refuses to boot when:
- SECRET_KEY is missing or still the dev default (JWTs would be forgeable)
- DATABASE_URL is missing or SQLite (stock writes rely on row locks)
- STRIPE_SECRET_KEY is missing (every checkout would 500)
- the storefront origin is not an explicit https:// origin

Static files for the Django admin are served by WhiteNoise.
"""

from __future__ import annotations

from django.core.exceptions import ImproperlyConfigured

from .base import *  # noqa: F403
from .base import BASE_DIR, MIDDLEWARE, PAYMENTS, SECRET_KEY, env

DEBUG = False

# ----------------------------
# Fail-closed checks
# ----------------------------
if SECRET_KEY == "dev-insecure-change-me-storefront-signing-key":
    raise ImproperlyConfigured("SECRET_KEY must be set in production.")

ALLOWED_HOSTS = env.list("ALLOWED_HOSTS", default=[])
if not ALLOWED_HOSTS:
    raise ImproperlyConfigured("ALLOWED_HOSTS must be set in production.")

if (env("DATABASE_URL", default="") or "").strip().startswith("sqlite"):
    raise ImproperlyConfigured("Refusing to run the storefront on SQLite.")

DATABASES = {"default": env.db("DATABASE_URL")}
DATABASES["default"]["CONN_MAX_AGE"] = env.int("DB_CONN_MAX_AGE", default=60)

if not PAYMENTS["STRIPE"]["SECRET_KEY"]:
    raise ImproperlyConfigured("STRIPE_SECRET_KEY must be set in production.")

# ----------------------------
# Storefront origin (CORS/CSRF)
# ----------------------------
CORS_ALLOWED_ORIGINS = env.list("CORS_ALLOWED_ORIGINS", default=[])
CSRF_TRUSTED_ORIGINS = env.list("CSRF_TRUSTED_ORIGINS", default=CORS_ALLOWED_ORIGINS)

if not CORS_ALLOWED_ORIGINS:
    raise ImproperlyConfigured("CORS_ALLOWED_ORIGINS must list the storefront origin.")
if any(not o.startswith("https://") for o in CORS_ALLOWED_ORIGINS + CSRF_TRUSTED_ORIGINS):
    raise ImproperlyConfigured("Storefront origins must be https:// in production.")

# Admin API auth is a bearer token, not a cookie
CORS_ALLOW_CREDENTIALS = False

# ----------------------------
# Django admin static files
# ----------------------------
STATIC_ROOT = env("STATIC_ROOT", default=str(BASE_DIR / "staticfiles"))
MIDDLEWARE.insert(1, "whitenoise.middleware.WhiteNoiseMiddleware")
STORAGES = {
    "default": {"BACKEND": "django.core.files.storage.FileSystemStorage"},
    "staticfiles": {
        "BACKEND": "whitenoise.storage.CompressedManifestStaticFilesStorage"
    },
}

# ----------------------------
# TLS behind the proxy
# ----------------------------
SECURE_PROXY_SSL_HEADER = ("HTTP_X_FORWARDED_PROTO", "https")
SECURE_SSL_REDIRECT = env.bool("SECURE_SSL_REDIRECT", default=True)
SECURE_HSTS_SECONDS = env.int("SECURE_HSTS_SECONDS", default=3600)

# Django admin session cookies
SESSION_COOKIE_SECURE = True
CSRF_COOKIE_SECURE = True
