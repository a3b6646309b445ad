# catalog/apps.py

"""
CATALOG APP CONFIG

Owns the Product table:
- public catalog listing (stock hidden)
- admin product creation + stock updates
- authoritative price lookup for checkout
"""

from django.apps import AppConfig


class CatalogConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "catalog"
    verbose_name = "Product Catalog"
