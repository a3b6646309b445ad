"""
=====================================================
PATH: catalog/admin.py
=====================================================

Admin rules:

- Products are never deleted (no delete permission, no bulk delete action).
- New products are routed through create_product() so the same defaults and
  validation apply as on the API.
- Stock edits are routed through set_stock() so updated_at keeps increasing.
"""

from __future__ import annotations

from django.contrib import admin
from django.core.exceptions import ValidationError
from django.utils import timezone

from catalog.models import Product
from catalog.services import create_product, set_stock
from catalog.services.exceptions import CatalogValidationError


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "title",
        "category",
        "price_excl_tax",
        "stock",
        "in_stock",
        "updated_at",
    )
    list_filter = ("category", "updated_at")
    search_fields = ("title", "category")
    ordering = ("-updated_at", "-id")
    readonly_fields = ("updated_at",)

    @admin.display(boolean=True, description="In stock")
    def in_stock(self, obj):
        return obj.in_stock

    def get_actions(self, request):
        actions = super().get_actions(request)
        actions.pop("delete_selected", None)
        return actions

    def has_delete_permission(self, request, obj=None):
        return False

    def save_model(self, request, obj, form, change):
        try:
            if not change:
                created = create_product(
                    title=obj.title,
                    category=obj.category,
                    price_excl_tax=obj.price_excl_tax,
                    stock=obj.stock,
                    image=obj.image,
                )
                obj.pk = created.pk
                obj.updated_at = created.updated_at
                return

            if "stock" in form.changed_data:
                updated = set_stock(product_id=obj.pk, stock=obj.stock)
                obj.updated_at = updated.updated_at

            other = [f for f in form.changed_data if f != "stock"]
            if other:
                obj.updated_at = max(timezone.now(), obj.updated_at)
                obj.save(update_fields=[*other, "updated_at"])
        except CatalogValidationError as exc:
            raise ValidationError(str(exc)) from exc
