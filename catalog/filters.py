# catalog/filters.py

"""
Admin listing filters:
- ?category=<text>   case-insensitive exact match
- ?in_stock=true|false
"""

import django_filters

from catalog.models import Product


class AdminProductFilter(django_filters.FilterSet):
    category = django_filters.CharFilter(field_name="category", lookup_expr="iexact")
    in_stock = django_filters.BooleanFilter(method="filter_in_stock")

    class Meta:
        model = Product
        fields = ["category", "in_stock"]

    def filter_in_stock(self, queryset, name, value):
        if value:
            return queryset.filter(stock__gt=0)
        return queryset.filter(stock=0)
