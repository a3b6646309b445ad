# checkout/urls.py

"""
CHECKOUT URLS

Mounted at /api/:
- POST /api/create-payment-intent/
"""

from django.urls import path

from checkout.views import CreatePaymentIntentView

app_name = "checkout"

urlpatterns = [
    path(
        "create-payment-intent/",
        CreatePaymentIntentView.as_view(),
        name="create-payment-intent",
    ),
]
