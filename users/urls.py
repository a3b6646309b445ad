# users/urls.py

from django.urls import path

from .views import AdminLoginView, AdminTokenRefreshView

app_name = "users"

urlpatterns = [
    # ---------------- ADMIN CREDENTIAL ----------------
    path("login/", AdminLoginView.as_view(), name="admin-login"),
    path("token/refresh/", AdminTokenRefreshView.as_view(), name="admin-token-refresh"),
]
