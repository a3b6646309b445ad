from .auth import AdminLoginView, AdminTokenRefreshView

__all__ = [
    "AdminLoginView",
    "AdminTokenRefreshView",
]
