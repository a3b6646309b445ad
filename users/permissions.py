# users/permissions.py

"""
ADMIN CAPABILITY GATE

A caller either holds a valid admin credential or does not.

- Credential transport: SimpleJWT bearer token (DRF authentication class,
  configured in settings; nothing is held in process memory).
- Admin = active Django user with is_staff=True. Several admins may be
  logged in at once; tokens expire per SIMPLE_JWT settings.
"""

from rest_framework.permissions import BasePermission


def is_authorized(request) -> bool:
    user = getattr(request, "user", None)
    return bool(
        user
        and user.is_authenticated
        and user.is_active
        and user.is_staff
    )


class IsStoreAdmin(BasePermission):
    """
    Guards every catalog-mutating endpoint.

    DRF answers 401 when no/invalid credential was sent and 403 when the
    credential is valid but not an admin one.
    """

    message = "Unauthorized"

    def has_permission(self, request, view):
        return is_authorized(request)
