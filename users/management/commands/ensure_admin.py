# users/management/commands/ensure_admin.py

"""
PATH: users/management/commands/ensure_admin.py

Storefront admin bootstrap.

- Reads ADMIN_USER + ADMIN_PASS (settings, loaded from env / .env).
- Idempotent: creates the admin if missing; resets password + staff flag if it exists.
- Does NOT print the password.
"""

from __future__ import annotations

from django.conf import settings
from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand
from django.db import transaction


class Command(BaseCommand):
    help = "Create/update the storefront admin from ADMIN_USER / ADMIN_PASS (idempotent)."

    def handle(self, *args, **options):
        username = (getattr(settings, "ADMIN_USER", "") or "").strip()
        password = getattr(settings, "ADMIN_PASS", "") or ""

        if not username or not password:
            self.stdout.write(self.style.WARNING("ADMIN_USER / ADMIN_PASS not set. Skipping."))
            return

        User = get_user_model()

        with transaction.atomic():
            user = User.objects.filter(username=username).first()
            created = user is None

            if created:
                user = User(username=username)

            user.is_active = True
            user.is_staff = True
            user.set_password(password)
            user.save()

        state = "created" if created else "updated"
        self.stdout.write(self.style.SUCCESS(f"Admin ensured: {username} ({state})"))
