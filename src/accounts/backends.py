"""Authentication backends for the asset tracker.

The UI is gated by one shared credential pair. It is wired in as an
ordinary Django authentication backend, so a real identity provider can
replace it in ``AUTHENTICATION_BACKENDS`` without touching the rest of
the system.
"""

import secrets

from django.conf import settings
from django.contrib.auth import get_user_model
from django.contrib.auth.backends import BaseBackend

User = get_user_model()


def _encode(value):
    # JSON can carry lone surrogates, which strict UTF-8 refuses
    return value.encode("utf-8", "surrogatepass")


class SharedCredentialBackend(BaseBackend):
    """Accept the shared username/password from settings.

    A successful login resolves to a single shared user record; there
    is no per-person identity.
    """

    def authenticate(self, request, username=None, password=None, **kwargs):
        expected_username = getattr(settings, "ASSET_TRACKER_USERNAME", "")
        expected_password = getattr(settings, "ASSET_TRACKER_PASSWORD", "")
        if not expected_username or not expected_password:
            return None
        if username is None or password is None:
            return None
        if not (
            secrets.compare_digest(
                _encode(username), _encode(expected_username)
            )
            and secrets.compare_digest(
                _encode(password), _encode(expected_password)
            )
        ):
            return None
        user, created = User.objects.get_or_create(
            username=expected_username
        )
        if created:
            user.set_unusable_password()
            user.save(update_fields=["password"])
        return user

    def get_user(self, user_id):
        try:
            return User.objects.get(pk=user_id)
        except User.DoesNotExist:
            return None
