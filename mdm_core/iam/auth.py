# mdm_core/iam/auth.py
from __future__ import annotations

from django.conf import settings
from rest_framework.exceptions import NotAuthenticated
from rest_framework_simplejwt.authentication import JWTAuthentication

from mdm_core.iam.scope import PHYSICIAN_AND_STAFF, owner_or_raise
from mdm_core.iam.session import Identity, identity_from_token


class CookieOrHeaderJWTAuthentication(JWTAuthentication):
    """
    Authenticate using:
      1) Authorization: Bearer <access>
      2) HttpOnly cookie containing access token
    """

    def authenticate(self, request):
        header = self.get_header(request)
        if header:
            return super().authenticate(request)

        cookie_name = settings.SIMPLE_JWT.get("AUTH_COOKIE", "mdm_access")
        raw_token = request.COOKIES.get(cookie_name)
        if not raw_token:
            return None

        validated_token = self.get_validated_token(raw_token)
        return self.get_user(validated_token), validated_token


def get_identity(request) -> Identity:
    """
    Identity of the authenticated caller, read from the validated token claims.
    """
    token = getattr(request, "auth", None)
    identity = identity_from_token(token) if token is not None else None
    if identity is None:
        raise NotAuthenticated("Unauthorized. Please log in.")
    return identity


def require_owner(request, *, allow: frozenset = PHYSICIAN_AND_STAFF) -> tuple[Identity, int]:
    """
    (identity, tenant owner id) for the caller, or a DRF error.
    """
    identity = get_identity(request)
    return identity, owner_or_raise(identity, allow=allow)
