# mdm_core/iam/session.py
"""
Session tokens.

A session is a signed access JWT (simplejwt) carrying the caller's identity
claims. Login issues an access/refresh pair; the access token also records
when its refresh token expires so page guards can end the session without
touching the refresh cookie.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

from django.conf import settings
from rest_framework.exceptions import AuthenticationFailed
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.tokens import AccessToken, RefreshToken

from mdm_core.iam.models import Role, UserProfile

logger = logging.getLogger(__name__)

ROLE_CLAIM = "role"
EMAIL_CLAIM = "email"
FIRST_NAME_CLAIM = "first_name"
LAST_NAME_CLAIM = "last_name"
PHYSICIAN_CLAIM = "physician_id"
REFRESH_EXP_CLAIM = "refresh_exp"


@dataclass(frozen=True)
class Identity:
    user_id: int
    email: str
    role: Role
    physician_id: Optional[int]
    expires_at: Optional[int]
    refresh_expires_at: Optional[int]


def _jwt_cfg() -> dict[str, Any]:
    return getattr(settings, "SIMPLE_JWT", {}) or {}


def session_claims(user) -> dict[str, Any]:
    """
    Identity claims embedded in every token issued for ``user``.
    Raises AuthenticationFailed when the account has no role profile.
    """
    try:
        profile = user.profile
    except UserProfile.DoesNotExist:
        raise AuthenticationFailed("Account has no role assigned.")

    return {
        EMAIL_CLAIM: user.email,
        FIRST_NAME_CLAIM: user.first_name,
        LAST_NAME_CLAIM: user.last_name,
        ROLE_CLAIM: profile.role,
        PHYSICIAN_CLAIM: profile.physician_id,
    }


def issue_tokens(user) -> tuple[str, str]:
    """
    Returns (access, refresh) for ``user``.
    Claims are copied from the refresh token into the access token by simplejwt.
    """
    refresh = RefreshToken.for_user(user)
    for claim, value in session_claims(user).items():
        refresh[claim] = value

    access = refresh.access_token
    access[REFRESH_EXP_CLAIM] = refresh["exp"]
    return str(access), str(refresh)


def _optional_int(value) -> Optional[int]:
    if value in (None, ""):
        return None
    return int(value)


def identity_from_token(token) -> Optional[Identity]:
    """
    Builds an Identity from a validated token; None when required claims
    are missing or malformed (including an unknown role).
    """
    try:
        return Identity(
            user_id=int(token["user_id"]),
            email=str(token.get(EMAIL_CLAIM, "") or ""),
            role=Role(token[ROLE_CLAIM]),
            physician_id=_optional_int(token.get(PHYSICIAN_CLAIM)),
            expires_at=_optional_int(token.get("exp")),
            refresh_expires_at=_optional_int(token.get(REFRESH_EXP_CLAIM)),
        )
    except (KeyError, TypeError, ValueError):
        logger.warning("Rejected session token with malformed identity claims")
        return None


def get_raw_token(request) -> Optional[str]:
    """
    Authorization: Bearer <access> wins over the access cookie.
    """
    header = request.META.get("HTTP_AUTHORIZATION", "")
    if header:
        parts = header.split()
        if len(parts) == 2 and parts[0].lower() == "bearer":
            return parts[1]
        return None
    return request.COOKIES.get(_jwt_cfg().get("AUTH_COOKIE", "mdm_access")) or None


def resolve_identity(request) -> Optional[Identity]:
    """
    Decodes and verifies the caller's session token.
    Absent, badly signed, expired or malformed tokens all yield None.
    """
    raw = get_raw_token(request)
    if not raw:
        return None
    try:
        token = AccessToken(raw)
    except TokenError:
        return None
    return identity_from_token(token)
