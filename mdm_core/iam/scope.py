# mdm_core/iam/scope.py
from __future__ import annotations

import logging

from rest_framework.exceptions import PermissionDenied, ValidationError

from mdm_core.iam.models import Role
from mdm_core.iam.session import Identity

logger = logging.getLogger(__name__)

PHYSICIAN_AND_STAFF = frozenset({Role.PHYSICIAN, Role.STAFF})


class TenantDenied(Exception):
    """
    Raised when an identity cannot be mapped to a tenant owner.
    ``reason`` is one of the class-level reason constants.
    """
    PHYSICIAN_LINK_MISSING = "physician_link_missing"
    ROLE_NOT_PERMITTED = "role_not_permitted"

    def __init__(self, reason: str, message: str):
        super().__init__(message)
        self.reason = reason
        self.message = message


def scope_owner(identity: Identity, *, allow: frozenset = PHYSICIAN_AND_STAFF) -> int:
    """
    Returns the physician id whose rows this identity may touch.

    Physician -> own id. Staff and Attorney -> linked physician id.
    """
    role = identity.role
    if role not in allow:
        raise TenantDenied(TenantDenied.ROLE_NOT_PERMITTED, "Access denied: Invalid role")

    if role == Role.PHYSICIAN:
        return identity.user_id

    if role in (Role.STAFF, Role.ATTORNEY):
        if identity.physician_id is None:
            raise TenantDenied(
                TenantDenied.PHYSICIAN_LINK_MISSING,
                "Physician ID not found for this user",
            )
        return identity.physician_id

    raise ValueError(f"Unknown role: {role!r}")


def owner_or_raise(identity: Identity, *, allow: frozenset = PHYSICIAN_AND_STAFF) -> int:
    """
    API flavour of scope_owner: maps TenantDenied onto DRF errors
    (missing link -> 400, role not permitted -> 403).
    """
    try:
        return scope_owner(identity, allow=allow)
    except TenantDenied as exc:
        logger.info("Tenant scope denied for user %s: %s", identity.user_id, exc.reason)
        if exc.reason == TenantDenied.PHYSICIAN_LINK_MISSING:
            raise ValidationError({"detail": exc.message})
        raise PermissionDenied(exc.message)
